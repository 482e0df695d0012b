import pytest

from slab_client.core.error_classifier import CONNECTION_FALLBACK, MALFORMED_FALLBACK, ErrorClassifier
from slab_client.core.errors import HTTPError, MalformedResponseError, TransportError, ValidationError


def test_message_field_wins():
    error = HTTPError(500, '{"message": "solver crashed", "error": "internal"}')

    assert ErrorClassifier.to_message(error) == "HTTP 500 - solver crashed"


def test_error_field_used_without_message():
    error = HTTPError(422, '{"error": "bad dimensions"}')

    assert ErrorClassifier.to_message(error) == "HTTP 422 - bad dimensions"


@pytest.mark.parametrize("body", ["Bad Gateway", '{"message"', "[1, 2]", '{"detail": 3}'])
def test_unusable_json_degrades_to_raw_text(body):
    assert ErrorClassifier.to_message(HTTPError(502, body)) == f"HTTP 502 - {body}"


def test_empty_body_is_status_derived():
    assert ErrorClassifier.to_message(HTTPError(503, "")) == "HTTP 503"


def test_transport_description_and_fallback():
    assert ErrorClassifier.to_message(TransportError("Cannot connect")) == "Cannot connect"
    assert ErrorClassifier.to_message(TransportError()) == CONNECTION_FALLBACK


def test_malformed_response_uses_raw_text():
    message = ErrorClassifier.to_message(MalformedResponseError("<html>oops</html>", 200))

    assert "<html>oops</html>" in message
    assert ErrorClassifier.to_message(MalformedResponseError("", 200)) == MALFORMED_FALLBACK


def test_validation_error_keeps_diagnostic():
    assert ErrorClassifier.to_message(ValidationError("Add at least one valid slab")) == "Add at least one valid slab"


def test_unknown_exception_without_text_falls_back():
    assert ErrorClassifier.to_message(RuntimeError()) == CONNECTION_FALLBACK
    assert ErrorClassifier.to_message(RuntimeError("boom")) == "boom"


def test_deeply_nested_body_degrades_to_raw_text():
    body = "[" * 100000

    message = ErrorClassifier.to_message(HTTPError(500, body))

    assert message == f"HTTP 500 - {body}"
