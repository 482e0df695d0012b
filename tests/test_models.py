import pytest

from slab_client.core.models import CutPiece, FieldKind, NumericValue, StockUnit, parse_numeric


def test_empty_string_is_empty():
    assert parse_numeric("").is_empty
    assert parse_numeric("   ").is_empty
    assert parse_numeric(None).is_empty


@pytest.mark.parametrize("raw", ["abc", "12x", "--3", "nan", "inf", "1,5"])
def test_malformed_text_is_invalid(raw):
    value = parse_numeric(raw)

    assert value.kind is FieldKind.INVALID
    assert value.raw == raw
    assert not value.is_positive()


def test_negative_numbers_clamp_to_zero():
    assert parse_numeric("-7.5") == NumericValue.number(0)


def test_decimal_and_exponent_text():
    assert parse_numeric("12.5").value == 12.5
    assert parse_numeric("1e3").value == 1000
    assert parse_numeric(" 40 ").value == 40


def test_integral_fields_truncate():
    assert parse_numeric("3.9", integral=True).value == 3
    assert parse_numeric("0.4", integral=True).value == 0
    assert parse_numeric("-2", integral=True).value == 0


def test_numeric_input_is_accepted():
    assert parse_numeric(25).value == 25
    assert parse_numeric(2.5).value == 2.5


def test_display_keeps_invalid_text():
    assert parse_numeric("12x").display() == "12x"
    assert parse_numeric("").display() == ""
    assert parse_numeric("8").display() == "8"


def test_blank_rows_have_empty_fields():
    slab = StockUnit.blank("S1")
    piece = CutPiece.blank("P1")

    assert slab.width.is_empty and slab.length.is_empty
    assert piece.quantity.is_empty
    assert piece.id == "P1"
