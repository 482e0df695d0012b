"""
Приведение разнородных ошибок к одному сообщению для пользователя
"""

import json
import logging
from typing import Optional

from .errors import HTTPError, MalformedResponseError, TransportError, ValidationError

logger = logging.getLogger(__name__)

CONNECTION_FALLBACK = "Failed to connect to the optimization server."
MALFORMED_FALLBACK = "The optimization server returned an unreadable response."


def _body_field(body: str, field_name: str) -> Optional[str]:
    """Строковое поле из JSON тела ошибки; ошибка разбора не выходит наружу"""
    if not body:
        return None
    try:
        data = json.loads(body)
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None
    value = data.get(field_name)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def body_detail(body: str) -> Optional[str]:
    """
    Описание ошибки из тела ответа

    Приоритет: поле message, поле error, сырой текст ответа.
    """
    for field_name in ('message', 'error'):
        detail = _body_field(body, field_name)
        if detail:
            return detail
    if body and body.strip():
        return body.strip()
    return None


class ErrorClassifier:
    """Преобразует причину ошибки в одно сообщение"""

    @classmethod
    def to_message(cls, error: Exception) -> str:
        if isinstance(error, ValidationError):
            return str(error)

        if isinstance(error, HTTPError):
            detail = body_detail(error.body)
            if detail:
                return f"HTTP {error.status_code} - {detail}"
            return f"HTTP {error.status_code}"

        if isinstance(error, MalformedResponseError):
            detail = body_detail(error.body)
            if detail:
                return f"Unexpected response from the optimization server: {detail}"
            return MALFORMED_FALLBACK

        if isinstance(error, TransportError):
            if error.description:
                return error.description
            return CONNECTION_FALLBACK

        description = str(error).strip() if error is not None else ""
        if description:
            return description
        logger.debug(f"Ошибка без описания: {type(error).__name__}")
        return CONNECTION_FALLBACK
