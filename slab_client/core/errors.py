"""
Ошибки клиента оптимизации
"""

from typing import Optional


class OptimizerClientError(Exception):
    """Базовая ошибка клиента"""


class ValidationError(OptimizerClientError):
    """Нет ни одной корректной строки слэбов или деталей, запрос не отправляется"""


class TransportError(OptimizerClientError):
    """Сервер недоступен, соединение разорвано или истек таймаут"""

    def __init__(self, description: str = "", original: Optional[Exception] = None):
        super().__init__(description)
        self.description = description
        self.original = original


class HTTPError(OptimizerClientError):
    """Сервер ответил статусом, отличным от 2xx"""

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code
        self.body = body or ""


class MalformedResponseError(OptimizerClientError):
    """Ответ 2xx, тело которого не удалось разобрать"""

    def __init__(self, body: str = "", status_code: Optional[int] = None, reason: str = ""):
        super().__init__(reason or "Malformed response")
        self.body = body or ""
        self.status_code = status_code
        self.reason = reason
