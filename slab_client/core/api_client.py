"""
API клиент для взаимодействия с сервером оптимизации
"""

import base64
import binascii
import logging
from typing import Optional
from urllib.parse import unquote

import requests
from pydantic import ValidationError as SchemaValidationError

from . import config
from .errors import HTTPError, MalformedResponseError, TransportError
from .schemas import OptimizationRequest, OptimizationResult

logger = logging.getLogger(__name__)


def _post(url, payload, timeout):
    """POST запрос; ошибки requests превращаются в TransportError"""
    try:
        return requests.post(
            url,
            json=payload,
            headers={'Content-Type': 'application/json'},
            timeout=timeout
        )
    except requests.exceptions.Timeout as e:
        logger.error(f"❌ API: Таймаут запроса к {url}: {e}")
        raise TransportError("Request to the optimization server timed out.", e) from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"❌ API: Не удается подключиться к {url}: {e}")
        raise TransportError(f"Cannot connect to the optimization server at {url}.", e) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"❌ API: Ошибка запроса: {e}")
        raise TransportError(str(e), e) from e


def parse_result(response) -> OptimizationResult:
    """Разбор успешного ответа сервера"""
    try:
        data = response.json()
    except (ValueError, RecursionError) as e:
        raise MalformedResponseError(response.text, response.status_code, f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedResponseError(response.text, response.status_code, "Response body is not a JSON object")

    try:
        return OptimizationResult.model_validate(data)
    except SchemaValidationError as e:
        raise MalformedResponseError(response.text, response.status_code, str(e)) from e


def optimize_layout(request: OptimizationRequest, url: Optional[str] = None,
                    timeout: Optional[float] = None) -> OptimizationResult:
    """
    Отправка слэбов и деталей на оптимизацию

    Args:
        request: Тело запроса с корректными слэбами и деталями
        url: Адрес сервиса, по умолчанию config.API_URL
        timeout: Таймаут транспорта в секундах

    Returns:
        OptimizationResult: Разобранный ответ сервиса

    Raises:
        TransportError, HTTPError, MalformedResponseError
    """
    url = url or config.API_URL
    timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT

    logger.info(f"🔄 API: Отправка на оптимизацию: слэбов {len(request.inventory)}, деталей {len(request.pieces)}")
    response = _post(url, request.to_payload(), timeout)

    if not response.ok:
        logger.error(f"❌ API: Ошибка оптимизации: HTTP {response.status_code}")
        raise HTTPError(response.status_code, response.text)

    result = parse_result(response)
    logger.info(f"✅ API: Использовано слэбов: {result.slab_used}, раскладок: {len(result.images)}, "
                f"не размещено деталей: {len(result.unfitted_piece_ids)}")
    return result


def _decode_data_uri(reference: str) -> bytes:
    header, sep, payload = reference.partition(',')
    if not sep:
        raise MalformedResponseError(reason="Data URI has no payload")
    if header.endswith(';base64'):
        try:
            return base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise MalformedResponseError(reason=f"Invalid base64 image data: {e}") from e
    return unquote(payload).encode('utf-8')


def fetch_image(reference: str, timeout: Optional[float] = None) -> bytes:
    """Получение байтов раскладки по ссылке (data: URI или http(s) URL)"""
    if reference.startswith('data:'):
        return _decode_data_uri(reference)

    timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
    try:
        response = requests.get(reference, timeout=timeout)
    except requests.exceptions.RequestException as e:
        logger.error(f"❌ API: Не удалось загрузить раскладку {reference}: {e}")
        raise TransportError(f"Failed to download layout image: {e}", e) from e

    if not response.ok:
        raise HTTPError(response.status_code, response.text)
    return response.content


def save_image(reference: str, path: str, timeout: Optional[float] = None) -> str:
    """Сохранение раскладки в файл, возвращает путь"""
    content = fetch_image(reference, timeout=timeout)
    with open(path, 'wb') as f:
        f.write(content)
    logger.info(f"💾 Раскладка сохранена: {path} ({len(content)} байт)")
    return path
