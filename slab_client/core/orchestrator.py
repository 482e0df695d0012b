"""
Жизненный цикл запроса на оптимизацию

Отправка, защита от повторного запроса во время ожидания и обработка ответа.
Все изменения состояния идут через RequestOrchestrator, отображение только
читает текущее SessionState.
"""

import functools
import logging
from typing import Callable, Iterable, List, Optional

from . import api_client
from .error_classifier import CONNECTION_FALLBACK, ErrorClassifier
from .errors import OptimizerClientError
from .models import CutPiece, StockUnit
from .schemas import OptimizationRequest, OptimizationResult, PieceSpec, StockSpec
from .session import SessionState
from .validator import submit_diagnostic, valid_pieces, valid_stock

logger = logging.getLogger(__name__)

Transport = Callable[[OptimizationRequest], OptimizationResult]
Runner = Callable[[Callable[[], SessionState], Callable[[SessionState], None]], None]
Listener = Callable[[SessionState], None]


def run_inline(work, on_done):
    """Синхронный запуск: ответ обрабатывается до возврата из submit"""
    on_done(work())


def build_request(inventory: Iterable[StockUnit], pieces: Iterable[CutPiece]) -> OptimizationRequest:
    """Запрос только из корректных строк, все поля приведены к числам"""
    return OptimizationRequest(
        pieces=[PieceSpec.from_row(piece) for piece in valid_pieces(pieces)],
        inventory=[StockSpec.from_row(slab) for slab in valid_stock(inventory)],
    )


class RequestOrchestrator:
    """
    Управление запросом на оптимизацию

    Переходы: Editing|Success|Failed -> Pending -> Success|Failed.
    Пока запрос выполняется, повторная отправка и очистка игнорируются.
    """

    def __init__(self, transport: Optional[Transport] = None, runner: Optional[Runner] = None):
        self._transport = transport or api_client.optimize_layout
        self._runner = runner or run_inline
        self._state = SessionState.editing()
        self._pending_request: Optional[OptimizationRequest] = None
        self._listeners: List[Listener] = []

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def pending_request(self) -> Optional[OptimizationRequest]:
        return self._pending_request

    def subscribe(self, listener: Listener) -> None:
        """Подписка на смену состояния"""
        self._listeners.append(listener)

    def _set_state(self, state: SessionState) -> None:
        self._state = state
        logger.debug(f"Состояние сессии: {state.phase.value}")
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception(f"❌ Ошибка подписчика при переходе в {state.phase.value}")

    def submit(self, inventory: Iterable[StockUnit], pieces: Iterable[CutPiece]) -> bool:
        """
        Отправка слэбов и деталей на оптимизацию

        Returns:
            True, если запрос ушел на сервер
        """
        if self._state.is_pending:
            logger.warning("⚠️ Запрос уже выполняется, повторная отправка отклонена")
            return False

        inventory = list(inventory)
        pieces = list(pieces)
        diagnostic = submit_diagnostic(inventory, pieces)
        if diagnostic is not None:
            logger.info(f"⚠️ Отправка невозможна: {diagnostic}")
            self._set_state(SessionState.failed(diagnostic))
            return False

        request = build_request(inventory, pieces)
        self._pending_request = request
        self._set_state(SessionState.pending())
        logger.info(f"🚀 Запуск оптимизации: слэбов {len(request.inventory)}, деталей {len(request.pieces)}")

        self._runner(functools.partial(self._perform, request), self._settle)
        return True

    def _perform(self, request: OptimizationRequest) -> SessionState:
        """Выполнение запроса; результат - итоговое состояние, исключение наружу не выходит"""
        try:
            result = self._transport(request)
        except OptimizerClientError as e:
            error = e
        except Exception as e:
            logger.exception("❌ Непредвиденная ошибка при запросе оптимизации")
            error = e
        else:
            return SessionState.success(result)

        message = self._describe(error)
        logger.error(f"❌ Ошибка оптимизации: {message}")
        return SessionState.failed(message)

    @staticmethod
    def _describe(error: Exception) -> str:
        try:
            return ErrorClassifier.to_message(error)
        except Exception:
            logger.exception("❌ Не удалось сформировать сообщение об ошибке")
            return CONNECTION_FALLBACK

    def _settle(self, state: SessionState) -> None:
        if not self._state.is_pending:
            logger.warning(f"⚠️ Ответ получен вне ожидания, состояние: {self._state.phase.value}")
            return
        self._pending_request = None
        self._set_state(state)
        if state.is_success:
            logger.info("✅ Оптимизация завершена")

    def clear(self) -> bool:
        """Сброс результата или ошибки; во время ожидания ничего не делает"""
        if self._state.is_pending:
            logger.debug("Очистка во время ожидания ответа пропущена")
            return False
        self._set_state(SessionState.editing())
        return True
