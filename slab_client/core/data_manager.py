"""
Менеджер данных для приложения оптимизации раскроя слэбов
"""

import logging
import threading

from PyQt5.QtCore import QObject, pyqtSignal

from .api_client import optimize_layout
from .config import API_URL, REQUEST_TIMEOUT
from .input_collection import InputCollection
from .models import CutPiece, StockUnit
from .orchestrator import RequestOrchestrator
from .result_model import ResultModel

logger = logging.getLogger(__name__)


class DataManager(QObject):
    """Менеджер для работы с данными"""

    # Сигналы для thread-safe коммуникации
    state_changed_signal = pyqtSignal(object)  # SessionState
    inventory_changed_signal = pyqtSignal()
    pieces_changed_signal = pyqtSignal()

    # Доставка ответа из рабочего потока в поток GUI
    _settled_signal = pyqtSignal(object, object)  # on_done, SessionState

    def __init__(self, api_url=None, timeout=None, runner=None, transport=None):
        super().__init__()
        self.api_url = api_url or API_URL
        self.timeout = timeout if timeout is not None else REQUEST_TIMEOUT

        self.inventory = InputCollection.of(StockUnit, 'S')
        self.pieces = InputCollection.of(CutPiece, 'P')

        self._settled_signal.connect(self._deliver)
        self.orchestrator = RequestOrchestrator(
            transport=transport or self._transport,
            runner=runner or self._run_in_thread,
        )
        self.orchestrator.subscribe(self.state_changed_signal.emit)

    def _transport(self, request):
        return optimize_layout(request, url=self.api_url, timeout=self.timeout)

    def _run_in_thread(self, work, on_done):
        """Запрос выполняется в отдельном потоке, ответ обрабатывается в потоке GUI"""
        def run():
            self._settled_signal.emit(on_done, work())

        thread = threading.Thread(target=run, daemon=True)
        thread.start()

    def _deliver(self, on_done, state):
        on_done(state)

    def configure(self, api_url, timeout):
        """Обновление параметров подключения"""
        self.api_url = api_url or API_URL
        self.timeout = timeout
        logger.info(f"🔧 Сервис оптимизации: {self.api_url}, таймаут {self.timeout} с")

    @property
    def state(self):
        return self.orchestrator.state

    @property
    def result_model(self):
        """ResultModel для текущего успешного результата или None"""
        state = self.orchestrator.state
        if state.is_success:
            return ResultModel(state.result)
        return None

    # ========== СЛЭБЫ ==========

    def add_inventory(self):
        self.inventory.add()
        self.inventory_changed_signal.emit()

    def remove_inventory(self, index):
        if self.inventory.remove(index):
            self.inventory_changed_signal.emit()

    def update_inventory(self, index, field_name, value):
        return self.inventory.update(index, field_name, value)

    # ========== ДЕТАЛИ ==========

    def add_piece(self):
        self.pieces.add()
        self.pieces_changed_signal.emit()

    def remove_piece(self, index):
        if self.pieces.remove(index):
            self.pieces_changed_signal.emit()

    def update_piece(self, index, field_name, value):
        return self.pieces.update(index, field_name, value)

    # ========== ОПТИМИЗАЦИЯ ==========

    def run_optimization(self):
        """Асинхронная оптимизация"""
        return self.orchestrator.submit(self.inventory, self.pieces)

    def clear_results(self):
        return self.orchestrator.clear()

    def has_optimization_result(self):
        """Проверка наличия результата оптимизации"""
        return self.orchestrator.state.is_success
