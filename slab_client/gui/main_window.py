"""
Главное окно приложения оптимизации раскроя слэбов
"""

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QTableWidget, QGroupBox,
    QPushButton, QScrollArea, QSplitter, QDialog
)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont
import logging

from ..core.data_manager import DataManager
from .config import (
    WINDOW_TITLE, WINDOW_SUBTITLE, WINDOW_MIN_SIZE, DARK_THEME_STYLE,
    ERROR_BANNER_STYLE, WARNING_BANNER_STYLE, SUCCESS_BANNER_STYLE,
    OPTIMIZE_BUTTON_TEXT, OPTIMIZE_BUTTON_BUSY_TEXT, ALL_FIT_TEXT, EMPTY_RESULTS_TEXT,
    INVENTORY_COLUMNS, PIECE_COLUMNS
)
from .dialogs import SettingsDialog
from .settings_manager import SettingsManager
from .table_widgets import setup_input_table, fill_input_table, refresh_value_cell
from .visualization_widgets import LayoutCard

# Настройка логирования
logger = logging.getLogger(__name__)


class OptimizerWindow(QWidget):
    """Главное окно приложения"""

    def __init__(self, data_manager=None, settings_manager=None):
        super().__init__()

        self.settings_manager = settings_manager or SettingsManager()
        settings = self.settings_manager.load_settings()

        self.data_manager = data_manager or DataManager(
            api_url=settings.get('api_url'),
            timeout=settings.get('request_timeout'),
        )

        self.init_ui()

        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(*WINDOW_MIN_SIZE)

        # Подключение сигналов
        self.data_manager.state_changed_signal.connect(self.render_state)
        self.data_manager.inventory_changed_signal.connect(self.refresh_inventory_table)
        self.data_manager.pieces_changed_signal.connect(self.refresh_pieces_table)

        self.refresh_inventory_table()
        self.refresh_pieces_table()
        self.render_state(self.data_manager.state)

        logger.debug("Главное окно инициализировано")

    def init_ui(self):
        """Инициализация интерфейса"""
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(10, 10, 10, 10)
        self.setStyleSheet(DARK_THEME_STYLE)

        # Заголовок
        header_layout = QHBoxLayout()
        titles = QVBoxLayout()
        title_label = QLabel(WINDOW_TITLE)
        title_label.setFont(QFont("Arial", 20, QFont.Bold))
        titles.addWidget(title_label)
        titles.addWidget(QLabel(WINDOW_SUBTITLE))
        header_layout.addLayout(titles)
        header_layout.addStretch()

        self.settings_button = QPushButton("⚙ Settings")
        self.settings_button.clicked.connect(self.on_settings_clicked)
        header_layout.addWidget(self.settings_button)
        main_layout.addLayout(header_layout)

        # Баннер ошибки
        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(ERROR_BANNER_STYLE)
        self.error_label.hide()
        main_layout.addWidget(self.error_label)

        splitter = QSplitter(Qt.Horizontal)
        splitter.addWidget(self.create_inputs_panel())
        splitter.addWidget(self.create_results_panel())
        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 2)
        main_layout.addWidget(splitter, 1)

    # ========== ПАНЕЛЬ ВВОДА ==========

    def create_inputs_panel(self):
        panel = QWidget()
        layout = QVBoxLayout(panel)
        layout.setContentsMargins(0, 0, 0, 0)

        self.inventory_table, inventory_group = self._create_input_group(
            "Inventory Slabs", INVENTORY_COLUMNS, "+ Add Slab", self.on_add_inventory
        )
        self.inventory_table.itemChanged.connect(
            lambda item: self._on_item_changed(item, INVENTORY_COLUMNS, self.data_manager.update_inventory,
                                               self.inventory_table)
        )
        layout.addWidget(inventory_group)

        self.pieces_table, pieces_group = self._create_input_group(
            "Pieces to Cut", PIECE_COLUMNS, "+ Add Piece", self.on_add_piece
        )
        self.pieces_table.itemChanged.connect(
            lambda item: self._on_item_changed(item, PIECE_COLUMNS, self.data_manager.update_piece,
                                               self.pieces_table)
        )
        layout.addWidget(pieces_group)

        buttons = QHBoxLayout()
        self.optimize_button = QPushButton(OPTIMIZE_BUTTON_TEXT)
        self.optimize_button.setMinimumHeight(40)
        self.optimize_button.clicked.connect(self.on_optimize_clicked)
        buttons.addWidget(self.optimize_button, 1)

        self.clear_button = QPushButton("Clear")
        self.clear_button.clicked.connect(self.on_clear_clicked)
        self.clear_button.hide()
        buttons.addWidget(self.clear_button)
        layout.addLayout(buttons)

        return panel

    def _create_input_group(self, title, columns, add_text, on_add):
        group = QGroupBox(title)
        layout = QVBoxLayout(group)

        table = QTableWidget()
        setup_input_table(table, columns)
        layout.addWidget(table)

        add_button = QPushButton(add_text)
        add_button.clicked.connect(on_add)
        layout.addWidget(add_button)
        return table, group

    def _on_item_changed(self, item, columns, update, table):
        """Запись значения ячейки в коллекцию"""
        col = item.column()
        if col < 1 or col > len(columns):
            return
        field_name = columns[col - 1][0]
        value = update(item.row(), field_name, item.text())
        refresh_value_cell(table, item, value)

    def refresh_inventory_table(self):
        fill_input_table(self.inventory_table, self.data_manager.inventory, INVENTORY_COLUMNS,
                         self.data_manager.remove_inventory)

    def refresh_pieces_table(self):
        fill_input_table(self.pieces_table, self.data_manager.pieces, PIECE_COLUMNS,
                         self.data_manager.remove_piece)

    def on_add_inventory(self):
        self.data_manager.add_inventory()

    def on_add_piece(self):
        self.data_manager.add_piece()

    # ========== ПАНЕЛЬ РЕЗУЛЬТАТОВ ==========

    def create_results_panel(self):
        group = QGroupBox("Results")
        layout = QVBoxLayout(group)

        self.stats_label = QLabel()
        self.stats_label.setFont(QFont("Arial", 11, QFont.Bold))
        layout.addWidget(self.stats_label)

        self.unfit_label = QLabel()
        self.unfit_label.setWordWrap(True)
        self.unfit_label.setStyleSheet(WARNING_BANNER_STYLE)
        layout.addWidget(self.unfit_label)

        self.all_fit_label = QLabel(ALL_FIT_TEXT)
        self.all_fit_label.setStyleSheet(SUCCESS_BANNER_STYLE)
        layout.addWidget(self.all_fit_label)

        self.placeholder_label = QLabel(EMPTY_RESULTS_TEXT)
        self.placeholder_label.setAlignment(Qt.AlignCenter)
        self.placeholder_label.setWordWrap(True)
        layout.addWidget(self.placeholder_label)

        self.layouts_container = QWidget()
        self.layouts_layout = QVBoxLayout(self.layouts_container)
        self.layouts_layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.layouts_container)
        layout.addWidget(scroll, 1)
        return group

    def _clear_layout_cards(self):
        while self.layouts_layout.count() > 1:
            item = self.layouts_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

    # ========== СОСТОЯНИЕ ==========

    def render_state(self, state):
        """Отрисовка по текущему состоянию сессии"""
        pending = state.is_pending
        self.optimize_button.setEnabled(not pending)
        self.optimize_button.setText(OPTIMIZE_BUTTON_BUSY_TEXT if pending else OPTIMIZE_BUTTON_TEXT)
        self.clear_button.setVisible(state.is_success or state.is_failed)

        if state.is_failed:
            self.error_label.setText(f"Error: {state.message}")
            self.error_label.show()
        else:
            self.error_label.hide()

        self._clear_layout_cards()
        model = self.data_manager.result_model
        if model is None:
            self.stats_label.clear()
            self.unfit_label.hide()
            self.all_fit_label.hide()
            self.placeholder_label.setText(OPTIMIZE_BUTTON_BUSY_TEXT if pending else EMPTY_RESULTS_TEXT)
            self.placeholder_label.show()
            return

        self.stats_label.setText(
            f"Slabs used: {model.slab_used}    Layouts: {len(model.layouts)}    Unfit pieces: {model.unfit_count}"
        )
        self.unfit_label.setText(model.unfit_summary)
        self.unfit_label.setVisible(model.unfit_count > 0)
        self.all_fit_label.setVisible(model.all_fit)

        if model.has_layouts:
            self.placeholder_label.hide()
            for layout_item in model.layouts:
                card = LayoutCard(layout_item, timeout=self.data_manager.timeout)
                self.layouts_layout.insertWidget(self.layouts_layout.count() - 1, card)
        else:
            self.placeholder_label.setText(model.no_layouts_reason)
            self.placeholder_label.show()

    # ========== ОБРАБОТЧИКИ ==========

    def on_optimize_clicked(self):
        """Обработчик кнопки оптимизации"""
        self.data_manager.run_optimization()

    def on_clear_clicked(self):
        self.data_manager.clear_results()

    def on_settings_clicked(self):
        """Диалог настроек подключения"""
        dialog = SettingsDialog(self.settings_manager.load_settings(),
                                self.settings_manager.get_default_settings(), self)
        if dialog.exec_() != QDialog.Accepted:
            return
        settings = dialog.get_settings()
        self.settings_manager.save_settings(settings)
        self.data_manager.configure(settings['api_url'], settings['request_timeout'])
