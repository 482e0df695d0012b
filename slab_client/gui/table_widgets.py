"""
Виджеты и функции для работы с таблицами ввода слэбов и деталей
"""

from PyQt5.QtWidgets import QTableWidget, QTableWidgetItem, QHeaderView, QPushButton
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QColor
import logging

from .config import REMOVE_BUTTON_STYLE

# Настройка логирования
logger = logging.getLogger(__name__)

INVALID_CELL_COLOR = QColor('#7a2e2e')


def _create_label_item(label):
    """Ячейка с меткой строки, редактирование запрещено"""
    item = QTableWidgetItem(label)
    item.setFlags(item.flags() & ~Qt.ItemIsEditable)
    item.setTextAlignment(Qt.AlignCenter)
    return item


def _apply_value(item, value):
    """Текст и подсветка ячейки числового поля; нераспознанное значение подсвечивается"""
    item.setText(value.display())
    item.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
    if value.is_invalid:
        item.setBackground(INVALID_CELL_COLOR)
        item.setToolTip("Not a number")
    else:
        item.setData(Qt.BackgroundRole, None)
        item.setToolTip("")
    return item


def _create_value_item(value):
    return _apply_value(QTableWidgetItem(), value)


def setup_input_table(table: QTableWidget, columns):
    """Настройка колонок таблицы: метка, числовые поля, кнопка удаления"""
    headers = ['ID'] + [title for _, title in columns] + ['']
    table.setColumnCount(len(headers))
    table.setHorizontalHeaderLabels(headers)
    table.verticalHeader().setVisible(False)

    header = table.horizontalHeader()
    header.setSectionResizeMode(0, QHeaderView.ResizeToContents)
    for col in range(1, len(columns) + 1):
        header.setSectionResizeMode(col, QHeaderView.Stretch)
    header.setSectionResizeMode(len(headers) - 1, QHeaderView.ResizeToContents)


def fill_input_table(table: QTableWidget, collection, columns, on_remove):
    """
    Заполнение таблицы строками коллекции

    Сигналы таблицы блокируются на время заполнения, чтобы не вызвать
    повторную запись значений в коллекцию.
    """
    table.blockSignals(True)
    try:
        table.setRowCount(len(collection))
        for row_index, row in enumerate(collection):
            table.setItem(row_index, 0, _create_label_item(row.id))
            for col, (field_name, _) in enumerate(columns, start=1):
                table.setItem(row_index, col, _create_value_item(getattr(row, field_name)))

            remove_btn = QPushButton("✕")
            remove_btn.setStyleSheet(REMOVE_BUTTON_STYLE)
            remove_btn.setToolTip(f"Remove {row.id}")
            remove_btn.setEnabled(len(collection) > 1)
            remove_btn.clicked.connect(lambda _checked=False, i=row_index: on_remove(i))
            table.setCellWidget(row_index, len(columns) + 1, remove_btn)
    finally:
        table.blockSignals(False)


def refresh_value_cell(table: QTableWidget, item, value):
    """Обновление одной ячейки после разбора введенного значения"""
    table.blockSignals(True)
    try:
        _apply_value(item, value)
    finally:
        table.blockSignals(False)
