"""
Конфигурация и константы для окна оптимизации раскроя слэбов
"""

WINDOW_TITLE = "Slab Optimizer"
WINDOW_SUBTITLE = "Efficient piece placement with automatic rotation support"
WINDOW_MIN_SIZE = (1200, 800)

OPTIMIZE_BUTTON_TEXT = "OPTIMIZE"
OPTIMIZE_BUTTON_BUSY_TEXT = "Optimizing..."
ALL_FIT_TEXT = "All pieces placed successfully!"
EMPTY_RESULTS_TEXT = "Add your available slabs and the pieces you want to cut, then click OPTIMIZE"
IMAGE_LOAD_FAILED_TEXT = "Image failed to load"

# Колонки таблиц ввода: (поле строки, заголовок)
INVENTORY_COLUMNS = [('width', 'Width'), ('length', 'Length')]
PIECE_COLUMNS = [('width', 'Width'), ('length', 'Length'), ('quantity', 'Qty')]

LAYOUT_PREVIEW_WIDTH = 520

# Стили для приложения
DARK_THEME_STYLE = """
    QWidget {
        background-color: #2b2b2b;
        color: #ffffff;
        font-family: 'Segoe UI', Arial, sans-serif;
        font-size: 10pt;
    }

    QGroupBox {
        background-color: #3c3c3c;
        border: 2px solid #555555;
        border-radius: 8px;
        margin: 5px;
        padding-top: 15px;
        font-weight: bold;
        color: #ffffff;
    }

    QGroupBox::title {
        subcontrol-origin: margin;
        left: 10px;
        padding: 0 8px 0 8px;
        color: #ffffff;
        background-color: #3c3c3c;
    }

    QTableWidget {
        background-color: #1e1e1e;
        color: #ffffff;
        gridline-color: #555555;
        border: 2px solid #555555;
        border-radius: 4px;
        selection-background-color: #0078d4;
    }

    QHeaderView::section {
        background-color: #404040;
        color: #ffffff;
        padding: 6px;
        border: none;
        border-right: 1px solid #555555;
        font-weight: bold;
    }

    QPushButton {
        background-color: #0078d4;
        color: white;
        border: none;
        padding: 8px 16px;
        border-radius: 4px;
        font-weight: bold;
        min-width: 80px;
    }

    QPushButton:hover {
        background-color: #106ebe;
    }

    QPushButton:pressed {
        background-color: #005a9e;
    }

    QPushButton:disabled {
        background-color: #555555;
        color: #888888;
    }

    QLineEdit, QDoubleSpinBox {
        background-color: #1e1e1e;
        color: #ffffff;
        border: 2px solid #555555;
        border-radius: 4px;
        padding: 6px;
    }

    QScrollArea {
        border: none;
    }
"""

ERROR_BANNER_STYLE = """
    QLabel {
        background-color: #5c1f1f;
        color: #ffd6d6;
        border-left: 4px solid #e53935;
        border-radius: 4px;
        padding: 10px;
    }
"""

WARNING_BANNER_STYLE = """
    QLabel {
        background-color: #5c4a1f;
        color: #ffe8b0;
        border-left: 4px solid #f9a825;
        border-radius: 4px;
        padding: 10px;
    }
"""

SUCCESS_BANNER_STYLE = """
    QLabel {
        background-color: #1f5c2a;
        color: #d6ffdc;
        border-left: 4px solid #43a047;
        border-radius: 4px;
        padding: 10px;
    }
"""

REMOVE_BUTTON_STYLE = """
    QPushButton {
        background-color: #8b2e2e;
        min-width: 30px;
        padding: 4px 8px;
    }
    QPushButton:hover {
        background-color: #a83a3a;
    }
"""

# Стили для диалогов
DIALOG_STYLE = """
    QDialog {
        background-color: #2b2b2b;
        color: #ffffff;
    }
    QLabel {
        color: #ffffff;
        font-size: 10pt;
    }
    QLineEdit, QDoubleSpinBox {
        background-color: #1e1e1e;
        color: #ffffff;
        border: 2px solid #555555;
        border-radius: 4px;
        padding: 6px;
    }
    QPushButton {
        background-color: #0078d4;
        color: white;
        border: none;
        padding: 8px 16px;
        border-radius: 4px;
        font-weight: bold;
        min-width: 80px;
    }
    QPushButton:hover {
        background-color: #106ebe;
    }
"""
