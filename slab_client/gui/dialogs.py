"""
Диалоги для приложения оптимизации раскроя слэбов
"""

from PyQt5.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit,
    QPushButton, QDoubleSpinBox, QFormLayout
)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont
from .config import DIALOG_STYLE


class SettingsDialog(QDialog):
    """Диалог настроек подключения к сервису оптимизации"""

    def __init__(self, settings, defaults, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Connection settings")
        self.setModal(True)
        self.setMinimumWidth(480)
        self.setStyleSheet(DIALOG_STYLE)

        self._defaults = defaults
        self.init_ui()
        self._apply(settings)

    def init_ui(self):
        """Инициализация интерфейса"""
        layout = QVBoxLayout()

        title_label = QLabel("Optimization service")
        title_label.setFont(QFont("Arial", 12, QFont.Bold))
        title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(title_label)

        form = QFormLayout()
        self.url_input = QLineEdit()
        form.addRow("Endpoint URL:", self.url_input)

        self.timeout_input = QDoubleSpinBox()
        self.timeout_input.setRange(1, 3600)
        self.timeout_input.setSuffix(" s")
        form.addRow("Request timeout:", self.timeout_input)
        layout.addLayout(form)

        button_layout = QHBoxLayout()

        self.reset_btn = QPushButton("Defaults")
        self.reset_btn.clicked.connect(lambda: self._apply(self._defaults))
        button_layout.addWidget(self.reset_btn)

        button_layout.addStretch()

        self.cancel_btn = QPushButton("Cancel")
        self.cancel_btn.clicked.connect(self.reject)
        button_layout.addWidget(self.cancel_btn)

        self.save_btn = QPushButton("Save")
        self.save_btn.clicked.connect(self.accept)
        button_layout.addWidget(self.save_btn)

        layout.addLayout(button_layout)
        self.setLayout(layout)

    def _apply(self, settings):
        self.url_input.setText(str(settings.get('api_url', '')))
        self.timeout_input.setValue(float(settings.get('request_timeout', 120)))

    def get_settings(self):
        """Введенные настройки"""
        return {
            'api_url': self.url_input.text().strip() or self._defaults.get('api_url'),
            'request_timeout': self.timeout_input.value(),
        }
