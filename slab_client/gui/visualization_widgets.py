"""
Виджеты отображения раскладок, полученных от сервиса оптимизации
"""

import logging
import threading

from PyQt5.QtWidgets import (
    QFrame, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFileDialog, QMessageBox
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont, QPixmap

from ..core.api_client import fetch_image, save_image
from ..core.error_classifier import ErrorClassifier
from ..core.errors import OptimizerClientError
from .config import LAYOUT_PREVIEW_WIDTH, IMAGE_LOAD_FAILED_TEXT

logger = logging.getLogger(__name__)


class LayoutCard(QFrame):
    """Карточка раскладки одного слэба: заголовок, изображение, кнопка скачивания"""

    # Сигналы для thread-safe коммуникации
    image_loaded_signal = pyqtSignal(bytes)
    image_failed_signal = pyqtSignal(str)

    def __init__(self, layout_item, timeout=None, parent=None):
        super().__init__(parent)
        self.layout_item = layout_item
        self.timeout = timeout
        self.setFrameShape(QFrame.StyledPanel)

        self.image_loaded_signal.connect(self._show_image)
        self.image_failed_signal.connect(self._show_failure)

        self.init_ui()
        self.load_image_async()

    def init_ui(self):
        layout = QVBoxLayout(self)

        header = QHBoxLayout()
        title = QLabel(self.layout_item.title)
        title.setFont(QFont("Arial", 11, QFont.Bold))
        header.addWidget(title)
        header.addStretch()

        self.download_btn = QPushButton("⬇ Download PNG")
        self.download_btn.clicked.connect(self.on_download_clicked)
        header.addWidget(self.download_btn)
        layout.addLayout(header)

        self.image_label = QLabel("Loading...")
        self.image_label.setAlignment(Qt.AlignCenter)
        self.image_label.setMinimumHeight(200)
        layout.addWidget(self.image_label)

    def load_image_async(self):
        """Загрузка изображения в отдельном потоке"""
        reference = self.layout_item.reference

        def load():
            try:
                content = fetch_image(reference, timeout=self.timeout)
            except OptimizerClientError as e:
                self.image_failed_signal.emit(ErrorClassifier.to_message(e))
                return
            self.image_loaded_signal.emit(content)

        thread = threading.Thread(target=load, daemon=True)
        thread.start()

    def _show_image(self, content):
        pixmap = QPixmap()
        if not pixmap.loadFromData(content):
            self._show_failure(IMAGE_LOAD_FAILED_TEXT)
            return
        if pixmap.width() > LAYOUT_PREVIEW_WIDTH:
            pixmap = pixmap.scaledToWidth(LAYOUT_PREVIEW_WIDTH, Qt.SmoothTransformation)
        self.image_label.setPixmap(pixmap)

    def _show_failure(self, message):
        logger.warning(f"⚠️ {self.layout_item.title}: {message}")
        self.image_label.setText(IMAGE_LOAD_FAILED_TEXT)
        self.image_label.setToolTip(message)

    def on_download_clicked(self):
        """Сохранение раскладки в файл"""
        path, _ = QFileDialog.getSaveFileName(
            self, "Save layout", self.layout_item.filename, "PNG images (*.png)"
        )
        if not path:
            return
        try:
            save_image(self.layout_item.reference, path, timeout=self.timeout)
        except (OptimizerClientError, OSError) as e:
            message = ErrorClassifier.to_message(e)
            logger.error(f"❌ Не удалось сохранить раскладку: {message}")
            QMessageBox.critical(self, "Download failed", message)
