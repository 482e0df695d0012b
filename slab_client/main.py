#!/usr/bin/env python3
"""
Точка входа в приложение оптимизации раскроя слэбов
"""

import sys
import logging

from .core.config import setup_logging

logger = logging.getLogger(__name__)


def main():
    """Главная функция - точка входа в приложение"""
    setup_logging()

    from PyQt5.QtWidgets import QApplication
    from .gui import get_main_window

    app = QApplication(sys.argv)
    window = get_main_window()()
    window.show()

    logger.info("🚀 Приложение запущено")
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
