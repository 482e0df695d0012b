"""
Настройки клиента оптимизации раскроя слэбов
"""

import os
import logging
from dotenv import load_dotenv

# Загрузка переменных окружения
load_dotenv()

# API Configuration
API_URL = os.getenv('SLAB_API_URL', 'http://localhost:8085/api/slab')
REQUEST_TIMEOUT = float(os.getenv('SLAB_REQUEST_TIMEOUT', '120'))  # секунды, таймаут транспорта

# Application Settings
ENABLE_LOGGING = os.getenv('SLAB_ENABLE_LOGGING', 'true').lower() == 'true'
LOG_LEVEL = os.getenv('SLAB_LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def setup_logging(level=None):
    """Настройка логирования приложения"""
    if not ENABLE_LOGGING:
        logging.disable(logging.CRITICAL)
        return
    resolved = level or LOG_LEVEL
    logging.basicConfig(level=getattr(logging, resolved, logging.INFO), format=LOG_FORMAT)
