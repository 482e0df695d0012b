"""
Клиент сервиса оптимизации раскроя слэбов

Этот пакет содержит:
- core: Ввод слэбов и деталей, проверка, запрос к сервису и состояние сессии
- gui: Графический интерфейс пользователя
- Основной модуль запуска приложения
"""

__version__ = "1.0.0"
