"""
GUI компоненты для приложения оптимизации раскроя слэбов
"""

# OptimizerWindow импортируется при необходимости,
# чтобы пакет можно было импортировать без PyQt5 (например, SettingsManager)
def get_main_window():
    """Получить главное окно (ленивая загрузка)"""
    from .main_window import OptimizerWindow
    return OptimizerWindow

__all__ = ["get_main_window"]
