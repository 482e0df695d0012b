"""
Основная логика клиента оптимизации раскроя слэбов
"""

from .input_collection import InputCollection
from .models import CutPiece, NumericValue, StockUnit, parse_numeric
from .orchestrator import RequestOrchestrator
from .result_model import ResultModel
from .schemas import OptimizationRequest, OptimizationResult
from .session import Phase, SessionState

__all__ = [
    "InputCollection",
    "CutPiece",
    "NumericValue",
    "StockUnit",
    "parse_numeric",
    "RequestOrchestrator",
    "ResultModel",
    "OptimizationRequest",
    "OptimizationResult",
    "Phase",
    "SessionState",
]
