"""
Состояние сессии: редактирование, ожидание ответа, успех или ошибка
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .schemas import OptimizationResult


class Phase(Enum):
    """Фаза жизненного цикла запроса"""
    EDITING = "editing"
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class SessionState:
    """
    Единственное значение, по которому строится отображение

    result заполнен только в фазе SUCCESS, message - только в FAILED.
    """
    phase: Phase
    result: Optional[OptimizationResult] = None
    message: Optional[str] = None

    @classmethod
    def editing(cls) -> 'SessionState':
        return cls(Phase.EDITING)

    @classmethod
    def pending(cls) -> 'SessionState':
        return cls(Phase.PENDING)

    @classmethod
    def success(cls, result: OptimizationResult) -> 'SessionState':
        return cls(Phase.SUCCESS, result=result)

    @classmethod
    def failed(cls, message: str) -> 'SessionState':
        return cls(Phase.FAILED, message=message)

    @property
    def is_editing(self) -> bool:
        return self.phase is Phase.EDITING

    @property
    def is_pending(self) -> bool:
        return self.phase is Phase.PENDING

    @property
    def is_success(self) -> bool:
        return self.phase is Phase.SUCCESS

    @property
    def is_failed(self) -> bool:
        return self.phase is Phase.FAILED
