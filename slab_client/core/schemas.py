"""
Модели запроса и ответа сервиса оптимизации
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import StockUnit, CutPiece


class PieceSpec(BaseModel):
    """Деталь в теле запроса"""
    id: str
    width: float
    length: float
    qty: int

    @classmethod
    def from_row(cls, piece: CutPiece) -> 'PieceSpec':
        return cls(
            id=piece.id,
            width=piece.width.value,
            length=piece.length.value,
            qty=piece.quantity.value,
        )


class StockSpec(BaseModel):
    """Слэб в теле запроса"""
    id: str
    width: float
    length: float

    @classmethod
    def from_row(cls, slab: StockUnit) -> 'StockSpec':
        return cls(id=slab.id, width=slab.width.value, length=slab.length.value)


class OptimizationRequest(BaseModel):
    """Тело POST запроса на оптимизацию"""
    model_config = ConfigDict(frozen=True)

    pieces: List[PieceSpec]
    inventory: List[StockSpec]

    def to_payload(self) -> dict:
        return self.model_dump()


class OptimizationResult(BaseModel):
    """
    Ответ сервиса оптимизации

    Отсутствующие поля (и null) заменяются нулем или пустым списком,
    лишние поля игнорируются.
    """
    model_config = ConfigDict(extra='ignore', populate_by_name=True, frozen=True)

    slab_used: int = Field(0, alias='slabUsed')
    unfitted_piece_ids: List[str] = Field(default_factory=list, alias='unfittedPieceId')
    images: List[str] = Field(default_factory=list, alias='image')

    @field_validator('slab_used', mode='before')
    @classmethod
    def _default_slab_used(cls, value):
        return 0 if value is None else value

    @field_validator('images', mode='before')
    @classmethod
    def _default_images(cls, value):
        return [] if value is None else value

    @field_validator('unfitted_piece_ids', mode='before')
    @classmethod
    def _default_piece_ids(cls, value):
        if value is None:
            return []
        if isinstance(value, list):
            # сервис может вернуть числовые идентификаторы
            return [str(item) for item in value]
        return value
