"""
Проверка строк ввода перед отправкой на оптимизацию
"""

from enum import Enum
from typing import Iterable, List, Optional

from .errors import ValidationError
from .models import CutPiece, StockUnit, Row

NO_VALID_SLAB = "Add at least one valid slab (width and length > 0)"
NO_VALID_PIECE = "Add at least one valid piece (width, length, quantity > 0)"


class RowKind(Enum):
    """Тип строки ввода"""
    STOCK = "stock"
    PIECE = "piece"


def row_kind(row: Row) -> RowKind:
    return RowKind.PIECE if isinstance(row, CutPiece) else RowKind.STOCK


def is_valid_row(row: Row, kind: Optional[RowKind] = None) -> bool:
    """Слэб корректен при width > 0 и length > 0, деталь - еще и при quantity > 0"""
    actual = row_kind(row)
    if kind is not None and kind is not actual:
        raise TypeError(f"Expected a {kind.value} row, got {type(row).__name__}")
    kind = actual
    if not (row.width.is_positive() and row.length.is_positive()):
        return False
    if kind is RowKind.PIECE:
        return row.quantity.is_positive() and isinstance(row.quantity.value, int)
    return True


def valid_stock(inventory: Iterable[StockUnit]) -> List[StockUnit]:
    return [slab for slab in inventory if is_valid_row(slab, RowKind.STOCK)]


def valid_pieces(pieces: Iterable[CutPiece]) -> List[CutPiece]:
    return [piece for piece in pieces if is_valid_row(piece, RowKind.PIECE)]


def submit_diagnostic(inventory: Iterable[StockUnit], pieces: Iterable[CutPiece]) -> Optional[str]:
    """
    Сообщение о том, почему отправка невозможна, или None

    Слэбы проверяются первыми: если нет ни одного корректного слэба,
    сообщение о слэбах выдается независимо от состояния деталей.
    """
    if not valid_stock(inventory):
        return NO_VALID_SLAB
    if not valid_pieces(pieces):
        return NO_VALID_PIECE
    return None


def can_submit(inventory: Iterable[StockUnit], pieces: Iterable[CutPiece]) -> bool:
    return submit_diagnostic(inventory, pieces) is None


def ensure_submittable(inventory: Iterable[StockUnit], pieces: Iterable[CutPiece]) -> None:
    diagnostic = submit_diagnostic(inventory, pieces)
    if diagnostic is not None:
        raise ValidationError(diagnostic)
