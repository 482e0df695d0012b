"""
Модели входных данных: слэбы склада, детали для раскроя и числовые поля формы
"""

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

Number = Union[int, float]


class FieldKind(Enum):
    """Состояние числового поля"""
    EMPTY = "empty"      # Поле не заполнено
    NUMBER = "number"    # Корректное неотрицательное число
    INVALID = "invalid"  # Текст, который не удалось разобрать


@dataclass(frozen=True)
class NumericValue:
    """Значение числового поля формы: Empty | Number(n) | Invalid"""
    kind: FieldKind
    value: Optional[Number] = None
    raw: str = ""

    @classmethod
    def empty(cls) -> 'NumericValue':
        return cls(FieldKind.EMPTY)

    @classmethod
    def number(cls, value: Number) -> 'NumericValue':
        return cls(FieldKind.NUMBER, value=value)

    @classmethod
    def invalid(cls, raw: str) -> 'NumericValue':
        return cls(FieldKind.INVALID, raw=raw)

    @property
    def is_empty(self) -> bool:
        return self.kind is FieldKind.EMPTY

    @property
    def is_number(self) -> bool:
        return self.kind is FieldKind.NUMBER

    @property
    def is_invalid(self) -> bool:
        return self.kind is FieldKind.INVALID

    def is_positive(self) -> bool:
        """Число строго больше нуля"""
        return self.is_number and self.value > 0

    def display(self) -> str:
        """Текст для отображения в ячейке таблицы"""
        if self.is_number:
            return str(self.value)
        if self.is_invalid:
            return self.raw
        return ""


EMPTY = NumericValue.empty()


def parse_numeric(raw, integral: bool = False) -> NumericValue:
    """
    Разбор значения, введенного пользователем

    Пустая строка дает Empty, число ограничивается снизу нулем,
    для целочисленных полей дробная часть отбрасывается.
    Нераспознанный текст (а также NaN и бесконечность) дает Invalid,
    исключение наружу не выбрасывается.
    """
    if raw is None:
        return EMPTY

    if isinstance(raw, bool):
        return NumericValue.invalid(str(raw))

    if isinstance(raw, (int, float)):
        number = float(raw)
        text = str(raw)
    else:
        text = str(raw)
        if text.strip() == "":
            return EMPTY
        try:
            number = float(text.strip())
        except ValueError:
            return NumericValue.invalid(text)

    if math.isnan(number) or math.isinf(number):
        return NumericValue.invalid(text)

    number = max(0.0, number)
    if integral:
        return NumericValue.number(int(math.trunc(number)))
    if number.is_integer():
        return NumericValue.number(int(number))
    return NumericValue.number(number)


@dataclass(frozen=True)
class StockUnit:
    """Слэб (лист материала) со склада"""
    id: str
    width: NumericValue = EMPTY
    length: NumericValue = EMPTY

    FIELDS = ("width", "length")
    INTEGRAL_FIELDS = ()

    @classmethod
    def blank(cls, label: str) -> 'StockUnit':
        return cls(id=label)

    def with_field(self, field_name: str, value: NumericValue) -> 'StockUnit':
        return replace(self, **{field_name: value})


@dataclass(frozen=True)
class CutPiece:
    """Деталь, которую нужно вырезать"""
    id: str
    width: NumericValue = EMPTY
    length: NumericValue = EMPTY
    quantity: NumericValue = EMPTY

    FIELDS = ("width", "length", "quantity")
    INTEGRAL_FIELDS = ("quantity",)

    @classmethod
    def blank(cls, label: str) -> 'CutPiece':
        return cls(id=label)

    def with_field(self, field_name: str, value: NumericValue) -> 'CutPiece':
        return replace(self, **{field_name: value})


Row = Union[StockUnit, CutPiece]

