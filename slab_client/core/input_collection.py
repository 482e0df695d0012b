"""
Упорядоченный список редактируемых строк (слэбы или детали)
"""

import logging
from typing import Callable, Generic, Iterator, List, Tuple, TypeVar

from .models import NumericValue, parse_numeric

logger = logging.getLogger(__name__)

RowT = TypeVar('RowT')


class InputCollection(Generic[RowT]):
    """
    Коллекция строк ввода, в которой всегда есть хотя бы одна строка

    Метка строки (S1, P2, ...) назначается при создании и больше не меняется.
    Номер метки берется из счетчика созданных строк, поэтому после удаления
    метки не перенумеровываются и не используются повторно.
    """

    def __init__(self, row_factory: Callable[[str], RowT], prefix: str):
        self._row_factory = row_factory
        self._prefix = prefix
        self._created = 0
        self._rows: List[RowT] = []
        self.add()

    @classmethod
    def of(cls, row_type, prefix: str) -> 'InputCollection':
        """Коллекция для типа строки с фабрикой row_type.blank"""
        return cls(row_type.blank, prefix)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[RowT]:
        return iter(list(self._rows))

    def __getitem__(self, index: int) -> RowT:
        return self._rows[index]

    @property
    def rows(self) -> Tuple[RowT, ...]:
        return tuple(self._rows)

    def _next_label(self) -> str:
        number = max(self._created, len(self._rows)) + 1
        return f"{self._prefix}{number}"

    def add(self) -> RowT:
        """Добавление пустой строки в конец"""
        row = self._row_factory(self._next_label())
        self._rows.append(row)
        self._created += 1
        logger.debug(f"Добавлена строка {row.id}, всего строк: {len(self._rows)}")
        return row

    def remove(self, index: int) -> bool:
        """
        Удаление строки по индексу

        Последнюю оставшуюся строку удалить нельзя, индекс вне диапазона
        ничего не делает. Возвращает True, если строка удалена.
        """
        if len(self._rows) <= 1:
            logger.debug(f"Удаление отклонено: в коллекции {self._prefix} одна строка")
            return False
        if not 0 <= index < len(self._rows):
            return False
        removed = self._rows[index]
        self._rows = [row for i, row in enumerate(self._rows) if i != index]
        logger.debug(f"Удалена строка {removed.id}, всего строк: {len(self._rows)}")
        return True

    def update(self, index: int, field_name: str, raw_value) -> NumericValue:
        """Запись введенного значения в поле строки"""
        if not 0 <= index < len(self._rows):
            raise IndexError(f"Row index out of range: {index}")
        row = self._rows[index]
        if field_name not in type(row).FIELDS:
            raise KeyError(field_name)

        value = parse_numeric(raw_value, integral=field_name in type(row).INTEGRAL_FIELDS)
        if value.is_invalid:
            logger.debug(f"Нераспознанное значение '{raw_value}' для {row.id}.{field_name}")
        self._rows[index] = row.with_field(field_name, value)
        return value

    def valid_rows(self, predicate: Callable[[RowT], bool]) -> List[RowT]:
        """Строки, прошедшие проверку predicate, в исходном порядке"""
        return [row for row in self._rows if predicate(row)]
