"""
StoreDelta — запись change-log аддитивного store

Каждое успешное add() в store порождает одну запись
(operation, ordinal, key, old_value, new_value).
old_value/new_value — ASCII-decimal представление накопленного значения.
"""

from enum import IntEnum
from typing import List

from pydantic import BaseModel, Field

from src.core.math.bigint import parse_decimal_ascii

from .balance import ORDINAL_MAX


class StoreOperation(IntEnum):
    """Тип операции записи change-log"""

    UNSET = 0
    CREATE = 1  # Первая запись ключа
    UPDATE = 2
    DELETE = 3


class StoreDelta(BaseModel):
    """Одна запись change-log store."""

    operation: StoreOperation = Field(StoreOperation.UNSET, description="Тип операции")
    ordinal: int = Field(..., ge=0, le=ORDINAL_MAX, description="Ordinal записи")
    key: str = Field(..., description="Ключ store ('<component_id>:<token hex>')")
    old_value: bytes = Field(b"", description="Значение до записи (ASCII-decimal)")
    new_value: bytes = Field(..., description="Значение после записи (ASCII-decimal)")

    model_config = {"frozen": True}

    def old_int(self) -> int:
        """
        Значение до записи; пустое old_value трактуется как 0.

        Raises:
            ValueError: Если old_value не является ASCII-decimal целым
        """
        if not self.old_value:
            return 0
        return parse_decimal_ascii(self.old_value)

    def new_int(self) -> int:
        """
        Значение после записи.

        Raises:
            ValueError: Если new_value не является ASCII-decimal целым
        """
        return parse_decimal_ascii(self.new_value)


class StoreDeltas(BaseModel):
    """Упорядоченный change-log store за блок."""

    deltas: List[StoreDelta] = Field(default_factory=list)

    model_config = {"frozen": True}
