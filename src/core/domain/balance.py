"""
Balance models — относительные и абсолютные изменения балансов

Immutable Pydantic модели:
- BalanceDelta: относительное изменение баланса токена в компоненте
- BlockBalanceDeltas: упорядоченный поток BalanceDelta одного блока
- BalanceChange: абсолютный баланс токена в компоненте после транзакции

Форматы чисел:
- BalanceDelta.delta — signed big-endian (two's complement)
- BalanceChange.balance — unsigned big-endian (магнитуда)
"""

from typing import Any, Dict, Final, List, Optional, Tuple

from pydantic import BaseModel, Field, field_serializer, field_validator

from src.core.math.bigint import from_signed_bytes_be, from_unsigned_bytes_be

from .encoding import coerce_hex_bytes, to_hex_str
from .transaction import Transaction

# Максимальное значение u64 (ordinal)
ORDINAL_MAX: Final[int] = 2**64 - 1


# =============================================================================
# RELATIVE DELTAS
# =============================================================================


class BalanceDelta(BaseModel):
    """
    Относительное изменение баланса одного токена одного компонента.

    ord — ordinal (позиция в потоке); для фиксированной пары
    (component_id, token) ordinals обязаны строго возрастать.
    """

    ord: int = Field(..., ge=0, le=ORDINAL_MAX, description="Ordinal изменения в блоке")
    tx: Optional[Transaction] = Field(None, description="Транзакция изменения")
    token: bytes = Field(..., description="Адрес токена")
    delta: bytes = Field(..., description="Изменение баланса, signed big-endian")
    component_id: bytes = Field(..., description="Идентификатор компонента (UTF-8)")

    model_config = {"frozen": True}

    @field_validator("token", "delta", mode="before")
    @classmethod
    def parse_hex(cls, v: Any) -> Any:
        return coerce_hex_bytes(v)

    @field_serializer("token", "delta", when_used="json")
    def serialize_hex(self, v: bytes) -> str:
        return to_hex_str(v)

    def delta_value(self) -> int:
        """Изменение баланса как целое со знаком."""
        return from_signed_bytes_be(self.delta)


class BlockBalanceDeltas(BaseModel):
    """Все относительные изменения балансов блока, в порядке потока."""

    balance_deltas: List[BalanceDelta] = Field(default_factory=list)

    model_config = {"frozen": True}


# =============================================================================
# ABSOLUTE BALANCES
# =============================================================================


class BalanceChange(BaseModel):
    """Абсолютный баланс токена в компоненте."""

    token: bytes = Field(..., description="Адрес токена")
    balance: bytes = Field(..., description="Абсолютный баланс, unsigned big-endian")
    component_id: bytes = Field(..., description="Идентификатор компонента (UTF-8)")

    model_config = {"frozen": True}

    @field_validator("token", "balance", mode="before")
    @classmethod
    def parse_hex(cls, v: Any) -> Any:
        return coerce_hex_bytes(v)

    @field_serializer("token", "balance", when_used="json")
    def serialize_hex(self, v: bytes) -> str:
        return to_hex_str(v)

    def balance_value(self) -> int:
        """Абсолютный баланс как неотрицательное целое."""
        return from_unsigned_bytes_be(self.balance)


# tx hash → (Transaction, token → BalanceChange)
TxAggregatedBalances = Dict[bytes, Tuple[Transaction, Dict[bytes, BalanceChange]]]
