"""
Transaction — Идентичность транзакции блока

Immutable Pydantic модель. Поле hash — ключ агрегации балансов по транзакциям,
остальные поля (from, to, index) переносятся в результат как метаданные.
"""

from typing import Any, Final

from pydantic import BaseModel, Field, field_serializer, field_validator

from .encoding import coerce_hex_bytes, to_hex_str

# Максимальное значение u32 (индекс транзакции в блоке)
TX_INDEX_MAX: Final[int] = 2**32 - 1


class Transaction(BaseModel):
    """
    Транзакция, к которой отнесено изменение баланса.

    Immutable модель (frozen=True). Поле `from` является ключевым словом Python,
    поэтому атрибут называется from_ (alias "from" для JSON и конструктора).
    """

    hash: bytes = Field(..., description="Хэш транзакции (ключ агрегации)")
    from_: bytes = Field(..., alias="from", description="Адрес отправителя")
    to: bytes = Field(..., description="Адрес получателя")
    index: int = Field(..., ge=0, le=TX_INDEX_MAX, description="Индекс транзакции в блоке")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("hash", "from_", "to", mode="before")
    @classmethod
    def parse_hex(cls, v: Any) -> Any:
        return coerce_hex_bytes(v)

    @field_serializer("hash", "from_", "to", when_used="json")
    def serialize_hex(self, v: bytes) -> str:
        return to_hex_str(v)

    def hash_hex(self) -> str:
        """Хэш в виде "0x..." строки (для логов и сообщений об ошибках)."""
        return to_hex_str(self.hash)
