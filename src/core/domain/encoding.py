"""
Hex-кодирование байтовых полей доменных моделей.

JSON-форма байтовых полей: строка "0x" + lowercase hex.
Python-форма: bytes. Модели принимают обе формы на входе.
"""

import binascii
from typing import Any


def coerce_hex_bytes(value: Any) -> Any:
    """
    Приведение hex-строки к bytes (для field_validator mode="before").

    Args:
        value: bytes, bytearray или hex-строка (с префиксом "0x" или без)

    Returns:
        bytes для строк и bytearray; прочие значения без изменений

    Raises:
        ValueError: Если строка не является корректным hex
    """
    if isinstance(value, bytearray):
        return bytes(value)
    if isinstance(value, str):
        digits = value[2:] if value[:2].lower() == "0x" else value
        try:
            return binascii.unhexlify(digits)
        except ValueError as e:
            raise ValueError(f"Invalid hex string {value!r}: {e}") from e
    return value


def to_hex_str(value: bytes) -> str:
    """bytes → "0x..." (lowercase)."""
    return "0x" + value.hex()
