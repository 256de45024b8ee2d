"""
BigInt codecs — целые произвольной точности в байтовых представлениях

Модуль обеспечивает точное (без потерь) преобразование целых чисел между:
- signed big-endian байтами (two's complement) — формат relative deltas
- unsigned big-endian байтами (магнитуда) — формат абсолютных балансов
- ASCII-decimal байтами — формат значений в change-log аддитивного store

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все кодирования минимальны: ноль кодируется одним байтом 0x00
2. Пустой вход в from_signed_bytes_be / from_unsigned_bytes_be → 0
3. parse_decimal_ascii принимает только [+-]?[0-9]+ (никаких пробелов и '_')
4. Ошибки формата никогда не маскируются: ValueError с описанием
5. ASCII-decimal преобразования не ограничены числом цифр: int <-> str
   идёт через Decimal, на который не действует лимит int_max_str_digits
"""

import re
from decimal import Decimal
from typing import Final

# Строгий формат ASCII-decimal целого
_DECIMAL_RE: Final[re.Pattern[bytes]] = re.compile(rb"[+-]?[0-9]+")


# =============================================================================
# SIGNED (TWO'S COMPLEMENT)
# =============================================================================


def from_signed_bytes_be(data: bytes) -> int:
    """
    Декодирование signed big-endian (two's complement).

    Args:
        data: Байты числа; пустые байты трактуются как 0

    Returns:
        Целое со знаком

    Examples:
        >>> from_signed_bytes_be(b"\\x03\\xe8")
        1000
        >>> from_signed_bytes_be(b"\\xff")
        -1
    """
    return int.from_bytes(data, byteorder="big", signed=True)


def to_signed_bytes_be(value: int) -> bytes:
    """
    Минимальное two's complement big-endian представление.

    Examples:
        >>> to_signed_bytes_be(0)
        b'\\x00'
        >>> to_signed_bytes_be(128)
        b'\\x00\\x80'
        >>> to_signed_bytes_be(-128)
        b'\\x80'
    """
    # Для отрицательных -2^k помещается в k бит, поэтому сдвигаем на единицу
    length = ((value + (value < 0)).bit_length() + 8) // 8
    return value.to_bytes(length, byteorder="big", signed=True)


# =============================================================================
# UNSIGNED (MAGNITUDE)
# =============================================================================


def from_unsigned_bytes_be(data: bytes) -> int:
    """Декодирование unsigned big-endian магнитуды."""
    return int.from_bytes(data, byteorder="big", signed=False)


def to_unsigned_bytes_be(value: int) -> bytes:
    """
    Минимальное big-endian представление магнитуды |value|.

    Знак отбрасывается: абсолютные балансы публикуются как магнитуда.

    Examples:
        >>> to_unsigned_bytes_be(150)
        b'\\x96'
        >>> to_unsigned_bytes_be(-999)
        b'\\x03\\xe7'
        >>> to_unsigned_bytes_be(0)
        b'\\x00'
    """
    magnitude = abs(value)
    length = max(1, (magnitude.bit_length() + 7) // 8)
    return magnitude.to_bytes(length, byteorder="big", signed=False)


# =============================================================================
# ASCII DECIMAL
# =============================================================================


def parse_decimal_ascii(data: bytes) -> int:
    """
    Разбор ASCII-decimal целого (формат значений change-log).

    Args:
        data: Байты вида b"-42", b"+1000", b"150"

    Returns:
        Целое со знаком

    Raises:
        ValueError: Если байты не ASCII или не являются десятичным целым
    """
    try:
        text = data.decode("ascii")
    except UnicodeDecodeError as e:
        raise ValueError(f"Integer value is not valid ASCII: {data!r}") from e

    if _DECIMAL_RE.fullmatch(data) is None:
        raise ValueError(f"Failed to parse integer from {text!r}")

    return int(Decimal(text))


def to_decimal_ascii(value: int) -> bytes:
    """Кодирование целого в ASCII-decimal байты (без ограничения числа цифр)."""
    return str(Decimal(value)).encode("ascii")
