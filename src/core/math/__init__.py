"""
Core math modules

Целочисленные примитивы произвольной точности и их байтовые кодирования.
"""

from src.core.math.bigint import (
    from_signed_bytes_be,
    from_unsigned_bytes_be,
    parse_decimal_ascii,
    to_decimal_ascii,
    to_signed_bytes_be,
    to_unsigned_bytes_be,
)

__all__ = [
    # Signed (two's complement)
    "from_signed_bytes_be",
    "to_signed_bytes_be",
    # Unsigned (magnitude)
    "from_unsigned_bytes_be",
    "to_unsigned_bytes_be",
    # ASCII decimal
    "parse_decimal_ascii",
    "to_decimal_ascii",
]
