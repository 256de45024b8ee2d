"""
Тесты для BigInt codecs

Проверяет:
1. Two's complement big-endian кодирование и декодирование
2. Минимальность кодирований (ноль → 0x00)
3. Магнитуду для абсолютных балансов
4. Строгий разбор ASCII-decimal значений store
"""

import pytest

from src.core.math import (
    from_signed_bytes_be,
    from_unsigned_bytes_be,
    parse_decimal_ascii,
    to_decimal_ascii,
    to_signed_bytes_be,
    to_unsigned_bytes_be,
)


class TestSignedBytes:
    """Тесты signed big-endian (two's complement)"""

    @pytest.mark.parametrize(
        "value, encoded",
        [
            (0, b"\x00"),
            (1, b"\x01"),
            (127, b"\x7f"),
            (128, b"\x00\x80"),
            (1000, b"\x03\xe8"),
            (-1, b"\xff"),
            (-128, b"\x80"),
            (-129, b"\xff\x7f"),
        ],
    )
    def test_minimal_encoding(self, value: int, encoded: bytes) -> None:
        """Минимальное two's complement представление"""
        assert to_signed_bytes_be(value) == encoded
        assert from_signed_bytes_be(encoded) == value

    def test_empty_bytes_decode_to_zero(self) -> None:
        """Пустые байты → 0"""
        assert from_signed_bytes_be(b"") == 0

    def test_high_bit_means_negative(self) -> None:
        """Старший бит первого байта — знак"""
        assert from_signed_bytes_be(b"\x96") == -106
        assert from_signed_bytes_be(b"\x00\x96") == 150

    def test_arbitrary_precision(self) -> None:
        """Значения за пределами u256 не теряют точность"""
        value = -(2**300) + 12345
        assert from_signed_bytes_be(to_signed_bytes_be(value)) == value


class TestUnsignedBytes:
    """Тесты unsigned big-endian (магнитуда)"""

    def test_zero_is_single_byte(self) -> None:
        assert to_unsigned_bytes_be(0) == b"\x00"

    def test_no_sign_padding(self) -> None:
        """150 кодируется одним байтом (в отличие от signed формата)"""
        assert to_unsigned_bytes_be(150) == b"\x96"
        assert to_unsigned_bytes_be(999) == b"\x03\xe7"

    def test_negative_becomes_magnitude(self) -> None:
        """Знак отбрасывается"""
        assert to_unsigned_bytes_be(-999) == b"\x03\xe7"

    def test_decode(self) -> None:
        assert from_unsigned_bytes_be(b"\x96") == 150
        assert from_unsigned_bytes_be(b"") == 0


class TestDecimalAscii:
    """Тесты ASCII-decimal формата значений store"""

    @pytest.mark.parametrize(
        "data, value",
        [(b"0", 0), (b"150", 150), (b"+1000", 1000), (b"-1", -1), (b"007", 7)],
    )
    def test_parse_valid(self, data: bytes, value: int) -> None:
        assert parse_decimal_ascii(data) == value

    @pytest.mark.parametrize(
        "data",
        [b"", b" 1", b"1 ", b"1_000", b"0x10", b"1.5", b"abc", b"+", b"--1"],
    )
    def test_parse_rejects_non_decimal(self, data: bytes) -> None:
        """Всё, кроме [+-]?[0-9]+, — ошибка"""
        with pytest.raises(ValueError):
            parse_decimal_ascii(data)

    def test_parse_rejects_non_ascii(self) -> None:
        with pytest.raises(ValueError, match="ASCII"):
            parse_decimal_ascii(b"\xff\xfe")

    def test_encode(self) -> None:
        assert to_decimal_ascii(999) == b"999"
        assert to_decimal_ascii(-42) == b"-42"
        assert to_decimal_ascii(0) == b"0"

    def test_beyond_int_str_digit_limit(self) -> None:
        """ASCII-decimal без ограничения на число цифр"""
        value = -(10**5000) + 7
        encoded = to_decimal_ascii(value)
        assert len(encoded) == 5001
        assert parse_decimal_ascii(encoded) == value
        assert parse_decimal_ascii(b"1" * 6000) == (10**6000 - 1) // 9
