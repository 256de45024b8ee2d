"""
Тесты для ключей store "<component_id>:<token hex>"

Проверяет:
1. Бит-точный формат ключа (lowercase hex, разделитель ':')
2. Обратимость balance_key ↔ parse_balance_key
3. Доступ к сегментам ключа
4. Дефекты кодирования (UTF-8, hex, разделитель в component_id)
"""

import pytest

from src.balances import (
    BalanceEncodingError,
    balance_key,
    first_segment,
    last_segment,
    parse_balance_key,
    segment_at,
    try_segment_at,
)
from tests.unit.helpers import COMPONENT_ID, T0_KEY, TOKEN_0


class TestBalanceKey:
    """Тесты построения ключа"""

    def test_format(self) -> None:
        assert balance_key(COMPONENT_ID, TOKEN_0) == T0_KEY

    def test_lowercase_hex(self) -> None:
        assert balance_key(b"pool", b"\xab\xcd\xef") == "pool:abcdef"

    def test_empty_token(self) -> None:
        assert balance_key(b"pool", b"") == "pool:"

    def test_utf8_component(self) -> None:
        assert balance_key("пул".encode("utf-8"), b"\x01") == "пул:01"

    def test_invalid_utf8_component(self) -> None:
        with pytest.raises(BalanceEncodingError, match="utf-8"):
            balance_key(b"\xff\xfe", TOKEN_0)

    def test_delimiter_in_component_rejected(self) -> None:
        """':' в component_id сделал бы ключ необратимым"""
        with pytest.raises(BalanceEncodingError, match="delimiter"):
            balance_key(b"a:b", TOKEN_0)

    def test_encoding_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            balance_key(b"\xff", TOKEN_0)


class TestSegments:
    """Тесты доступа к сегментам"""

    def test_segment_at(self) -> None:
        assert segment_at(T0_KEY, 0) == "0x42c0ffee"
        assert segment_at(T0_KEY, 1) == "bad999"

    def test_first_and_last(self) -> None:
        assert first_segment(T0_KEY) == "0x42c0ffee"
        assert last_segment(T0_KEY) == "bad999"
        assert last_segment("single") == "single"
        assert last_segment("a:b:c") == "c"
        assert last_segment("a:") == ""

    def test_try_segment_missing(self) -> None:
        assert try_segment_at(T0_KEY, 2) is None
        assert try_segment_at(T0_KEY, -1) is None

    def test_segment_missing_raises(self) -> None:
        with pytest.raises(BalanceEncodingError):
            segment_at("no-delimiter", 1)


class TestParseBalanceKey:
    """Тесты разбора ключа"""

    def test_roundtrip(self) -> None:
        assert parse_balance_key(balance_key(COMPONENT_ID, TOKEN_0)) == (COMPONENT_ID, TOKEN_0)

    def test_invalid_hex_token(self) -> None:
        with pytest.raises(BalanceEncodingError, match="hex"):
            parse_balance_key("pool:xyz1")

    def test_odd_length_token(self) -> None:
        with pytest.raises(BalanceEncodingError):
            parse_balance_key("pool:abc")

    def test_non_ascii_token(self) -> None:
        with pytest.raises(BalanceEncodingError):
            parse_balance_key("pool:ёё")

    def test_missing_token_segment(self) -> None:
        with pytest.raises(BalanceEncodingError):
            parse_balance_key("pool")
