"""
Ключи store: "<component_id>:<token hex>"

Формат бит-в-бит совместим со store: component_id как UTF-8 строка,
токен как lowercase hex без префикса "0x", разделитель ':'.
"""

import binascii
from typing import Final, Optional, Tuple

from .errors import BalanceEncodingError

KEY_DELIMITER: Final[str] = ":"


# =============================================================================
# BUILD
# =============================================================================


def balance_key(component_id: bytes, token: bytes) -> str:
    """
    Построение ключа store для пары (component, token).

    Args:
        component_id: Идентификатор компонента (UTF-8 байты)
        token: Адрес токена

    Returns:
        "<component_id>:<token hex>"

    Raises:
        BalanceEncodingError: component_id не UTF-8 или содержит ':'
    """
    try:
        component = component_id.decode("utf-8")
    except UnicodeDecodeError as e:
        raise BalanceEncodingError(
            f"component_id is not valid utf-8: {component_id!r}"
        ) from e

    if KEY_DELIMITER in component:
        raise BalanceEncodingError(
            f"component_id {component!r} contains key delimiter {KEY_DELIMITER!r}"
        )

    return f"{component}{KEY_DELIMITER}{token.hex()}"


# =============================================================================
# SEGMENTS
# =============================================================================


def try_segment_at(key: str, index: int) -> Optional[str]:
    """Сегмент ключа по индексу или None, если сегмента нет."""
    segments = key.split(KEY_DELIMITER)
    if 0 <= index < len(segments):
        return segments[index]
    return None


def segment_at(key: str, index: int) -> str:
    """
    Сегмент ключа по индексу.

    Raises:
        BalanceEncodingError: Если сегмента с таким индексом нет
    """
    segment = try_segment_at(key, index)
    if segment is None:
        raise BalanceEncodingError(f"Key {key!r} has no segment at index {index}")
    return segment


def first_segment(key: str) -> str:
    return segment_at(key, 0)


def last_segment(key: str) -> str:
    return segment_at(key, key.count(KEY_DELIMITER))


# =============================================================================
# PARSE
# =============================================================================


def parse_balance_key(key: str) -> Tuple[bytes, bytes]:
    """
    Обратное преобразование ключа store.

    Args:
        key: "<component_id>:<token hex>"

    Returns:
        (component_id, token)

    Raises:
        BalanceEncodingError: Нет сегмента токена или токен не hex
    """
    component = segment_at(key, 0)
    token_hex = segment_at(key, 1)
    try:
        token = binascii.unhexlify(token_hex)
    except ValueError as e:
        raise BalanceEncodingError(f"Token ID not valid hex in key {key!r}") from e
    return component.encode("utf-8"), token
