"""Константы и фабрики тестовых данных."""

from src.core.domain import BalanceDelta, Transaction
from src.core.math import to_signed_bytes_be

COMPONENT_ID = b"0x42c0ffee"
TOKEN_0 = bytes.fromhex("bad999")
TOKEN_1 = bytes.fromhex("babe00")
T0_KEY = "0x42c0ffee:bad999"
T1_KEY = "0x42c0ffee:babe00"


def make_tx(hash_: bytes = b"\x00\x01", index: int = 0) -> Transaction:
    return Transaction(hash=hash_, from_=b"\x09\x09", to=b"\x08\x08", index=index)


def make_delta(
    ord: int,
    token: bytes,
    value: int,
    tx: Transaction | None = None,
    component_id: bytes = COMPONENT_ID,
) -> BalanceDelta:
    return BalanceDelta(
        ord=ord,
        tx=tx if tx is not None else make_tx(),
        token=token,
        delta=to_signed_bytes_be(value),
        component_id=component_id,
    )
