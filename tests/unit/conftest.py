"""
Общие fixtures для unit-тестов агрегации балансов.

Сценарий блока: один компонент, два токена, одна транзакция.
    ord=0  T0 +1000
    ord=2  T1 +100
    ord=3  T1 +50
    ord=10 T0 -1
Ожидаемо: T0 → 999, T1 → 150.
"""

import pytest

from src.core.domain import BlockBalanceDeltas, StoreDelta, StoreDeltas, StoreOperation

from .helpers import T0_KEY, T1_KEY, TOKEN_0, TOKEN_1, make_delta


@pytest.fixture
def block_balance_deltas() -> BlockBalanceDeltas:
    """Относительные изменения блока из сценария."""
    return BlockBalanceDeltas(
        balance_deltas=[
            make_delta(0, TOKEN_0, 1000),
            make_delta(2, TOKEN_1, 100),
            make_delta(3, TOKEN_1, 50),
            make_delta(10, TOKEN_0, -1),
        ]
    )


@pytest.fixture
def store_deltas() -> StoreDeltas:
    """Change-log store, соответствующий block_balance_deltas."""
    return StoreDeltas(
        deltas=[
            StoreDelta(
                operation=StoreOperation.CREATE,
                ordinal=0,
                key=T0_KEY,
                old_value=b"0",
                new_value=b"1000",
            ),
            StoreDelta(
                operation=StoreOperation.CREATE,
                ordinal=2,
                key=T1_KEY,
                old_value=b"0",
                new_value=b"100",
            ),
            StoreDelta(
                operation=StoreOperation.UPDATE,
                ordinal=3,
                key=T1_KEY,
                old_value=b"100",
                new_value=b"150",
            ),
            StoreDelta(
                operation=StoreOperation.UPDATE,
                ordinal=10,
                key=T0_KEY,
                old_value=b"1000",
                new_value=b"999",
            ),
        ]
    )
