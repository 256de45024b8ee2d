"""
Block pipeline: relative deltas → store → абсолютные балансы по транзакциям.

1. store_balance_changes: накопление deltas блока в store
2. drain_deltas: change-log store за этот блок
3. aggregate_balances_changes: группировка по транзакциям

Блок применяется целиком или никак: при любой ошибке на шагах 1-3
store откатывается к состоянию до блока.
"""

import logging
from typing import Optional

from src.core.domain.balance import BlockBalanceDeltas, TxAggregatedBalances
from src.store.additive_store import InMemoryAddStore

from .accumulator import store_balance_changes
from .aggregator import AlignmentConfig, aggregate_balances_changes

logger = logging.getLogger(__name__)


def aggregate_block(
    deltas: BlockBalanceDeltas,
    store: InMemoryAddStore,
    config: Optional[AlignmentConfig] = None,
) -> TxAggregatedBalances:
    """
    Обработка одного блока.

    Store должен иметь пустой change-log на входе (предыдущий блок дренирован),
    иначе записи предыдущих блоков нарушат сопоставление с deltas.

    Args:
        deltas: Относительные изменения балансов блока
        store: Store, живущий между блоками
        config: Конфигурация сопоставления change-log ↔ deltas

    Returns:
        tx hash → (Transaction, token → BalanceChange)

    Raises:
        BalanceAggregationError: Блок отклонён, store не изменён
        ValueError: Значение не кодируется, store не изменён
    """
    snapshot = store.snapshot()
    try:
        store_balance_changes(deltas, store)
        store_deltas = store.drain_deltas()
        result = aggregate_balances_changes(store_deltas, deltas, config)
    except Exception:
        store.rollback(snapshot)
        logger.warning(
            "Block rejected, store rolled back (%d deltas)", len(deltas.balance_deltas)
        )
        raise

    logger.info(
        "Block aggregated: %d deltas, %d transactions",
        len(deltas.balance_deltas),
        len(result),
    )
    return result
