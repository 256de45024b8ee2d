"""Balances — агрегация относительных изменений балансов в абсолютные.

Порядок использования:
1. store_balance_changes — сохранить deltas блока в аддитивный store
   (ordinals строго возрастают для каждого ключа)
2. aggregate_balances_changes — сопоставить change-log store с deltas
   и получить абсолютные балансы по транзакциям
aggregate_block выполняет оба шага для InMemoryAddStore.
"""

from .accumulator import plan_balance_changes, store_balance_changes
from .aggregator import (
    AlignmentConfig,
    aggregate_balances_changes,
    balance_change_from_store_delta,
)
from .errors import (
    BalanceAggregationError,
    BalanceEncodingError,
    MissingTransactionError,
    OrdinalOrderError,
    StoreAlignmentError,
)
from .keys import (
    KEY_DELIMITER,
    balance_key,
    first_segment,
    last_segment,
    parse_balance_key,
    segment_at,
    try_segment_at,
)
from .pipeline import aggregate_block

__all__ = [
    # Accumulator
    "plan_balance_changes",
    "store_balance_changes",
    # Aggregator
    "AlignmentConfig",
    "aggregate_balances_changes",
    "balance_change_from_store_delta",
    # Pipeline
    "aggregate_block",
    # Keys
    "KEY_DELIMITER",
    "balance_key",
    "parse_balance_key",
    "segment_at",
    "try_segment_at",
    "first_segment",
    "last_segment",
    # Errors
    "BalanceAggregationError",
    "OrdinalOrderError",
    "BalanceEncodingError",
    "MissingTransactionError",
    "StoreAlignmentError",
]
