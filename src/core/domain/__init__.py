"""
Domain models and value objects.

Contains the block-level entities: Transaction, BalanceDelta, BalanceChange,
and the store change-log records (StoreDelta).
"""

from src.core.domain.balance import (
    ORDINAL_MAX,
    BalanceChange,
    BalanceDelta,
    BlockBalanceDeltas,
    TxAggregatedBalances,
)
from src.core.domain.encoding import coerce_hex_bytes, to_hex_str
from src.core.domain.store_delta import StoreDelta, StoreDeltas, StoreOperation
from src.core.domain.transaction import TX_INDEX_MAX, Transaction

__all__ = [
    # Transaction
    "TX_INDEX_MAX",
    "Transaction",
    # Balances
    "ORDINAL_MAX",
    "BalanceDelta",
    "BlockBalanceDeltas",
    "BalanceChange",
    "TxAggregatedBalances",
    # Store change-log
    "StoreOperation",
    "StoreDelta",
    "StoreDeltas",
    # Encoding helpers
    "coerce_hex_bytes",
    "to_hex_str",
]
