"""
Contract Validation Module

Модуль для валидации JSON контрактов сообщений балансов.
"""

from .validators import (
    BalanceChangeValidator,
    BlockBalanceDeltasValidator,
    ContractValidator,
    SchemaLoader,
    StoreDeltasValidator,
    validate_balance_change,
    validate_block_balance_deltas,
    validate_store_deltas,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BlockBalanceDeltasValidator",
    "StoreDeltasValidator",
    "BalanceChangeValidator",
    # Functions
    "validate_block_balance_deltas",
    "validate_store_deltas",
    "validate_balance_change",
]
