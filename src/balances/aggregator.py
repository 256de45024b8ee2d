"""
Aggregator — абсолютные балансы по транзакциям и токенам

Читает абсолютные значения из change-log аддитивного store
(см. store_balance_changes), сопоставляет их с относительными deltas
блока для получения транзакции и компонента, и группирует результат
по хэшу транзакции.

Правила:
- Группировка по tx.hash в порядке первого появления хэша
- Внутри транзакции для токена остаётся последнее по потоку значение
  (last-write-wins)
- Представитель Transaction группы — последняя транзакция с этим хэшем

Сопоставление change-log ↔ deltas:
- strict (по умолчанию): равные длины, совпадение ключа и ordinal
  в каждой паре, иначе StoreAlignmentError
- legacy (strict=False): позиционный zip с усечением до короткой
  последовательности (с предупреждением в лог)
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from src.core.domain.balance import (
    BalanceChange,
    BalanceDelta,
    BlockBalanceDeltas,
    TxAggregatedBalances,
)
from src.core.domain.store_delta import StoreDelta, StoreDeltas
from src.core.domain.transaction import Transaction
from src.core.math.bigint import to_unsigned_bytes_be

from .errors import BalanceEncodingError, MissingTransactionError, StoreAlignmentError
from .keys import balance_key, parse_balance_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlignmentConfig:
    """Конфигурация сопоставления change-log store с потоком deltas.

    strict=True: длины равны, в каждой паре совпадают ключ и ordinal.
    strict=False: позиционный zip, усечение до более короткой последовательности.
    """
    strict: bool = True


# =============================================================================
# PAIRING
# =============================================================================


def _pair_deltas(
    balance_store: StoreDeltas,
    deltas: BlockBalanceDeltas,
    config: AlignmentConfig,
) -> Iterator[Tuple[int, StoreDelta, BalanceDelta]]:
    store_deltas = balance_store.deltas
    balance_deltas = deltas.balance_deltas

    if len(store_deltas) != len(balance_deltas):
        if config.strict:
            raise StoreAlignmentError(
                index=min(len(store_deltas), len(balance_deltas)),
                expected=len(balance_deltas),
                actual=len(store_deltas),
                details="length mismatch",
            )
        logger.warning(
            "Store deltas (%d) and balance deltas (%d) differ in length; "
            "truncating to %d pairs",
            len(store_deltas),
            len(balance_deltas),
            min(len(store_deltas), len(balance_deltas)),
        )

    for index, (store_delta, balance_delta) in enumerate(zip(store_deltas, balance_deltas)):
        if config.strict:
            expected_key = balance_key(balance_delta.component_id, balance_delta.token)
            if store_delta.key != expected_key:
                raise StoreAlignmentError(index, expected_key, store_delta.key, "key mismatch")
            if store_delta.ordinal != balance_delta.ord:
                raise StoreAlignmentError(
                    index, balance_delta.ord, store_delta.ordinal, "ordinal mismatch"
                )
        yield index, store_delta, balance_delta


# =============================================================================
# CONVERSION
# =============================================================================


def balance_change_from_store_delta(store_delta: StoreDelta) -> BalanceChange:
    """
    Абсолютный баланс из записи change-log.

    Args:
        store_delta: Запись change-log с ключом "<component_id>:<token hex>"

    Returns:
        BalanceChange с балансом как unsigned big-endian магнитудой new_value

    Raises:
        BalanceEncodingError: Невалидный ключ или new_value
    """
    component_id, token = parse_balance_key(store_delta.key)

    # new_value: ASCII-строка с десятичным целым
    try:
        balance = store_delta.new_int()
    except ValueError as e:
        raise BalanceEncodingError(
            f"Invalid new_value for key {store_delta.key!r}: {e}"
        ) from e

    return BalanceChange(
        token=token,
        balance=to_unsigned_bytes_be(balance),
        component_id=component_id,
    )


# =============================================================================
# AGGREGATION
# =============================================================================


def aggregate_balances_changes(
    balance_store: StoreDeltas,
    deltas: BlockBalanceDeltas,
    config: Optional[AlignmentConfig] = None,
) -> TxAggregatedBalances:
    """
    Агрегация абсолютных балансов по транзакциям и токенам.

    Args:
        balance_store: Change-log store, заполненного store_balance_changes
        deltas: Относительные изменения балансов того же блока
        config: Конфигурация сопоставления (default: strict)

    Returns:
        tx hash → (Transaction, token → BalanceChange); при нескольких
        изменениях токена в транзакции остаётся последнее

    Raises:
        StoreAlignmentError: change-log и deltas разошлись (strict)
        MissingTransactionError: у delta нет транзакции
        BalanceEncodingError: невалидный ключ или значение store
    """
    config = config or AlignmentConfig()
    aggregated: Dict[bytes, Tuple[Transaction, Dict[bytes, BalanceChange]]] = {}

    for index, store_delta, balance_delta in _pair_deltas(balance_store, deltas, config):
        change = balance_change_from_store_delta(store_delta)

        tx = balance_delta.tx
        if tx is None:
            raise MissingTransactionError(index, balance_delta.ord)

        group = aggregated.get(tx.hash)
        balances = group[1] if group is not None else {}
        balances[change.token] = change
        aggregated[tx.hash] = (tx, balances)

    logger.debug(
        "Aggregated %d balance deltas into %d transactions",
        len(deltas.balance_deltas),
        len(aggregated),
    )
    return aggregated
