"""
Accumulator — накопление относительных изменений балансов в аддитивном store

Относительные deltas блока прибавляются в store под ключом
"<component_id>:<token hex>", так что store хранит абсолютные балансы.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Для каждого ключа ordinals строго возрастают; иначе OrdinalOrderError
2. Блок сначала полностью валидируется (ключи, ordinals, декодирование),
   и только затем применяется к store: ошибочный блок не меняет store
3. Одинаковый упорядоченный вход на свежем store → одинаковое состояние
"""

import logging
from typing import Dict, List, Tuple

from src.core.domain.balance import BlockBalanceDeltas
from src.store.additive_store import AdditiveStore

from .errors import OrdinalOrderError
from .keys import balance_key

logger = logging.getLogger(__name__)


def plan_balance_changes(deltas: BlockBalanceDeltas) -> List[Tuple[int, str, int]]:
    """
    Валидация блока и построение списка операций add для store.

    Args:
        deltas: Относительные изменения балансов блока (в порядке потока)

    Returns:
        [(ordinal, ключ store, signed значение), ...] в порядке потока

    Raises:
        OrdinalOrderError: ordinal ключа не больше предыдущего ordinal того же ключа
        BalanceEncodingError: component_id не является валидным UTF-8
    """
    previous_ordinal: Dict[str, int] = {}
    operations: List[Tuple[int, str, int]] = []

    for delta in deltas.balance_deltas:
        key = balance_key(delta.component_id, delta.token)

        last_ord = previous_ordinal.get(key)
        if last_ord is not None and last_ord >= delta.ord:
            raise OrdinalOrderError(key, last_ord, delta.ord)
        previous_ordinal[key] = delta.ord

        operations.append((delta.ord, key, delta.delta_value()))

    return operations


def store_balance_changes(deltas: BlockBalanceDeltas, store: AdditiveStore) -> None:
    """
    Аддитивно сохранить относительные изменения балансов.

    Фактически агрегирует относительные изменения в абсолютные балансы.
    Предназначено для использования вместе с aggregate_balances_changes,
    который потребляет change-log заполненного здесь store.

    Args:
        deltas: Относительные изменения; ordinals строго возрастают для
            каждой пары (component_id, token)
        store: Аддитивный store

    Raises:
        OrdinalOrderError: Нарушен порядок ordinals (store не изменён)
        BalanceEncodingError: Невалидный component_id (store не изменён)
    """
    operations = plan_balance_changes(deltas)

    for ordinal, key, value in operations:
        store.add(ordinal, key, value)

    logger.debug(
        "Stored %d balance deltas across %d keys",
        len(operations),
        len({key for _, key, _ in operations}),
    )
