"""Additive Store — аддитивное key/value хранилище с change-log.

Интерфейсы:
- AdditiveStore: add(ord, key, value) — прибавить signed значение под ключом
- StoreReader: get_last(key) — последнее накопленное значение

InMemoryAddStore — in-memory реализация обоих интерфейсов:
- Полная история значений ключа (ordinal, value) для get_at/get_first/get_last
- Change-log (StoreDeltas) с одной записью на каждый add()
- Накопленные значения живут между блоками; change-log дренируется за блок
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Protocol, Tuple

from src.core.domain.store_delta import StoreDelta, StoreDeltas, StoreOperation
from src.core.math.bigint import to_decimal_ascii

logger = logging.getLogger(__name__)


class AdditiveStore(Protocol):
    def add(self, ord: int, key: str, value: int) -> None:
        ...


class StoreReader(Protocol):
    def get_last(self, key: str) -> Optional[int]:
        ...


@dataclass(frozen=True)
class StoreSnapshot:
    """Состояние InMemoryAddStore для отката (история только дописывается)."""

    history_lengths: Dict[str, int]
    changelog: Tuple[StoreDelta, ...]


class InMemoryAddStore:
    """In-memory аддитивный store.

    Отсутствующий ключ трактуется как 0: первое add() создаёт ключ
    (StoreOperation.CREATE, old_value=b"0"), последующие обновляют (UPDATE).
    """

    def __init__(self):
        # key → [(ordinal, накопленное значение), ...] в порядке записи
        self._history: Dict[str, List[Tuple[int, int]]] = {}
        self._changelog: List[StoreDelta] = []

    # -------------------------------------------------------------------------
    # WRITE
    # -------------------------------------------------------------------------

    def add(self, ord: int, key: str, value: int) -> None:
        """Прибавить value к текущему значению key на ordinal ord.

        Args:
            ord: ordinal записи
            key: ключ store
            value: signed приращение
        """
        history = self._history.get(key)
        if history is None:
            operation = StoreOperation.CREATE
            old_value = 0
            history = []
        else:
            operation = StoreOperation.UPDATE
            old_value = history[-1][1]

        new_value = old_value + value
        # Запись change-log строится до мутации: ошибка не оставляет следов
        entry = StoreDelta(
            operation=operation,
            ordinal=ord,
            key=key,
            old_value=to_decimal_ascii(old_value),
            new_value=to_decimal_ascii(new_value),
        )
        history.append((ord, new_value))
        self._history[key] = history
        self._changelog.append(entry)

    def add_many(self, ord: int, keys: Iterable[str], value: int) -> None:
        """Прибавить одно и то же значение к нескольким ключам."""
        for key in keys:
            self.add(ord, key, value)

    # -------------------------------------------------------------------------
    # READ
    # -------------------------------------------------------------------------

    def get_last(self, key: str) -> Optional[int]:
        history = self._history.get(key)
        if not history:
            return None
        return history[-1][1]

    def get_first(self, key: str) -> Optional[int]:
        history = self._history.get(key)
        if not history:
            return None
        return history[0][1]

    def get_at(self, ord: int, key: str) -> Optional[int]:
        """Значение key по состоянию на ordinal ord.

        Ordinals монотонны только внутри блока, а история живёт между
        блоками, поэтому просматривается вся история ключа.

        Returns:
            Значение после последней (в порядке записи) записи с
            ordinal <= ord, None если таких записей нет
        """
        value = None
        for entry_ord, entry_value in self._history.get(key, []):
            if entry_ord <= ord:
                value = entry_value
        return value

    def has_last(self, key: str) -> bool:
        return self.get_last(key) is not None

    def has_first(self, key: str) -> bool:
        return self.get_first(key) is not None

    def has_at(self, ord: int, key: str) -> bool:
        return self.get_at(ord, key) is not None

    # -------------------------------------------------------------------------
    # CHANGE-LOG
    # -------------------------------------------------------------------------

    def deltas(self, since_ordinal: Optional[int] = None) -> StoreDeltas:
        """Снимок change-log без очистки.

        Args:
            since_ordinal: если задан, только записи с ordinal >= since_ordinal
        """
        if since_ordinal is None:
            return StoreDeltas(deltas=list(self._changelog))
        return StoreDeltas(
            deltas=[delta for delta in self._changelog if delta.ordinal >= since_ordinal]
        )

    def drain_deltas(self) -> StoreDeltas:
        """Вернуть change-log и очистить его (накопленные значения сохраняются)."""
        drained = StoreDeltas(deltas=self._changelog)
        self._changelog = []
        logger.debug("Drained %d store deltas", len(drained.deltas))
        return drained

    # -------------------------------------------------------------------------
    # SNAPSHOT
    # -------------------------------------------------------------------------

    def snapshot(self) -> StoreSnapshot:
        """Точка отката: длины историй ключей и копия change-log."""
        return StoreSnapshot(
            history_lengths={key: len(history) for key, history in self._history.items()},
            changelog=tuple(self._changelog),
        )

    def rollback(self, snapshot: StoreSnapshot) -> None:
        """Вернуть store к состоянию snapshot (отменяет все add() после него)."""
        for key in list(self._history):
            length = snapshot.history_lengths.get(key, 0)
            if length == 0:
                del self._history[key]
            else:
                del self._history[key][length:]
        self._changelog = list(snapshot.changelog)
        logger.debug("Store rolled back to %d keys", len(self._history))
