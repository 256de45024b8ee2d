"""Store — аддитивное хранилище накопленных балансов.

- AdditiveStore / StoreReader интерфейсы, потребляемые агрегацией
- InMemoryAddStore с change-log (StoreDeltas) и откатом к StoreSnapshot
"""

from .additive_store import (
    AdditiveStore,
    InMemoryAddStore,
    StoreReader,
    StoreSnapshot,
)

__all__ = [
    "AdditiveStore",
    "StoreReader",
    "InMemoryAddStore",
    "StoreSnapshot",
]
