from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import datetime
from threading import RLock
from typing import Protocol, runtime_checkable

from cachetools import TLRUCache

from caching_system.core.models import CacheEntry

log = logging.getLogger(__name__)


@runtime_checkable
class Store(Protocol):
    """Key/value container with absolute-time expiration.

    ``get`` returns ``None`` for a missing or expired key; ``remove`` of a
    missing key is a no-op.
    """

    def set(self, key: str, value: object, expires_at: datetime) -> None: ...

    def get(self, key: str) -> object | None: ...

    def remove(self, key: str) -> None: ...


@runtime_checkable
class AtomicStore(Store, Protocol):
    def set_if_absent(self, key: str, value: object, expires_at: datetime) -> bool:
        """Write only when no live entry holds ``key``. Returns False otherwise."""
        ...


def _entry_ttu(_key: str, entry: CacheEntry, _now: float) -> float:
    return entry.expires_at_ts


class MemoryStore:
    """
    In-process store backed by ``cachetools.TLRUCache``.

    Each item's time-to-use is its absolute expiration as a POSIX timestamp,
    so ``timer`` must tick in wall-clock seconds (``time.time`` by default).
    TLRUCache is not thread-safe on its own; every call holds ``_lock``.
    """

    def __init__(
        self,
        *,
        name: str = "New Memory Cache",
        maxsize: int = 10_000,
        timer: Callable[[], float] = time.time,
    ) -> None:
        self.name = name
        self._cache: TLRUCache[str, CacheEntry] = TLRUCache(
            maxsize=maxsize, ttu=_entry_ttu, timer=timer
        )
        self._lock = RLock()

    def set(self, key: str, value: object, expires_at: datetime) -> None:
        with self._lock:
            # TLRUCache silently skips items whose expiry is already past
            self._cache[key] = CacheEntry(key=key, value=value, expires_at=expires_at)

    def set_if_absent(self, key: str, value: object, expires_at: datetime) -> bool:
        with self._lock:
            if self._get_live(key) is not None:
                return False
            self._cache[key] = CacheEntry(key=key, value=value, expires_at=expires_at)
            return True

    def get(self, key: str) -> object | None:
        with self._lock:
            return self._get_live(key)

    def remove(self, key: str) -> None:
        with self._lock:
            self._cache.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
        log.debug("Store %r cleared", self.name)

    def __len__(self) -> int:
        with self._lock:
            self._cache.expire()
            return len(self._cache)

    def _get_live(self, key: str) -> object | None:
        entry = self._cache.get(key)
        if entry is None:
            return None
        return entry.value
