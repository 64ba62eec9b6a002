from __future__ import annotations

import logging
from dataclasses import dataclass

from caching_system.app.settings import Settings, get_settings
from caching_system.infra.store import MemoryStore
from caching_system.services.cache import Cache

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    settings: Settings
    store: MemoryStore
    cache: Cache


def create_memory_cache(*, name: str = "New Memory Cache", maxsize: int = 10_000) -> Cache:
    """Cache over a fresh MemoryStore, for callers that don't inject their own store."""
    return Cache(MemoryStore(name=name, maxsize=maxsize))


def build_container(settings: Settings | None = None) -> Container:
    """
    Wires the default store and cache from settings.

    Logging is left to the caller, e.g. `configure_logging(container.settings.log_level)`.
    """
    settings = settings or get_settings()

    store = MemoryStore(name=settings.store_name, maxsize=settings.store_maxsize)
    cache = Cache(store)
    log.info("Memory store %r ready (maxsize=%d)", store.name, settings.store_maxsize)

    return Container(settings=settings, store=store, cache=cache)
