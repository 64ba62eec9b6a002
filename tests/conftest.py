from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from caching_system.infra.store import MemoryStore
from caching_system.services.cache import Cache


class FakeClock:
    """Manually advanced wall clock, shared by Cache (datetime) and MemoryStore (timestamp)."""

    def __init__(self) -> None:
        self.now = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def timestamp(self) -> float:
        return self.now.timestamp()

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> MemoryStore:
    return MemoryStore(name="test", maxsize=100, timer=clock.timestamp)


@pytest.fixture
def cache(store: MemoryStore, clock: FakeClock) -> Cache:
    return Cache(store, clock=clock)
