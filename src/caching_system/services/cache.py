from __future__ import annotations

import logging
import math
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import TypeVar, overload

from caching_system.core.errors import (
    AlreadyExistsError,
    CacheTypeError,
    InvalidArgumentError,
    InvalidTTLError,
    NotFoundError,
)
from caching_system.infra.store import AtomicStore, Store

log = logging.getLogger(__name__)

T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _check_key(key: object) -> str:
    if key is None or not isinstance(key, str) or not key:
        raise InvalidArgumentError("key must be a non-empty string")
    return key


class Cache:
    """
    Typed façade over a Store.

    Validates keys and TTLs, rejects duplicate adds and missing reads, and
    turns a relative TTL into an absolute expiration instant. Storage and
    expiration themselves are left to the Store.
    """

    def __init__(self, store: Store, *, clock: Callable[[], datetime] | None = None) -> None:
        if store is None:
            raise InvalidArgumentError("store must not be None")
        self._store = store
        self._clock = clock or _utcnow

    def add(self, key: str, value: object, ttl_seconds: float) -> None:
        """
        Stores ``value`` under ``key`` for ``ttl_seconds`` from now.

        Args:
            key: unique, non-empty identifier for the entry
            value: object to cache (None is not storable)
            ttl_seconds: how long the entry stays retrievable, > 0

        Raises:
            InvalidArgumentError: empty key or None value
            InvalidTTLError: ttl_seconds <= 0, not finite, or too far in the future
            AlreadyExistsError: a live entry already holds the key
        """
        key = _check_key(key)
        if isinstance(ttl_seconds, bool) or not isinstance(ttl_seconds, (int, float)):
            raise InvalidArgumentError(f"ttl_seconds must be a number, got {type(ttl_seconds).__name__}")
        # ints are always finite; math.isfinite would overflow on huge ones
        if (isinstance(ttl_seconds, float) and not math.isfinite(ttl_seconds)) or ttl_seconds <= 0:
            raise InvalidTTLError(f"ttl_seconds must be a finite number greater than zero, got {ttl_seconds}")
        if value is None:
            raise InvalidArgumentError("value must not be None")

        try:
            expires_at = self._clock() + timedelta(seconds=ttl_seconds)
        except (OverflowError, ValueError) as e:
            raise InvalidTTLError(f"ttl_seconds {ttl_seconds} expires beyond the representable range") from e

        if isinstance(self._store, AtomicStore):
            if not self._store.set_if_absent(key, value, expires_at):
                log.debug("Rejected duplicate add for key: %s", key)
                raise AlreadyExistsError(f"An object with key {key!r} already exists.")
        else:
            # check-then-set is not atomic here; concurrent adds may both write
            if self._exists(key):
                log.debug("Rejected duplicate add for key: %s", key)
                raise AlreadyExistsError(f"An object with key {key!r} already exists.")
            self._store.set(key, value, expires_at)

        log.debug("Added key: %s (expires %s)", key, expires_at.isoformat())

    @overload
    def get(self, key: str) -> object: ...

    @overload
    def get(self, key: str, expected_type: type[T]) -> T: ...

    def get(self, key: str, expected_type: type | None = None) -> object:
        """Returns the live value for ``key``, optionally checked against ``expected_type``."""
        key = _check_key(key)

        value = self._store.get(key)
        if value is None:
            raise NotFoundError(f"An object with key {key!r} doesn't exist.")

        if expected_type is not None and not isinstance(value, expected_type):
            raise CacheTypeError(
                f"Cached object for key {key!r} is {type(value).__name__}, "
                f"expected {expected_type.__name__}"
            )
        return value

    def remove(self, key: str) -> None:
        key = _check_key(key)
        if self._exists(key):
            self._store.remove(key)
            log.debug("Removed key: %s", key)

    def _exists(self, key: str) -> bool:
        return self._store.get(key) is not None
