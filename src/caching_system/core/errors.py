from __future__ import annotations


class CacheError(Exception):
    """Base error for caching-system."""


class InvalidArgumentError(CacheError, ValueError):
    """Raised when a key, value or store argument is invalid."""


class InvalidTTLError(InvalidArgumentError):
    """Raised when a time-to-live is out of range (zero or negative)."""


class AlreadyExistsError(CacheError):
    """Raised when adding a key that already holds a live entry."""


class NotFoundError(CacheError, LookupError):
    """Raised when a key has no live entry."""


class CacheTypeError(CacheError, TypeError):
    """Raised when a cached value is not of the type the caller expects."""
