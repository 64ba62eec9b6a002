from __future__ import annotations

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    # Store
    store_name: str
    store_maxsize: int

    # Logging
    log_level: str


def _clean(s: str | None) -> str:
    return (s or "").strip().strip('"').strip("'")


def _int(name: str, default: int) -> int:
    v = _clean(os.getenv(name, str(default)))
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"{name} must be an integer, got {v!r}") from e


def get_settings() -> Settings:
    """
    Reads cache settings from the environment (.env supported).

    - CACHE_STORE_NAME: name of the default in-memory store
    - CACHE_MAXSIZE: capacity of the default in-memory store, > 0
    - CACHE_LOG_LEVEL: root log level name
    """
    maxsize = _int("CACHE_MAXSIZE", 10_000)
    if maxsize <= 0:
        raise RuntimeError(f"CACHE_MAXSIZE must be greater than zero, got {maxsize}")

    return Settings(
        store_name=_clean(os.getenv("CACHE_STORE_NAME")) or "New Memory Cache",
        store_maxsize=maxsize,
        log_level=(_clean(os.getenv("CACHE_LOG_LEVEL")) or "INFO").upper(),
    )
