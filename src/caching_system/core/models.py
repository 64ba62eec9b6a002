from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CacheEntry:
    key: str
    value: object
    # absolute instant, timezone-aware UTC
    expires_at: datetime

    @property
    def expires_at_ts(self) -> float:
        return self.expires_at.timestamp()
