"""In-memory key/value cache with per-entry time-to-live.

Thread-safe for its own map only; two callers missing the same key at the
same time will both compute the value. Expired entries are dropped when read
and swept from the whole map on writes, at most once per sweep interval.
"""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")

_MISSING = object()


class CacheEntry(Generic[T]):
    """Single cache entry with an absolute expiry time."""

    __slots__ = ("value", "expires_at")

    def __init__(self, value: T, expires_at: float) -> None:
        self.value = value
        self.expires_at = expires_at

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class TTLCache:
    """Key/value cache whose entries expire *ttl_seconds* after being set."""

    def __init__(
        self,
        ttl_seconds: float = 3600.0,
        clock: Callable[[], float] = time.monotonic,
        sweep_interval: Optional[float] = None,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.sweep_interval = ttl_seconds if sweep_interval is None else sweep_interval
        self._clock = clock
        self._entries: dict[str, CacheEntry[Any]] = {}
        self._lock = threading.Lock()
        self._next_sweep = clock() + self.sweep_interval

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the cached value for *key*, or *default* if missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return default
            if entry.is_expired(self._clock()):
                del self._entries[key]
                return default
            return entry.value

    def set(self, key: str, value: Any, ttl_seconds: Optional[float] = None) -> None:
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        now = self._clock()
        with self._lock:
            if now >= self._next_sweep:
                self._sweep(now)
            self._entries[key] = CacheEntry(value, now + ttl)

    def get_or_compute(self, key: str, compute: Callable[[], T]) -> T:
        """Read-through lookup: on a miss, call *compute* and store its result.

        Exceptions from *compute* propagate and nothing is stored.
        """
        value = self.get(key, _MISSING)
        if value is not _MISSING:
            return value
        value = compute()
        self.set(key, value)
        return value

    def purge_expired(self) -> int:
        """Drop expired entries and return how many were removed."""
        with self._lock:
            return self._sweep(self._clock())

    def _sweep(self, now: float) -> int:
        expired = [k for k, e in self._entries.items() if e.is_expired(now)]
        for key in expired:
            del self._entries[key]
        self._next_sweep = now + self.sweep_interval
        return len(expired)
