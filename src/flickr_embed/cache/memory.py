"""In-process cache backend with TTL expiry."""

import time
from collections.abc import Callable
from dataclasses import dataclass
from threading import Lock

from loguru import logger

from .base import CacheBackend, Expiry, resolve_expiry


@dataclass
class CacheEntry:
    """A stored value and the Unix time it stops being valid."""

    value: bytes
    expires_at: float

    def is_expired(self, now: float) -> bool:
        """Check whether this entry has lapsed at ``now``."""
        return now >= self.expires_at


class MemoryCache(CacheBackend):
    """Thread-safe dictionary cache.

    Expired entries are dropped when read, and every write sweeps out the
    rest. The clock is injectable so tests can move time forward without
    sleeping.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = Lock()

    def get(self, key: str) -> bytes | None:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.is_expired(now):
                del self._entries[key]
                logger.debug("Cache entry expired: {}", key)
                return None
            return entry.value

    def set(self, key: str, value: bytes, ttl: Expiry) -> bool:
        now = self._clock()
        expires_at = resolve_expiry(ttl, now)
        with self._lock:
            self._prune(now)
            self._entries[key] = CacheEntry(value=value, expires_at=expires_at)
        return True

    def _prune(self, now: float) -> None:
        """Drop every expired entry. Caller holds the lock."""
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug("Pruned {} expired cache entries", len(expired))

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
