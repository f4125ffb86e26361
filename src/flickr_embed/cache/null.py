"""Cache backend used when caching is disabled."""

from .base import CacheBackend, Expiry


class NullCache(CacheBackend):
    """Never stores anything, so every lookup is a miss."""

    def get(self, key: str) -> bytes | None:
        return None

    def set(self, key: str, value: bytes, ttl: Expiry) -> bool:
        return True
