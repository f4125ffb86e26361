"""
Abstract base class for key-value cache backends.

Enables swapping between the in-process cache, the file cache, or an
external store. Values are opaque bytes; callers own serialization.
"""

from abc import ABC, abstractmethod
from datetime import datetime

# Seconds from now, or an absolute point in time
Expiry = int | float | datetime


def resolve_expiry(ttl: Expiry, now: float) -> float:
    """
    Convert a TTL into an absolute expiry timestamp.

    Args:
        ttl: Lifetime in seconds, or an absolute datetime
        now: Current time as a Unix timestamp

    Returns:
        Unix timestamp after which the entry is stale

    Raises:
        ValueError: If a relative TTL is not positive
    """
    if isinstance(ttl, datetime):
        return ttl.timestamp()
    if ttl <= 0:
        raise ValueError(f"Cache TTL must be positive, got {ttl}")
    return now + ttl


class CacheBackend(ABC):
    """Abstract interface for metadata cache backends."""

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """
        Fetch a value.

        Args:
            key: Cache key

        Returns:
            The stored bytes, or None if absent or expired

        Raises:
            CacheError: If the backend is unavailable
        """
        pass

    @abstractmethod
    def set(self, key: str, value: bytes, ttl: Expiry) -> bool:
        """
        Store a value.

        Args:
            key: Cache key
            value: Bytes to store
            ttl: Lifetime in seconds, or an absolute expiry datetime

        Returns:
            True if the value was stored

        Raises:
            CacheError: If the backend is unavailable
        """
        pass
