"""
Metadata cache package.

Provides a factory function to create the configured cache backend.
"""

import time
from collections.abc import Callable
from pathlib import Path

from .base import CacheBackend, Expiry, resolve_expiry
from .file import FileCache
from .memory import MemoryCache
from .null import NullCache


def create_cache(
    backend_type: str = "memory",
    cache_dir: str | Path = "./data/flickr-cache",
    clock: Callable[[], float] = time.time,
) -> CacheBackend:
    """
    Factory function to create a cache backend.

    Args:
        backend_type: Type of backend ("memory", "file" or "none")
        cache_dir: Directory for the file backend
        clock: Source of the current Unix time

    Returns:
        Configured CacheBackend instance

    Raises:
        ValueError: If backend_type is not recognized
    """
    if backend_type == "memory":
        return MemoryCache(clock=clock)
    elif backend_type == "file":
        return FileCache(cache_dir=cache_dir, clock=clock)
    elif backend_type == "none":
        return NullCache()
    else:
        raise ValueError(f"Unknown cache backend: {backend_type}")


__all__ = [
    "CacheBackend",
    "Expiry",
    "FileCache",
    "MemoryCache",
    "NullCache",
    "create_cache",
    "resolve_expiry",
]
