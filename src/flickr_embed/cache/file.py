"""
Filesystem cache backend.

Stores one JSON record per key in a directory, so cached metadata survives
process restarts and can be shared by workers on the same host.
"""

import base64
import binascii
import hashlib
import time
from collections.abc import Callable
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from ..errors import CacheError
from .base import CacheBackend, Expiry, resolve_expiry


class CacheRecord(BaseModel):
    """On-disk representation of one cache entry."""

    key: str = Field(description="Original cache key")
    expires_at: float = Field(description="Unix timestamp after which the entry is stale")
    value: str = Field(description="Base64-encoded value")


class FileCache(CacheBackend):
    """Cache backend that writes each entry to its own file."""

    def __init__(self, cache_dir: Path | str, clock: Callable[[], float] = time.time):
        """
        Initialize the file cache.

        Args:
            cache_dir: Directory to store cache records
            clock: Source of the current Unix time
        """
        self.cache_dir = Path(cache_dir)
        self._clock = clock

        self.cache_dir.mkdir(parents=True, exist_ok=True)
        logger.debug("FileCache initialized: dir={}", self.cache_dir)

    def get(self, key: str) -> bytes | None:
        path = self._path_for(key)
        try:
            if not path.exists():
                return None
            raw = path.read_text()
        except OSError as e:
            raise CacheError(f"Could not read cache record {path}: {e}") from e

        try:
            record = CacheRecord.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Ignoring corrupt cache record {}: {}", path.name, e)
            return None

        # Guard against hash collisions
        if record.key != key:
            return None
        if self._clock() >= record.expires_at:
            logger.debug("Cache entry expired: {}", key)
            return None
        try:
            return base64.b64decode(record.value, validate=True)
        except binascii.Error as e:
            logger.warning("Ignoring cache record {} with a bad payload: {}", path.name, e)
            return None

    def set(self, key: str, value: bytes, ttl: Expiry) -> bool:
        record = CacheRecord(
            key=key,
            expires_at=resolve_expiry(ttl, self._clock()),
            value=base64.b64encode(value).decode("ascii"),
        )
        path = self._path_for(key)
        tmp_path = path.with_suffix(".tmp")
        try:
            tmp_path.write_text(record.model_dump_json())
            tmp_path.replace(path)
        except OSError as e:
            raise CacheError(f"Could not write cache record {path}: {e}") from e
        return True

    def count(self) -> int:
        """Return the number of records on disk, including stale ones."""
        return sum(1 for _ in self.cache_dir.glob("*.json"))

    def clear(self) -> int:
        """Delete every record and return how many were removed."""
        removed = 0
        for path in self.cache_dir.glob("*.json"):
            path.unlink(missing_ok=True)
            removed += 1
        logger.info("Cleared {} cache records from {}", removed, self.cache_dir)
        return removed

    def _path_for(self, key: str) -> Path:
        """Map a cache key to its record file."""
        digest = hashlib.sha256(key.encode()).hexdigest()[:32]
        return self.cache_dir / f"{digest}.json"
