"""
Cache-backed photo metadata lookups.

Combines a photo's info and size list into one PhotoMetadata, serves it from
the cache when possible, and stores fresh lookups with a TTL.
"""

import hashlib

from loguru import logger
from pydantic import ValidationError

from ..cache.base import CacheBackend, Expiry
from ..errors import CacheError, NotFoundError, PhotoServiceError
from .base import PhotoMetadata, PhotoServiceClient

DEFAULT_NAMESPACE = "flickrapi"
DEFAULT_TTL = 600


def derive_key(namespace: str, photo_id: str) -> str:
    """Build the cache key for a photo's metadata."""
    digest = hashlib.sha256(f"photo:{photo_id}".encode()).hexdigest()[:16]
    return f"{namespace}:{digest}"


class CachedMetadataFetcher:
    """Fetches photo metadata, reading through a cache."""

    def __init__(
        self,
        client: PhotoServiceClient,
        cache: CacheBackend,
        ttl: Expiry = DEFAULT_TTL,
        namespace: str = DEFAULT_NAMESPACE,
    ):
        """
        Initialize the fetcher.

        Args:
            client: Remote photo service
            cache: Cache backend shared across requests
            ttl: Seconds to keep entries, or an absolute expiry datetime
            namespace: Key prefix separating these entries from other cache users
        """
        self.client = client
        self.cache = cache
        self.ttl = ttl
        self.namespace = namespace

    def fetch(self, photo_id: str) -> PhotoMetadata:
        """
        Return metadata for a photo, from the cache or the remote service.

        Args:
            photo_id: Numeric photo identifier

        Returns:
            The photo's title, page URL and size variants

        Raises:
            NotFoundError: If the service has no info or no sizes for the photo,
                or could not be reached
        """
        key = derive_key(self.namespace, photo_id)

        cached = self._read(key)
        if cached is not None:
            logger.debug("Metadata cache hit: photo={}, key={}", photo_id, key)
            return cached

        logger.debug("Metadata cache miss: photo={}, key={}", photo_id, key)
        metadata = self._fetch_remote(photo_id)
        self._store(key, metadata)
        return metadata

    def _read(self, key: str) -> PhotoMetadata | None:
        """Read and decode a cached entry; any problem counts as a miss."""
        try:
            raw = self.cache.get(key)
        except CacheError as e:
            logger.warning("Metadata cache unavailable, fetching remotely: {}", e)
            return None
        if raw is None:
            return None

        try:
            return PhotoMetadata.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Discarding undecodable cache entry {}: {}", key, e)
            return None

    def _fetch_remote(self, photo_id: str) -> PhotoMetadata:
        """Look the photo up on the remote service."""
        try:
            info = self.client.get_photo_info(photo_id)
            sizes = self.client.get_photo_sizes(photo_id) if info else []
        except PhotoServiceError as e:
            logger.warning("Photo service lookup failed for {}: {}", photo_id, e)
            raise NotFoundError(photo_id) from e

        if not info or not sizes:
            logger.info("Photo not found: {}", photo_id)
            raise NotFoundError(photo_id)

        logger.debug("Fetched metadata for {}: {} sizes", photo_id, len(sizes))
        return PhotoMetadata.from_parts(info, sizes)

    def _store(self, key: str, metadata: PhotoMetadata) -> None:
        """Write metadata to the cache. Failures are logged, never raised."""
        try:
            stored = self.cache.set(key, metadata.model_dump_json().encode("utf-8"), self.ttl)
        except CacheError as e:
            logger.warning("Failed to store metadata under {}: {}", key, e)
            return
        if not stored:
            logger.warning("Cache refused metadata under {}", key)
