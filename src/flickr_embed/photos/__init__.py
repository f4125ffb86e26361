"""Photo service package.

Provides a factory function to create the configured photo service client.
"""

from .base import PhotoInfo, PhotoMetadata, PhotoServiceClient, PhotoSize
from .cache import CachedMetadataFetcher, derive_key
from .flickr import DEFAULT_API_URL, FlickrClient


def create_photo_client(
    provider_type: str = "flickr",
    api_key: str = "",
    api_secret: str = "",
    base_url: str | None = None,
    timeout: float = 10.0,
) -> PhotoServiceClient:
    """Create a photo service client.

    Args:
        provider_type: Type of provider (currently only "flickr")
        api_key: API key for the provider
        api_secret: Optional API secret for request signing
        base_url: Optional endpoint override
        timeout: HTTP timeout in seconds

    Returns:
        Configured PhotoServiceClient instance

    Raises:
        ValueError: If provider_type is not recognized

    """
    if provider_type == "flickr":
        return FlickrClient(
            api_key=api_key,
            api_secret=api_secret,
            base_url=base_url or DEFAULT_API_URL,
            timeout=timeout,
        )
    else:
        raise ValueError(f"Unknown photo provider: {provider_type}")


__all__ = [
    "CachedMetadataFetcher",
    "FlickrClient",
    "PhotoInfo",
    "PhotoMetadata",
    "PhotoServiceClient",
    "PhotoSize",
    "create_photo_client",
    "derive_key",
]
