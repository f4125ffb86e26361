"""
Embed pipeline.

Runs one ``<flickr>`` tag through parsing, validation, metadata lookup,
size resolution and rendering. Any EmbedError along the way becomes a single
inline error element; partial markup is never returned.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING

from loguru import logger

from ..cache import create_cache
from ..cache.base import CacheBackend
from ..errors import ConfigError, EmbedError, InvalidIdError, MissingIdError
from ..host import HostContext, TagRegistry
from ..photos import create_photo_client
from ..photos.base import PhotoServiceClient
from ..photos.cache import CachedMetadataFetcher
from . import html
from .options import EmbedDefaults, apply_defaults, parse_options
from .render import MarkupRenderer
from .sizes import resolve_size

if TYPE_CHECKING:
    from ..config import Settings

TAG_NAME = "flickr"

_PHOTO_ID = re.compile(r"[0-9]+")


class PipelineState(str, Enum):
    """Stages a tag passes through."""

    PARSED = "parsed"
    VALIDATED = "validated"
    FETCHED = "fetched"
    RESOLVED = "resolved"
    RENDERED = "rendered"
    FAILED = "failed"


def validate_id(photo_id: str) -> None:
    """Reject empty and non-numeric photo IDs."""
    if not photo_id:
        raise MissingIdError()
    if not _PHOTO_ID.fullmatch(photo_id):
        raise InvalidIdError(photo_id)


def error_element(error: EmbedError) -> str:
    """Render a failure as the inline error shown instead of the image."""
    return html.element("strong", {"class": ["error", "flickrapi-error"]}, error.message)


class EmbedPipeline:
    """Turns tag bodies into image markup."""

    def __init__(
        self,
        api_key: str,
        fetcher: CachedMetadataFetcher,
        defaults: EmbedDefaults | None = None,
        renderer: MarkupRenderer | None = None,
        host: HostContext | None = None,
    ):
        """
        Initialize the pipeline.

        Args:
            api_key: Photo service API key; rendering fails without one
            fetcher: Cache-backed metadata lookups
            defaults: Options applied when a tag leaves them out
            renderer: Markup renderer
            host: Default page context when a call supplies none
        """
        self.api_key = api_key
        self.fetcher = fetcher
        self.defaults = defaults or EmbedDefaults()
        self.renderer = renderer or MarkupRenderer()
        self.host = host or HostContext()

    def render(self, options_string: str, host: HostContext | None = None) -> str:
        """
        Render one tag body, mapping failures to an inline error element.

        Args:
            options_string: Tag body, e.g. ``123|thumb|left|Caption``
            host: Page context; falls back to the pipeline's default

        Returns:
            ``<div class="flickrapi">`` markup, or a ``<strong class="error">`` element
        """
        try:
            return self.run(options_string, host)
        except EmbedError as e:
            logger.info("Rendering <{}> failed ({}): {}", TAG_NAME, e.kind, e.message)
            return error_element(e)

    def run(self, options_string: str, host: HostContext | None = None) -> str:
        """
        Render one tag body, raising on failure.

        Raises:
            ConfigError: If no API key is configured
            MissingIdError: If the tag has no photo ID
            InvalidIdError: If the photo ID is not numeric
            NotFoundError: If the photo has no info or sizes
            SizeNotAvailableError: If the requested size is not offered
        """
        host = host or self.host
        state = PipelineState.PARSED
        request = parse_options(options_string)
        logger.debug("Parsed <{}> options: {}", TAG_NAME, request)

        try:
            if not self.api_key:
                raise ConfigError()
            validate_id(request.id)
            state = PipelineState.VALIDATED

            metadata = self.fetcher.fetch(request.id)
            state = PipelineState.FETCHED

            request = apply_defaults(request, metadata, self.defaults)
            image = resolve_size(request.size, metadata.sizes, metadata.link_url)
            state = PipelineState.RESOLVED

            markup = self.renderer.render(request, image, host, metadata.link_url)
            state = PipelineState.RENDERED
        except EmbedError:
            logger.debug("Pipeline moved from {} to {}", state.value, PipelineState.FAILED.value)
            raise

        logger.debug("Rendered photo {} as {}", request.id, request.type)
        return html.raw_element("div", {"class": "flickrapi"}, markup)

    def handle_tag(self, body: str, attrs: dict[str, str], host: HostContext) -> str:
        """Tag handler entry point; tag attributes are not used."""
        return self.render(body, host)

    def register(self, registry: TagRegistry) -> None:
        """Register this pipeline as the ``<flickr>`` handler."""
        registry.register(TAG_NAME, self.handle_tag)


def create_pipeline(
    settings: Settings,
    client: PhotoServiceClient | None = None,
    cache: CacheBackend | None = None,
) -> EmbedPipeline:
    """
    Build a pipeline from settings.

    Args:
        settings: Application settings
        client: Optional photo client override (defaults to Flickr)
        cache: Optional cache override (defaults to ``settings.cache_backend``)

    Returns:
        Configured EmbedPipeline
    """
    if client is None:
        client = create_photo_client(
            provider_type="flickr",
            api_key=settings.flickr_api_key,
            api_secret=settings.flickr_api_secret,
            base_url=settings.flickr_api_url,
            timeout=settings.flickr_timeout,
        )
    if cache is None:
        cache = create_cache(settings.cache_backend, settings.cache_dir)

    fetcher = CachedMetadataFetcher(
        client=client,
        cache=cache,
        ttl=settings.cache_ttl,
        namespace=settings.cache_namespace,
    )
    host = HostContext(
        direction=settings.content_direction,
        link_rel=settings.link_rel,
        link_target=settings.link_target,
    )
    logger.debug(
        "Pipeline created: cache={}, ttl={}, direction={}",
        settings.cache_backend,
        settings.cache_ttl,
        settings.content_direction,
    )
    return EmbedPipeline(
        api_key=settings.flickr_api_key,
        fetcher=fetcher,
        defaults=settings.embed_defaults,
        host=host,
    )
