"""
Flickr Embed.

Renders <flickr>ID|options</flickr> tags as wiki-style image links, with
photo metadata fetched from the Flickr API and cached.

Usage:
    # Render one tag body
    flickr-embed render "123456|thumb|left|A caption"

    # Expand all tags in a page
    flickr-embed expand page.html -o page.out.html

    # Start the MCP server
    flickr-embed serve
"""

__version__ = "0.1.0"

from .embed import EmbedPipeline, create_pipeline
from .errors import (
    ConfigError,
    EmbedError,
    InvalidIdError,
    MissingIdError,
    NotFoundError,
    SizeNotAvailableError,
)
from .host import HostContext, TagRegistry

__all__ = [
    "ConfigError",
    "EmbedError",
    "EmbedPipeline",
    "HostContext",
    "InvalidIdError",
    "MissingIdError",
    "NotFoundError",
    "SizeNotAvailableError",
    "TagRegistry",
    "create_pipeline",
]
