"""
FastMCP server for Flickr photo embeds.

Exposes the embed pipeline as tools so clients can render single tags or
expand every ``<flickr>`` tag in a document.
"""

from __future__ import annotations

from typing import Literal

from fastmcp import FastMCP
from loguru import logger

from .config import settings
from .embed import EmbedPipeline, create_pipeline
from .host import HostContext, TagRegistry

# Initialize components lazily (on first tool call)
_pipeline = None
_registry = None


def get_pipeline() -> EmbedPipeline:
    """Get or create the embed pipeline."""
    global _pipeline
    if _pipeline is None:
        logger.debug("Initializing embed pipeline: cache={}", settings.cache_backend)
        _pipeline = create_pipeline(settings)
        logger.info("Embed pipeline initialized successfully")
    return _pipeline


def get_registry() -> TagRegistry:
    """Get or create the tag registry with the pipeline registered."""
    global _registry
    if _registry is None:
        _registry = TagRegistry()
        get_pipeline().register(_registry)
    return _registry


def _host_for(direction: str) -> HostContext:
    """Build the page context for a tool call."""
    return HostContext(
        direction="rtl" if direction == "rtl" else "ltr",
        link_rel=settings.link_rel,
        link_target=settings.link_target,
    )


mcp = FastMCP(
    name="flickr-embed",
    instructions=(
        "Renders Flickr photo embeds as HTML. Tag bodies look like "
        "'PHOTO_ID|thumb|left|m|Caption': a numeric photo ID followed by optional "
        "type (thumb, frame, frameless), location (left, right, center, none), "
        "size code (s, t, m, -, b) and caption, in any order."
    ),
)


@mcp.tool()
def render_flickr_embed(options: str, direction: Literal["ltr", "rtl"] = "ltr") -> str:
    """
    Render one Flickr embed as HTML.

    Args:
        options: Tag body, e.g. "123456|thumb|left|A caption"
        direction: Writing direction of the page ("ltr" or "rtl")

    Returns:
        HTML markup for the image, or an inline error element
    """
    logger.info("Render request: options='{}'", options[:80])
    return get_pipeline().render(options, _host_for(direction))


@mcp.tool()
def expand_flickr_tags(text: str, direction: Literal["ltr", "rtl"] = "ltr") -> str:
    """
    Replace every <flickr>...</flickr> tag in a document with HTML.

    Args:
        text: Document containing flickr tags
        direction: Writing direction of the page ("ltr" or "rtl")

    Returns:
        The document with all tags expanded
    """
    logger.info("Expand request: {} characters", len(text))
    return get_registry().expand(text, _host_for(direction))


# Export for uvicorn
def create_app():
    """Create the MCP application for deployment."""
    return mcp
