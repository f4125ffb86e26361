"""
Tag embedding package.

Parses ``<flickr>`` tag bodies, resolves sizes and renders image markup.
"""

from .options import EmbedDefaults, EmbedRequest, apply_defaults, parse_options
from .pipeline import EmbedPipeline, PipelineState, create_pipeline, error_element
from .render import MarkupRenderer
from .sizes import VALID_SIZES, ResolvedImage, resolve_size

__all__ = [
    "EmbedDefaults",
    "EmbedPipeline",
    "EmbedRequest",
    "MarkupRenderer",
    "PipelineState",
    "ResolvedImage",
    "VALID_SIZES",
    "apply_defaults",
    "create_pipeline",
    "error_element",
    "parse_options",
    "resolve_size",
]
