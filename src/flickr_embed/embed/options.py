"""
Tag option parsing.

Turns a ``<flickr>`` tag body such as ``123|thumb|left|My caption`` into an
EmbedRequest, and fills the gaps from configuration and photo metadata.
"""

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..photos.base import PhotoMetadata
from .sizes import VALID_SIZES

DisplayType = Literal["thumb", "frame", "frameless"]
Location = Literal["left", "right", "center", "none"]
SizeCode = Literal["s", "t", "m", "-", "b"]

VALID_TYPES = ("thumb", "frame", "frameless")
VALID_LOCATIONS = ("right", "left", "center", "none")

# A pipe not preceded by a backslash
_DELIMITER = re.compile(r"(?<!\\)\|")


class EmbedRequest(BaseModel):
    """A parsed tag: photo ID plus display options."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Photo identifier, exactly as written")
    type: DisplayType | None = Field(default=None, description="Display mode")
    location: Location | None = Field(default=None, description="Horizontal alignment")
    size: SizeCode | None = Field(default=None, description="One-letter size code")
    caption: str | None = Field(default=None, description="Caption, alt and title text")


class EmbedDefaults(BaseModel):
    """Deployment-wide defaults for options a tag leaves out."""

    type: DisplayType = "frameless"
    location: Location | None = "right"
    size: SizeCode = "-"


def split_options(options_string: str) -> list[str]:
    """Split a tag body on unescaped pipes, unescaping ``\\|`` in each token."""
    return [part.replace("\\|", "|") for part in _DELIMITER.split(options_string)]


def parse_options(options_string: str) -> EmbedRequest:
    """
    Parse a tag body into an EmbedRequest.

    The first token is the photo ID. Every later token is tried against the
    type, location and size vocabularies in that order, and is accepted by the
    first category that is still empty. Anything else becomes the caption;
    further caption tokens are joined back together with ``|``.

    Args:
        options_string: Raw text between the tag's opening and closing markers

    Returns:
        The parsed request. Never raises; the ID is validated later.
    """
    parts = split_options(options_string)
    fields: dict[str, str] = {"id": parts[0]}

    for part in parts[1:]:
        token = part.strip()
        normalized = token.lower()
        if "type" not in fields and normalized in VALID_TYPES:
            fields["type"] = normalized
        elif "location" not in fields and normalized in VALID_LOCATIONS:
            fields["location"] = normalized
        elif "size" not in fields and normalized in VALID_SIZES:
            fields["size"] = normalized
        elif not fields.get("caption"):
            # Keep the caption's original case
            fields["caption"] = token
        else:
            fields["caption"] += "|" + token

    return EmbedRequest(**fields)


def apply_defaults(
    request: EmbedRequest,
    metadata: PhotoMetadata,
    defaults: EmbedDefaults,
) -> EmbedRequest:
    """
    Fill options the tag left unset.

    Type, location and size come from the configured defaults; the caption
    falls back to the photo's title.

    Returns:
        A new, fully populated request
    """
    return request.model_copy(
        update={
            "type": request.type or defaults.type,
            "location": request.location or defaults.location,
            "size": request.size or defaults.size,
            "caption": request.caption or metadata.title,
        }
    )
