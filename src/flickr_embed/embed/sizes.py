"""Size code resolution against a photo's size variants."""

from pydantic import BaseModel

from ..errors import SizeNotAvailableError
from ..photos.base import PhotoSize

# Size codes users may write, mapped to the labels Flickr gives size variants.
# A photo does not necessarily offer every one of them.
VALID_SIZES = {
    "s": "Square",
    "t": "Thumbnail",
    "m": "Small",
    "-": "Medium",
    "b": "Large",
}


class ResolvedImage(BaseModel):
    """The size variant chosen for rendering."""

    url: str
    width: int
    link_url: str = ""


def resolve_size(size_code: str, sizes: list[PhotoSize], link_url: str = "") -> ResolvedImage:
    """
    Pick the size variant for a size code.

    Only an exact label match counts; there is no nearest-size fallback.

    Args:
        size_code: One of the keys of VALID_SIZES
        sizes: Variants reported by the photo service
        link_url: Click-through URL carried into the result

    Returns:
        The first variant whose label matches the code

    Raises:
        SizeNotAvailableError: If the code is unknown or no variant matches
    """
    label = VALID_SIZES.get(size_code)
    if label is not None:
        for size in sizes:
            if size.label == label:
                return ResolvedImage(url=size.url, width=size.width, link_url=link_url)
    raise SizeNotAvailableError(size_code)
