"""
Photo metadata models and the photo service interface.

Enables swapping the Flickr REST client for a fake or another provider.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field


class PhotoSize(BaseModel):
    """One size variant of a photo."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(description="Size label used by the service (e.g. 'Medium')")
    width: int = Field(description="Width in pixels")
    url: str = Field(description="Direct URL of the image file")


class PhotoInfo(BaseModel):
    """Descriptive information about a photo."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(default="", description="Photo title")
    link_url: str = Field(description="Canonical photo page URL")


class PhotoMetadata(BaseModel):
    """Everything the renderer needs about one photo."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(default="", description="Photo title")
    link_url: str = Field(description="Canonical photo page URL")
    sizes: list[PhotoSize] = Field(
        default_factory=list,
        description="Size variants in the order the service lists them",
    )

    @classmethod
    def from_parts(cls, info: PhotoInfo, sizes: list[PhotoSize]) -> "PhotoMetadata":
        """Combine a photo's info and size list."""
        return cls(title=info.title, link_url=info.link_url, sizes=list(sizes))


class PhotoServiceClient(ABC):
    """Abstract interface for remote photo services."""

    @abstractmethod
    def get_photo_info(self, photo_id: str) -> PhotoInfo | None:
        """
        Look up a photo's title and page URL.

        Args:
            photo_id: Numeric photo identifier

        Returns:
            The photo info, or None if the service does not know the photo

        Raises:
            PhotoServiceError: If the service could not be reached
        """
        pass

    @abstractmethod
    def get_photo_sizes(self, photo_id: str) -> list[PhotoSize]:
        """
        List the available size variants of a photo.

        Args:
            photo_id: Numeric photo identifier

        Returns:
            Size variants, empty if the service does not know the photo

        Raises:
            PhotoServiceError: If the service could not be reached
        """
        pass
