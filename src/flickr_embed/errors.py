"""
Error types for the embed pipeline.

Every user-facing failure derives from EmbedError and is rendered inline
as a single error element. CacheError and PhotoServiceError are internal:
the fetcher logs the former and maps the latter to NotFoundError.
"""


class EmbedError(Exception):
    """Base class for failures shown in place of the image."""

    kind = "error"

    @property
    def message(self) -> str:
        """Return the human-readable message for this failure."""
        return str(self)


class ConfigError(EmbedError):
    """The Flickr API key is not configured."""

    kind = "config"

    def __init__(self, message: str = "Flickr Error ( No API key ): You must set FLICKR_API_KEY!"):
        super().__init__(message)


class MissingIdError(EmbedError):
    """The tag body did not start with a photo ID."""

    kind = "missing_id"

    def __init__(self):
        super().__init__("Flickr Error ( No ID ): Enter at least a PhotoID")


class InvalidIdError(EmbedError):
    """The photo ID is not made of decimal digits."""

    kind = "invalid_id"

    def __init__(self, photo_id: str):
        self.photo_id = photo_id
        super().__init__("Flickr Error ( Not a valid ID ): PhotoID not numeric")


class NotFoundError(EmbedError):
    """The photo service returned no info or no sizes for the ID."""

    kind = "not_found"

    def __init__(self, photo_id: str):
        self.photo_id = photo_id
        super().__init__(f"Flickr Error ( Photo not found ): PhotoID {photo_id}")


class SizeNotAvailableError(EmbedError):
    """The requested size code has no matching variant."""

    kind = "size_not_available"

    def __init__(self, size_code: str):
        self.size_code = size_code
        super().__init__(
            f"Flickr Error ( Not a valid size ): Size '{size_code}' not found for this photo"
        )


class CacheError(Exception):
    """A cache backend could not complete a get or set."""


class PhotoServiceError(Exception):
    """The remote photo service could not be reached or answered badly."""
