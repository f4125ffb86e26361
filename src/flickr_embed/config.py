"""Configuration management using pydantic-settings.

Loads from environment variables and .env file.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .embed.options import EmbedDefaults


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    Attributes:
        flickr_api_key: Flickr API key. Required at render time.
        flickr_api_secret: Flickr API secret, used to sign requests when set.
        flickr_api_url: Flickr REST endpoint.
        flickr_timeout: HTTP timeout for Flickr calls in seconds.
        default_type: Display type used when a tag sets none.
        default_location: Alignment used when a tag sets none. Empty means none,
            so thumbnails follow the writing direction.
        default_size: Size code used when a tag sets none.
        cache_backend: Metadata cache backend, one of "memory", "file" or "none".
        cache_path: Directory for the file cache backend.
        cache_namespace: Prefix that keeps cache keys apart from other users.
        cache_ttl: Lifetime of cached metadata in seconds.
        content_direction: Writing direction of rendered content ("ltr" or "rtl").
        link_rel: rel attribute added to external image links.
        link_target: Optional target attribute for external image links.
        host: MCP server bind address.
        port: MCP server bind port.
        debug: Enable debug mode.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_json: Output logs in JSON format for production.
        log_file: Optional path of a rotated log file.

    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Flickr
    flickr_api_key: str = ""
    flickr_api_secret: str = ""
    flickr_api_url: str = "https://api.flickr.com/services/rest/"
    flickr_timeout: float = 10.0

    # Tag defaults
    default_type: Literal["thumb", "frame", "frameless"] = "frameless"
    default_location: Literal["left", "right", "center", "none"] | None = "right"
    default_size: Literal["s", "t", "m", "-", "b"] = "-"

    # Metadata cache
    cache_backend: Literal["memory", "file", "none"] = "memory"
    cache_path: str = "./data/flickr-cache"
    cache_namespace: str = "flickrapi"
    cache_ttl: int = Field(default=600, gt=0)

    # Rendering
    content_direction: Literal["ltr", "rtl"] = "ltr"
    link_rel: str | None = "nofollow"
    link_target: str | None = None

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    log_file: str | None = None

    @field_validator("default_location", "link_target", "log_file", mode="before")
    @classmethod
    def _empty_as_none(cls, value):
        """Let an empty environment variable unset an optional setting."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def cache_dir(self) -> Path:
        """Return the file cache directory as a Path object.

        Returns:
            Path: Resolved path to the cache directory.

        """
        return Path(self.cache_path)

    @property
    def embed_defaults(self) -> EmbedDefaults:
        """Return the configured type, location and size defaults."""
        return EmbedDefaults(
            type=self.default_type,
            location=self.default_location,
            size=self.default_size,
        )


# Global settings instance
settings = Settings()
