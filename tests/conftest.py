"""Pytest fixtures and configuration for flickr-embed tests.

This module provides shared fixtures for testing the option parser, cache
backends, metadata fetcher, renderer and pipeline.
"""

import tempfile
from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from flickr_embed.cache import MemoryCache
from flickr_embed.photos.base import PhotoInfo, PhotoMetadata, PhotoServiceClient, PhotoSize


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# --- Temporary Directory Fixtures ---


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


@pytest.fixture
def temp_cache_dir(temp_dir: Path) -> Path:
    """Create a temporary directory for the file cache."""
    cache_dir = temp_dir / "cache"
    cache_dir.mkdir()
    return cache_dir


# --- Sample Data Fixtures ---


@pytest.fixture
def sample_info() -> PhotoInfo:
    """Photo info as returned by the photo service."""
    return PhotoInfo(title="X", link_url="http://example/123")


@pytest.fixture
def sample_sizes() -> list[PhotoSize]:
    """Size variants as returned by the photo service."""
    return [
        PhotoSize(label="Medium", width=180, url="http://img/m.jpg"),
    ]


@pytest.fixture
def sample_metadata(sample_info, sample_sizes) -> PhotoMetadata:
    """Combined metadata for photo 123."""
    return PhotoMetadata.from_parts(sample_info, sample_sizes)


# --- Mock Provider Fixtures ---


@pytest.fixture
def mock_photo_client(sample_info, sample_sizes) -> PhotoServiceClient:
    """Create a mock photo service client that knows one photo."""
    client = MagicMock(spec=PhotoServiceClient)
    client.get_photo_info.return_value = sample_info
    client.get_photo_sizes.return_value = sample_sizes
    return client


@pytest.fixture
def clock() -> FakeClock:
    """Create a controllable clock."""
    return FakeClock()


@pytest.fixture
def memory_cache(clock) -> MemoryCache:
    """Create an empty in-memory cache driven by the fake clock."""
    return MemoryCache(clock=clock)


# --- Settings Override Fixtures ---


@pytest.fixture
def mock_settings(temp_dir: Path, monkeypatch):
    """Override settings with test values."""
    monkeypatch.setenv("FLICKR_API_KEY", "test-api-key")
    monkeypatch.setenv("CACHE_PATH", str(temp_dir / "cache"))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    from flickr_embed.config import Settings

    return Settings()
