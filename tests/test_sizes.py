"""Tests for size code resolution."""

import pytest

from flickr_embed.embed.sizes import VALID_SIZES, resolve_size
from flickr_embed.errors import SizeNotAvailableError
from flickr_embed.photos.base import PhotoSize


@pytest.fixture
def sizes() -> list[PhotoSize]:
    """Medium and Large variants."""
    return [
        PhotoSize(label="Medium", width=500, url="u1"),
        PhotoSize(label="Large", width=1024, url="u2"),
    ]


class TestResolveSize:
    """Test resolve_size function."""

    def test_medium(self, sizes):
        """Test '-' resolves to the Medium variant."""
        image = resolve_size("-", sizes)

        assert image.width == 500
        assert image.url == "u1"

    def test_large(self, sizes):
        """Test 'b' resolves to the Large variant."""
        image = resolve_size("b", sizes, link_url="http://example/1")

        assert image.width == 1024
        assert image.url == "u2"
        assert image.link_url == "http://example/1"

    def test_missing_label_raises(self):
        """Test a code without a matching variant raises."""
        only_medium = [PhotoSize(label="Medium", width=500, url="u1")]

        with pytest.raises(SizeNotAvailableError) as exc_info:
            resolve_size("b", only_medium)

        assert exc_info.value.size_code == "b"
        assert "'b'" in exc_info.value.message

    def test_no_nearest_fallback(self, sizes):
        """Test a smaller missing size does not fall back to a larger one."""
        with pytest.raises(SizeNotAvailableError):
            resolve_size("s", sizes)

    def test_first_match_wins(self):
        """Test the first variant with the label is chosen."""
        duplicated = [
            PhotoSize(label="Small", width=240, url="first"),
            PhotoSize(label="Small", width=320, url="second"),
        ]

        assert resolve_size("m", duplicated).url == "first"

    def test_label_match_is_exact(self):
        """Test labels must match exactly, including case."""
        with pytest.raises(SizeNotAvailableError):
            resolve_size("-", [PhotoSize(label="medium", width=500, url="u1")])

    def test_unknown_code_raises(self, sizes):
        """Test a code outside the vocabulary raises."""
        with pytest.raises(SizeNotAvailableError):
            resolve_size("x", sizes)


def test_valid_sizes_vocabulary():
    """Test the size code vocabulary."""
    assert VALID_SIZES == {
        "s": "Square",
        "t": "Thumbnail",
        "m": "Small",
        "-": "Medium",
        "b": "Large",
    }
