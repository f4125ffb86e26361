"""Tests for host integration: HostContext and TagRegistry."""

import pytest

from flickr_embed.host import HostContext, TagRegistry, parse_attributes


class TestHostContext:
    """Test HostContext class."""

    def test_align_end_ltr(self):
        """Test left-to-right content ends on the right."""
        assert HostContext(direction="ltr").align_end() == "right"

    def test_align_end_rtl(self):
        """Test right-to-left content ends on the left."""
        assert HostContext(direction="rtl").align_end() == "left"

    def test_external_link_attribs(self):
        """Test configured rel and target are returned."""
        host = HostContext(link_rel="nofollow", link_target="_blank")

        assert host.external_link_attribs("http://x/") == {"rel": "nofollow", "target": "_blank"}

    def test_external_link_attribs_empty(self):
        """Test nothing is added when no policy is configured."""
        assert HostContext(link_rel=None).external_link_attribs("http://x/") == {}


class TestParseAttributes:
    """Test parse_attributes function."""

    def test_quoted_and_bare(self):
        """Test double-quoted, single-quoted and bare values."""
        attrs = parse_attributes(' a="1" b=\'2\' C=3')

        assert attrs == {"a": "1", "b": "2", "c": "3"}

    def test_empty(self):
        """Test no attributes."""
        assert parse_attributes(None) == {}


class TestTagRegistry:
    """Test TagRegistry class."""

    @pytest.fixture
    def registry(self):
        """Registry with an echo handler for <echo>."""
        registry = TagRegistry()
        registry.register(
            "echo",
            lambda body, attrs, host: f"[{body}|{attrs.get('x', '')}|{host.direction}]",
        )
        return registry

    def test_register(self, registry):
        """Test registered names are listed."""
        assert "echo" in registry
        assert "ECHO" in registry
        assert registry.names == ["echo"]

    def test_duplicate_registration_raises(self, registry):
        """Test a tag name can only be registered once."""
        with pytest.raises(ValueError, match="already registered"):
            registry.register("echo", lambda body, attrs, host: "")

    def test_expand_replaces_tags(self, registry):
        """Test every occurrence is replaced."""
        text = "a <echo>1</echo> b <ECHO x='y'>2</ECHO> c"

        result = registry.expand(text, HostContext(direction="rtl"))

        assert result == "a [1||rtl] b [2|y|rtl] c"

    def test_expand_multiline_body(self, registry):
        """Test bodies may span lines."""
        assert registry.expand("<echo>1\n2</echo>") == "[1\n2||ltr]"

    def test_unregistered_tags_untouched(self, registry):
        """Test other tags are left alone."""
        text = "<other>1</other>"

        assert registry.expand(text) == text

    def test_empty_registry(self):
        """Test expanding with nothing registered returns the text."""
        assert TagRegistry().expand("<echo>1</echo>") == "<echo>1</echo>"
