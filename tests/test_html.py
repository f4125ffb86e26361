"""Tests for HTML element construction helpers."""

from flickr_embed.embed import html


class TestAttributes:
    """Test attribute rendering."""

    def test_basic(self):
        """Test attributes render in insertion order with a leading space."""
        assert html.attributes({"alt": "a", "src": "b"}) == ' alt="a" src="b"'

    def test_none_and_false_are_dropped(self):
        """Test None and False omit the attribute."""
        assert html.attributes({"title": None, "hidden": False, "id": "x"}) == ' id="x"'

    def test_true_is_boolean_attribute(self):
        """Test True renders the attribute name as its value."""
        assert html.attributes({"hidden": True}) == ' hidden="hidden"'

    def test_list_joins_classes(self):
        """Test lists are joined with spaces, skipping empty entries."""
        assert html.attributes({"class": ["error", "", "flickrapi-error"]}) == (
            ' class="error flickrapi-error"'
        )

    def test_values_are_escaped(self):
        """Test quotes and markup in values are escaped."""
        assert html.attributes({"title": '"><script>'}) == ' title="&quot;&gt;&lt;script&gt;"'

    def test_numbers(self):
        """Test numeric values are converted to strings."""
        assert html.attributes({"width": 182}) == ' width="182"'


class TestElements:
    """Test element builders."""

    def test_element_escapes_text(self):
        """Test text content is escaped."""
        assert html.element("strong", {}, "a < b & c") == "<strong>a &lt; b &amp; c</strong>"

    def test_raw_element_keeps_html(self):
        """Test raw content is inserted as-is."""
        assert html.raw_element("div", {"class": "x"}, "<b>hi</b>") == '<div class="x"><b>hi</b></div>'

    def test_void_element(self):
        """Test void elements are self-closed."""
        assert html.void_element("img", {"src": "u"}) == '<img src="u" />'

    def test_empty_element(self):
        """Test an element without attributes or content."""
        assert html.element("a") == "<a></a>"


def test_single_line():
    """Test newlines become spaces."""
    assert html.single_line("a\nb\r\nc") == "a b c"
