"""
HTML element construction.

All markup the renderer emits goes through these helpers, which escape
attribute values and text content. Attribute values may be strings, numbers
or lists of class names; None and False drop the attribute.
"""

from html import escape

AttrValue = str | int | float | bool | list[str] | None


def attributes(attrs: dict[str, AttrValue]) -> str:
    """Render an attribute map as ``name="value"`` pairs with a leading space."""
    rendered = []
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            value = name
        elif isinstance(value, list):
            value = " ".join(part for part in value if part)
        rendered.append(f' {name}="{escape(str(value), quote=True)}"')
    return "".join(rendered)


def text(value: str) -> str:
    """Escape plain text for use as element content."""
    return escape(value, quote=False)


def element(tag: str, attrs: dict[str, AttrValue] | None = None, content: str = "") -> str:
    """Build an element whose content is plain text."""
    return raw_element(tag, attrs, text(content))


def raw_element(tag: str, attrs: dict[str, AttrValue] | None = None, html: str = "") -> str:
    """Build an element around content that is already safe HTML."""
    return f"<{tag}{attributes(attrs or {})}>{html}</{tag}>"


def void_element(tag: str, attrs: dict[str, AttrValue] | None = None) -> str:
    """Build an element that has no content, such as ``img``."""
    return f"<{tag}{attributes(attrs or {})} />"


def single_line(html: str) -> str:
    """Replace newlines so the fragment can be spliced inline."""
    return html.replace("\r\n", " ").replace("\n", " ")
