"""
Host page integration.

HostContext carries what the embedding page knows (writing direction and
external link policy). TagRegistry maps tag names to handlers and expands
every ``<name attrs>body</name>`` occurrence in a page.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from loguru import logger

_ATTRIBUTE = re.compile(r"""([\w-]+)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+))""")


@dataclass(frozen=True)
class HostContext:
    """Page-level rendering context supplied by the host."""

    direction: Literal["ltr", "rtl"] = "ltr"
    link_rel: str | None = "nofollow"
    link_target: str | None = None

    def align_end(self) -> str:
        """Return the trailing edge for the content's writing direction."""
        return "left" if self.direction == "rtl" else "right"

    def external_link_attribs(self, url: str) -> dict[str, str]:
        """Attributes the host adds to links that leave the site."""
        attribs = {}
        if self.link_rel:
            attribs["rel"] = self.link_rel
        if self.link_target:
            attribs["target"] = self.link_target
        return attribs


TagHandler = Callable[[str, dict[str, str], HostContext], str]


def parse_attributes(text: str) -> dict[str, str]:
    """Parse the attribute part of an opening tag."""
    attrs = {}
    for match in _ATTRIBUTE.finditer(text or ""):
        name, double, single, bare = match.groups()
        attrs[name.lower()] = next(v for v in (double, single, bare) if v is not None)
    return attrs


class TagRegistry:
    """Tag name to handler mapping, filled once at startup."""

    def __init__(self):
        self._handlers: dict[str, TagHandler] = {}

    def register(self, name: str, handler: TagHandler) -> None:
        """Register a handler for ``<name>...</name>``."""
        name = name.lower()
        if name in self._handlers:
            raise ValueError(f"Tag already registered: {name}")
        self._handlers[name] = handler
        logger.debug("Registered tag handler: <{}>", name)

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._handlers

    @property
    def names(self) -> list[str]:
        """Registered tag names."""
        return sorted(self._handlers)

    def expand(self, text: str, host: HostContext | None = None) -> str:
        """
        Replace every registered tag in ``text`` with its handler's output.

        Args:
            text: Page source
            host: Rendering context passed to handlers

        Returns:
            The page with all registered tags expanded
        """
        if not self._handlers:
            return text
        host = host or HostContext()

        names = "|".join(re.escape(name) for name in self._handlers)
        pattern = re.compile(
            rf"<({names})(\s[^>]*)?>(.*?)</\1\s*>",
            re.IGNORECASE | re.DOTALL,
        )

        def replace(match: re.Match) -> str:
            name, attr_text, body = match.groups()
            handler = self._handlers[name.lower()]
            return handler(body, parse_attributes(attr_text), host)

        expanded, count = pattern.subn(replace, text)
        logger.debug("Expanded {} tags", count)
        return expanded
