"""
Image link markup.

Produces the same structures a wiki uses for ``[[File:...]]`` links:
a plain (optionally floated) linked image, or a thumbnail box with a caption
bar and a magnify link.
"""

from ..host import HostContext
from . import html
from .options import EmbedRequest
from .sizes import ResolvedImage

# Width used when the chosen size reports none
DEFAULT_THUMB_WIDTH = 180
ENLARGE_TITLE = "Enlarge"


class MarkupRenderer:
    """Renders a merged EmbedRequest and its resolved image as HTML."""

    def __init__(self, enlarge_title: str = ENLARGE_TITLE):
        self.enlarge_title = enlarge_title

    def render(
        self,
        request: EmbedRequest,
        image: ResolvedImage,
        host: HostContext,
        link_url: str | None = None,
    ) -> str:
        """
        Render the image link.

        ``thumb`` and ``frame`` produce a thumbnail box; anything else
        produces a plain image. ``center`` wraps the output in a centering
        div and aligns the inner markup as ``none``.

        Args:
            request: Request with defaults applied
            image: Chosen size variant
            host: Page context (writing direction, external link attributes)
            link_url: Click-through target; defaults to ``image.link_url``

        Returns:
            Single-line HTML fragment
        """
        if link_url is None:
            link_url = image.link_url
        caption = request.caption or ""
        align = request.location or ""

        centered = align == "center"
        if centered:
            align = "none"

        if request.type in ("thumb", "frame"):
            # Unaligned thumbnails float to the trailing edge of the text
            if not align:
                align = host.align_end()
            markup = self._thumbnail(request, image, caption, align, link_url)
        else:
            markup = self._image(
                image.url,
                alt=caption,
                title=caption,
                link_url=link_url,
                link_attribs=host.external_link_attribs(link_url) if link_url else {},
            )
            if align:
                markup = html.raw_element("div", {"class": f"float{align}"}, markup)

        if centered:
            markup = html.raw_element("div", {"class": "center"}, markup)
        return html.single_line(markup)

    def _thumbnail(
        self,
        request: EmbedRequest,
        image: ResolvedImage,
        caption: str,
        align: str,
        link_url: str,
    ) -> str:
        """Build the boxed thumbnail with its caption bar."""
        width = image.width or DEFAULT_THUMB_WIDTH
        outer_width = width + 2

        picture = self._image(
            image.url,
            alt=caption,
            title=caption,
            link_url=link_url,
            img_class="thumbimage",
        )

        # Framed images are shown as-is, so there is nothing to enlarge
        zoom_icon = ""
        if request.type != "frame" and link_url:
            zoom_icon = html.raw_element(
                "div",
                {"class": "magnify"},
                html.element("a", {"href": link_url, "title": self.enlarge_title}),
            )

        caption_bar = html.raw_element(
            "div", {"class": "thumbcaption"}, zoom_icon + html.text(caption)
        )
        inner = html.raw_element(
            "div",
            {"class": "thumbinner", "style": f"width:{outer_width}px;"},
            picture + "  " + caption_bar,
        )
        return html.raw_element("div", {"class": ["thumb", f"t{align}"]}, inner)

    def _image(
        self,
        url: str,
        alt: str = "",
        title: str = "",
        link_url: str = "",
        link_attribs: dict[str, str] | None = None,
        img_class: str | None = None,
    ) -> str:
        """Build an ``img``, linked to ``link_url`` when one is given."""
        if not link_url:
            return html.void_element(
                "img", {"alt": alt, "title": title or None, "src": url, "class": img_class}
            )

        img = html.void_element("img", {"alt": alt, "src": url, "class": img_class})

        anchor = {"href": link_url, "title": title or None}
        anchor.update(link_attribs or {})
        return html.raw_element("a", anchor, img)
