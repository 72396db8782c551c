"""Figure handlers."""

from __future__ import annotations

from bs4.element import Tag

from latex2web.core.context import RenderContext
from latex2web.core.rules import TagKind, renders
from latex2web.core.text import flatten

from ._helpers import attribute


CAPTION_TAG = "caption"


def _caption_text(element: Tag) -> str:
    caption = element.find(CAPTION_TAG)
    return flatten(caption) if isinstance(caption, Tag) else ""


@renders(TagKind.FIGURE, name="figures")
def render_figure(element: Tag, context: RenderContext) -> str:
    """Render ``graphics``/``figure`` elements carrying a ``graphic`` source.

    Without a source the element is transparent.
    """
    source = attribute(element, "graphic")
    if source is None:
        return context.render_children(element)

    caption = _caption_text(element)
    parts = [f'<figure><img src="{source}" alt="{caption}">']
    if caption:
        parts.append(f"<figcaption>{caption}</figcaption>")
    parts.append("</figure>")
    return "".join(parts)
