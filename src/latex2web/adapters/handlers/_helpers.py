"""Internal helpers shared across handler modules."""

from __future__ import annotations

from collections.abc import Iterable

from bs4.element import Tag

from latex2web.core.context import RenderContext


def wrap(tag: str, content: str, attributes: str = "", *, inline: bool = False) -> str:
    """Wrap ``content`` in ``tag``.

    Rendered text carries a trailing separator space. Inline wrappers move it
    after the closing tag so adjacent words stay apart; block wrappers drop it.
    Punctuation that follows an inline element therefore gets a leading space,
    as in ``<strong>world</strong> .``.
    """
    inner = content.rstrip(" ")
    trailing = " " if inline and len(inner) != len(content) else ""
    return f"<{tag}{attributes}>{inner}</{tag}>{trailing}"


def child_elements(element: Tag, *names: str) -> Iterable[Tag]:
    """Yield the direct element children of ``element`` named one of ``names``."""
    for child in element.children:
        if isinstance(child, Tag) and child.name in names:
            yield child


def render_wrapped(
    tag: str,
    element: Tag,
    context: RenderContext,
    attributes: str = "",
    *,
    inline: bool = False,
) -> str:
    """Render the children of ``element`` inside ``tag``."""
    return wrap(tag, context.render_children(element), attributes, inline=inline)


def attribute(element: Tag, name: str) -> str | None:
    """Return an attribute value as a string, or None when missing."""
    value = element.get(name)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return " ".join(str(item) for item in value)
