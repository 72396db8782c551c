"""Text helpers: subtree flattening and markup escaping."""

from __future__ import annotations

from bs4.element import PageElement, Tag

from .document import is_text


_HTML_ESCAPES: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def flatten(node: PageElement) -> str:
    """Concatenate every descendant text payload of ``node`` in document order.

    Structure is discarded, no separators are inserted and nothing is escaped.
    Descendants are walked iteratively so deeply nested payloads are safe.
    """
    if is_text(node):
        return str(node)
    if not isinstance(node, Tag):
        return ""
    return "".join(str(item) for item in node.descendants if is_text(item))


def escape_html(text: str) -> str:
    """Escape characters that are significant in HTML markup."""
    for char, entity in _HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


__all__ = ["escape_html", "flatten"]
