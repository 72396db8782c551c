"""Inline handlers: emphasis, font switches and math."""

from __future__ import annotations

from bs4.element import Tag

from latex2web.core.context import RenderContext
from latex2web.core.rules import TagKind, renders
from latex2web.core.text import flatten

from ._helpers import attribute, render_wrapped


@renders(TagKind.EMPHASIS, name="inline_emphasis")
def render_emphasis(element: Tag, context: RenderContext) -> str:
    return render_wrapped("em", element, context, inline=True)


@renders(TagKind.BOLD, name="inline_strong")
def render_strong(element: Tag, context: RenderContext) -> str:
    """Render ``<text font="bold">`` as strong emphasis."""
    return render_wrapped("strong", element, context, inline=True)


@renders(TagKind.TYPEWRITER, name="inline_code")
def render_typewriter(element: Tag, context: RenderContext) -> str:
    """Render ``<text font="typewriter">`` as inline code."""
    return render_wrapped("code", element, context, inline=True)


@renders(TagKind.MATH, name="math")
def render_math(element: Tag, _context: RenderContext) -> str:
    """Emit MathJax delimiters around the raw math payload.

    The payload is deliberately left unescaped: MathJax reads the TeX source
    verbatim from the page text.
    """
    payload = flatten(element)
    if attribute(element, "mode") == "display":
        return f'<div class="math-display">\\[{payload}\\]</div>'
    return f"\\({payload}\\)"
