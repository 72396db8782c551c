"""Code-related handlers."""

from __future__ import annotations

from bs4.element import Tag

from latex2web.core.context import RenderContext
from latex2web.core.rules import TagKind, renders
from latex2web.core.text import escape_html, flatten

from ._helpers import attribute


@renders(TagKind.VERBATIM, name="code_blocks")
def render_code_block(element: Tag, _context: RenderContext) -> str:
    """Render ``verbatim``/``lstlisting`` bodies as escaped preformatted code.

    The ``language`` attribute becomes a ``language-*`` class picked up by the
    client-side highlighter.
    """
    code = escape_html(flatten(element))
    language = attribute(element, "language")
    classes = f' class="language-{language}"' if language else ""
    return f"<pre><code{classes}>{code}</code></pre>"
