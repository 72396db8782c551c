"""Block-level handlers: sections, headings, paragraphs, lists and tables."""

from __future__ import annotations

from bs4.element import Tag

from latex2web.core.context import RenderContext
from latex2web.core.document import heading_level, is_document_title
from latex2web.core.rules import TagKind, renders

from ._helpers import child_elements, render_wrapped, wrap


@renders(TagKind.SECTION, name="sections")
def render_section(element: Tag, context: RenderContext) -> str:
    return render_wrapped("section", element, context)


@renders(TagKind.TITLE, name="headings")
def render_heading(element: Tag, context: RenderContext) -> str:
    """Render section titles as headings sized by their nesting depth.

    The document title is already shown in the page header and is skipped.
    """
    if is_document_title(element):
        return ""
    return render_wrapped(f"h{heading_level(context.depth)}", element, context)


@renders(TagKind.PARAGRAPH, name="paragraphs")
def render_paragraph(element: Tag, context: RenderContext) -> str:
    return render_wrapped("p", element, context)


def _render_list(tag: str, element: Tag, context: RenderContext) -> str:
    items = "".join(
        render_wrapped("li", item, context.enter(item))
        for item in child_elements(element, "item")
    )
    return wrap(tag, items)


@renders(TagKind.ITEMIZE, name="unordered_lists")
def render_itemize(element: Tag, context: RenderContext) -> str:
    """Only direct ``item`` children become list entries."""
    return _render_list("ul", element, context)


@renders(TagKind.ENUMERATE, name="ordered_lists")
def render_enumerate(element: Tag, context: RenderContext) -> str:
    return _render_list("ol", element, context)


def _render_row(row: Tag, context: RenderContext) -> str:
    cells = "".join(
        render_wrapped(cell.name, cell, context.enter(cell))
        for cell in child_elements(row, "td", "th")
    )
    return wrap("tr", cells)


@renders(TagKind.TABLE, name="tables")
def render_table(element: Tag, context: RenderContext) -> str:
    """Render ``tr`` rows and their ``td``/``th`` cells; anything else is ignored."""
    rows = "".join(
        _render_row(row, context.enter(row)) for row in child_elements(element, "tr")
    )
    table = wrap("table", rows)
    return wrap("div", table, ' class="table-wrapper"')
