"""Baseline handlers: dropped tags, metadata and transparent elements."""

from __future__ import annotations

from bs4.element import Tag

from latex2web.core.context import RenderContext
from latex2web.core.rules import TagKind, renders


@renders(TagKind.DROPPED, name="drop_metadata")
def drop_metadata(_element: Tag, _context: RenderContext) -> str:
    """Discard converter bookkeeping (``tags``, ``tag``, ``ref``, ``bibref``) and its subtree."""
    return ""


@renders(TagKind.CREATOR, name="skip_creator")
def skip_creator(_element: Tag, _context: RenderContext) -> str:
    """Author information is surfaced in the page header instead."""
    return ""


@renders(TagKind.UNKNOWN, TagKind.PLAIN_TEXT, name="transparent")
def render_transparent(element: Tag, context: RenderContext) -> str:
    """Render children without emitting a wrapper for the element itself."""
    return context.render_children(element)
