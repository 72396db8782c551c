"""Rendering context threaded through the recursive tree walk."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from bs4.element import PageElement, Tag

from .document import SECTION_TAG


if TYPE_CHECKING:  # pragma: no cover - typing only
    from .rules import RenderEngine


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Immutable per-call rendering state.

    A fresh context is derived for every element entered, so siblings never
    observe each other's state. ``depth`` counts sectioning ancestors of the
    element being rendered and ``nesting`` counts all element ancestors below
    the render root.
    """

    engine: RenderEngine
    depth: int = 0
    nesting: int = 0

    def enter(self, element: Tag) -> RenderContext:
        """Return the context seen by the children of ``element``."""
        return replace(
            self,
            depth=self.depth + (1 if element.name == SECTION_TAG else 0),
            nesting=self.nesting + 1,
        )

    def render(self, node: PageElement) -> str:
        """Render ``node`` as a child of the current element."""
        return self.engine.render_node(node, self)

    def render_children(self, element: Tag) -> str:
        """Render the children of ``element`` in document order."""
        return "".join(self.render(child) for child in element.children)


__all__ = ["RenderContext"]
