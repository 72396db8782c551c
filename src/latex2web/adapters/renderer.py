"""High-level intermediate XML to HTML renderer."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from bs4.element import Tag

from latex2web.core.config import ConversionConfig
from latex2web.core.document import body_root, parse_document
from latex2web.core.metadata import DocumentMetadata
from latex2web.core.rules import RenderEngine, TagKind


@dataclass(frozen=True, slots=True)
class RenderedDocument:
    """Metadata and body fragment produced from one intermediate document."""

    metadata: DocumentMetadata
    body_html: str


class HtmlRenderer:
    """Convert intermediate XML into HTML fragments using the handler registry."""

    def __init__(self, config: ConversionConfig | None = None) -> None:
        self.config = config or ConversionConfig()
        self.engine = RenderEngine(max_nesting=self.config.max_nesting)
        self._register_builtin_handlers()

    def _register_builtin_handlers(self) -> None:
        """Register the built-in handler modules."""

        from .handlers import basic, blocks, code, inline, media

        for module in (basic, blocks, inline, code, media):
            self.engine.collect_from(module)

    def register(self, handler: Any) -> None:
        """Register additional handlers on demand.

        Arguments can be callables decorated with :func:`renders` or modules/classes
        exposing decorated attributes.
        """

        definition = getattr(handler, "__render_rule__", None)
        if definition is not None:
            self.engine.register(handler)
            return

        self.engine.collect_from(handler)

    def render_tree(self, tree: Tag) -> RenderedDocument:
        """Render an already parsed tree."""
        metadata = DocumentMetadata.from_tree(tree)
        body_html = self.engine.render(body_root(tree))
        return RenderedDocument(metadata=metadata, body_html=body_html)

    def render(self, markup: str | bytes) -> RenderedDocument:
        """Parse and render intermediate XML text."""
        return self.render_tree(parse_document(markup))

    def iter_registered_rules(self) -> Iterable[tuple[TagKind, str]]:
        """Expose currently registered rules for debugging/reporting."""
        return self.engine.iter_registered_rules()


__all__ = ["HtmlRenderer", "RenderedDocument"]
