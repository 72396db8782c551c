"""Rule declaration and dispatch engine for the XML to HTML renderer.

Handlers declare the kind of element they render via the ``@renders``
decorator. The :class:`RenderEngine` collects those declarations into a
:class:`RenderRegistry` and walks the intermediate markup tree in document
order, asking each handler for the HTML fragment of its element.

Architecture

`Classification layer`
: :func:`classify` maps an element onto the closed :class:`TagKind`
  enumeration. Tags outside the vocabulary become :attr:`TagKind.UNKNOWN`.

`Declaration layer`
: ``@renders`` stores a lightweight :class:`RuleDefinition` on every handler.

`Execution layer`
: :class:`RenderEngine` checks that every kind has a handler before it runs,
  then composes fragments bottom-up. The tree is never mutated.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
import logging
from typing import Any, cast

from bs4.element import PageElement, Tag

from .context import RenderContext
from .document import is_text, section_depth
from .exceptions import NestingTooDeepError, RenderError


logger = logging.getLogger(__name__)


class TagKind(Enum):
    """Every element shape the renderer distinguishes."""

    DROPPED = "dropped"
    """Metadata and cross-reference tags discarded with their subtree."""

    SECTION = "section"
    TITLE = "title"
    PARAGRAPH = "paragraph"
    EMPHASIS = "emphasis"
    BOLD = "bold"
    TYPEWRITER = "typewriter"
    PLAIN_TEXT = "plain_text"
    """``text`` element without a recognised ``font`` attribute."""

    ITEMIZE = "itemize"
    ENUMERATE = "enumerate"
    TABLE = "table"
    FIGURE = "figure"
    VERBATIM = "verbatim"
    MATH = "math"
    CREATOR = "creator"
    UNKNOWN = "unknown"
    """Anything else; rendered transparently."""


_TAG_KINDS: dict[str, TagKind] = {
    "tags": TagKind.DROPPED,
    "tag": TagKind.DROPPED,
    "ref": TagKind.DROPPED,
    "bibref": TagKind.DROPPED,
    "section": TagKind.SECTION,
    "title": TagKind.TITLE,
    "para": TagKind.PARAGRAPH,
    "p": TagKind.PARAGRAPH,
    "emph": TagKind.EMPHASIS,
    "em": TagKind.EMPHASIS,
    "itemize": TagKind.ITEMIZE,
    "enumerate": TagKind.ENUMERATE,
    "tabular": TagKind.TABLE,
    "table": TagKind.TABLE,
    "graphics": TagKind.FIGURE,
    "figure": TagKind.FIGURE,
    "verbatim": TagKind.VERBATIM,
    "lstlisting": TagKind.VERBATIM,
    "Math": TagKind.MATH,
    "math": TagKind.MATH,
    "creator": TagKind.CREATOR,
}

_FONT_KINDS: dict[str, TagKind] = {
    "bold": TagKind.BOLD,
    "typewriter": TagKind.TYPEWRITER,
}


def classify(element: Tag) -> TagKind:
    """Return the :class:`TagKind` used to dispatch ``element``."""
    if element.name == "text":
        return _FONT_KINDS.get(cast(str, element.get("font", "")), TagKind.PLAIN_TEXT)
    return _TAG_KINDS.get(element.name, TagKind.UNKNOWN)


RuleCallable = Callable[[Tag, RenderContext], str]


@dataclass(frozen=True)
class RenderRule:
    """Concrete rendering rule registered in the engine."""

    kind: TagKind
    name: str
    handler: RuleCallable
    priority: int = 0


@dataclass(frozen=True)
class RuleDefinition:
    """Descriptor installed on handler callables by the decorator."""

    kinds: tuple[TagKind, ...]
    priority: int = 0
    name: str | None = None

    def bind(self, handler: RuleCallable) -> list[RenderRule]:
        """Create one concrete rule per declared kind."""
        name = self.name or getattr(handler, "__name__", handler.__class__.__name__)
        return [
            RenderRule(kind=kind, name=name, handler=handler, priority=self.priority)
            for kind in self.kinds
        ]


def renders(
    *kinds: TagKind,
    priority: int = 0,
    name: str | None = None,
) -> Callable[[RuleCallable], RuleCallable]:
    """Decorator used to register element handlers."""
    if not kinds:
        raise TypeError("renders() requires at least one TagKind")
    definition = RuleDefinition(kinds=tuple(kinds), priority=priority, name=name)

    def decorator(handler: RuleCallable) -> RuleCallable:
        cast(Any, handler).__render_rule__ = definition
        return handler

    return decorator


class RenderRegistry:
    """Container gathering render rules, highest priority first per kind."""

    def __init__(self) -> None:
        self._rules: dict[TagKind, list[RenderRule]] = {}

    def register(self, rule: RenderRule) -> None:
        """Register a rule; later rules win ties on priority."""
        bucket = self._rules.setdefault(rule.kind, [])
        bucket.insert(0, rule)
        bucket.sort(key=lambda item: -item.priority)

    def rule_for(self, kind: TagKind) -> RenderRule:
        """Return the active rule for ``kind``."""
        try:
            return self._rules[kind][0]
        except (KeyError, IndexError) as exc:
            raise RenderError(f"No handler registered for {kind.name}") from exc

    def missing_kinds(self) -> list[TagKind]:
        """Return the kinds that still lack a handler, in declaration order."""
        return [kind for kind in TagKind if not self._rules.get(kind)]


class RenderEngine:
    """Transducer turning an intermediate markup subtree into an HTML fragment."""

    def __init__(self, registry: RenderRegistry | None = None, *, max_nesting: int = 128) -> None:
        self.registry = registry or RenderRegistry()
        self.max_nesting = max_nesting

    def collect_from(self, owner: Any) -> None:
        """Collect decorated callables from an object or module."""
        for attribute in dir(owner):
            handler = getattr(owner, attribute)
            definition = getattr(handler, "__render_rule__", None)
            if isinstance(definition, RuleDefinition):
                for rule in definition.bind(handler):
                    self.registry.register(rule)

    def register(self, handler: RuleCallable) -> None:
        """Register a standalone callable decorated with ``@renders``."""
        definition = getattr(handler, "__render_rule__", None)
        if not isinstance(definition, RuleDefinition):
            msg = "Handler must be decorated with @renders"
            raise TypeError(msg)
        for rule in definition.bind(handler):
            self.registry.register(rule)

    def validate(self) -> None:
        """Ensure every :class:`TagKind` can be dispatched."""
        missing = self.registry.missing_kinds()
        if missing:
            names = ", ".join(kind.name for kind in missing)
            raise RenderError(f"Render engine lacks handlers for: {names}")

    def render(self, root: PageElement) -> str:
        """Render ``root`` and its descendants into an HTML fragment."""
        self.validate()
        depth = section_depth(root)
        logger.debug("Rendering <%s> subtree at section depth %d", getattr(root, "name", None), depth)
        context = RenderContext(engine=self, depth=depth)
        return self.render_node(root, context).strip()

    def render_node(self, node: PageElement, context: RenderContext) -> str:
        """Render a single node within ``context``."""
        if is_text(node):
            trimmed = str(node).strip()
            return f"{trimmed} " if trimmed else ""
        if not isinstance(node, Tag):
            return ""
        if context.nesting >= self.max_nesting:
            raise NestingTooDeepError(self.max_nesting)

        rule = self.registry.rule_for(classify(node))
        return rule.handler(node, context.enter(node))

    def iter_registered_rules(self) -> Iterable[tuple[TagKind, str]]:
        """Expose currently active rules for debugging/reporting."""
        for kind in TagKind:
            if kind in self.registry.missing_kinds():
                continue
            yield kind, self.registry.rule_for(kind).name


__all__ = [
    "RenderEngine",
    "RenderRegistry",
    "RenderRule",
    "RuleDefinition",
    "TagKind",
    "classify",
    "renders",
]
