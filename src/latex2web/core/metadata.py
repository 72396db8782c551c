"""Document metadata lookups (title and author)."""

from __future__ import annotations

from dataclasses import dataclass

from bs4.element import Tag

from .text import flatten


TITLE_TAG = "title"
AUTHOR_TAG = "creator"
DEFAULT_TITLE = "Untitled"


def find_first(tree: Tag, tag_name: str) -> Tag | None:
    """Return the first element named ``tag_name`` in pre-order, ``tree`` included."""
    if tree.name == tag_name:
        return tree
    match = tree.find(tag_name)
    return match if isinstance(match, Tag) else None


def extract_text(tree: Tag, tag_name: str) -> str | None:
    """Return the flattened text of the first ``tag_name`` element, if any."""
    element = find_first(tree, tag_name)
    if element is None:
        return None
    return flatten(element)


@dataclass(frozen=True, slots=True)
class DocumentMetadata:
    """Page-level metadata surfaced in the output header."""

    title: str = DEFAULT_TITLE
    author: str | None = None

    @classmethod
    def from_tree(cls, tree: Tag) -> DocumentMetadata:
        """Collect the title and author, applying fallback and omission policies."""
        title = extract_text(tree, TITLE_TAG)
        author = extract_text(tree, AUTHOR_TAG)
        return cls(
            title=DEFAULT_TITLE if title is None else title,
            author=author or None,
        )

    def author_html(self) -> str:
        """Return the author paragraph, or an empty string when there is no author."""
        if not self.author:
            return ""
        return f'<p class="author">{self.author}</p>'


__all__ = [
    "AUTHOR_TAG",
    "DEFAULT_TITLE",
    "TITLE_TAG",
    "DocumentMetadata",
    "extract_text",
    "find_first",
]
