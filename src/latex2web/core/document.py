"""Parsing and structural helpers for the intermediate markup tree."""

from __future__ import annotations

import logging
from typing import Any

from bs4 import BeautifulSoup
from bs4.element import CData, NavigableString, PageElement, PreformattedString, Tag
from lxml import etree

from .exceptions import DocumentParseError


logger = logging.getLogger(__name__)

DOCUMENT_TAG = "document"
SECTION_TAG = "section"
MAX_HEADING_LEVEL = 6


def parse_document(markup: str | bytes) -> BeautifulSoup:
    """Parse intermediate XML into a tree, rejecting malformed input.

    BeautifulSoup's XML builder recovers from most syntax errors, so the
    payload is first checked with a strict ``lxml`` parser and any failure is
    surfaced as :class:`DocumentParseError`.
    """
    payload = markup.encode("utf-8") if isinstance(markup, str) else markup
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        etree.fromstring(payload, parser)
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise DocumentParseError(f"Malformed intermediate markup: {exc}") from exc

    soup = BeautifulSoup(payload, "xml")
    logger.debug("Parsed intermediate markup (%d bytes)", len(payload))
    return soup


def is_text(node: Any) -> bool:
    """Return True for character data; comments and processing instructions are not text."""
    if not isinstance(node, NavigableString):
        return False
    return not isinstance(node, PreformattedString) or isinstance(node, CData)


def has_tag(node: PageElement | None, *names: str) -> bool:
    """Return True when ``node`` is an element whose tag matches one of ``names``."""
    return isinstance(node, Tag) and node.name in names


def body_root(tree: Tag) -> Tag:
    """Return the subtree rendered as the page body."""
    if tree.name == DOCUMENT_TAG:
        return tree
    body = tree.find(DOCUMENT_TAG)
    return body if isinstance(body, Tag) else tree


def section_depth(node: PageElement) -> int:
    """Count the sectioning ancestors of ``node``, excluding the node itself."""
    return sum(1 for parent in node.parents if parent.name == SECTION_TAG)


def heading_level(depth: int) -> int:
    """Map a section depth onto an HTML heading level."""
    return min(depth + 1, MAX_HEADING_LEVEL)


def is_document_title(node: Tag) -> bool:
    """Return True for the title that belongs to the document root."""
    return has_tag(node.parent, DOCUMENT_TAG)


__all__ = [
    "DOCUMENT_TAG",
    "MAX_HEADING_LEVEL",
    "SECTION_TAG",
    "body_root",
    "has_tag",
    "heading_level",
    "is_document_title",
    "is_text",
    "parse_document",
    "section_depth",
]
