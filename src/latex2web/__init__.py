"""Primary public API for latex2web."""

from __future__ import annotations

from latex2web.adapters.renderer import HtmlRenderer, RenderedDocument
from latex2web.conversion import convert_file, convert_xml
from latex2web.core.assembler import DocumentAssembler
from latex2web.core.config import ConversionConfig
from latex2web.core.exceptions import (
    ConverterFailedError,
    ConverterUnavailableError,
    DocumentParseError,
    Latex2WebError,
    NestingTooDeepError,
    RenderError,
)
from latex2web.core.metadata import DocumentMetadata
from latex2web.core.rules import RenderEngine, TagKind, renders
from latex2web.core.themes import ThemeRegistry
from latex2web.version import get_version


__version__ = get_version()

__all__ = [
    "ConversionConfig",
    "ConverterFailedError",
    "ConverterUnavailableError",
    "DocumentAssembler",
    "DocumentMetadata",
    "DocumentParseError",
    "HtmlRenderer",
    "Latex2WebError",
    "NestingTooDeepError",
    "RenderEngine",
    "RenderError",
    "RenderedDocument",
    "TagKind",
    "ThemeRegistry",
    "__version__",
    "convert_file",
    "convert_xml",
    "get_version",
    "renders",
]
