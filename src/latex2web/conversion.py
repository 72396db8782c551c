"""End-to-end conversion from LaTeX (or intermediate XML) to an HTML page."""

from __future__ import annotations

import logging
from pathlib import Path

from latex2web.adapters.latexml import run_converter
from latex2web.adapters.renderer import HtmlRenderer
from latex2web.core.assembler import DocumentAssembler
from latex2web.core.config import ConversionConfig
from latex2web.core.diagnostics import DiagnosticEmitter, NullEmitter
from latex2web.core.themes import ThemeRegistry, default_registry


logger = logging.getLogger(__name__)

XML_SUFFIXES = frozenset({".xml"})


def convert_xml(
    markup: str | bytes,
    config: ConversionConfig | None = None,
    *,
    themes: ThemeRegistry | None = None,
    assembler: DocumentAssembler | None = None,
) -> str:
    """Render intermediate XML into a complete HTML document."""
    config = config or ConversionConfig()
    rendered = HtmlRenderer(config).render(markup)
    theme_css = (themes or default_registry()).resolve(config.theme)
    return (assembler or DocumentAssembler()).assemble(
        rendered.metadata, rendered.body_html, theme_css
    )


def read_intermediate(
    source: Path,
    config: ConversionConfig,
    emitter: DiagnosticEmitter,
) -> str:
    """Return intermediate XML for ``source``, running the converter for LaTeX input."""
    if source.suffix.lower() in XML_SUFFIXES:
        emitter.event("xml_input", {"source": str(source)})
        return source.read_text(encoding="utf-8")

    emitter.event("converter_start", {"source": str(source), "converter": config.converter})
    output = run_converter(source, config.converter)
    for warning in output.warnings:
        emitter.warning(f"{config.converter}: {warning}")
    return output.xml


def write_output_file(target: Path, content: str) -> None:
    """Persist HTML content to disk, creating parent directories as needed."""
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise OSError(f"Failed to write HTML output to '{target}': {exc}") from exc


def convert_file(
    source: Path,
    config: ConversionConfig | None = None,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> Path:
    """Convert ``source`` and write the page next to it (or to ``config.output``)."""
    config = config or ConversionConfig()
    emitter = emitter or NullEmitter()

    markup = read_intermediate(source, config, emitter)
    html = convert_xml(markup, config)

    target = config.resolve_output(source)
    write_output_file(target, html)
    logger.debug("Wrote %d characters to %s", len(html), target)
    emitter.event("output_written", {"path": str(target)})
    return target


__all__ = ["convert_file", "convert_xml", "read_intermediate", "write_output_file"]
