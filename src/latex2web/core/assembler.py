"""Wrap rendered fragments into the final HTML page."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .metadata import DocumentMetadata


TEMPLATE_DIR = Path(__file__).resolve().parents[1] / "data" / "templates"
PAGE_TEMPLATE = "page.html"

MATHJAX_URL = "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"
PRISM_BASE_URL = "https://cdnjs.cloudflare.com/ajax/libs/prism/1.29.0"
PRISM_LANGUAGES: tuple[str, ...] = ("python", "java", "c", "cpp", "javascript", "bash")


def _build_environment(template_dir: Path) -> Environment:
    # Fragments are already HTML; autoescaping would double-encode them.
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
    )


class DocumentAssembler:
    """Render the page template around a body fragment."""

    def __init__(
        self,
        template_dir: Path = TEMPLATE_DIR,
        *,
        mathjax_url: str = MATHJAX_URL,
        prism_base: str = PRISM_BASE_URL,
        prism_languages: Sequence[str] = PRISM_LANGUAGES,
    ) -> None:
        self.environment = _build_environment(template_dir)
        self.mathjax_url = mathjax_url
        self.prism_base = prism_base
        self.prism_languages = tuple(prism_languages)

    def assemble(self, metadata: DocumentMetadata, body_html: str, theme_css: str) -> str:
        """Return the complete HTML document."""
        template = self.environment.get_template(PAGE_TEMPLATE)
        return template.render(
            title=metadata.title,
            author_html=metadata.author_html(),
            body_html=body_html,
            theme_css=theme_css,
            mathjax_url=self.mathjax_url,
            prism_base=self.prism_base,
            prism_languages=self.prism_languages,
        )


__all__ = [
    "MATHJAX_URL",
    "PRISM_BASE_URL",
    "PRISM_LANGUAGES",
    "TEMPLATE_DIR",
    "DocumentAssembler",
]
