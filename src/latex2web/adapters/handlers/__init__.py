"""Built-in element handlers."""

from __future__ import annotations

from . import basic, blocks, code, inline, media


__all__ = ["basic", "blocks", "code", "inline", "media"]
