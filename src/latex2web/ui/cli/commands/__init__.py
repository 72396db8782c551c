"""Command implementations exposed by the latex2web CLI."""

from __future__ import annotations

from .convert import convert


__all__ = ["convert"]
