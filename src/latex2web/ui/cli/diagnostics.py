"""Rich-backed emitter used by the command line."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from latex2web.core.diagnostics import format_event_message

from .state import emit_warning, render_message


class CliEmitter:
    """Print converter warnings to stderr and progress lines to stdout."""

    def warning(self, message: str) -> None:
        emit_warning(message)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        message = format_event_message(name, payload)
        if message:
            render_message("info", message)


__all__ = ["CliEmitter"]
