"""Diagnostic abstractions shared across the conversion pipeline."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any, Protocol, runtime_checkable


logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticEmitter(Protocol):
    """Receives converter warnings and progress events from the pipeline."""

    def warning(self, message: str) -> None: ...

    def event(self, name: str, payload: Mapping[str, Any]) -> None: ...


class NullEmitter:
    """Emitter that ignores every diagnostic."""

    def warning(self, message: str) -> None:
        return

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        return


class LoggingEmitter:
    """Forward diagnostics to a :mod:`logging` logger."""

    def __init__(self, logger_obj: logging.Logger | None = None) -> None:
        self._logger = logger_obj or logger

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        message = format_event_message(name, payload)
        if message is None:
            self._logger.debug("diagnostic event %s: %s", name, dict(payload))
        else:
            self._logger.info(message)


def format_event_message(name: str, payload: Mapping[str, Any]) -> str | None:
    """Return the progress line shown for ``name``, or None for silent events."""
    if name == "converter_start":
        return f"converting {payload.get('source')} with {payload.get('converter')}..."
    if name == "xml_input":
        return f"reading intermediate XML from {payload.get('source')}"
    if name == "output_written":
        return f"wrote {payload.get('path')}"
    return None


__all__ = [
    "DiagnosticEmitter",
    "LoggingEmitter",
    "NullEmitter",
    "format_event_message",
]
