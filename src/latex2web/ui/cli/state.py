"""Console state shared by the CLI command and its diagnostic emitter."""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field
import sys
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "CLIState",
    "debug_enabled",
    "emit_error",
    "emit_warning",
    "get_cli_state",
    "render_message",
    "set_cli_state",
]


@dataclass(slots=True)
class CLIState:
    """Verbosity, traceback preference and the rich consoles of one run."""

    verbosity: int = 0
    show_tracebacks: bool = False
    _console: Console | None = field(default=None, init=False, repr=False)
    _err_console: Console | None = field(default=None, init=False, repr=False)

    @property
    def console(self) -> Console:
        """Return a stdout console, rebuilt when ``sys.stdout`` is swapped."""
        from rich.console import Console

        if self._console is None or self._console.file is not sys.stdout:
            self._console = Console(file=sys.stdout, highlight=False)
        return self._console

    @property
    def err_console(self) -> Console:
        """Return a stderr console, rebuilt when ``sys.stderr`` is swapped."""
        from rich.console import Console

        if self._err_console is None or self._err_console.file is not sys.stderr:
            self._err_console = Console(file=sys.stderr, highlight=False)
        return self._err_console


_STATE_VAR: ContextVar[CLIState | None] = ContextVar("latex2web_cli_state", default=None)


def get_cli_state() -> CLIState:
    """Return the active CLI state, creating it on first use."""
    state = _STATE_VAR.get()
    if state is None:
        state = CLIState()
        _STATE_VAR.set(state)
    return state


def set_cli_state(*, verbosity: int = 0, debug: bool = False) -> CLIState:
    """Configure the CLI state for a new command invocation."""
    state = get_cli_state()
    state.verbosity = max(0, verbosity)
    state.show_tracebacks = debug
    return state


def render_message(
    level: str,
    message: str,
    *,
    exception: BaseException | None = None,
) -> None:
    """Print ``message``; warnings and errors go to stderr with optional detail."""
    state = get_cli_state()

    if level == "info":
        state.console.print(message, markup=False, soft_wrap=True)
        return

    from rich.text import Text

    style = "red" if level == "error" else "yellow"
    text = Text.assemble((f"{level}: ", f"bold {style}"), (message, style))

    if exception is not None and state.verbosity >= 1:
        details = [f"type: {type(exception).__name__}"]
        cause = exception.__cause__
        if cause is not None and state.verbosity >= 2:
            details.append(f"caused by: {type(cause).__name__}: {cause}")
        text.append("\n" + "\n".join(details), style=style)

    state.err_console.print(text, soft_wrap=True)


def emit_warning(message: str) -> None:
    render_message("warning", message)


def emit_error(message: str, *, exception: BaseException | None = None) -> None:
    render_message("error", message, exception=exception)


def debug_enabled() -> bool:
    """Return whether failures should surface as full tracebacks."""
    return get_cli_state().show_tracebacks
