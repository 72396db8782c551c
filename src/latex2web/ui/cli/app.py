"""Typer application wiring for the latex2web CLI."""

from __future__ import annotations

import typer

from .commands import convert
from .state import debug_enabled, emit_error, get_cli_state


app = typer.Typer(
    help="Convert LaTeX documents to HTML.",
    context_settings={"help_option_names": ["--help", "-h"]},
    add_completion=False,
)


app.command()(convert)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except KeyboardInterrupt as exc:
        if debug_enabled():
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise SystemExit(1) from exc
    except Exception as exc:  # pragma: no cover - catch-all for console scripts
        state = get_cli_state()
        if state.show_tracebacks:
            from rich.traceback import Traceback

            tb = Traceback.from_exception(
                type(exc),
                exc,
                exc.__traceback__,
                show_locals=state.verbosity >= 2,
            )
            state.err_console.print(tb)
        else:
            emit_error(str(exc), exception=exc)
        raise SystemExit(1) from exc


__all__ = ["app", "main"]
