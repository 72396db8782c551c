"""Implementation of the `latex2web` conversion command."""

from __future__ import annotations

import typer

from latex2web.conversion import convert_file
from latex2web.core.config import DEFAULT_CONVERTER, DEFAULT_THEME, ConversionConfig
from latex2web.core.exceptions import (
    ConverterFailedError,
    ConverterUnavailableError,
    Latex2WebError,
)

from .._options import (
    ConverterOption,
    DebugOption,
    InputPathArgument,
    OutputPathOption,
    ThemeOption,
    VerbosityOption,
    VersionOption,
)
from ..diagnostics import CliEmitter
from ..state import debug_enabled, emit_error, set_cli_state


def convert(
    input_path: InputPathArgument,
    output: OutputPathOption = None,
    theme: ThemeOption = DEFAULT_THEME,
    converter: ConverterOption = DEFAULT_CONVERTER,
    verbose: VerbosityOption = 0,
    debug: DebugOption = False,
    version: VersionOption = False,
) -> None:
    """Convert a LaTeX document into a self-contained HTML page."""
    state = set_cli_state(verbosity=verbose, debug=debug)
    config = ConversionConfig(theme=theme, converter=converter, output=output)
    emitter = CliEmitter()

    try:
        convert_file(input_path, config, emitter=emitter)
    except ConverterUnavailableError as exc:
        emit_error(str(exc), exception=exc)
        state.err_console.print(exc.hint, markup=False, soft_wrap=True)
        raise typer.Exit(code=1) from exc
    except ConverterFailedError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc
    except (Latex2WebError, OSError) as exc:
        if debug_enabled():
            raise
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["convert"]
