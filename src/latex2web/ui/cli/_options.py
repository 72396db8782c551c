"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from latex2web.version import get_version


INPUTS_PANEL = "Input Handling"
OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"latex2web {get_version()}")
        raise typer.Exit()


InputPathArgument = Annotated[
    Path,
    typer.Argument(
        metavar="INPUT",
        help=(
            "LaTeX source converted with LaTeXML, or an already converted "
            "intermediate XML (.xml) document."
        ),
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

ConverterOption = Annotated[
    str,
    typer.Option(
        "--converter",
        help="LaTeX to XML converter executable.",
        rich_help_panel=INPUTS_PANEL,
    ),
]

OutputPathOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Output HTML file. Defaults to the input path with an .html extension.",
        dir_okay=False,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

ThemeOption = Annotated[
    str,
    typer.Option(
        "--theme",
        "-t",
        help="Stylesheet theme ('clean-serif' or 'dark'). Unknown names use 'clean-serif'.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

VerbosityOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase diagnostic detail. Repeat for more.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks on failure.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

VersionOption = Annotated[
    bool,
    typer.Option(
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show the version and exit.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]


__all__ = [
    "ConverterOption",
    "DebugOption",
    "InputPathArgument",
    "OutputPathOption",
    "ThemeOption",
    "VerbosityOption",
    "VersionOption",
]
