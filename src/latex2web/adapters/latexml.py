"""Boundary with the external LaTeXML converter."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import shutil
import subprocess

from latex2web.core.config import DEFAULT_CONVERTER
from latex2web.core.exceptions import ConverterFailedError, ConverterUnavailableError


logger = logging.getLogger(__name__)

WARNING_PREFIX = "Warning:"


@dataclass(frozen=True, slots=True)
class ConverterOutput:
    """Intermediate XML produced by the converter plus the warnings it reported."""

    xml: str
    warnings: tuple[str, ...] = ()


def parse_warnings(stderr: str) -> tuple[str, ...]:
    """Return the converter warning lines found in ``stderr``."""
    return tuple(
        line.strip() for line in stderr.splitlines() if line.lstrip().startswith(WARNING_PREFIX)
    )


def locate_converter(executable: str = DEFAULT_CONVERTER) -> str:
    """Return a runnable path for ``executable`` after probing ``--version``."""
    resolved = shutil.which(executable)
    if resolved is None:
        raise ConverterUnavailableError(executable)
    try:
        subprocess.run(
            [resolved, "--version"],
            check=False,
            capture_output=True,
            text=True,
        )
    except OSError as exc:
        raise ConverterUnavailableError(executable) from exc
    return resolved


def run_converter(source: Path, executable: str = DEFAULT_CONVERTER) -> ConverterOutput:
    """Convert ``source`` to intermediate XML.

    LaTeXML reports recoverable problems on stderr while still exiting with
    status 0; those lines are kept as warnings next to the XML on stdout.
    """
    command = [locate_converter(executable), str(source)]
    logger.debug("Running converter: %s", " ".join(command))
    try:
        process = subprocess.run(
            command,
            check=False,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        raise ConverterUnavailableError(executable) from exc

    if process.returncode != 0:
        raise ConverterFailedError(executable, process.returncode, process.stderr or "")
    logger.debug("Converter produced %d characters of XML", len(process.stdout))
    return ConverterOutput(xml=process.stdout, warnings=parse_warnings(process.stderr or ""))


__all__ = ["ConverterOutput", "locate_converter", "parse_warnings", "run_converter"]
