"""Custom exception hierarchy for the LaTeX to HTML pipeline."""

from __future__ import annotations


INSTALL_HINT = "install with: brew install latexml (mac) or apt install latexml (linux)"


class Latex2WebError(RuntimeError):
    """Base exception for conversion failures."""


class ConverterUnavailableError(Latex2WebError):
    """Raised when the external LaTeX converter cannot be invoked."""

    def __init__(self, executable: str, hint: str = INSTALL_HINT) -> None:
        super().__init__(f"{executable} not found")
        self.executable = executable
        self.hint = hint


class ConverterFailedError(Latex2WebError):
    """Raised when the external converter runs but reports a failure."""

    def __init__(self, executable: str, returncode: int, stderr: str) -> None:
        super().__init__(f"{executable} failed: {stderr}")
        self.executable = executable
        self.returncode = returncode
        self.stderr = stderr


class DocumentParseError(Latex2WebError):
    """Raised when the intermediate markup is not well-formed."""


class NestingTooDeepError(Latex2WebError):
    """Raised when a document nests deeper than the configured ceiling."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Document nesting exceeds the limit of {limit} levels")
        self.limit = limit


class RenderError(Latex2WebError):
    """Raised when the render engine is misconfigured."""


__all__ = [
    "INSTALL_HINT",
    "ConverterFailedError",
    "ConverterUnavailableError",
    "DocumentParseError",
    "Latex2WebError",
    "NestingTooDeepError",
    "RenderError",
]
