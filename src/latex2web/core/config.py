"""Configuration model used by the conversion pipeline.

ConversionConfig

`theme` (`str`)
: Name of the stylesheet inlined into the page. Unknown names silently fall
  back to `clean-serif`.

`converter` (`str`)
: Executable invoked to turn LaTeX sources into intermediate XML. Accepts a
  bare command name looked up on `PATH` or an explicit path.

`max_nesting` (`int`)
: Deepest element nesting the renderer accepts before giving up with a
  `NestingTooDeepError`. Keeps pathological inputs from exhausting the
  interpreter stack.

`output` (`Path | None`)
: Destination of the rendered page. Defaults to the input path with an
  `.html` extension.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_THEME = "clean-serif"
DEFAULT_CONVERTER = "latexml"


class ConversionConfig(BaseModel):
    """Settings shared by a single conversion run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    theme: str = DEFAULT_THEME
    converter: str = DEFAULT_CONVERTER
    max_nesting: int = Field(default=128, ge=1)
    output: Path | None = None

    def resolve_output(self, input_path: Path) -> Path:
        """Return the output path, substituting the input extension when unset."""
        if self.output is not None:
            return self.output
        return Path(input_path).with_suffix(".html")


__all__ = ["DEFAULT_CONVERTER", "DEFAULT_THEME", "ConversionConfig"]
