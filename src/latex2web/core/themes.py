"""Stylesheet themes inlined into rendered pages."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
import logging
from pathlib import Path
from types import MappingProxyType

from .config import DEFAULT_THEME


logger = logging.getLogger(__name__)

THEME_DIR = Path(__file__).resolve().parents[1] / "data" / "themes"


@dataclass(frozen=True)
class ThemeRegistry:
    """Immutable mapping of theme names to CSS text."""

    themes: Mapping[str, str]
    default: str = DEFAULT_THEME

    def __post_init__(self) -> None:
        if self.default not in self.themes:
            raise KeyError(f"Default theme '{self.default}' is not registered")

    @classmethod
    def load(cls, directory: Path = THEME_DIR, *, default: str = DEFAULT_THEME) -> ThemeRegistry:
        """Read every ``*.css`` file in ``directory``, keyed by file stem."""
        themes = {
            path.stem: path.read_text(encoding="utf-8")
            for path in sorted(directory.glob("*.css"))
        }
        return cls(themes=MappingProxyType(themes), default=default)

    @property
    def names(self) -> list[str]:
        return sorted(self.themes)

    def resolve(self, name: str) -> str:
        """Return the CSS for ``name``; unknown names yield the default theme."""
        css = self.themes.get(name)
        if css is None:
            logger.debug(
                "Unknown theme '%s' (available: %s), using '%s'",
                name,
                ", ".join(self.names),
                self.default,
            )
            return self.themes[self.default]
        return css


@lru_cache(maxsize=1)
def default_registry() -> ThemeRegistry:
    """Return the registry of bundled themes, loaded once per process."""
    return ThemeRegistry.load()


def resolve(theme_name: str) -> str:
    """Return the bundled CSS for ``theme_name``."""
    return default_registry().resolve(theme_name)


__all__ = ["THEME_DIR", "ThemeRegistry", "default_registry", "resolve"]
