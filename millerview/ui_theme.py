"""UI theme definitions and selection helpers.

Themes are ANSI palettes for pane chrome and rows. The ``plain`` theme has
no escape sequences at all and is what ``--no-color`` selects.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    reverse: str
    border: str
    title: str
    header: str
    directory: str
    file: str
    placeholder: str
    error: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    border="\033[2m",
    title="\033[1;38;5;81m",
    header="\033[1m",
    directory="\033[1;34m",
    file="\033[38;5;252m",
    placeholder="\033[2;38;5;250m",
    error="\033[38;5;203m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    border="\033[2;38;5;31m",
    title="\033[1;38;5;45m",
    header="\033[1;38;5;153m",
    directory="\033[1;38;5;45m",
    file="\033[38;5;252m",
    placeholder="\033[2;38;5;110m",
    error="\033[38;5;215m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    border="",
    title="",
    header="",
    directory="",
    file="",
    placeholder="",
    error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
