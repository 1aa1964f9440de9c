"""Centralized configuration for boxcompose."""

from __future__ import annotations

from dataclasses import dataclass, field

from boxcompose.graphics.style import ALL_STYLES, DrawingStyle, Light

_STYLES: dict[str, DrawingStyle] = {str(style): style for style in ALL_STYLES}
# Bare family names mean the normal detail.
_ALIASES: dict[str, str] = {
    "light": "light:normal",
    "heavy": "heavy:normal",
}


def style_names() -> list[str]:
    """Return sorted list of accepted style names."""
    return sorted([*_STYLES, *_ALIASES])


def parse_style(name: str) -> DrawingStyle:
    """Return the built-in style called *name* (``ascii``, ``heavy:triple-dash``, ...).

    Raises :class:`ValueError` if the name is not recognised.
    """
    key = name.strip().lower().replace("_", "-")
    key = _ALIASES.get(key, key)
    style = _STYLES.get(key)
    if style is None:
        available = ", ".join(style_names())
        raise ValueError(f"Unknown style {name!r}. Available: {available}")
    return style


@dataclass
class DrawConfig:
    """Configuration for rendering a drawing script."""

    style: DrawingStyle = field(default_factory=Light)
    width: int = 80
    height: int = 24
    fill: str = " "
