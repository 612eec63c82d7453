"""Colour model shared by paths and document backgrounds."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Color(str, enum.Enum):
    """Named colours. Values are the literal attribute text."""

    NONE = "none"  # omit the visual effect
    BLACK = "black"
    BLUE = "blue"
    GREEN = "green"
    RED = "red"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RGB:
    """Explicit 8-bit RGB triple."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"RGB channel {name} must be an int in 0..255, got {value!r}")

    def __str__(self) -> str:
        return f"rgb({self.r},{self.g},{self.b})"


ColorValue = Color | RGB


def render_color(color: ColorValue) -> str:
    """Render a colour as an SVG attribute value, e.g. ``black`` or ``rgb(1,2,3)``."""
    return str(color)
