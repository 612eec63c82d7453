"""minsvg: minimal SVG path and document builder."""

from minsvg.models.color import RGB, Color, ColorValue, render_color
from minsvg.svg.document import MinSVG
from minsvg.svg.path import Path
from minsvg.svg.serializer import DEFAULT_XMLNS

__version__ = "0.1.0"

__all__ = [
    "Color",
    "RGB",
    "ColorValue",
    "render_color",
    "Path",
    "MinSVG",
    "DEFAULT_XMLNS",
]
