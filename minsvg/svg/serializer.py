"""String assembly for <svg>, <rect> and <path> markup.

Nothing here escapes its input: rule text, namespaces and colours are
written verbatim.
"""

from __future__ import annotations

from collections.abc import Iterable

from minsvg.models.color import Color, ColorValue, render_color

DEFAULT_XMLNS = "http://www.w3.org/2000/svg"

SVG_CLOSE = "</svg>"


def join_rules(rules: Iterable[str]) -> str:
    """Concatenate rule fragments in order. Each fragment carries its own trailing space."""
    return "".join(rules)


def path_element(d: str, stroke: ColorValue, stroke_width: int, fill: ColorValue) -> str:
    return (
        f'<path d="{d}" stroke="{render_color(stroke)}"'
        f' stroke-width="{stroke_width}" fill="{render_color(fill)}" />'
    )


def svg_open_tag(viewbox: tuple[int, int, int, int], xmlns: str | None = None) -> str:
    min_x, min_y, width, height = viewbox
    ns = DEFAULT_XMLNS if xmlns is None else xmlns
    return f'<svg viewBox="{min_x} {min_y} {width} {height}" xmlns="{ns}">'


def background_rect(width: int, height: int, color: ColorValue) -> str:
    """Full-canvas background rectangle, or empty string when ``color`` is ``Color.NONE``."""
    if color == Color.NONE:
        return ""
    return f'<rect width="{width}" height="{height}" style="fill:{render_color(color)}" />'
