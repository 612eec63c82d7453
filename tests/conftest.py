"""Shared test fixtures."""

from __future__ import annotations

import pytest

from minsvg import RGB, Color, MinSVG, Path


LINE_PATH_SVG = '<path d="M 0 0 L 100 100 " stroke="none" stroke-width="0" fill="none" />'

LINE_PATH_RAW = "M 0 0 L 100 100 "

RGB_DOCUMENT_RAW = (
    '<rect width="100" height="100" style="fill:rgb(0,0,0)" />'
    '<path d="" stroke="rgb(10,100,50)" stroke-width="0" fill="none" />'
    "</svg>"
)

TRIANGLE_DOCUMENT_SVG = (
    '<svg viewBox="0 0 500 500" xmlns="http://www.w3.org/2000/svg">'
    '<rect width="500" height="500" style="fill:green" />'
    '<path d="M 0 0 L 0 50 L 450 500 L 500 500 L 0 0 " stroke="black" stroke-width="3" fill="black" />'
    "</svg>"
)


def make_line_path() -> Path:
    path = Path()
    path.move_to(0, 0)
    path.line_to(100, 100)
    return path


def make_triangle_document() -> MinSVG:
    svg = MinSVG([0, 0, 500, 500])

    path = Path()
    path.set_stroke_color(Color.BLACK)
    path.set_fill_color(Color.BLACK)
    path.set_stroke_width(3)
    path.move_to(0, 0)
    path.line_to(0, 50)
    path.line_to(450, 500)
    path.line_to(500, 500)
    path.line_to(0, 0)

    svg.add_path(path)
    svg.set_background_color(Color.GREEN)
    return svg


def make_rgb_document() -> MinSVG:
    svg = MinSVG([0, 0, 100, 100])
    svg.set_background_color(RGB(0, 0, 0))

    path = Path()
    path.set_stroke_color(RGB(10, 100, 50))
    svg.add_path(path)
    return svg


@pytest.fixture
def line_path() -> Path:
    return make_line_path()


@pytest.fixture
def triangle_document() -> MinSVG:
    return make_triangle_document()


@pytest.fixture
def rgb_document() -> MinSVG:
    return make_rgb_document()
