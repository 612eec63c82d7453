"""API request models."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, NonNegativeInt

from minsvg.models.color import RGB, Color, ColorValue
from minsvg.svg.document import MinSVG
from minsvg.svg.path import Path

Channel = Annotated[int, Field(ge=0, le=255)]


class RGBIn(BaseModel):
    r: Channel
    g: Channel
    b: Channel

    def to_color(self) -> RGB:
        return RGB(self.r, self.g, self.b)


ColorIn = Union[Color, RGBIn]


def _color(value: ColorIn) -> ColorValue:
    return value.to_color() if isinstance(value, RGBIn) else value


class MoveRule(BaseModel):
    op: Literal["move"]
    x: NonNegativeInt
    y: NonNegativeInt

    def apply(self, path: Path) -> None:
        path.move_to(self.x, self.y)


class LineRule(BaseModel):
    op: Literal["line"]
    x: NonNegativeInt
    y: NonNegativeInt

    def apply(self, path: Path) -> None:
        path.line_to(self.x, self.y)


class BezierRule(BaseModel):
    op: Literal["bezier"]
    x1: NonNegativeInt
    y1: NonNegativeInt
    x2: NonNegativeInt
    y2: NonNegativeInt
    x: NonNegativeInt
    y: NonNegativeInt

    def apply(self, path: Path) -> None:
        path.bezier(self.x1, self.y1, self.x2, self.y2, self.x, self.y)


class CloseRule(BaseModel):
    op: Literal["close"]

    def apply(self, path: Path) -> None:
        path.close_path()


class UndoRule(BaseModel):
    """Removes the rule before it, like calling ``Path.undo()``."""

    op: Literal["undo"]

    def apply(self, path: Path) -> None:
        path.undo()


class RawRule(BaseModel):
    op: Literal["raw"]
    text: str = Field(..., description="Path data fragment written verbatim, e.g. 'A 5 5 0 0 1 10 10 '")

    def apply(self, path: Path) -> None:
        path.add_raw_rule(self.text)


RuleIn = Annotated[
    Union[MoveRule, LineRule, BezierRule, CloseRule, UndoRule, RawRule],
    Field(discriminator="op"),
]


class PathIn(BaseModel):
    stroke: ColorIn = Color.NONE
    stroke_width: NonNegativeInt = 0
    fill: ColorIn = Color.NONE
    rules: list[RuleIn] = Field(default_factory=list)

    def build(self) -> Path:
        path = Path()
        path.set_stroke_color(_color(self.stroke))
        path.set_stroke_width(self.stroke_width)
        path.set_fill_color(_color(self.fill))
        for rule in self.rules:
            rule.apply(path)
        return path


class RenderRequest(BaseModel):
    viewbox: tuple[NonNegativeInt, NonNegativeInt, NonNegativeInt, NonNegativeInt] = Field(
        ..., description="min-x, min-y, width, height"
    )
    xmlns: str | None = Field(default=None, description="Namespace override")
    background: ColorIn = Color.NONE
    paths: list[PathIn] = Field(default_factory=list)

    def build(self) -> MinSVG:
        doc = MinSVG(self.viewbox)
        if self.xmlns is not None:
            doc.set_xmlns(self.xmlns)
        doc.set_background_color(_color(self.background))
        for p in self.paths:
            doc.add_path(p.build())
        return doc
