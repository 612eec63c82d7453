"""Path builder: accumulates drawing rules and styling for one <path> element."""

from __future__ import annotations

import logging

from minsvg.models.color import Color, ColorValue
from minsvg.svg.serializer import join_rules, path_element

logger = logging.getLogger(__name__)


class Path:
    """A single ``<path>`` under construction.

    Rules are stored as pre-rendered fragments ("M 0 0 ", "L 10 10 ", ...) and
    written out verbatim in insertion order. Mutators return ``self`` so calls
    can be chained::

        path = Path().set_stroke_color(Color.BLACK).move_to(0, 0).line_to(10, 10)
    """

    def __init__(self) -> None:
        self._rules: list[str] = []
        self._stroke: ColorValue = Color.NONE
        self._stroke_width: int = 0
        self._fill: ColorValue = Color.NONE

    # -- inspection --------------------------------------------------------

    @property
    def rules(self) -> tuple[str, ...]:
        return tuple(self._rules)

    @property
    def stroke(self) -> ColorValue:
        return self._stroke

    @property
    def stroke_width(self) -> int:
        return self._stroke_width

    @property
    def fill(self) -> ColorValue:
        return self._fill

    def __len__(self) -> int:
        return len(self._rules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return (
            self._rules == other._rules
            and self._stroke == other._stroke
            and self._stroke_width == other._stroke_width
            and self._fill == other._fill
        )

    def __repr__(self) -> str:
        return (
            f"Path(rules={len(self._rules)}, stroke={self._stroke!r}, "
            f"stroke_width={self._stroke_width}, fill={self._fill!r})"
        )

    def copy(self) -> Path:
        """Independent copy with the same rules and styling."""
        dup = Path()
        dup._rules = list(self._rules)
        dup._stroke = self._stroke
        dup._stroke_width = self._stroke_width
        dup._fill = self._fill
        return dup

    # -- styling -----------------------------------------------------------

    def set_stroke_color(self, color: ColorValue) -> Path:
        """Set ``stroke``. Defaults to ``none``."""
        self._stroke = color
        return self

    def set_stroke_width(self, width: int) -> Path:
        """Set ``stroke-width``. Defaults to ``0``."""
        self._stroke_width = width
        return self

    def set_fill_color(self, color: ColorValue) -> Path:
        """Set ``fill``. Defaults to ``none``."""
        self._fill = color
        return self

    # -- rules -------------------------------------------------------------

    def move_to(self, x: int, y: int) -> Path:
        self._rules.append(f"M {x} {y} ")
        return self

    def line_to(self, x: int, y: int) -> Path:
        self._rules.append(f"L {x} {y} ")
        return self

    def bezier(self, x1: int, y1: int, x2: int, y2: int, x: int, y: int) -> Path:
        """Cubic bezier with control points (x1, y1), (x2, y2) ending at (x, y)."""
        self._rules.append(f"C {x1} {y1}, {x2} {y2}, {x} {y} ")
        return self

    def close_path(self) -> Path:
        self._rules.append("Z ")
        return self

    def add_raw_rule(self, text: str) -> Path:
        """Append ``text`` verbatim, e.g. an arc or relative command."""
        self._rules.append(text)
        return self

    def undo(self) -> Path:
        """Drop the most recent rule. Does nothing on an empty path."""
        if self._rules:
            self._rules.pop()
        else:
            logger.debug("undo() on empty path ignored")
        return self

    # -- output ------------------------------------------------------------

    def serialize(self) -> str:
        return path_element(self.serialize_raw(), self._stroke, self._stroke_width, self._fill)

    def serialize_raw(self) -> str:
        """Path data only, i.e. the value of the ``d`` attribute."""
        return join_rules(self._rules)
