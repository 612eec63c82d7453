"""Document builder: wraps paths in an <svg> element."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from minsvg.models.color import Color, ColorValue
from minsvg.svg.path import Path
from minsvg.svg.serializer import SVG_CLOSE, background_rect, svg_open_tag

logger = logging.getLogger(__name__)


class MinSVG:
    """An SVG document holding zero or more paths.

    ``viewbox`` is ``(min_x, min_y, width, height)`` and is fixed at
    construction. The namespace defaults to ``http://www.w3.org/2000/svg``
    unless overridden with :meth:`set_xmlns`.

    :meth:`add_path` stores a copy of the given path, so editing the caller's
    ``Path`` afterwards does not change the document. Paths are painted in the
    order they were added, after the background.
    """

    def __init__(self, viewbox: Sequence[int]) -> None:
        if len(viewbox) != 4:
            raise ValueError(f"viewbox needs 4 values (min_x, min_y, width, height), got {len(viewbox)}")
        self._viewbox: tuple[int, int, int, int] = tuple(viewbox)  # type: ignore[assignment]
        self._xmlns: str | None = None
        self._background: ColorValue = Color.NONE
        self._paths: list[Path] = []

    @property
    def viewbox(self) -> tuple[int, int, int, int]:
        return self._viewbox

    @property
    def xmlns(self) -> str | None:
        return self._xmlns

    @property
    def background(self) -> ColorValue:
        return self._background

    @property
    def paths(self) -> tuple[Path, ...]:
        return tuple(self._paths)

    def __repr__(self) -> str:
        return f"MinSVG(viewbox={self._viewbox}, paths={len(self._paths)})"

    def set_xmlns(self, xmlns: str) -> MinSVG:
        self._xmlns = xmlns
        return self

    def set_background_color(self, color: ColorValue) -> MinSVG:
        """Fill the whole view box. ``Color.NONE`` (the default) draws no background."""
        self._background = color
        return self

    def add_path(self, path: Path) -> MinSVG:
        self._paths.append(path.copy())
        return self

    def serialize(self) -> str:
        svg = svg_open_tag(self._viewbox, self._xmlns) + self._body()
        logger.debug("Serialized document: %d paths, %d chars", len(self._paths), len(svg))
        return svg

    def serialize_raw(self) -> str:
        """Document body without the opening ``<svg>`` tag.

        The closing ``</svg>`` is still appended, same as :meth:`serialize`.
        """
        return self._body()

    def _body(self) -> str:
        _, _, width, height = self._viewbox
        parts = [background_rect(width, height, self._background)]
        parts.extend(p.serialize() for p in self._paths)
        parts.append(SVG_CLOSE)
        return "".join(parts)
