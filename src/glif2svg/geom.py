"""Bounding box accumulation and source-to-SVG coordinate transformation"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from glif2svg.common import Point


###############################################################################
# SvgBox
###############################################################################
class SvgBox:
    """
    Running bounding box of all points observed during one conversion run.

    All four extrema start at 0 (not at +/-infinity), so a glyph lying
    completely in the negative (or positive) quadrant keeps 0 as one of its
    bounds. The box is only ever widened, never narrowed.

    Attributes:
        minx (float): The minimum x-coordinate.
        maxx (float): The maximum x-coordinate.
        miny (float): The minimum y-coordinate.
        maxy (float): The maximum y-coordinate.
    """

    minx: float
    maxx: float
    miny: float
    maxy: float

    def __init__(self, minx: float = 0.0, maxx: float = 0.0, miny: float = 0.0, maxy: float = 0.0):
        self.minx = float(minx)
        self.maxx = float(maxx)
        self.miny = float(miny)
        self.maxy = float(maxy)

    def consider(self, points: Union[Sequence[Point], NDArray[np.float64]]) -> None:
        """Widen the box so that it contains all given points.

        Args:
            points: sequence of (x, y) points or an array of shape (n, 2)
        """
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        if not pts.shape[0]:
            return
        self.minx = min(self.minx, float(pts[:, 0].min()))
        self.maxx = max(self.maxx, float(pts[:, 0].max()))
        self.miny = min(self.miny, float(pts[:, 1].min()))
        self.maxy = max(self.maxy, float(pts[:, 1].max()))

    def seed_vertical(self, ascender: float, descender: float) -> None:
        """Overwrite the vertical extent with font metrics (before any point is observed)."""
        self.maxy = float(ascender)
        self.miny = float(descender)

    def seed_horizontal(self, minx: float, maxx: float) -> None:
        """Overwrite the horizontal extent, e.g. with 0 and the advance width."""
        self.minx = float(minx)
        self.maxx = float(maxx)

    def contains(self, x: float, y: float) -> bool:
        """True if the point (x, y) lies inside or on the border of the box."""
        return self.minx <= x <= self.maxx and self.miny <= y <= self.maxy

    def copy(self) -> SvgBox:
        """Independent copy of the current state."""
        return SvgBox(self.minx, self.maxx, self.miny, self.maxy)

    @property
    def extent(self) -> Tuple[float, float, float, float]:
        """The extent of the box as Tuple (minx, maxx, miny, maxy)."""
        return self.minx, self.maxx, self.miny, self.maxy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SvgBox):
            return NotImplemented
        return self.extent == other.extent

    def __repr__(self) -> str:
        return f"SvgBox(minx={self.minx:g}, maxx={self.maxx:g}, miny={self.miny:g}, maxy={self.maxy:g})"


###############################################################################
# CoordinateTransform
###############################################################################
@dataclass(frozen=True)
class CoordinateTransform:
    """
    Maps source space (y up) to SVG space (y down).

    x is passed through. y is flipped and translated by _y_offset_:
        viewBox mode:       y' = -y + maxy + miny
        width/height mode:  y' = -y + miny
    The offset is taken from a box snapshot so that all points of one run
    are flipped about the same origin.
    """

    y_offset: float = 0.0

    @classmethod
    def from_box(cls, box: SvgBox, no_viewbox: bool = False) -> CoordinateTransform:
        """Create the transformation for the given box and sizing mode.

        Args:
            box (SvgBox): box holding the (seeded or measured) vertical extent
            no_viewbox (bool, optional): True for width/height mode. Defaults to False.

        Returns:
            CoordinateTransform: the transformation
        """
        if no_viewbox:
            return cls(box.miny)
        return cls(box.maxy + box.miny)

    def transform_x(self, x: float) -> float:
        """SVG x-axis has the same direction as the source x-axis."""
        return x

    def transform_y(self, y: float) -> float:
        """Flip y and move it by the offset."""
        return -y + self.y_offset

    def transform_point(self, point: Point) -> Point:
        """Transform a single (x, y) point."""
        return self.transform_x(point[0]), self.transform_y(point[1])
