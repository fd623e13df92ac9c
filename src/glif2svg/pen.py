"""Transcoding of path verbs into SVG path data and sizing of the SVG document."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from glif2svg.common import VERB_INFO, Point, UnsupportedVerbError, Verb
from glif2svg.geom import CoordinateTransform, SvgBox
from glif2svg.number import DEFAULT_PRECISION, NumberFormatter

logger = logging.getLogger(__name__)

XmlAttribute = Tuple[str, str]


###############################################################################
# SvgPathPen
###############################################################################
class SvgPathPen:
    """
    Pen state of one conversion run.

    Owns the growing SVG path data, the bounding box of all observed points,
    the precision (decimal digits kept when coordinates are written) and the
    sizing mode (viewBox or width/height).

    Every point handed to the pen is first added to the bounding box using
    its source-space value, then transformed to SVG space and written with
    the configured precision. The bounding box itself is never truncated.
    """

    path: str
    box: SvgBox
    precision: int
    no_viewbox: bool

    def __init__(self, precision: int = DEFAULT_PRECISION, no_viewbox: bool = False):
        self.path = ""
        self.box = SvgBox()
        self.precision = NumberFormatter.validate_precision(precision)
        self.no_viewbox = no_viewbox
        self._transform: Optional[CoordinateTransform] = None

    # Formatting ----------------------------------------------------------------
    def p(self, value: float) -> str:
        """Truncate and format a single number with the pen's precision."""
        return NumberFormatter.format(value, self.precision)

    def fix_transform(self) -> CoordinateTransform:
        """Derive the source-to-SVG transformation from the current box, once per run."""
        if self._transform is None:
            self._transform = CoordinateTransform.from_box(self.box, self.no_viewbox)
            logger.debug("y offset fixed at %g", self._transform.y_offset)
        return self._transform

    @property
    def transform(self) -> CoordinateTransform:
        """The source-to-SVG transformation of this run."""
        return self.fix_transform()

    def _emit_points(self, points: Sequence[Point]) -> str:
        trafo = self.transform
        coords: List[str] = []
        for point in points:
            x, y = trafo.transform_point(point)
            coords.append(self.p(x))
            coords.append(self.p(y))
        return " ".join(coords)

    def extend_path(self, path: str) -> None:
        """Append raw SVG path data."""
        self.path += path

    # Drawing -------------------------------------------------------------------
    def move_to(self, pt: Point) -> None:
        """Start a new subpath at _pt_."""
        self.box.consider([pt])
        self.extend_path(f"M {self._emit_points([pt])}")

    def line_to(self, pt: Point) -> None:
        """Straight line to _pt_."""
        self.box.consider([pt])
        self.extend_path(f"L {self._emit_points([pt])}")

    def qcurve_to(self, ctrl: Point, pt: Point) -> None:
        """Quadratic curve with control point _ctrl_ ending in _pt_."""
        self.box.consider([ctrl, pt])
        self.extend_path(f"Q {self._emit_points([ctrl, pt])}")

    def curve_to(self, ctrl1: Point, ctrl2: Point, pt: Point) -> None:
        """Cubic curve with control points _ctrl1_, _ctrl2_ ending in _pt_."""
        self.box.consider([ctrl1, ctrl2, pt])
        self.extend_path(f"C {self._emit_points([ctrl1, ctrl2, pt])}")

    def close_path(self) -> None:
        """Close the current subpath."""
        self.extend_path("Z")

    @staticmethod
    def check_verbs(verbs: Iterable[Verb]) -> List[Verb]:
        """Return the verbs as list after checking command letters and point counts.

        Raises:
            UnsupportedVerbError: for the first verb that is not M, L, Q, C, Z with matching arity
        """
        checked: List[Verb] = []
        for index, verb in enumerate(verbs):
            info = VERB_INFO.get(getattr(verb, "cmd", None))  # type: ignore[arg-type]
            points = getattr(verb, "points", None)
            if info is None or points is None or len(points) != info.consumes_points:
                raise UnsupportedVerbError(verb, index)
            checked.append(verb)
        return checked

    def draw(self, verbs: Iterable[Verb]) -> None:
        """Transcode all _verbs_ into SVG path data.

        The sequence is checked completely before anything is written,
        so an unsupported verb leaves the path data untouched.

        Args:
            verbs (Iterable[Verb]): flattened outline (M, L, Q, C, Z)

        Raises:
            UnsupportedVerbError: if the sequence contains an unsupported verb
        """
        checked = self.check_verbs(verbs)
        self.fix_transform()
        for verb in checked:
            if verb.cmd == "M":
                self.move_to(verb.points[0])
            elif verb.cmd == "L":
                self.line_to(verb.points[0])
            elif verb.cmd == "Q":
                self.qcurve_to(*verb.points)
            elif verb.cmd == "C":
                self.curve_to(*verb.points)
            else:
                self.close_path()
        logger.debug("transcoded %d verbs, box %r", len(checked), self.box)

    def measure(self, verbs: Iterable[Verb]) -> None:
        """Add all points of _verbs_ to the bounding box without writing path data."""
        for verb in self.check_verbs(verbs):
            self.box.consider(verb.points)

    # Document sizing -----------------------------------------------------------
    def viewbox(self) -> Tuple[float, float, float, float]:
        """(x, y, dx, dy) with dx = |minx| + maxx and dy = |miny| + maxy."""
        box = self.box
        return (box.minx, box.miny, abs(box.minx) + box.maxx, abs(box.miny) + box.maxy)

    def width(self) -> float:
        """Document width, same as the viewBox width."""
        return self.viewbox()[2]

    def height(self) -> float:
        """Document height, same as the viewBox height."""
        return self.viewbox()[3]

    def viewbox_str(self) -> str:
        """The viewBox attribute value "x y dx dy"."""
        return " ".join(self.p(value) for value in self.viewbox())

    def size_attr(self, name: str, size: float) -> XmlAttribute:
        """A single pixel sizing attribute like ("width", "500px")."""
        return (name, f"{self.p(size)}px")

    def px_size_attrs(self) -> List[XmlAttribute]:
        """The width and height attributes in pixels."""
        return [
            self.size_attr("width", self.width()),
            self.size_attr("height", self.height()),
        ]

    def size_attrs(self) -> List[XmlAttribute]:
        """Either the viewBox attribute or the width/height attributes, depending on the mode."""
        if self.no_viewbox:
            return self.px_size_attrs()
        return [("viewBox", self.viewbox_str())]

    def baseline_guide_position(self) -> str:
        """Position of the baseline guide: the descender depth below the top-left origin."""
        return f"{0.0:.2f},{abs(self.box.miny):.2f}"
