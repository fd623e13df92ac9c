"""Central module containing types, verb metadata and errors for glyph to SVG conversion."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping, Sequence, Tuple

###############################################################################
# Types
###############################################################################


SvgPathCmds = Literal[  # Type-Definition for the SvgPath-Commands a glyph outline is made of
    # MoveTo (1 point) - start a new subpath and move the current point to (x,y)
    "M",
    # LineTo (1 point) - draw a straight line from the current point to (x,y)
    "L",
    # Quadratic Bezier To (2 points) - one control point and an endpoint (x,y)
    "Q",
    # Cubic Bezier To (3 points) - two control points and an endpoint (x,y)
    "C",
    # ClosePath (0 points) - close subpath by drawing a line from the current point to start point
    "Z",
]

Point = Tuple[float, float]


###############################################################################
# VerbInfo
###############################################################################


@dataclass(frozen=True)
class VerbInfo:
    """Metadata for the path verbs.

    Attributes:
        consumes_points: Number of points this verb carries
    """

    consumes_points: int


# Verb registry with metadata
VERB_INFO: Mapping[str, VerbInfo] = MappingProxyType(
    {
        "M": VerbInfo(1),  # MoveTo - destination
        "L": VerbInfo(1),  # LineTo - destination
        "Q": VerbInfo(2),  # Quadratic - control, destination
        "C": VerbInfo(3),  # Cubic - control, control, destination
        "Z": VerbInfo(0),  # ClosePath - no points
    }
)


###############################################################################
# Verb
###############################################################################


@dataclass(frozen=True)
class Verb:
    """One path construction operation together with the points it carries.

    The points are in source space (font units, y grows upward).
    A Verb is not validated on creation: the transcoder rejects unknown
    command letters and wrong point counts when it consumes the sequence.
    """

    cmd: str
    points: Tuple[Point, ...] = ()

    @classmethod
    def move(cls, pt: Sequence[float]) -> Verb:
        """MoveTo verb."""
        return cls("M", (_as_point(pt),))

    @classmethod
    def line(cls, pt: Sequence[float]) -> Verb:
        """LineTo verb."""
        return cls("L", (_as_point(pt),))

    @classmethod
    def quad(cls, ctrl: Sequence[float], pt: Sequence[float]) -> Verb:
        """Quadratic curve verb."""
        return cls("Q", (_as_point(ctrl), _as_point(pt)))

    @classmethod
    def cubic(cls, ctrl1: Sequence[float], ctrl2: Sequence[float], pt: Sequence[float]) -> Verb:
        """Cubic curve verb."""
        return cls("C", (_as_point(ctrl1), _as_point(ctrl2), _as_point(pt)))

    @classmethod
    def close(cls) -> Verb:
        """ClosePath verb."""
        return cls("Z", ())

    def __str__(self) -> str:
        coords = " ".join(f"{x:g} {y:g}" for x, y in self.points)
        return f"{self.cmd} {coords}".strip()


def _as_point(pt: Sequence[float]) -> Point:
    return (float(pt[0]), float(pt[1]))


###############################################################################
# Errors
###############################################################################


class Glif2SvgError(Exception):
    """Base class of all errors raised while converting a glyph to SVG."""


class UnsupportedVerbError(Glif2SvgError, ValueError):
    """A verb outside of M, L, Q, C, Z or with the wrong number of points was encountered."""

    def __init__(self, verb: object, index: int):
        self.verb = verb
        self.index = index
        super().__init__(f"Unsupported verb {verb!r} at position {index}")


class MissingMetricsError(Glif2SvgError, LookupError):
    """Vertical metrics (ascender/descender) could not be determined."""


class InvalidPrecisionError(Glif2SvgError, ValueError):
    """Precision outside of the accepted range 0..255."""


class GlyphSourceError(Glif2SvgError, OSError):
    """The glyph source could not be read."""
