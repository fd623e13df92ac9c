"""Classes related to the FontTools library: reading glyph outlines and vertical metrics."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from fontTools.misc import plistlib
from fontTools.pens.basePen import BasePen
from fontTools.pens.pointPen import PointToSegmentPen
from fontTools.ttLib import TTFont, TTLibError
from fontTools.ufoLib.errors import GlifLibError
from fontTools.ufoLib.glifLib import readGlyphFromString

from glif2svg.common import GlyphSourceError, MissingMetricsError, Point, Verb

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

FONTINFO_FILENAME = "fontinfo.plist"


###############################################################################
# Pens
###############################################################################
class VerbRecordingPen(BasePen):
    """
    Records glyph drawing commands as a list of Verbs.

    Supports the commands: M, L, C, Q, Z (all absolute). Curves with several
    off-curve points are split into single segments by BasePen.
    Contours are kept apart by their kind: open contours (ended by endPath)
    come first in `.verbs`, closed contours (ended by closePath) follow.

    Access the result via `.verbs` after drawing a glyph with this pen.
    """

    def __init__(self, glyphSet=None):
        """
        Initialize the VerbRecordingPen.

        Parameters:
            glyphSet (GlyphSet, optional): The glyph set used to decompose components.
                Components not found in the glyph set are skipped with a warning.
        """
        super().__init__(glyphSet if glyphSet is not None else {})
        self._contour: List[Verb] = []
        self._open: List[Verb] = []
        self._closed: List[Verb] = []

    # BasePen callback methods -------------------------------------------------
    def _moveTo(self, pt: Point):
        self._contour = [Verb.move(pt)]

    def _lineTo(self, pt: Point):
        self._contour.append(Verb.line(pt))

    def _qCurveToOne(self, pt1: Point, pt2: Point):
        self._contour.append(Verb.quad(pt1, pt2))

    def _curveToOne(self, pt1: Point, pt2: Point, pt3: Point):
        self._contour.append(Verb.cubic(pt1, pt2, pt3))

    def _closePath(self):
        self._contour.append(Verb.close())
        self._closed.extend(self._contour)
        self._contour = []

    def _endPath(self):
        self._open.extend(self._contour)
        self._contour = []

    @property
    def verbs(self) -> List[Verb]:
        """Return the recorded verbs, open contours first."""
        return self._open + self._closed

    def reset(self) -> None:
        """Clear recorded verbs."""
        self._contour = []
        self._open = []
        self._closed = []


###############################################################################
# GlyphOutline
###############################################################################
@dataclass
class GlyphOutline:
    """A glyph outline reduced to verbs, plus its advance width if known."""

    name: str
    advance_width: Optional[float] = None
    verbs: List[Verb] = field(default_factory=list)


class _GlifAttributes:
    """Receiver for the glyph attributes set by readGlyphFromString."""

    width: Optional[float] = None

    def __setattr__(self, name: str, value: Any) -> None:
        # only the advance width is of interest
        if name == "width":
            object.__setattr__(self, name, value)


###############################################################################
# GlyphReader
###############################################################################
class GlyphReader:
    """
    Class to provide static methods to read a single glyph outline.
    """

    @staticmethod
    def read_glif_string(text: Union[str, bytes], name: str = "glyph") -> GlyphOutline:
        """Read the outline and advance width of a GLIF document.

        Args:
            text (Union[str, bytes]): content of a .glif file
            name (str, optional): name for the outline. Defaults to "glyph".

        Raises:
            GlyphSourceError: if the GLIF data is not valid

        Returns:
            GlyphOutline: the outline
        """
        attributes = _GlifAttributes()
        pen = VerbRecordingPen()
        try:
            readGlyphFromString(text, glyphObject=attributes, pointPen=PointToSegmentPen(pen))
        except (GlifLibError, SyntaxError) as err:  # SyntaxError covers XML parse errors
            raise GlyphSourceError(f"Invalid glif data for {name}: {err}") from err
        advance = float(attributes.width) if attributes.width is not None else None
        return GlyphOutline(name=name, advance_width=advance, verbs=pen.verbs)

    @staticmethod
    def read_glif(glif_path: PathLike) -> GlyphOutline:
        """Read a .glif file (UFO glyph)."""
        glif_path = Path(glif_path)
        try:
            text = glif_path.read_bytes()
        except OSError as err:
            raise GlyphSourceError(f"Cannot read {glif_path}: {err}") from err
        outline = GlyphReader.read_glif_string(text, glif_path.stem)
        logger.debug("read %s: %d verbs, advance %s", glif_path, len(outline.verbs), outline.advance_width)
        return outline

    @staticmethod
    def read_ttfont_glyph(font_path: PathLike, glyph_name: str) -> GlyphOutline:
        """Read a single glyph of a TrueType/OpenType font.

        Args:
            font_path (PathLike): path to a .ttf/.otf file
            glyph_name (str): name of the glyph inside the font (e.g. "A")

        Raises:
            GlyphSourceError: if the font cannot be read or has no such glyph

        Returns:
            GlyphOutline: the outline
        """
        try:
            ttfont = TTFont(str(font_path))
        except (OSError, TTLibError) as err:
            raise GlyphSourceError(f"Cannot read font {font_path}: {err}") from err
        glyph_set = ttfont.getGlyphSet()
        if glyph_name not in glyph_set:
            raise GlyphSourceError(f"Glyph {glyph_name!r} not found in {font_path}")
        glyph = glyph_set[glyph_name]
        pen = VerbRecordingPen(glyph_set)
        glyph.draw(pen)
        return GlyphOutline(name=glyph_name, advance_width=float(glyph.width), verbs=pen.verbs)


###############################################################################
# MetricsProvider
###############################################################################
class MetricsProvider:
    """
    Class to provide static methods to look up the vertical metrics (ascender, descender) of a font.
    All lookups raise MissingMetricsError if the metrics are not available.
    """

    @staticmethod
    def from_fontinfo(fontinfo_path: PathLike) -> Tuple[float, float]:
        """Read ascender and descender from a UFO fontinfo.plist."""
        try:
            with open(fontinfo_path, "rb") as plist_file:
                info = plistlib.load(plist_file)
        except (OSError, SyntaxError, ValueError) as err:  # SyntaxError covers XML parse errors
            raise MissingMetricsError(f"Cannot read {fontinfo_path}: {err}") from err
        if not isinstance(info, dict):
            raise MissingMetricsError(f"{fontinfo_path} does not contain a dictionary")
        try:
            return float(info["ascender"]), float(info["descender"])
        except (KeyError, TypeError, ValueError) as err:
            raise MissingMetricsError(f"No ascender/descender in {fontinfo_path}") from err

    @staticmethod
    def fontinfo_path_for_glif(glif_path: PathLike) -> Path:
        """fontinfo.plist of the UFO a glyph file belongs to: <ufo>/glyphs/x.glif -> <ufo>/fontinfo.plist"""
        return Path(glif_path).resolve().parent.parent / FONTINFO_FILENAME

    @staticmethod
    def from_glif_path(glif_path: PathLike) -> Tuple[float, float]:
        """Read ascender and descender from the UFO the given glyph file belongs to."""
        return MetricsProvider.from_fontinfo(MetricsProvider.fontinfo_path_for_glif(glif_path))

    @staticmethod
    def from_ttfont(font_path: PathLike) -> Tuple[float, float]:
        """Read ascender and descender from the hhea table of a TrueType/OpenType font."""
        try:
            ttfont = TTFont(str(font_path))
            hhea = ttfont["hhea"]
        except (OSError, KeyError, TTLibError) as err:
            raise MissingMetricsError(f"No hhea metrics in {font_path}: {err}") from err
        return float(hhea.ascender), float(hhea.descender)  # type: ignore
