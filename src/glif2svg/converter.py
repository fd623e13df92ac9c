"""Conversion of one glyph outline into SVG path data with matching document metrics."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from glif2svg.common import MissingMetricsError, Verb
from glif2svg.fonttools import GlyphOutline, GlyphReader, MetricsProvider
from glif2svg.geom import SvgBox
from glif2svg.number import DEFAULT_PRECISION, NumberFormatter
from glif2svg.pen import SvgPathPen, XmlAttribute

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

TTFONT_SUFFIXES = (".ttf", ".otf", ".woff", ".woff2")


###############################################################################
# ConversionConfig
###############################################################################
@dataclass(frozen=True)
class ConversionConfig:
    """
    Options of a conversion run.

    Attributes:
        precision (int): decimal digits kept when writing coordinates (0..255). Defaults to 16.
        no_viewbox (bool): write width/height in px instead of a viewBox. Defaults to False.
        no_metrics (bool): ignore font metrics and advance width, derive the
            document box from the outline only. Defaults to False.
    """

    precision: int = DEFAULT_PRECISION
    no_viewbox: bool = False
    no_metrics: bool = False

    def __post_init__(self):
        object.__setattr__(self, "precision", NumberFormatter.validate_precision(self.precision))


###############################################################################
# SvgGlyphResult
###############################################################################
@dataclass
class SvgGlyphResult:
    """
    Result of a conversion run: the path data and the sizing attributes.
    Exactly one of _viewbox_ or (_width_, _height_) is set.
    """

    d: str
    viewbox: Optional[str] = None
    width: Optional[str] = None
    height: Optional[str] = None
    box: SvgBox = field(default_factory=SvgBox)
    baseline_position: str = "0.00,0.00"
    metrics_used: bool = False
    name: str = "glyph"

    def attributes(self) -> List[XmlAttribute]:
        """Sizing attributes of the <svg> element."""
        if self.viewbox is not None:
            return [("viewBox", self.viewbox)]
        return [("width", str(self.width)), ("height", str(self.height))]


###############################################################################
# GlyphSvgConverter
###############################################################################
class GlyphSvgConverter:
    """
    Runs the conversion of glyph outlines with a fixed configuration.
    Every run uses its own SvgPathPen, so one converter can be used for many glyphs.
    """

    config: ConversionConfig

    def __init__(self, config: Optional[ConversionConfig] = None):
        self.config = config if config is not None else ConversionConfig()

    def convert(
        self,
        verbs: Iterable[Verb],
        advance_width: Optional[float] = None,
        metrics: Optional[Tuple[float, float]] = None,
        name: str = "glyph",
    ) -> SvgGlyphResult:
        """Convert the outline given by _verbs_.

        Order of operations:
            1. vertical extent: seeded by _metrics_ (ascender, descender), or,
               if there are none or metrics are switched off, measured from the outline
            2. horizontal extent: seeded with 0 and _advance_width_ unless metrics are switched off
            3. transcoding of all verbs (widens the box further if the outline exceeds the seeds)
            4. sizing of the document from the final box

        Args:
            verbs (Iterable[Verb]): flattened outline (M, L, Q, C, Z)
            advance_width (Optional[float], optional): advance width of the glyph. Defaults to None.
            metrics (Optional[Tuple[float, float]], optional): (ascender, descender). Defaults to None.
            name (str, optional): name of the glyph. Defaults to "glyph".

        Raises:
            UnsupportedVerbError: if the outline contains an unsupported verb

        Returns:
            SvgGlyphResult: path data and sizing attributes
        """
        config = self.config
        checked = SvgPathPen.check_verbs(verbs)
        pen = SvgPathPen(config.precision, config.no_viewbox)

        metrics_used = False
        if not config.no_metrics and metrics is not None:
            ascender, descender = metrics
            pen.box.seed_vertical(ascender, descender)
            metrics_used = True
            logger.debug("%s: vertical extent seeded by metrics %g/%g", name, ascender, descender)
        else:
            if not config.no_metrics:
                logger.warning("%s: failed to set metrics of SVG from font, using outline bounds", name)
            pen.measure(checked)

        if not config.no_metrics:
            pen.box.seed_horizontal(0.0, advance_width or 0.0)

        baseline_position = pen.baseline_guide_position()
        pen.draw(checked)

        result = SvgGlyphResult(
            d=pen.path,
            box=pen.box.copy(),
            baseline_position=baseline_position,
            metrics_used=metrics_used,
            name=name,
        )
        if config.no_viewbox:
            width, height = pen.px_size_attrs()
            result.width, result.height = width[1], height[1]
        else:
            result.viewbox = pen.viewbox_str()
        return result

    def convert_outline(self, outline: GlyphOutline, metrics: Optional[Tuple[float, float]] = None) -> SvgGlyphResult:
        """Convert a GlyphOutline read by the GlyphReader."""
        return self.convert(outline.verbs, outline.advance_width, metrics, outline.name)

    def convert_file(
        self,
        input_path: PathLike,
        glyph_name: Optional[str] = None,
        fontinfo_path: Optional[PathLike] = None,
    ) -> SvgGlyphResult:
        """Read a glyph from a .glif file or from a font file and convert it.

        Metrics are looked up in _fontinfo_path_ if given, else in the UFO the
        .glif file belongs to, else in the hhea table of the font file.
        Missing metrics are reported as a single warning and the outline bounds are used instead.

        Args:
            input_path (PathLike): .glif file, or .ttf/.otf/.woff/.woff2 font file
            glyph_name (Optional[str], optional): glyph to read from a font file. Defaults to None.
            fontinfo_path (Optional[PathLike], optional): UFO fontinfo.plist with metrics. Defaults to None.

        Returns:
            SvgGlyphResult: path data and sizing attributes
        """
        input_path = Path(input_path)
        is_font = input_path.suffix.lower() in TTFONT_SUFFIXES
        if is_font:
            if not glyph_name:
                raise ValueError(f"A glyph name is required to read from font file {input_path}")
            outline = GlyphReader.read_ttfont_glyph(input_path, glyph_name)
        else:
            outline = GlyphReader.read_glif(input_path)

        metrics: Optional[Tuple[float, float]] = None
        if not self.config.no_metrics:
            try:
                if fontinfo_path is not None:
                    metrics = MetricsProvider.from_fontinfo(fontinfo_path)
                elif is_font:
                    metrics = MetricsProvider.from_ttfont(input_path)
                else:
                    metrics = MetricsProvider.from_glif_path(input_path)
            except MissingMetricsError as err:
                # reported once by convert
                logger.debug("%s: %s", outline.name, err)

        return self.convert_outline(outline, metrics)
