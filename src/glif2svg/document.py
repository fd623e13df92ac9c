"""SVG document holding a single glyph, with Inkscape page setup."""

from __future__ import annotations

import io
import sys
from typing import Mapping, Optional

import svgwrite
import svgwrite.base
import svgwrite.container

from glif2svg.consts import (
    BASELINE_GUIDE_ORIENTATION,
    GUIDE_IDENT,
    NAMEDVIEW,
    NAMEDVIEW_IDENT,
    SVG_VERSION,
    XMLNS,
    XYGRID,
    XYGRID_IDENT,
)
from glif2svg.converter import SvgGlyphResult


class _InkscapeElement(svgwrite.base.BaseElement):
    """Element of the sodipodi/inkscape namespaces, not known to the svgwrite validator."""

    def __init__(self, elementname: str, attributes: Optional[Mapping[str, str]] = None, **extra):
        self.elementname = elementname
        super().__init__(debug=False, **extra)
        if attributes:
            self.attribs.update(attributes)


class _GlyphDrawing(svgwrite.Drawing):
    """Drawing with exactly the namespaces of XMLNS, without baseProfile and without an empty <defs>."""

    def __init__(self, **extra):
        super().__init__(size=None, **extra)
        self.elements.remove(self.defs)
        for prefix, uri in XMLNS.items():
            self.attribs[f"xmlns:{prefix}" if prefix else "xmlns"] = uri
        self.attribs["version"] = SVG_VERSION

    def get_xml(self):
        # bypasses Drawing.get_xml, which adds xmlns:xlink, xmlns:ev and baseProfile
        return super(svgwrite.Drawing, self).get_xml()


class GlyphSvgDocument:
    """An SVG document with one glyph path.

    Structure:
        svg                     -- viewBox or width/height
            sodipodi:namedview  -- page setup for Inkscape
                inkscape:grid
                sodipodi:guide  -- baseline
            g#glyph
                path            -- the glyph outline
    """

    drawing: svgwrite.Drawing
    glyph_group: svgwrite.container.Group

    def __init__(self, result: SvgGlyphResult):
        # no validation: inkscape/sodipodi elements and px sizes with many decimals
        self.drawing = _GlyphDrawing(profile="full", debug=False)
        for name, value in result.attributes():
            self.drawing[name] = value

        namedview = _InkscapeElement(NAMEDVIEW_IDENT, NAMEDVIEW)
        namedview.add(_InkscapeElement(XYGRID_IDENT, XYGRID))
        namedview.add(
            _InkscapeElement(
                GUIDE_IDENT,
                {
                    "id": "baseline",
                    "position": result.baseline_position,
                    "orientation": BASELINE_GUIDE_ORIENTATION,
                },
            )
        )
        self.drawing.add(namedview)

        self.glyph_group = self.drawing.g(id="glyph")
        self.glyph_group.add(self.drawing.path(d=result.d))
        self.drawing.add(self.glyph_group)

    @classmethod
    def from_result(cls, result: SvgGlyphResult) -> GlyphSvgDocument:
        """Create the document for a conversion result."""
        return cls(result)

    def tostring(self, pretty: bool = True, indent: int = 4) -> str:
        """The complete document including the XML declaration, ending with a newline."""
        svg_buffer = io.StringIO()
        self.drawing.write(svg_buffer, pretty=pretty, indent=indent)
        output = svg_buffer.getvalue()
        if not output.endswith("\n"):
            output += "\n"
        return output

    def save_as(self, filename: Optional[str] = None, pretty: bool = True, indent: int = 4) -> None:
        """Save as SVG file, or write to stdout if _filename_ is None or "-".

        Args:
            filename (Optional[str], optional): path and filename. Defaults to None (stdout).
            pretty (bool, optional): True for easy readable output. Defaults to True.
            indent (int, optional): Indention if pretty is enabled. Defaults to 4 spaces.
        """
        output = self.tostring(pretty=pretty, indent=indent)
        if filename is None or filename == "-":
            sys.stdout.write(output)
            return
        with open(filename, "w", encoding="utf-8") as svg_file:
            svg_file.write(output)
