"""Shared fixtures: a small UFO with one glyph and its fontinfo.plist"""

from pathlib import Path

import pytest
from fontTools.misc import plistlib

SQUARE_GLIF = """<?xml version="1.0" encoding="UTF-8"?>
<glyph name="square" format="2">
  <advance width="500"/>
  <unicode hex="0041"/>
  <outline>
    <contour>
      <point x="100" y="0" type="line"/>
      <point x="400" y="0" type="line"/>
      <point x="400" y="300" type="line"/>
      <point x="100" y="300" type="line"/>
    </contour>
  </outline>
</glyph>
"""


def write_ufo(root: Path, glif_text: str = SQUARE_GLIF, fontinfo=None) -> Path:
    """Create <root>/Test.ufo with glyphs/square.glif (and fontinfo.plist if given); return the glif path."""
    glyphs_dir = root / "Test.ufo" / "glyphs"
    glyphs_dir.mkdir(parents=True)
    glif_path = glyphs_dir / "square.glif"
    glif_path.write_text(glif_text, encoding="utf-8")
    if fontinfo is not None:
        with open(root / "Test.ufo" / "fontinfo.plist", "wb") as plist_file:
            plistlib.dump(fontinfo, plist_file)
    return glif_path


@pytest.fixture
def ufo_glif(tmp_path: Path) -> Path:
    """A glif inside a UFO with ascender 800 and descender -200."""
    return write_ufo(tmp_path, fontinfo={"ascender": 800, "descender": -200, "unitsPerEm": 1000})


@pytest.fixture
def lonely_glif(tmp_path: Path) -> Path:
    """A glif inside a UFO without fontinfo.plist."""
    return write_ufo(tmp_path)
