"""Fixed attribute sets of the SVG document boilerplate"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

XYGRID_IDENT: str = "inkscape:grid"
XYGRID: Mapping[str, str] = MappingProxyType(
    {
        "id": "grid№1",
        "type": "xygrid",
        "dotted": "false",
        "enabled": "true",
        "visible": "true",
        "empspacing": "10",
    }
)

NAMEDVIEW_IDENT: str = "sodipodi:namedview"
NAMEDVIEW: Mapping[str, str] = MappingProxyType(
    {
        "pagecolor": "#ffffff",
        "bordercolor": "#666666",
        "borderopacity": "1.0",
        "showgrid": "true",
    }
)

GUIDE_IDENT: str = "sodipodi:guide"
BASELINE_GUIDE_ORIENTATION: str = "0.00,1.00"

# "" is the default namespace of the document
XMLNS: Mapping[str, str] = MappingProxyType(
    {
        "": "http://www.w3.org/2000/svg",
        "svg": "http://www.w3.org/2000/svg",
        "sodipodi": "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
        "inkscape": "http://www.inkscape.org/namespaces/inkscape",
    }
)

SVG_VERSION: str = "1.1"
