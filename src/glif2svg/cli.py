"""Command line interface: convert a glyph (.glif or font file) to SVG."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from glif2svg.common import Glif2SvgError, InvalidPrecisionError
from glif2svg.converter import ConversionConfig, GlyphSvgConverter
from glif2svg.document import GlyphSvgDocument
from glif2svg.number import DEFAULT_PRECISION, PRECISION_MAX, PRECISION_MIN, NumberFormatter

logger = logging.getLogger(__name__)

VERSION = "0.99.0"


def _precision(value: str) -> int:
    try:
        return NumberFormatter.validate_precision(value)
    except InvalidPrecisionError as err:
        raise argparse.ArgumentTypeError(f"Precision must be {PRECISION_MIN}…{PRECISION_MAX}") from err


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser of the glif2svg command."""
    parser = argparse.ArgumentParser(prog="glif2svg", description="Convert between glif to SVG")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("input", nargs="?", help="The path to the input file (.glif, or .ttf/.otf with --glyph).")
    input_group.add_argument("-i", "--input", dest="input_file", metavar="INPUT", help=argparse.SUPPRESS)

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument("output", nargs="?", help=argparse.SUPPRESS)
    output_group.add_argument(
        "-o",
        "--output",
        dest="output_file",
        metavar="OUTPUT",
        help="The path to the output file. If not provided, or `-`, stdout.",
    )

    parser.add_argument("-B", "--no-viewbox", action="store_true", help="Don't put viewBox in SVG")
    parser.add_argument(
        "-M",
        "--no-metrics",
        action="store_true",
        help="Don't consider glif's height/width when writing SVG, use minx/maxx/miny/maxy",
    )
    parser.add_argument(
        "-F",
        "--fontinfo",
        metavar="PATH",
        help="fontinfo file (for metrics, should point to fontinfo.plist path)",
    )
    parser.add_argument("-p", "--precision", type=_precision, default=DEFAULT_PRECISION, help="Float precision")
    parser.add_argument("-g", "--glyph", help="Glyph name, required when reading from a .ttf/.otf font")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print debug messages")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the glif2svg command. Returns the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    input_path = args.input or args.input_file
    output_path = args.output or args.output_file
    config = ConversionConfig(
        precision=args.precision,
        no_viewbox=args.no_viewbox,
        no_metrics=args.no_metrics,
    )

    try:
        result = GlyphSvgConverter(config).convert_file(input_path, args.glyph, args.fontinfo)
    except (Glif2SvgError, ValueError) as err:
        logger.error("%s", err)
        return 1

    GlyphSvgDocument.from_result(result).save_as(output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
