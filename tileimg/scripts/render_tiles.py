#!/usr/bin/env python3
"""
Render Tiles Script.

Draw tile rectangles on a grid and write the image as PNG.

Usage:
    tileimg -o out.png 0,0 1,0 1,1
    tileimg -o out.png 0-2,0 3,0-1
    tileimg -o out.png -s none red:0,0 green:1,0 blue:2,0
    tileimg -s none 75,0,0:0,0-4 150,0,0:1,0-4 > out.png
    python -m tileimg --config my.yaml 0,0

Exit codes:
    0 ok, 1 bad arguments or config, 2 output file error,
    3 bad cell spec, 4 PNG encode error, 5 bad color
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import BinaryIO, Optional, Sequence

from tileimg import __version__
from tileimg.configs.loader import load_config
from tileimg.errors import EXIT_OK, ArgumentError, FileError, TileImgError
from tileimg.render.colors import build_color_table
from tileimg.render.encoder import encode_png, write_output
from tileimg.render.pipeline import render_tiles
from tileimg.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

VERSION_TEXT = f"""tileimg v{__version__}
Copyright (c) 2020 jiro4989
Released under the MIT License.
https://github.com/jiro4989/tileimg"""

DESCRIPTION = "tileimg draws tile rectangles to an image."

EPILOG = """\
examples:
  tileimg -o out.png 0,0 1,0 1,1
  tileimg -o out.png 0-2,0 3,0-1
  tileimg -o out.png -s none red:0,0 green:1,0 blue:2,0
  tileimg -o out.png -s none 75,0,0:0,0-4 150,0,0:1,0-4 225,0,0:2,0-4

spec format:
  Each <spec> is X,Y: the column and row of one tile. With the default
  4x4 grid, 1,1 draws this tile:

    +-----+-----+-----+-----+
    | 0,0 | 1,0 | 2,0 | 3,0 |
    +-----+-----+-----+-----+
    | 0,1 | 1,1 | 2,1 | 3,1 |
    +-----+-----+-----+-----+
    | 0,2 | 1,2 | 2,2 | 3,2 |
    +-----+-----+-----+-----+
    | 0,3 | 1,3 | 2,3 | 3,3 |
    +-----+-----+-----+-----+

  BEGIN-END on either axis joins tiles into one rectangle; 1-2,0-2
  draws one rectangle covering columns 1..2 of rows 0..2.

  COLOR:X,Y fills the tile with COLOR, a color name or an R,G,B
  triplet (0-255 each), overriding --fill-color.
"""


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting on bad input."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise ArgumentError(f"{message}\n{self.format_usage().rstrip()}")


class _VersionAction(argparse.Action):
    def __init__(self, option_strings, dest=argparse.SUPPRESS, **kwargs):
        super().__init__(option_strings, dest, nargs=0, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        print(VERSION_TEXT)
        parser.exit()


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="tileimg",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "specs",
        nargs="+",
        metavar="<spec>",
        help="tile spec: [COLOR:]X,Y where X and Y are N or BEGIN-END",
    )
    parser.add_argument("--version", action=_VersionAction, help="print version")

    # Image and grid (None -> config value)
    parser.add_argument("-W", "--width", type=int, help="image width [default: 200]")
    parser.add_argument("-H", "--height", type=int, help="image height [default: 200]")
    parser.add_argument("-c", "--column", type=int, help="tile columns [default: 4]")
    parser.add_argument("-r", "--row", type=int, help="tile rows [default: 4]")
    parser.add_argument("-p", "--pad", type=int, help="tile padding width [default: 5]")

    # Style
    parser.add_argument(
        "-b", "--background-color", help="background color [default: white]",
    )
    parser.add_argument("-s", "--stroke-color", help="stroke color [default: black]")
    parser.add_argument("-f", "--fill-color", help="fill color [default: none]")
    parser.add_argument("-l", "--line-width", type=float, help="line width [default: 2]")

    # Output and ambient
    parser.add_argument("-o", "--out", help="output file path [default: stdout]")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="logging level [default: WARNING]",
    )
    parser.add_argument(
        "--log-json", action="store_true", help="emit log lines as JSON",
    )
    parser.add_argument("--log-file", help="also write log lines to this file")
    return parser


def _overrides(args: argparse.Namespace) -> dict:
    """Nested config overrides for every option given on the command line."""
    mapping = {
        ("image", "width"): args.width,
        ("image", "height"): args.height,
        ("grid", "columns"): args.column,
        ("grid", "rows"): args.row,
        ("grid", "pad"): args.pad,
        ("style", "background"): args.background_color,
        ("style", "stroke"): args.stroke_color,
        ("style", "fill"): args.fill_color,
        ("style", "line_width"): args.line_width,
    }
    overrides: dict = {}
    for (section, key), value in mapping.items():
        if value is not None:
            overrides.setdefault(section, {})[key] = value
    return overrides


def main(
    argv: Optional[Sequence[str]] = None,
    stdout: Optional[BinaryIO] = None,
) -> int:
    """Run tileimg; return the process exit status.

    Parameters
    ----------
    argv : Sequence[str], optional
        Arguments without the program name; ``sys.argv[1:]`` when None.
    stdout : BinaryIO, optional
        Binary stream for the PNG when ``--out`` is not given;
        ``sys.stdout.buffer`` when None.
    """
    parser = build_parser()
    try:
        args = parser.parse_intermixed_args(argv)
    except ArgumentError as exc:
        print(f"tileimg: {exc}", file=sys.stderr)
        return exc.exit_code
    except SystemExit as exc:
        # --help / --version
        return exc.code if isinstance(exc.code, int) else EXIT_OK

    try:
        setup_logging(
            args.log_level,
            args.log_file,
            json=args.log_json,
            quiet_libs=["PIL"],
            context={"app": "tileimg"},
        )
    except OSError as exc:
        print(f"tileimg: cannot open log file: {exc}", file=sys.stderr)
        return FileError.exit_code

    try:
        config = load_config(args.config, _overrides(args))
        table = build_color_table()
        canvas = render_tiles(args.specs, config, table)
        data = encode_png(canvas)
        if args.out is None and stdout is None:
            stdout = sys.stdout.buffer
        write_output(data, path=args.out, stream=stdout)
    except TileImgError as exc:
        logger.debug("Run aborted", exc_info=True)
        print(f"tileimg: {exc}", file=sys.stderr)
        return exc.exit_code

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
