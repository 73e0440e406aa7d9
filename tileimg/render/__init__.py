"""
Rendering module.

Pixel buffer, color lookup, rectangle rasterization, the render loop and
PNG output.
"""

from tileimg.render.canvas import Canvas
from tileimg.render.colors import (
    NO_COLOR,
    build_color_table,
    parse_triplet,
    resolve_color,
)
from tileimg.render.encoder import decode_png, encode_png, write_output
from tileimg.render.pipeline import TileArg, parse_tile_arg, render_tiles
from tileimg.render.rectangle import DrawSpec, draw_rectangle, stroke_pixels

__all__ = [
    "NO_COLOR",
    "Canvas",
    "DrawSpec",
    "TileArg",
    "build_color_table",
    "decode_png",
    "draw_rectangle",
    "encode_png",
    "parse_tile_arg",
    "parse_triplet",
    "render_tiles",
    "resolve_color",
    "stroke_pixels",
    "write_output",
]
