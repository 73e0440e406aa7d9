"""Render loop: tile arguments -> painted canvas.

A tile argument is ``[COLOR:]XRANGE,YRANGE``.  For each argument, in
order:

    cells  = parse_cells(XRANGE,YRANGE)
    rect   = merge_span(cell_rect(start), cell_rect(end))
    draw_rectangle(canvas, DrawSpec(rect, fill, stroke, line_width))

The canvas is background-filled once before the first argument.  The
first error aborts the loop; callers encode only after a full render.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from tileimg.configs.loader import RenderConfig
from tileimg.errors import RectangleParseError
from tileimg.grid.mapping import range_rect
from tileimg.grid.spans import parse_cells
from tileimg.grid.types import CellRange
from tileimg.render.canvas import Canvas
from tileimg.render.colors import Color, resolve_color
from tileimg.render.rectangle import DrawSpec, draw_rectangle

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TileArg:
    """A parsed tile argument."""

    cells: CellRange
    fill_color: Color


def parse_tile_arg(
    text: str, default_fill: Color, table: Mapping[str, Color]
) -> TileArg:
    """Parse ``[COLOR:]XRANGE,YRANGE``.

    The inline color, when present, replaces *default_fill*.  It is
    resolved before the cell spec is parsed.

    Raises
    ------
    ColorParseError
        If the inline color is unknown or malformed.
    RectangleParseError
        If the cell spec is malformed or holds more than one ``:``.
    """
    if ":" in text:
        parts = text.split(":")
        if len(parts) != 2:
            raise RectangleParseError(
                f"tile argument {text!r} must be 'COLOR:X,Y'"
            )
        color_token, cells_token = parts
        fill = resolve_color(color_token, table)
    else:
        fill = default_fill
        cells_token = text
    return TileArg(cells=parse_cells(cells_token), fill_color=fill)


def render_tiles(
    args: Iterable[str],
    config: RenderConfig,
    table: Mapping[str, Color],
) -> Canvas:
    """Render *args* onto a fresh canvas described by *config*.

    Returns
    -------
    Canvas
        Background-filled canvas with every tile painted in input order.

    Raises
    ------
    ColorParseError, RectangleParseError
        On the first malformed color or cell spec.
    """
    background = resolve_color(config.background_color, table)
    stroke = resolve_color(config.stroke_color, table)
    default_fill = resolve_color(config.fill_color, table)

    grid = config.grid
    canvas = Canvas(grid.canvas_width, grid.canvas_height)
    canvas.fill(background)

    count = 0
    for text in args:
        tile = parse_tile_arg(text, default_fill, table)
        rect = range_rect(tile.cells, grid)
        logger.debug("Tile %r -> cells %s -> %s", text, tile.cells.corners(), rect)
        draw_rectangle(
            canvas,
            DrawSpec(
                rect=rect,
                fill_color=tile.fill_color,
                stroke_color=stroke,
                line_width=config.line_width,
            ),
        )
        count += 1

    logger.info(
        "Rendered %d tile(s) on %dx%d canvas (%dx%d grid)",
        count, grid.canvas_width, grid.canvas_height, grid.columns, grid.rows,
    )
    return canvas
