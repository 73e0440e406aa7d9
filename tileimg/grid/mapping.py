"""Grid-to-pixel geometry.

Maps logical cells to padded pixel rectangles and merges range endpoints
into one spanning rectangle.

Cell size is ``canvas // count`` (truncating), so a canvas that does not
divide evenly leaves an unused strip on the right or bottom edge.

The merge is positional: the top-left corner comes from the start cell
and the bottom-right corner from the end cell.  A reversed range
(end cell before start cell) produces a reversed rectangle, which the
renderer draws as nothing.
"""

from __future__ import annotations

from tileimg.grid.types import CellCoord, CellRange, GridSpec, PixelRect


def cell_rect(cell: CellCoord, grid: GridSpec) -> PixelRect:
    """Return the padded pixel rectangle of one cell.

    No clamping is applied: cells outside the grid map to rectangles
    outside the canvas, and ``2 * pad >= cell size`` yields a degenerate
    rectangle.
    """
    cw = grid.cell_width
    ch = grid.cell_height
    return PixelRect(
        min_x=cell.col * cw + grid.pad,
        min_y=cell.row * ch + grid.pad,
        max_x=(cell.col + 1) * cw - grid.pad,
        max_y=(cell.row + 1) * ch - grid.pad,
    )


def merge_span(start: PixelRect, end: PixelRect) -> PixelRect:
    """Span from the top-left of *start* to the bottom-right of *end*."""
    return PixelRect(
        min_x=start.min_x,
        min_y=start.min_y,
        max_x=end.max_x,
        max_y=end.max_y,
    )


def range_rect(cells: CellRange, grid: GridSpec) -> PixelRect:
    """Map a cell range to its merged pixel rectangle."""
    return merge_span(cell_rect(cells.start, grid), cell_rect(cells.end, grid))
