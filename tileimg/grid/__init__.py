"""
Grid geometry module.

Tokenizes cell specs and maps logical grid cells and ranges to padded
pixel rectangles.
"""

from tileimg.grid.mapping import cell_rect, merge_span, range_rect
from tileimg.grid.spans import parse_cells, parse_span
from tileimg.grid.types import CellCoord, CellRange, GridSpec, PixelRect

__all__ = [
    "CellCoord",
    "CellRange",
    "GridSpec",
    "PixelRect",
    "cell_rect",
    "merge_span",
    "parse_cells",
    "parse_span",
    "range_rect",
]
