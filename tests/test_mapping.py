"""Tests for grid-to-pixel geometry.

Tests for tileimg.grid.mapping and tileimg.grid.types:
    - Default layout (200x200 canvas, 4x4 grid, pad 5)
    - Cell size independence from the other axis
    - Truncating cell size for uneven canvases
    - Positional range merge, including reversed ranges
    - Degenerate padding and out-of-grid cells (no clamping)
    - GridSpec validation

Run:
    pytest tests/test_mapping.py -v
"""

from __future__ import annotations

import pytest

from tileimg.grid.mapping import cell_rect, merge_span, range_rect
from tileimg.grid.spans import parse_cells
from tileimg.grid.types import CellCoord, GridSpec, PixelRect


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def grid() -> GridSpec:
    """Default 200x200 canvas, 4x4 grid, 5 px padding."""
    return GridSpec(columns=4, rows=4, canvas_width=200, canvas_height=200, pad=5)


# ---------------------------------------------------------------------------
# cell_rect
# ---------------------------------------------------------------------------


class TestCellRect:
    def test_origin_cell(self, grid: GridSpec) -> None:
        assert cell_rect(CellCoord(0, 0), grid) == PixelRect(5, 5, 45, 45)

    def test_last_cell(self, grid: GridSpec) -> None:
        assert cell_rect(CellCoord(3, 3), grid) == PixelRect(155, 155, 195, 195)

    def test_no_padding_tiles_canvas(self) -> None:
        g = GridSpec(columns=2, rows=2, canvas_width=100, canvas_height=60)
        assert cell_rect(CellCoord(1, 1), g) == PixelRect(50, 30, 100, 60)

    @pytest.mark.parametrize(
        "columns,rows,width,height,pad",
        [
            (4, 4, 200, 200, 5),
            (3, 7, 100, 90, 2),
            (5, 2, 333, 77, 0),
            (1, 1, 10, 10, 1),
        ],
    )
    def test_size_independent_of_other_axis(
        self, columns: int, rows: int, width: int, height: int, pad: int
    ) -> None:
        g = GridSpec(columns=columns, rows=rows, canvas_width=width,
                     canvas_height=height, pad=pad)
        for col in range(columns):
            for row in range(rows):
                r = cell_rect(CellCoord(col, row), g)
                assert r.width == width // columns - 2 * pad
                assert r.height == height // rows - 2 * pad

    def test_truncating_cell_size(self) -> None:
        g = GridSpec(columns=3, rows=3, canvas_width=100, canvas_height=100)
        assert g.cell_width == 33
        assert cell_rect(CellCoord(2, 0), g).max_x == 99

    def test_degenerate_padding(self) -> None:
        g = GridSpec(columns=4, rows=4, canvas_width=40, canvas_height=40, pad=5)
        r = cell_rect(CellCoord(0, 0), g)
        assert r == PixelRect(5, 5, 5, 5)
        assert r.is_empty

    def test_out_of_grid_not_clamped(self, grid: GridSpec) -> None:
        assert cell_rect(CellCoord(5, 0), grid) == PixelRect(255, 5, 295, 45)
        assert cell_rect(CellCoord(-1, 0), grid) == PixelRect(-45, 5, -5, 45)


# ---------------------------------------------------------------------------
# merge_span / range_rect
# ---------------------------------------------------------------------------


class TestSpanMerge:
    def test_merge_is_positional(self) -> None:
        start = PixelRect(10, 20, 30, 40)
        end = PixelRect(0, 0, 5, 5)
        assert merge_span(start, end) == PixelRect(10, 20, 5, 5)

    def test_horizontal_range(self, grid: GridSpec) -> None:
        r = range_rect(parse_cells("1-2,0"), grid)
        assert (r.min_x, r.min_y) == (55, 5)
        assert (r.max_x, r.max_y) == (145, 45)

    def test_block_range(self, grid: GridSpec) -> None:
        r = range_rect(parse_cells("1-2,0-3"), grid)
        assert r == PixelRect(55, 5, 145, 195)

    def test_scalar_range_equals_cell(self, grid: GridSpec) -> None:
        assert range_rect(parse_cells("2,1"), grid) == cell_rect(CellCoord(2, 1), grid)

    def test_reversed_range_is_empty(self, grid: GridSpec) -> None:
        r = range_rect(parse_cells("2-1,0"), grid)
        assert r.min_x > r.max_x
        assert r.is_empty


# ---------------------------------------------------------------------------
# GridSpec validation
# ---------------------------------------------------------------------------


class TestGridSpec:
    @pytest.mark.parametrize("columns,rows", [(0, 4), (4, 0), (-1, 4)])
    def test_non_positive_partition(self, columns: int, rows: int) -> None:
        with pytest.raises(ValueError, match="columns and rows"):
            GridSpec(columns=columns, rows=rows, canvas_width=10, canvas_height=10)

    def test_non_positive_canvas(self) -> None:
        with pytest.raises(ValueError, match="canvas size"):
            GridSpec(columns=1, rows=1, canvas_width=0, canvas_height=10)

    def test_negative_pad(self) -> None:
        with pytest.raises(ValueError, match="pad"):
            GridSpec(columns=1, rows=1, canvas_width=10, canvas_height=10, pad=-1)

    def test_frozen(self, grid: GridSpec) -> None:
        with pytest.raises(AttributeError):
            grid.pad = 0  # type: ignore[misc]
