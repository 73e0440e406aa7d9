"""Grid and pixel-space value types.

All types are immutable, slotted dataclasses.  None of them validate
their coordinates: a ``CellCoord`` may be negative or past the last
column, and a ``PixelRect`` may be degenerate or reversed.  Drawing code
treats such rectangles as empty.

Coordinates
-----------
Pixel space has its origin at the top-left corner, +X right, +Y down.
Rectangles are half-open: ``[min_x, max_x) x [min_y, max_y)``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GridSpec:
    """Canvas size, logical partition and cell padding for one run.

    Parameters
    ----------
    columns, rows : int
        Logical grid size.  Must be > 0.
    canvas_width, canvas_height : int
        Canvas size in pixels.  Must be > 0.
    pad : int
        Inward margin in pixels applied on every side of a cell.
    """

    columns: int
    rows: int
    canvas_width: int
    canvas_height: int
    pad: int = 0

    def __post_init__(self) -> None:
        if self.columns <= 0 or self.rows <= 0:
            raise ValueError(
                f"columns and rows must be > 0, got {self.columns}x{self.rows}"
            )
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError(
                "canvas size must be > 0, got "
                f"{self.canvas_width}x{self.canvas_height}"
            )
        if self.pad < 0:
            raise ValueError(f"pad must be >= 0, got {self.pad}")

    @property
    def cell_width(self) -> int:
        """Cell width in pixels (truncating division)."""
        return self.canvas_width // self.columns

    @property
    def cell_height(self) -> int:
        """Cell height in pixels (truncating division)."""
        return self.canvas_height // self.rows


@dataclass(frozen=True, slots=True)
class CellCoord:
    """Logical grid address."""

    col: int
    row: int


@dataclass(frozen=True, slots=True)
class CellRange:
    """Inclusive run of cells along both axes.

    ``start_* == end_*`` for a scalar token.
    """

    start_col: int
    end_col: int
    start_row: int
    end_row: int

    @property
    def start(self) -> CellCoord:
        return CellCoord(self.start_col, self.start_row)

    @property
    def end(self) -> CellCoord:
        return CellCoord(self.end_col, self.end_row)

    def corners(self) -> tuple[int, int, int, int]:
        """Return ``(x, y, x2, y2)``."""
        return self.start_col, self.start_row, self.end_col, self.end_row


@dataclass(frozen=True, slots=True)
class PixelRect:
    """Axis-aligned, half-open rectangle in pixel space."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    @property
    def is_empty(self) -> bool:
        """True for degenerate or reversed rectangles."""
        return self.min_x >= self.max_x or self.min_y >= self.max_y
