"""Filled, stroked rectangle rasterization.

Draw order within one rectangle:
    1. Fill ``[min_x, max_x) x [min_y, max_y)`` with the fill color.
    2. Overwrite a border band ``round(line_width)`` pixels thick along all
       four edges with the stroke color.

Either color may be ``NO_COLOR`` to skip that step.  Border pixels win
over fill pixels.  Rectangles are painted in call order, so the last
rectangle drawn wins wherever two overlap.

Empty or reversed rectangles draw nothing and raise nothing.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from tileimg.grid.types import PixelRect
from tileimg.render.canvas import Canvas
from tileimg.render.colors import NO_COLOR, Color

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DrawSpec:
    """One rectangle to paint.

    Parameters
    ----------
    rect : PixelRect
        Target rectangle (half-open).
    fill_color, stroke_color : Color
        RGBA colors, or ``NO_COLOR`` to skip.
    line_width : float
        Stroke width in pixels, rounded half-up when drawn.
    """

    rect: PixelRect
    fill_color: Color = NO_COLOR
    stroke_color: Color = NO_COLOR
    line_width: float = 0.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.line_width) or self.line_width < 0:
            raise ValueError(
                f"line_width must be finite and >= 0, got {self.line_width}"
            )


def stroke_pixels(line_width: float) -> int:
    """Round a line width to a whole pixel count (half-up)."""
    return int(math.floor(line_width + 0.5))


def draw_rectangle(canvas: Canvas, spec: DrawSpec) -> None:
    """Paint *spec* onto *canvas* in place."""
    r = spec.rect
    if r.is_empty:
        logger.debug("Skipping empty rectangle %s", r)
        return

    if spec.fill_color is not NO_COLOR:
        canvas.fill_rect(r.min_x, r.min_y, r.max_x, r.max_y, spec.fill_color)

    width = stroke_pixels(spec.line_width)
    if spec.stroke_color is NO_COLOR or width <= 0:
        return

    color = spec.stroke_color
    # Bands are clamped to the rectangle so a wide stroke never spills out.
    top = min(r.min_y + width, r.max_y)
    bottom = max(r.max_y - width, r.min_y)
    left = min(r.min_x + width, r.max_x)
    right = max(r.max_x - width, r.min_x)
    canvas.fill_rect(r.min_x, r.min_y, r.max_x, top, color)
    canvas.fill_rect(r.min_x, bottom, r.max_x, r.max_y, color)
    canvas.fill_rect(r.min_x, r.min_y, left, r.max_y, color)
    canvas.fill_rect(right, r.min_y, r.max_x, r.max_y, color)
