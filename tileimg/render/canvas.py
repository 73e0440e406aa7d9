"""RGBA pixel buffer.

The canvas is a ``(H, W, 4)`` uint8 numpy array owned by one renderer.
Writes outside the buffer are ignored; rectangle fills are clipped to the
canvas, and empty or reversed regions are no-ops.

A fresh canvas is fully transparent (all zeros).
"""

from __future__ import annotations

import logging

import numpy as np
from PIL import Image

from tileimg.render.colors import RGBA, Color

logger = logging.getLogger(__name__)


class Canvas:
    """Mutable RGBA raster with get/set-pixel and clipped fills.

    Parameters
    ----------
    width, height : int
        Size in pixels, both > 0.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be > 0, got {width}x{height}")
        self._pixels = np.zeros((height, width, 4), dtype=np.uint8)

    @classmethod
    def from_array(cls, pixels: np.ndarray) -> "Canvas":
        """Wrap a copy of an existing ``(H, W, 4)`` uint8 array."""
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"expected (H, W, 4) array, got {pixels.shape}")
        canvas = cls(pixels.shape[1], pixels.shape[0])
        canvas._pixels[...] = pixels.astype(np.uint8, copy=False)
        return canvas

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def pixels(self) -> np.ndarray:
        """The underlying ``(H, W, 4)`` array (not a copy)."""
        return self._pixels

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> RGBA:
        """Return the color at ``(x, y)``.

        Raises
        ------
        IndexError
            If ``(x, y)`` is outside the canvas.
        """
        if not self.contains(x, y):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas"
            )
        r, g, b, a = (int(c) for c in self._pixels[y, x])
        return r, g, b, a

    def set_pixel(self, x: int, y: int, color: RGBA) -> None:
        """Set one pixel; a no-op outside the canvas."""
        if self.contains(x, y):
            self._pixels[y, x] = color

    def fill_rect(
        self, min_x: int, min_y: int, max_x: int, max_y: int, color: RGBA
    ) -> None:
        """Fill ``[min_x, max_x) x [min_y, max_y)``, clipped to the canvas."""
        x0 = max(min_x, 0)
        y0 = max(min_y, 0)
        x1 = min(max_x, self.width)
        y1 = min(max_y, self.height)
        if x0 >= x1 or y0 >= y1:
            return
        self._pixels[y0:y1, x0:x1] = color

    def fill(self, color: Color) -> None:
        """Background fill: overwrite every pixel with *color*.

        ``NO_COLOR`` leaves the buffer untouched.
        """
        if color is None:
            logger.debug("Background is 'none'; leaving canvas transparent")
            return
        self._pixels[...] = color

    def to_image(self) -> Image.Image:
        """Return a Pillow RGBA image sharing no memory with the canvas."""
        return Image.fromarray(self._pixels.copy())
