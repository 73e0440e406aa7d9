"""PNG serialization and output.

The canvas is encoded fully in memory before anything touches the
destination, so a failed run never leaves a partial image behind.  File
output goes through ``fs.atomic_write_bytes`` (tmp -> fsync -> rename).
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from tileimg.errors import EncodeError, FileError
from tileimg.render.canvas import Canvas
from tileimg.utils import fs

logger = logging.getLogger(__name__)


def encode_png(canvas: Canvas) -> bytes:
    """Serialize *canvas* as an RGBA PNG.

    Raises
    ------
    EncodeError
        If Pillow fails to encode the buffer.
    """
    buf = io.BytesIO()
    try:
        canvas.to_image().save(buf, format="PNG")
    except (OSError, ValueError) as exc:
        raise EncodeError(f"failed to encode PNG: {exc}") from exc
    data = buf.getvalue()
    logger.debug(
        "Encoded %dx%d canvas to %d bytes", canvas.width, canvas.height, len(data)
    )
    return data


def decode_png(data: bytes) -> Canvas:
    """Decode PNG bytes back into a ``Canvas`` (converted to RGBA).

    Raises
    ------
    EncodeError
        If *data* is not a readable image.
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            pixels = np.asarray(img.convert("RGBA"), dtype=np.uint8)
    except (UnidentifiedImageError, OSError) as exc:
        raise EncodeError(f"failed to decode PNG: {exc}") from exc
    return Canvas.from_array(pixels)


def write_output(
    data: bytes,
    path: Optional[Union[str, Path]] = None,
    stream: Optional[BinaryIO] = None,
) -> None:
    """Write encoded image bytes to *path*, or to *stream* when no path.

    Raises
    ------
    FileError
        If the destination cannot be written.
    """
    if path is not None:
        try:
            fs.atomic_write_bytes(path, data)
        except OSError as exc:
            raise FileError(str(exc)) from exc
        logger.info("Wrote %d bytes to %s", len(data), path)
        return

    if stream is None:
        raise FileError("no output path or stream given")
    try:
        stream.write(data)
        stream.flush()
    except OSError as exc:
        raise FileError(f"failed to write image to stream: {exc}") from exc
