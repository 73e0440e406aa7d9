"""Color lookup.

Provides:
    - An immutable name -> RGBA table built once per process
    - The ``none`` sentinel (``NO_COLOR``) meaning "do not paint"
    - Resolution of a color token: table name first, then ``"R,G,B"``

The table is passed explicitly to every resolution call site; there is
no module-level lookup hidden behind ``resolve_color``.

Names come from Pillow's CSS color map (``white``, ``black``, ``red``,
``green`` = ``(0, 128, 0)``, ...).  ``none`` maps to ``NO_COLOR``, which is
distinct from a lookup miss: an unknown name is a ``ColorParseError``.

Usage::

    table = build_color_table()
    resolve_color("red", table)      # (255, 0, 0, 255)
    resolve_color("75,0,0", table)   # (75, 0, 0, 255)
    resolve_color("none", table)     # None
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Optional

from PIL import ImageColor

from tileimg.errors import ColorParseError

RGBA = tuple[int, int, int, int]
"""8-bit straight-alpha color."""

Color = Optional[RGBA]
"""A paintable color, or ``NO_COLOR``."""

NO_COLOR: Color = None
NONE_NAME = "none"

_CHANNEL_RE = re.compile(r"[0-9]{1,3}")


def build_color_table() -> Mapping[str, Color]:
    """Build the read-only name -> color table.

    Returns
    -------
    Mapping[str, Color]
        ``MappingProxyType`` over the table, including ``"none"``.
    """
    table: dict[str, Color] = {
        name: ImageColor.getcolor(name, "RGBA")
        for name in ImageColor.colormap
    }
    table[NONE_NAME] = NO_COLOR
    return MappingProxyType(table)


def parse_triplet(text: str) -> RGBA:
    """Parse ``"R,G,B"`` (decimal, each 0-255) into an opaque RGBA color.

    Raises
    ------
    ColorParseError
        If there are not exactly three channels or a channel is not an
        integer in range.
    """
    parts = text.split(",")
    if len(parts) != 3:
        raise ColorParseError(
            f"color {text!r} is neither a known name nor an 'R,G,B' triplet"
        )
    channels = []
    for part in parts:
        if not _CHANNEL_RE.fullmatch(part) or int(part) > 255:
            raise ColorParseError(
                f"invalid channel {part!r} in color {text!r}: expected 0-255"
            )
        channels.append(int(part))
    r, g, b = channels
    return r, g, b, 255


def resolve_color(token: str, table: Mapping[str, Color]) -> Color:
    """Resolve a color name or ``"R,G,B"`` triplet.

    Returns ``NO_COLOR`` for ``"none"``.

    Raises
    ------
    ColorParseError
        If *token* is neither in *table* nor a valid triplet.
    """
    key = token.strip().lower()
    if key in table:
        return table[key]
    if "," in key:
        return parse_triplet(key)
    raise ColorParseError(f"unknown color name {token!r}")
