"""Cell-spec tokenizer.

Grammar::

    TOKEN := INT | INT "-" INT
    CELLS := TOKEN "," TOKEN          (x-range comma y-range)

``INT`` is an unsigned decimal integer.  The hyphen is the range
separator, so negative coordinates cannot be written: ``"-3"`` splits
into an empty start and is rejected.

Usage::

    from tileimg.grid.spans import parse_cells
    cells = parse_cells("1-2,0")
    cells.corners()   # (1, 0, 2, 0)
"""

from __future__ import annotations

import re

from tileimg.errors import RectangleParseError
from tileimg.grid.types import CellRange

_INT_RE = re.compile(r"[0-9]+")


def _parse_int(text: str, token: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise RectangleParseError(
            f"invalid integer {text!r} in coordinate token {token!r}"
        )
    return int(text)


def parse_span(token: str) -> tuple[int, int]:
    """Parse ``"a"`` or ``"a-b"`` into ``(start, end)``.

    Parameters
    ----------
    token : str
        One axis of a cell spec.

    Returns
    -------
    tuple[int, int]
        ``(start, end)``; both equal for a scalar token.  No ordering is
        imposed, so ``"4-1"`` yields ``(4, 1)``.

    Raises
    ------
    RectangleParseError
        If a part is not an integer or the token holds more than one
        hyphen.
    """
    parts = token.split("-")
    if len(parts) == 1:
        value = _parse_int(parts[0], token)
        return value, value
    if len(parts) != 2:
        raise RectangleParseError(
            f"malformed range {token!r}: expected 'START-END'"
        )
    return _parse_int(parts[0], token), _parse_int(parts[1], token)


def parse_cells(text: str) -> CellRange:
    """Parse ``"XRANGE,YRANGE"`` into a ``CellRange``.

    Raises
    ------
    RectangleParseError
        If the comma is missing, repeated, or either range is malformed.
    """
    if "," not in text:
        raise RectangleParseError(
            f"cell spec {text!r} must be two comma separated values"
        )
    fields = text.split(",")
    if len(fields) != 2:
        raise RectangleParseError(
            f"cell spec {text!r} must be exactly two comma separated values, "
            f"got {len(fields)}"
        )
    x, x2 = parse_span(fields[0])
    y, y2 = parse_span(fields[1])
    return CellRange(start_col=x, end_col=x2, start_row=y, end_row=y2)
