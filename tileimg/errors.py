"""Exception taxonomy for tileimg.

Every failure that can end a run derives from ``TileImgError`` and carries
the process exit status the CLI reports for it.  All errors are terminal:
the first one raised aborts the run before any output is written.

Exit codes::

    0  success
    1  ArgumentError / ConfigError
    2  FileError
    3  RectangleParseError
    4  EncodeError
    5  ColorParseError
"""

from __future__ import annotations

EXIT_OK = 0


class TileImgError(Exception):
    """Base class for all tileimg errors."""

    exit_code: int = 1


class ArgumentError(TileImgError):
    """Raised for a malformed command-line invocation."""

    exit_code = 1


class ConfigError(ArgumentError):
    """Raised when a configuration file or value fails validation."""

    pass


class FileError(TileImgError):
    """Raised when the output destination cannot be created or written."""

    exit_code = 2


class RectangleParseError(TileImgError):
    """Raised when a cell spec violates the ``XRANGE,YRANGE`` grammar."""

    exit_code = 3


class EncodeError(TileImgError):
    """Raised when the canvas cannot be serialized to PNG."""

    exit_code = 4


class ColorParseError(TileImgError):
    """Raised for an unknown color name or a malformed ``R,G,B`` triplet."""

    exit_code = 5
