"""Filesystem helpers: atomic writes and YAML loading.

Provides:
    - Atomic writes: tmp file -> fsync -> rename (no partial images),
      following symlinks and writing devices such as /dev/stdout in place
    - Safe YAML loading for configuration files

Parent directories are never created: writing into a missing directory
is an error the caller reports.

Usage:
    from tileimg.utils import fs
    fs.atomic_write_bytes("out.png", png_bytes)
    cfg = fs.load_yaml("tileimg.yaml")
"""

import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml


def atomic_write_bytes(
    path: Union[str, Path],
    data: bytes,
    tmp_suffix: str = ".tmp"
) -> None:
    """Write bytes to file atomically (tmp -> fsync -> rename).

    Parameters
    ----------
    path : Union[str, Path]
        Target file path
    data : bytes
        Data to write
    tmp_suffix : str
        Temporary file suffix, default ".tmp"

    Raises
    ------
    OSError
        If the temporary file cannot be written or renamed.  The
        temporary file is removed first.

    Notes
    -----
    Symlinks are followed: the file they point to is replaced, not the
    link.  An existing target that is neither a regular file nor a
    directory (a device such as ``/dev/stdout``, a FIFO) cannot be
    renamed over, so it is written directly.

    The temporary file lives next to the resolved target so the rename
    stays on one filesystem.
    """
    requested = Path(path)

    if requested.exists() and not requested.is_file() and not requested.is_dir():
        try:
            with open(requested, 'wb') as f:
                f.write(data)
                f.flush()
        except OSError as e:
            raise OSError(f"Failed to write {requested}: {e.strerror or e}") from e
        return

    path = requested.resolve()
    tmp_path = path.with_name(path.name + tmp_suffix)

    try:
        with open(tmp_path, 'wb') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())

        # Overwrites an existing target on POSIX
        tmp_path.replace(path)
    except OSError as e:
        if tmp_path.exists():
            tmp_path.unlink()
        raise OSError(f"Failed to write {requested}: {e.strerror or e}") from e


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """Load YAML file safely.

    Parameters
    ----------
    path : Union[str, Path]
        YAML file path

    Returns
    -------
    Dict[str, Any]
        Parsed YAML content (``None`` for an empty document)

    Raises
    ------
    FileNotFoundError
        If file doesn't exist
    yaml.YAMLError
        If YAML parsing fails
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Failed to parse YAML file {path}: {e}") from e
