"""Configuration loader for tileimg.

Loads ``defaults.yaml`` (shipped alongside this module), merges an
optional user file and explicit overrides over it, validates the result
against the ``tileimg.v1`` schema and returns a frozen ``RenderConfig``.

Precedence (highest first): overrides, user file, shipped defaults.

Usage::

    from tileimg.configs.loader import load_config
    cfg = load_config()                                  # defaults
    cfg = load_config("my.yaml")                         # user file
    cfg = load_config(overrides={"grid": {"columns": 8}})
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from tileimg.errors import ConfigError
from tileimg.grid.types import GridSpec
from tileimg.utils.fs import load_yaml
from tileimg.utils.validators import TileImgConfigV1

logger = logging.getLogger(__name__)

DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"


# ---------------------------------------------------------------------------
# Runtime config
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RenderConfig:
    """Everything one render needs besides the tile arguments.

    Colors stay unresolved tokens here; they are resolved against the
    color table when rendering starts.
    """

    grid: GridSpec
    background_color: str
    stroke_color: str
    fill_color: str
    line_width: float


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _deep_merge(base: dict[str, Any], update: Mapping[str, Any]) -> dict[str, Any]:
    """Return *base* with *update* merged in, recursing into dicts."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_document(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")
    try:
        data = load_yaml(path)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read configuration file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration file {path} must hold a mapping, got {type(data).__name__}"
        )
    return data


def _format_validation_error(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        problems.append(f"{loc}: {err['msg']}")
    return "; ".join(problems)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(
    path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> RenderConfig:
    """Load and validate the render configuration.

    Parameters
    ----------
    path : str | Path | None
        User YAML file merged over the shipped defaults.  ``None`` uses
        the defaults alone.
    overrides : Mapping | None
        Nested values (same layout as the YAML) applied last, e.g. from
        command-line options.

    Returns
    -------
    RenderConfig
        Validated, frozen configuration.

    Raises
    ------
    ConfigError
        If a file is missing or unreadable, or any value fails
        validation.
    """
    data = _read_document(DEFAULTS_PATH)
    if path is not None:
        path = Path(path)
        logger.info("Loading configuration from %s", path)
        data = _deep_merge(data, _read_document(path))
    if overrides:
        data = _deep_merge(data, overrides)

    try:
        doc = TileImgConfigV1(**data)
    except ValidationError as exc:
        raise ConfigError(
            f"Invalid configuration: {_format_validation_error(exc)}"
        ) from exc

    config = RenderConfig(
        grid=GridSpec(
            columns=doc.grid.columns,
            rows=doc.grid.rows,
            canvas_width=doc.image.width,
            canvas_height=doc.image.height,
            pad=doc.grid.pad,
        ),
        background_color=doc.style.background,
        stroke_color=doc.style.stroke,
        fill_color=doc.style.fill,
        line_width=doc.style.line_width,
    )
    logger.debug("Configuration: %s", config)
    return config
