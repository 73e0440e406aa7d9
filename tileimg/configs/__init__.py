"""Render configuration loading and validation."""

from tileimg.configs.loader import DEFAULTS_PATH, RenderConfig, load_config
from tileimg.errors import ConfigError

__all__ = [
    "ConfigError",
    "DEFAULTS_PATH",
    "RenderConfig",
    "load_config",
]
