"""Cross-cutting utilities (lowest dependency layer).

This package provides shared primitives for:
    - Config schema validation (validators)
    - Atomic file output and YAML loading (fs)
    - Unified logging (logging_config)

No module in utils/ may import from upper layers (grid, render, configs,
scripts).

Convenience imports:
    from tileimg.utils import fs, validators
    from tileimg.utils.logging_config import setup_logging, push_context
"""

from . import fs
from . import logging_config
from . import validators

from .logging_config import pop_context, push_context, setup_logging

__all__ = [
    # Modules
    'fs',
    'logging_config',
    'validators',
    # Direct exports
    'setup_logging',
    'push_context',
    'pop_context',
]
