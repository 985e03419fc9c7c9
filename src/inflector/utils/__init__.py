# src/inflector/utils/__init__.py
"""

Does: Provide rule-table loading for the inflector.
Returns: Public API via load_config and its error types.
Used by: Inflector.from_config(), english_inflector(), tests.
"""

from __future__ import annotations

from .load_config import (
    PACKAGE_DATA_DIR,
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    load_config,
)

__all__ = [
    "load_config",
    "PACKAGE_DATA_DIR",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]
