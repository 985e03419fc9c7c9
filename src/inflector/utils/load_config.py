# src/inflector/utils/load_config.py

"""Load a JSON rule table from a data directory and run it through a validator.

Lookup order for the directory: explicit base_dir > INFLECTOR_DATA_DIR > the
packaged inflector/data/. Files may not escape that directory.

Used by Inflector.from_config() and english_inflector().
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

# --- optional json5 support (no hard dependency) -----------------------------
try:
    import json5 as _json5
except ImportError:  # pragma: no cover - only hit when json5 missing
    _json5 = None  # type: ignore[assignment]

# ── Public surface ────────────────────────────────────────────────────────────
Validator = Callable[[dict[str, Any]], dict[str, Any]]
__all__ = [
    "ENV_DATA_DIR",
    "PACKAGE_DATA_DIR",
    "load_config",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

ENV_DATA_DIR = "INFLECTOR_DATA_DIR"
PACKAGE_DATA_DIR = Path(__file__).resolve().parents[1] / "data"


# ── Exceptions ───────────────────────────────────────────────────────────────
class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested rule file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a rule file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON is not an object."""


log = logging.getLogger(__name__)


def _data_dir(base_dir: Path | None) -> Path:
    if base_dir is not None:
        return base_dir.resolve()
    env = os.environ.get(ENV_DATA_DIR)
    if env:
        return Path(os.path.expanduser(env)).resolve()
    return PACKAGE_DATA_DIR


def _resolve_path(file: str | os.PathLike[str], base_dir: Path | None) -> Path:
    """Map a logical name ('english') to <data>/english.json, staying inside data dir."""
    data_dir = _data_dir(base_dir)
    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def _read_json(path: Path, encoding: str, allow_comments: bool) -> Any:
    try:
        with path.open("r", encoding=encoding) as f:
            if allow_comments:
                if _json5 is None:
                    raise ConfigParseError(
                        "json5 requested (allow_comments=True) but not installed"
                    )
                return _json5.load(f)
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


def load_config(
    file: str | os.PathLike[str],
    *,
    validator: Validator,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    allow_comments: bool = False,
) -> dict[str, Any]:
    """
    Does: Read <data>/<file>.json, require a JSON object and pass it through `validator`.
    Returns: The validator's result.
    Raises: ConfigFileNotFound, ConfigParseError (bad JSON or validator failure),
            ConfigTypeError (top level is not an object).
    """
    path = _resolve_path(file, base_dir)
    data = _read_json(path, encoding, allow_comments)
    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    try:
        result = validator(data)
    except (ValueError, TypeError, KeyError) as e:
        raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
    log.debug("Config loaded: %s", path)
    return result
