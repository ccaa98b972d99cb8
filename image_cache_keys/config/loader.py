"""
Configuration loader for image_cache_keys.

The optional TOML file overrides the ``[cache_keys]`` section (digest, hash_length,
legacy, and ``[cache_keys.separators]``) and the ``[logging]`` level; anything it
leaves out keeps the value from ``config/defaults.py``.
"""

from __future__ import annotations

import copy
import tomllib
from pathlib import Path
from typing import Any

from image_cache_keys.config.defaults import DEFAULTS


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge two dictionaries without mutating the originals."""
    merged: dict[str, Any] = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_config(path: Path | None = None) -> dict[str, Any]:
    """
    Return the cache key settings from ``path`` merged over DEFAULTS.
    No path or a missing file returns a copy of DEFAULTS; malformed TOML raises ValueError.
    """
    if path is None:
        return copy.deepcopy(DEFAULTS)
    if path.is_dir():
        raise IsADirectoryError(f"Config path points to a directory: {path}")

    user_config: dict[str, Any] = {}
    if path.exists():
        try:
            with path.open("rb") as fh:
                user_config = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:  # pragma: no cover - exercised via tests
            raise ValueError(f"Invalid config file {path}: {exc}") from exc

    return _deep_merge(DEFAULTS, user_config)
