"""
Default configuration values.
"""

from __future__ import annotations

DEFAULTS: dict[str, object] = {
    "cache_keys": {
        "digest": "md5",
        "hash_length": 8,
        "legacy": False,
        "separators": {"operations": ".", "params": "+", "value": "-"},
    },
    "logging": {"level": "info"},
}
