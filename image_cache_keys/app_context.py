"""
Bootstrap helpers.

Responsibilities:
- Locate/load configuration.
- Configure logging.
- Build the cache key service from the loaded configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from image_cache_keys.config.loader import load_config
from image_cache_keys.logging.setup import setup_logging
from image_cache_keys.services.cache_key_service import CacheKeyService


@dataclass
class KeyContext:
    """Loaded configuration plus the service built from it."""

    config: dict[str, Any]
    config_path: Path | None
    log_path: Path | None
    service: CacheKeyService


def initialize_context(
    config_path: Path | None = None, log_dir: Path | None = None, configure_logging: bool = True
) -> KeyContext:
    """
    Load configuration, set up logging, and return a KeyContext.
    Without a config path the package defaults are used.
    """
    config = load_config(config_path)

    log_path: Path | None = None
    if configure_logging:
        log_path = setup_logging(log_dir=log_dir, level=str(config.get("logging", {}).get("level", "INFO")))

    return KeyContext(
        config=config,
        config_path=config_path,
        log_path=log_path,
        service=CacheKeyService.from_config(config),
    )
