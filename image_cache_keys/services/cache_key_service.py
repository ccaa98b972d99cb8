"""
Cache key service bound to one separator/digest configuration.

Used by storage layers that name cached image variants: it keeps the configured
separators, digest and key layout in one place so every caller derives identical names.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from image_cache_keys.utils.digests import DigestAlgorithm, DigestRef, resolve_digest
from image_cache_keys.utils.hashing import DEFAULT_HASH_LENGTH, hash_image_operations, hash_operations
from image_cache_keys.utils.imaging import Orientation, read_orientation
from image_cache_keys.utils.operations import DEFAULT_SEPARATORS, Separators, cache_filename, operations_to_string

LOGGER = logging.getLogger(__name__)


class CacheKeyService:
    """Derives cache keys and filenames for transformed images."""

    def __init__(
        self,
        separators: Separators = DEFAULT_SEPARATORS,
        digest: DigestRef = DigestAlgorithm.MD5,
        hash_length: int = DEFAULT_HASH_LENGTH,
        legacy: bool = False,
    ) -> None:
        if hash_length < 1:
            raise ValueError(f"hash_length must be positive, got {hash_length}")
        resolve_digest(digest)
        self.separators = separators
        self.digest = digest
        self.hash_length = hash_length
        self.legacy = legacy

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "CacheKeyService":
        """Build a service from the ``cache_keys`` section of a loaded config."""
        section = config.get("cache_keys", {}) if isinstance(config, Mapping) else {}
        separators = DEFAULT_SEPARATORS.merged(section.get("separators") or {})
        return cls(
            separators=separators,
            digest=str(section.get("digest", DigestAlgorithm.MD5.value)),
            hash_length=int(section.get("hash_length", DEFAULT_HASH_LENGTH)),
            legacy=bool(section.get("legacy", False)),
        )

    def key_for(self, operations: Mapping[Any, Any]) -> str:
        """Readable key fragment, e.g. ``.thumbnail+width-100+height-100``."""
        return operations_to_string(operations, self.separators, legacy=self.legacy)

    def hashed_key_for(self, operations: Mapping[Any, Any]) -> str:
        """Digest of the key fragment cut to ``hash_length``; empty for an empty operation set."""
        return hash_operations(
            operations, self.hash_length, self.digest, separators=self.separators, legacy=self.legacy
        )

    def filename_for(
        self, base_name: str, operations: Mapping[Any, Any], extension: str | None = None, hashed: bool = False
    ) -> str:
        if not hashed:
            return cache_filename(base_name, operations, extension, self.separators, legacy=self.legacy)
        key = self.hashed_key_for(operations)
        name = f"{base_name}{self.separators.operations}{key}" if key else base_name
        if extension:
            name = f"{name}.{extension.lstrip('.')}"
        LOGGER.debug("Hashed cache filename for %s: %s", base_name, name)
        return name

    def hash_table(self, image_sizes: Mapping[str, Mapping[str, Mapping[Any, Any]]]) -> dict[str, dict[str, str]]:
        table = hash_image_operations(
            image_sizes, self.hash_length, self.digest, separators=self.separators, legacy=self.legacy
        )
        LOGGER.info(
            "Hashed %d size configurations across %d models",
            sum(len(configs) for configs in table.values()),
            len(table),
        )
        return table

    def orientation_for(self, path: str | Path) -> Orientation:
        orientation = read_orientation(path)
        if orientation.parse_failed:
            LOGGER.info("Treating %s as unrotated: EXIF could not be parsed", path)
        return orientation
