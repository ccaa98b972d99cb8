"""
Batch hashing of named image size configurations into short cache identifiers.
"""

from __future__ import annotations

from typing import Any, Mapping

from image_cache_keys.utils.digests import DigestAlgorithm, DigestRef
from image_cache_keys.utils.operations import Separators, operations_to_string

DEFAULT_HASH_LENGTH = 8


def hash_operations(
    operations: Mapping[Any, Any],
    hash_length: int = DEFAULT_HASH_LENGTH,
    digest: DigestRef = DigestAlgorithm.MD5,
    *,
    separators: Separators | Mapping[str, str] | None = None,
    legacy: bool = False,
) -> str:
    """Digest one operation set and keep the first ``hash_length`` characters."""
    if hash_length < 1:
        raise ValueError(f"hash_length must be positive, got {hash_length}")
    return operations_to_string(operations, separators, digest, legacy=legacy)[:hash_length]


def hash_image_operations(
    image_sizes: Mapping[str, Mapping[str, Mapping[Any, Any]]],
    hash_length: int = DEFAULT_HASH_LENGTH,
    digest: DigestRef = DigestAlgorithm.MD5,
    *,
    separators: Separators | Mapping[str, str] | None = None,
    legacy: bool = False,
) -> dict[str, dict[str, str]]:
    """
    Map ``{model: {config_name: operations}}`` to ``{model: {config_name: digest_prefix}}``.

    The input is left untouched. A ``hash_length`` beyond the digest size returns the
    whole digest; an empty operation set yields an empty string.
    """
    return {
        model: {
            name: hash_operations(operations, hash_length, digest, separators=separators, legacy=legacy)
            for name, operations in configs.items()
        }
        for model, configs in image_sizes.items()
    }
