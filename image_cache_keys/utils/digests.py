"""
Digest providers for shortening cache-key fragments.
"""

from __future__ import annotations

import hashlib
from enum import Enum
from typing import Callable, Union


class InvalidHashFunction(ValueError):
    """Raised when a digest reference cannot be resolved to a callable."""


class DigestAlgorithm(str, Enum):
    """hashlib algorithms usable as cache-key digests."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    BLAKE2B = "blake2b"
    BLAKE2S = "blake2s"

    def hexdigest(self, text: str) -> str:
        return hashlib.new(self.value, text.encode("utf-8")).hexdigest()

    @property
    def digest_length(self) -> int:
        """Length of the hex digest in characters."""
        return hashlib.new(self.value).digest_size * 2


DigestFunction = Callable[[str], str]
DigestRef = Union[DigestAlgorithm, str, DigestFunction]


def resolve_digest(ref: DigestRef) -> DigestFunction:
    """
    Turn a digest reference into a ``str -> str`` callable.

    Accepts a DigestAlgorithm, an algorithm name such as ``"md5"`` (case-insensitive),
    or any callable. Anything else raises InvalidHashFunction.
    """
    if isinstance(ref, DigestAlgorithm):
        return ref.hexdigest
    if isinstance(ref, str):
        try:
            return DigestAlgorithm(ref.strip().lower()).hexdigest
        except ValueError as exc:
            raise InvalidHashFunction(f"Unknown digest algorithm: {ref!r}") from exc
    if callable(ref):
        return ref
    raise InvalidHashFunction(f"Digest reference is not callable: {ref!r}")
