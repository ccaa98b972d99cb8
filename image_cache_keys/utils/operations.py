"""
Canonical serialization of image operation sets into cache-key fragments.

A fragment is meant to be appended to a base filename so that every cached
variant of an image shares the base name, e.g.::

    my_horse.thumbnail+width-100+height-100.jpg

Operations are emitted in sorted order so the same content always yields the
same key, whatever order the caller built the mapping in.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from numbers import Complex, Number, Real
from typing import Any, Mapping

from image_cache_keys.utils.digests import DigestRef, resolve_digest

RESERVED_PATH_CHARS = frozenset('/\\:*?"<>|\0')


@dataclass(frozen=True)
class Separators:
    """Delimiters between operations, between a name and its params, and between a param and its value."""

    operations: str = "."
    params: str = "+"
    value: str = "-"

    def __post_init__(self) -> None:
        for field in fields(self):
            sep = getattr(self, field.name)
            if not isinstance(sep, str):
                raise ValueError(f"Separator {field.name!r} must be a string, got {type(sep).__name__}")
            bad = RESERVED_PATH_CHARS.intersection(sep)
            if bad:
                raise ValueError(f"Separator {field.name!r} contains path-reserved characters: {sorted(bad)}")

    def merged(self, overrides: Mapping[str, str] | None) -> "Separators":
        """Return a copy with the known keys of ``overrides`` applied; other keys are ignored."""
        if not overrides:
            return self
        known = {f.name for f in fields(self)}
        return replace(self, **{key: value for key, value in overrides.items() if key in known})


DEFAULT_SEPARATORS = Separators()


def _resolve_separators(separators: Separators | Mapping[str, str] | None) -> Separators:
    if isinstance(separators, Separators):
        return separators
    return DEFAULT_SEPARATORS.merged(separators)


def _is_number(value: Any) -> bool:
    # Decimal is a Number but not a Real; complex values and bools are excluded.
    if isinstance(value, bool):
        return False
    return isinstance(value, Real) or (isinstance(value, Number) and not isinstance(value, Complex))


def _is_scalar(value: Any) -> bool:
    return isinstance(value, str) or _is_number(value)


def _sort_key(name: Any) -> tuple[int, Any]:
    # Numeric names sort numerically ahead of string names.
    if _is_number(name):
        return (0, name)
    return (1, str(name))


def _operation_fragment(name: Any, params: Mapping[Any, Any], separators: Separators) -> str:
    parts = [f"{key}{separators.value}{value}" for key, value in params.items() if _is_scalar(value)]
    return f"{separators.operations}{name}{separators.params}{separators.params.join(parts)}"


def operations_to_string(
    operations: Mapping[Any, Any],
    separators: Separators | Mapping[str, str] | None = None,
    digest: DigestRef | None = None,
    *,
    legacy: bool = False,
) -> str:
    """
    Serialize ``operations`` (operation name -> parameter mapping) into a filename-safe string.

    Operations are visited in sorted name order; parameters keep the order they were given in
    and only string/number values are written. Entries whose parameters are not a mapping are
    skipped, except with ``legacy=True``: that layout keeps only the last operation in sorted
    order and writes non-mapping entries with empty parameters, matching keys produced by
    older releases.

    When ``digest`` is given and the result is non-empty, the digest of the result is returned
    instead. Raises InvalidHashFunction if ``digest`` cannot be resolved.
    """
    if not isinstance(operations, Mapping):
        raise TypeError(f"operations must be a mapping, got {type(operations).__name__}")
    seps = _resolve_separators(separators)

    fragments: list[str] = []
    for name in sorted(operations, key=_sort_key):
        params = operations[name]
        if not isinstance(params, Mapping):
            if not legacy:
                continue
            params = {}
        fragment = _operation_fragment(name, params, seps)
        if legacy:
            fragments = [fragment]
        else:
            fragments.append(fragment)

    result = "".join(fragments)
    if digest is not None and result:
        return resolve_digest(digest)(result)
    return result


def cache_filename(
    base_name: str,
    operations: Mapping[Any, Any],
    extension: str | None = None,
    separators: Separators | Mapping[str, str] | None = None,
    digest: DigestRef | None = None,
    *,
    legacy: bool = False,
) -> str:
    """
    Build the cached filename for ``base_name`` transformed by ``operations``.

    A hashed key is joined to the base name with the operations separator so that
    ``cache_filename("my_horse", ops, "jpg", digest="md5")`` gives ``my_horse.<md5>.jpg``.
    """
    key = operations_to_string(operations, separators, digest, legacy=legacy)
    seps = _resolve_separators(separators)
    if key and digest is not None:
        key = f"{seps.operations}{key}"
    name = f"{base_name}{key}"
    if extension:
        name = f"{name}.{extension.lstrip('.')}"
    return name
