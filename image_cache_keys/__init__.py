"""image_cache_keys

Deterministic, filename-safe cache keys for image transformation pipelines,
plus EXIF orientation reading.

Primary entrypoints:
 - utils/operations.py (operation set serializer, cached filenames)
 - utils/hashing.py (batch digests of size configurations)
 - utils/imaging.py (EXIF orientation)
 - services/cache_key_service.py (config-bound service)
"""

from image_cache_keys.utils.digests import DigestAlgorithm, InvalidHashFunction
from image_cache_keys.utils.hashing import hash_image_operations, hash_operations
from image_cache_keys.utils.imaging import Orientation, OrientationStatus, read_orientation
from image_cache_keys.utils.operations import Separators, cache_filename, operations_to_string

__all__ = [
    "DigestAlgorithm",
    "InvalidHashFunction",
    "Orientation",
    "OrientationStatus",
    "Separators",
    "cache_filename",
    "hash_image_operations",
    "hash_operations",
    "operations_to_string",
    "read_orientation",
]
