"""
EXIF orientation reading.
"""

from __future__ import annotations

import logging
import os
import struct
from dataclasses import dataclass
from enum import Enum
from io import BytesIO
from pathlib import Path
from typing import Any, BinaryIO

from PIL import ExifTags, Image

LOGGER = logging.getLogger(__name__)

ORIENTATION_ANGLES: dict[int, int] = {0: 0, 3: 180, 6: -90, 8: 90}

# Errors Pillow raises for unreadable files or broken EXIF blocks.
_PARSE_ERRORS = (OSError, SyntaxError, ValueError, struct.error, Image.DecompressionBombError)


class OrientationStatus(str, Enum):
    TAGGED = "tagged"
    NO_TAG = "no_tag"
    PARSE_FAILED = "parse_failed"


@dataclass(frozen=True)
class Orientation:
    """Rotation read from an image; ``angle`` is 0 unless ``status`` is TAGGED."""

    status: OrientationStatus
    angle: int = 0
    tag: int | None = None

    @property
    def parse_failed(self) -> bool:
        return self.status is OrientationStatus.PARSE_FAILED

    @property
    def has_tag(self) -> bool:
        return self.status is OrientationStatus.TAGGED


def orientation_from_tag(tag: Any) -> Orientation:
    """Map a raw EXIF Orientation value to an Orientation; 0 or missing counts as no tag."""
    if not isinstance(tag, int) or isinstance(tag, bool) or tag == 0:
        return Orientation(OrientationStatus.NO_TAG)
    return Orientation(OrientationStatus.TAGGED, ORIENTATION_ANGLES.get(tag, 0), tag)


def _read_from(source: str | Path | BinaryIO, label: str) -> Orientation:
    try:
        with Image.open(source) as image:
            tag = image.getexif().get(ExifTags.Base.Orientation)
    except _PARSE_ERRORS as exc:
        LOGGER.warning("Could not read EXIF orientation from %s: %s", label, exc)
        return Orientation(OrientationStatus.PARSE_FAILED)
    return orientation_from_tag(tag)


def read_orientation(path: str | Path) -> Orientation:
    """
    Read the EXIF orientation of the image at ``path``.

    Raises FileNotFoundError when ``path`` is not an existing, readable file. Unreadable images
    and malformed metadata give a PARSE_FAILED result instead of raising.
    """
    path = Path(path)
    if not path.is_file() or not os.access(path, os.R_OK):
        raise FileNotFoundError(f"File {path} not found!")
    return _read_from(path, str(path))


def read_orientation_bytes(image_bytes: bytes) -> Orientation:
    """Same as read_orientation for in-memory image data."""
    return _read_from(BytesIO(image_bytes), "<bytes>")
