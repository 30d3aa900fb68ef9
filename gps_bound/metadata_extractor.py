"""
Metadata extraction module for image files.

This module reads raw EXIF tag values from image files. It does not interpret
them: GPS rationals come back as flattened numerator/denominator integers and
text tags as raw bytes, leaving conversion to the coordinate module.

Pillow is used first (most reliable for common formats) with exifread as
a fallback for files Pillow cannot open.
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Tuple, Union

import exifread
from PIL import Image, UnidentifiedImageError
from PIL.ExifTags import GPSTAGS, TAGS


class TagCategory(Enum):
    """EXIF tag directories, valued by their pointer tag id (0 for IFD0)."""

    IMAGE = 0
    EXIF = 0x8769
    GPS = 0x8825

    @property
    def exifread_prefix(self) -> str:
        return {"IMAGE": "Image", "EXIF": "EXIF", "GPS": "GPS"}[self.name]

    @property
    def tag_names(self) -> Dict[int, str]:
        return GPSTAGS if self is TagCategory.GPS else TAGS


# GPS tag ids from the EXIF standard
GPS_LATITUDE_REF = 1
GPS_LATITUDE = 2
GPS_LONGITUDE_REF = 3
GPS_LONGITUDE = 4


class TagStatus(Enum):
    FOUND = "found"
    ABSENT = "absent"
    ERROR = "error"
    NO_CONTAINER = "no_container"


@dataclass(frozen=True)
class TagValue:
    """
    A raw tag value with two views.

    `numeric` holds integers, with every rational flattened into a
    numerator/denominator pair. `raw` holds the bytes of text and byte tags.
    """

    numeric: Tuple[int, ...] = ()
    raw: bytes = b""


@dataclass(frozen=True)
class TagResult:
    status: TagStatus
    value: Optional[TagValue] = None
    detail: str = field(default="", compare=False)

    @property
    def ok(self) -> bool:
        return self.status is TagStatus.FOUND


class MetadataAccessor(Protocol):
    """Anything able to look up a single EXIF tag in a file."""

    def read_tag(self, path: Union[str, Path], category: TagCategory, tag_id: int) -> TagResult:
        ...


Container = Dict[TagCategory, Dict[int, Any]]


class ExifMetadataAccessor:
    """
    Reads EXIF tags from image files.

    The last parsed file is cached so that consecutive lookups for one
    file only decode it once. The cache is keyed on path and modification
    time, so a file rewritten in place is parsed again.
    """

    def __init__(self):
        """Initialize the metadata accessor."""
        self.logger = logging.getLogger(__name__)
        self._cached_key: Optional[Tuple[str, Optional[int]]] = None
        self._cached_container: Optional[Container] = None

    def read_tag(self, path: Union[str, Path], category: TagCategory, tag_id: int) -> TagResult:
        """
        Look up one tag in a file's EXIF container.

        Args:
            path: Path to the image file
            category: Tag directory holding the tag
            tag_id: Numeric EXIF tag id

        Returns:
            TagResult with status FOUND and a value, or ABSENT, ERROR or
            NO_CONTAINER
        """
        container = self._load(str(path))
        if container is None:
            return TagResult(TagStatus.NO_CONTAINER)

        directory = container.get(category, {})
        if tag_id not in directory:
            return TagResult(TagStatus.ABSENT)

        try:
            return TagResult(TagStatus.FOUND, _to_tag_value(directory[tag_id]))
        except (TypeError, ValueError) as e:
            self.logger.debug(f"Unreadable tag {category.name}:{tag_id} in {path}: {e}")
            return TagResult(TagStatus.ERROR, detail=str(e))

    def _load(self, path: str) -> Optional[Container]:
        try:
            stamp = os.stat(path).st_mtime_ns
        except OSError:
            stamp = None
        key = (path, stamp)
        if key != self._cached_key:
            self._cached_container = self._read_container(path)
            self._cached_key = key
        return self._cached_container

    def _read_container(self, path: str) -> Optional[Container]:
        """
        Parse the EXIF container of a file.

        Args:
            path: Path to the image file

        Returns:
            Mapping of tag directory to {tag_id: value}, None if the file
            has no EXIF data
        """
        try:
            with Image.open(path) as img:
                return self._container_from_pillow(img.getexif())
        except UnidentifiedImageError as e:
            self.logger.debug(f"PIL cannot identify {path}: {e}")
        except Exception as e:
            self.logger.debug(f"PIL extraction failed for {path}: {e}")

        # Fallback to exifread
        try:
            with open(path, "rb") as f:
                tags = exifread.process_file(f, details=False)
            return self._container_from_exifread(tags)
        except Exception as e:
            self.logger.debug(f"exifread extraction failed for {path}: {e}")

        return None

    def _container_from_pillow(self, exif: Image.Exif) -> Optional[Container]:
        if not exif:
            return None

        container: Container = {TagCategory.IMAGE: dict(exif)}
        for category in (TagCategory.EXIF, TagCategory.GPS):
            container[category] = dict(exif.get_ifd(category.value))
        return container

    def _container_from_exifread(self, tags: Dict[str, Any]) -> Optional[Container]:
        if not tags:
            return None

        container: Container = {category: {} for category in TagCategory}
        lookup = {
            category.exifread_prefix: (category, {name: tag_id for tag_id, name in category.tag_names.items()})
            for category in TagCategory
        }

        for key, tag in tags.items():
            prefix, _, name = key.partition(" ")
            if prefix not in lookup:
                continue
            category, ids = lookup[prefix]
            if name in ids:
                container[category][ids[name]] = tag.values

        return container


def _to_tag_value(value: Any) -> TagValue:
    """
    Convert a library-specific tag value into a TagValue.

    Raises:
        TypeError: If the value has a type that has no numeric or byte view
    """
    if isinstance(value, bytes):
        return TagValue(raw=value)
    if isinstance(value, str):
        return TagValue(raw=value.encode("latin-1", errors="replace"))

    items = value if isinstance(value, (list, tuple)) else [value]
    numeric = []
    for item in items:
        numeric.extend(_split_number(item))
    return TagValue(numeric=tuple(numeric))


def _split_number(item: Any) -> Tuple[int, ...]:
    if isinstance(item, int):
        return (item,)

    # IFDRational (Pillow) and Ratio (exifread) both expose these
    numerator = getattr(item, "numerator", None)
    denominator = getattr(item, "denominator", None)
    if isinstance(numerator, int) and isinstance(denominator, int):
        return (numerator, denominator)

    raise TypeError(f"Unsupported tag value: {item!r}")
