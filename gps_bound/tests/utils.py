"""Helpers shared by the gps_bound test modules."""

from pathlib import Path
from typing import Dict, Optional, Tuple

from PIL import Image
from PIL.TiffImagePlugin import IFDRational

from gps_bound.metadata_extractor import (
    GPS_LATITUDE,
    GPS_LATITUDE_REF,
    GPS_LONGITUDE,
    GPS_LONGITUDE_REF,
    TagCategory,
    TagResult,
    TagStatus,
    TagValue,
)

GPS_IFD = 0x8825

# Placed in a fake tag table to make the accessor report an unreadable tag
CORRUPT = object()


def dms(degrees: int, minutes: int = 0, seconds: int = 0) -> Tuple[int, ...]:
    return (degrees, 1, minutes, 1, seconds, 1)


def gps_tags(lat: Tuple[int, ...], lat_ref: str, lon: Tuple[int, ...], lon_ref: str) -> Dict[int, object]:
    return {
        GPS_LATITUDE: TagValue(numeric=lat),
        GPS_LATITUDE_REF: TagValue(raw=lat_ref.encode()),
        GPS_LONGITUDE: TagValue(numeric=lon),
        GPS_LONGITUDE_REF: TagValue(raw=lon_ref.encode()),
    }


class FakeAccessor:
    """In-memory metadata accessor keyed by file name."""

    def __init__(self, files: Optional[Dict[str, Optional[Dict[int, object]]]] = None):
        self.files = files or {}
        self.calls = []

    def read_tag(self, path, category, tag_id):
        self.calls.append((Path(path).name, category, tag_id))
        tags = self.files.get(Path(path).name)
        if tags is None:
            return TagResult(TagStatus.NO_CONTAINER)
        if category is not TagCategory.GPS or tag_id not in tags:
            return TagResult(TagStatus.ABSENT)
        if tags[tag_id] is CORRUPT:
            return TagResult(TagStatus.ERROR, detail="corrupt")
        return TagResult(TagStatus.FOUND, tags[tag_id])


def _rationals(degrees: float) -> Tuple[IFDRational, IFDRational, IFDRational]:
    # Whole degrees and minutes, seconds to 1/100
    degrees = abs(degrees)
    whole = int(degrees)
    minutes_float = (degrees - whole) * 60
    minutes = int(minutes_float)
    hundredths = round((minutes_float - minutes) * 60 * 100)
    return IFDRational(whole, 1), IFDRational(minutes, 1), IFDRational(hundredths, 100)


def write_gps_jpeg(path: Path, latitude: float, longitude: float) -> Path:
    """Write a small JPEG carrying the given GPS position."""
    exif = Image.Exif()
    exif[GPS_IFD] = {
        GPS_LATITUDE_REF: "N" if latitude >= 0 else "S",
        GPS_LATITUDE: _rationals(latitude),
        GPS_LONGITUDE_REF: "E" if longitude >= 0 else "W",
        GPS_LONGITUDE: _rationals(longitude),
    }
    Image.new("RGB", (8, 8), color=(200, 30, 30)).save(path, "JPEG", exif=exif)
    return path


def write_plain_jpeg(path: Path) -> Path:
    """Write a small JPEG with no EXIF data at all."""
    Image.new("RGB", (8, 8), color=(30, 200, 30)).save(path, "JPEG")
    return path


