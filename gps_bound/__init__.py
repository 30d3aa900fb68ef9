"""
GPS Bound Package

Copies the images of a directory whose embedded GPS location lies inside
a latitude/longitude rectangle into a destination directory.
"""

__version__ = "1.0.0"

from .coordinates import Coordinate, Hemisphere, MalformedCoordinate, RationalSextuple, convert_dms
from .bounds import BoundingRectangle, InvalidRectangle, contains
from .metadata_extractor import ExifMetadataAccessor, TagCategory, TagResult, TagStatus, TagValue
from .locator import GPSLocator
from .file_copier import CopyOutcome, FileCopier
from .binder import BindReport, DirectoryBinder
from .logger import Logger

__all__ = [
    "Coordinate",
    "Hemisphere",
    "MalformedCoordinate",
    "RationalSextuple",
    "convert_dms",
    "BoundingRectangle",
    "InvalidRectangle",
    "contains",
    "ExifMetadataAccessor",
    "TagCategory",
    "TagResult",
    "TagStatus",
    "TagValue",
    "GPSLocator",
    "CopyOutcome",
    "FileCopier",
    "BindReport",
    "DirectoryBinder",
    "Logger",
]
