"""
GPS location lookup for image files.

Combines the four EXIF GPS tags of a file into a single decimal coordinate.
Files without usable GPS data are an expected, common case and yield None
rather than an error.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .coordinates import Coordinate, Hemisphere, MalformedCoordinate, RationalSextuple, convert_dms
from .metadata_extractor import (
    GPS_LATITUDE,
    GPS_LATITUDE_REF,
    GPS_LONGITUDE,
    GPS_LONGITUDE_REF,
    ExifMetadataAccessor,
    MetadataAccessor,
    TagCategory,
    TagResult,
)


class GPSLocator:
    """
    Extracts decimal GPS coordinates from image files.
    """

    def __init__(self, accessor: Optional[MetadataAccessor] = None):
        """
        Initialize the locator.

        Args:
            accessor: Source of raw tag values, EXIF reader by default
        """
        self.logger = logging.getLogger(__name__)
        self.accessor = accessor if accessor is not None else ExifMetadataAccessor()

    def locate(self, path: Union[str, Path]) -> Optional[Coordinate]:
        """
        Extract the GPS coordinate of a file.

        Args:
            path: Path to the image file

        Returns:
            Coordinate if all four GPS tags are present and well formed,
            None otherwise
        """
        tags = {}
        for tag_id in (GPS_LATITUDE, GPS_LONGITUDE, GPS_LATITUDE_REF, GPS_LONGITUDE_REF):
            result: TagResult = self.accessor.read_tag(path, TagCategory.GPS, tag_id)
            if not result.ok:
                self.logger.debug(f"No GPS data in {path}: tag {tag_id} is {result.status.value}")
                return None
            tags[tag_id] = result.value

        try:
            lat_hemisphere = Hemisphere.from_indicator(tags[GPS_LATITUDE_REF].raw)
            lon_hemisphere = Hemisphere.from_indicator(tags[GPS_LONGITUDE_REF].raw)
            if not lat_hemisphere.is_latitude or lon_hemisphere.is_latitude:
                raise MalformedCoordinate(
                    f"Hemisphere indicators {lat_hemisphere.value}/{lon_hemisphere.value} do not match their axes"
                )

            coordinate = Coordinate(
                latitude=convert_dms(RationalSextuple.from_values(tags[GPS_LATITUDE].numeric), lat_hemisphere),
                longitude=convert_dms(RationalSextuple.from_values(tags[GPS_LONGITUDE].numeric), lon_hemisphere),
            )
        except MalformedCoordinate as e:
            self.logger.debug(f"Malformed GPS data in {path}: {e}")
            return None

        if not coordinate.is_valid():
            self.logger.debug(f"GPS data out of range in {path}: {coordinate}")
            return None

        self.logger.debug(f"GPS found in {path}: {coordinate}")
        return coordinate
