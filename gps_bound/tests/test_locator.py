"""Tests for gps_bound.locator module."""

import pytest

from gps_bound.coordinates import Coordinate
from gps_bound.locator import GPSLocator
from gps_bound.metadata_extractor import (
    GPS_LATITUDE,
    GPS_LATITUDE_REF,
    GPS_LONGITUDE,
    GPS_LONGITUDE_REF,
    TagValue,
)
from gps_bound.tests.utils import CORRUPT, FakeAccessor, dms, gps_tags, write_gps_jpeg, write_plain_jpeg

ALL_TAGS = (GPS_LATITUDE, GPS_LONGITUDE, GPS_LATITUDE_REF, GPS_LONGITUDE_REF)


def _locate(tags):
    return GPSLocator(FakeAccessor({"photo.jpg": tags})).locate("/photos/photo.jpg")


class TestGPSLocator:
    def test_locates_coordinate(self):
        tags = gps_tags(dms(38), "N", dms(121, 30), "W")
        assert _locate(tags) == Coordinate(38.0, -121.5)

    def test_southern_eastern(self):
        tags = gps_tags(dms(33, 52, 12), "S", dms(151, 12, 36), "E")
        coordinate = _locate(tags)
        assert coordinate.latitude == pytest.approx(-33.87)
        assert coordinate.longitude == pytest.approx(151.21)

    def test_no_container(self):
        assert _locate(None) is None

    @pytest.mark.parametrize("missing", ALL_TAGS)
    def test_single_tag_missing(self, missing):
        tags = gps_tags(dms(38), "N", dms(121, 30), "W")
        del tags[missing]
        assert _locate(tags) is None

    @pytest.mark.parametrize("corrupt", ALL_TAGS)
    def test_single_tag_corrupt(self, corrupt):
        tags = gps_tags(dms(38), "N", dms(121, 30), "W")
        tags[corrupt] = CORRUPT
        assert _locate(tags) is None

    def test_zero_denominator(self):
        tags = gps_tags((38, 0, 0, 1, 0, 1), "N", dms(121, 30), "W")
        assert _locate(tags) is None

    def test_short_rational_array(self):
        tags = gps_tags((38, 1, 0, 1), "N", dms(121, 30), "W")
        assert _locate(tags) is None

    def test_invalid_hemisphere(self):
        tags = gps_tags(dms(38), "X", dms(121, 30), "W")
        assert _locate(tags) is None

    def test_swapped_hemispheres(self):
        tags = gps_tags(dms(38), "E", dms(121, 30), "N")
        assert _locate(tags) is None

    def test_out_of_range(self):
        tags = gps_tags(dms(95), "N", dms(121, 30), "W")
        assert _locate(tags) is None

    def test_empty_hemisphere_bytes(self):
        tags = gps_tags(dms(38), "N", dms(121, 30), "W")
        tags[GPS_LATITUDE_REF] = TagValue(raw=b"")
        assert _locate(tags) is None

    def test_reads_four_gps_tags(self):
        accessor = FakeAccessor({"photo.jpg": gps_tags(dms(38), "N", dms(121, 30), "W")})
        GPSLocator(accessor).locate("photo.jpg")
        assert sorted(tag_id for _, _, tag_id in accessor.calls) == sorted(ALL_TAGS)


class TestGPSLocatorWithFiles:
    def test_jpeg_with_gps(self, tmp_path):
        path = write_gps_jpeg(tmp_path / "gps.jpg", 38.0, -121.5)
        assert GPSLocator().locate(path) == Coordinate(38.0, -121.5)

    def test_jpeg_without_gps(self, tmp_path):
        path = write_plain_jpeg(tmp_path / "plain.jpg")
        assert GPSLocator().locate(path) is None

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("not an image")
        assert GPSLocator().locate(path) is None
