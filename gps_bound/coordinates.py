"""
Coordinate conversion module.

This module turns the degrees/minutes/seconds rational encoding stored in
EXIF GPS tags into signed decimal degrees.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Sequence, Union


class MalformedCoordinate(ValueError):
    """Raised when a GPS encoding cannot be turned into a decimal value."""


class RationalSextuple(NamedTuple):
    """
    Three fractions (degrees, minutes, seconds) stored as six integers.
    """

    degrees_num: int
    degrees_den: int
    minutes_num: int
    minutes_den: int
    seconds_num: int
    seconds_den: int

    @classmethod
    def from_values(cls, values: Sequence[int]) -> "RationalSextuple":
        """
        Build a sextuple from a flattened numerator/denominator sequence.

        Args:
            values: Sequence of exactly six integers

        Returns:
            RationalSextuple instance

        Raises:
            MalformedCoordinate: If the sequence is not six integers
        """
        values = tuple(values)
        if len(values) != 6:
            raise MalformedCoordinate(f"Expected 6 rational parts, got {len(values)}")
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in values):
            raise MalformedCoordinate(f"Rational parts must be integers: {values!r}")
        return cls(*values)


class Hemisphere(Enum):
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @classmethod
    def from_indicator(cls, indicator: Union[str, bytes]) -> "Hemisphere":
        """
        Map a direction character (N/S/E/W) to a hemisphere.

        Only the first character is considered; case is ignored.

        Raises:
            MalformedCoordinate: If the indicator is empty or not N/S/E/W
        """
        if isinstance(indicator, bytes):
            indicator = indicator.decode("ascii", errors="replace")
        indicator = indicator[:1].upper()
        try:
            return cls(indicator)
        except ValueError:
            raise MalformedCoordinate(f"Invalid hemisphere indicator: {indicator!r}") from None

    @property
    def multiplier(self) -> int:
        return 1 if self in (Hemisphere.NORTH, Hemisphere.EAST) else -1

    @property
    def is_latitude(self) -> bool:
        return self in (Hemisphere.NORTH, Hemisphere.SOUTH)


@dataclass(frozen=True)
class Coordinate:
    """A decimal-degree GPS position."""

    latitude: float
    longitude: float

    def is_valid(self) -> bool:
        """Check that both axes lie within their geographic ranges."""
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0

    def __str__(self) -> str:
        return f"({self.latitude:.6f}, {self.longitude:.6f})"


def convert_dms(sextuple: RationalSextuple, hemisphere: Hemisphere) -> float:
    """
    Convert degrees/minutes/seconds to decimal degrees.

    Args:
        sextuple: Rational DMS encoding
        hemisphere: Hemisphere deciding the sign of the result

    Returns:
        Decimal degrees, negative for South and West. The value is neither
        rounded nor clamped to a geographic range.

    Raises:
        MalformedCoordinate: If any denominator is zero
    """
    if 0 in (sextuple.degrees_den, sextuple.minutes_den, sextuple.seconds_den):
        raise MalformedCoordinate(f"Zero denominator in {tuple(sextuple)!r}")

    degrees = sextuple.degrees_num / sextuple.degrees_den
    minutes = sextuple.minutes_num / sextuple.minutes_den
    seconds = sextuple.seconds_num / sextuple.seconds_den

    decimal = degrees + minutes / 60 + seconds / 3600
    return decimal * hemisphere.multiplier
