"""
Bounding rectangle module.

A rectangle is given by its top-left and bottom-right corners on an
upright map centred on the Greenwich meridian. Edges are inclusive and the
rectangle may not wrap around the antimeridian.
"""

from dataclasses import dataclass

from .coordinates import Coordinate


class InvalidRectangle(ValueError):
    """Raised when corners do not describe a non-empty rectangle."""


@dataclass(frozen=True)
class BoundingRectangle:
    lat_top_left: float
    lon_top_left: float
    lat_bottom_right: float
    lon_bottom_right: float

    def __post_init__(self):
        if not (self.lat_top_left > self.lat_bottom_right
                and self.lon_top_left < self.lon_bottom_right):
            raise InvalidRectangle(
                f"Top-left ({self.lat_top_left}, {self.lon_top_left}) must lie north-west of "
                f"bottom-right ({self.lat_bottom_right}, {self.lon_bottom_right})"
            )

    @property
    def top_left(self) -> Coordinate:
        return Coordinate(self.lat_top_left, self.lon_top_left)

    @property
    def bottom_right(self) -> Coordinate:
        return Coordinate(self.lat_bottom_right, self.lon_bottom_right)

    def contains(self, point: Coordinate) -> bool:
        return contains(self, point)

    def __str__(self) -> str:
        return f"{self.top_left} to {self.bottom_right}"


def contains(rect: BoundingRectangle, point: Coordinate) -> bool:
    """
    Check whether a coordinate lies inside a rectangle, edges included.

    Args:
        rect: Bounding rectangle
        point: Decimal-degree coordinate

    Returns:
        True if the point is on or inside every edge, False otherwise
    """
    return (rect.lat_bottom_right <= point.latitude <= rect.lat_top_left
            and rect.lon_top_left <= point.longitude <= rect.lon_bottom_right)
