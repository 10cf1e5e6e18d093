"""
Value types returned by the codec.

A CodeArea is the rectangle of latitude/longitude that a code stands for,
together with the number of significant digits that produced it.
"""

from dataclasses import dataclass

from .alphabet import LATITUDE_MAX, LONGITUDE_MAX, MAX_DIGIT_COUNT, MIN_DIGIT_COUNT


@dataclass(frozen=True)
class LatLng:
    """A point in WGS84 degrees."""
    latitude: float
    longitude: float


@dataclass(frozen=True)
class CodeArea:
    """
    The bounding rectangle of a decoded code.

    Bounds are in degrees. The low edges belong to the area, the high edges
    belong to the neighbouring area.
    """
    latitude_lo: float
    longitude_lo: float
    latitude_hi: float
    longitude_hi: float
    code_length: int

    def __post_init__(self):
        if self.latitude_lo > self.latitude_hi or self.longitude_lo > self.longitude_hi:
            raise ValueError(
                f"Invalid code area: latitude [{self.latitude_lo}, {self.latitude_hi}], "
                f"longitude [{self.longitude_lo}, {self.longitude_hi}]"
            )
        if not MIN_DIGIT_COUNT <= self.code_length <= MAX_DIGIT_COUNT:
            raise ValueError(f"Invalid code length: {self.code_length}")

    @property
    def latitude_height(self) -> float:
        """Extent of the area along the meridian, in degrees."""
        return self.latitude_hi - self.latitude_lo

    @property
    def longitude_width(self) -> float:
        """Extent of the area along the parallel, in degrees."""
        return self.longitude_hi - self.longitude_lo

    @property
    def center(self) -> LatLng:
        """
        Midpoint of the area.

        Each axis is capped at its maximum so that rounding can never push
        the center past the pole or the antimeridian.
        """
        latitude = min(
            self.latitude_lo + (self.latitude_hi - self.latitude_lo) / 2, LATITUDE_MAX
        )
        longitude = min(
            self.longitude_lo + (self.longitude_hi - self.longitude_lo) / 2, LONGITUDE_MAX
        )
        return LatLng(latitude, longitude)

    def contains(self, latitude: float, longitude: float) -> bool:
        """Check if the point lies within the half-open area."""
        return (
            self.latitude_lo <= latitude < self.latitude_hi
            and self.longitude_lo <= longitude < self.longitude_hi
        )
