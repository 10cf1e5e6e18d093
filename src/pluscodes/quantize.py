"""
Quantization module for converting WGS84 coordinates to the fixed-point grid.

Encoding works on integers: each coordinate is shifted to be non-negative and
scaled by the inverse precision of the final grid digit. From then on only
integer division and remainders are used, so no floating point error
accumulates over the fifteen digits of a code.

- lat_val is in [0, 180 * GRID_LAT_PRECISION_INVERSE) for latitude in [-90, 90)
- lng_val is in [0, 360 * GRID_LNG_PRECISION_INVERSE) for longitude in [-180, 180)

Conversion truncates towards zero, which for non-negative values is floor.
"""

import math
from typing import Tuple

from .alphabet import (
    GRID_LAT_PRECISION_INVERSE,
    GRID_LNG_PRECISION_INVERSE,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    compute_precision_for_length,
)


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number, got {value}")


def clamp_latitude(latitude: float) -> float:
    """
    Clamp latitude to the valid WGS84 range.

    Args:
        latitude: Latitude in degrees

    Returns:
        Latitude in [-90, 90]
    """
    _require_finite("latitude", latitude)
    return min(float(LATITUDE_MAX), max(-float(LATITUDE_MAX), latitude))


def adjust_latitude(latitude: float, code_length: int) -> float:
    """
    Clamp latitude and move the north pole into the grid.

    Latitude 90 would encode to a digit outside the alphabet, so it is moved
    south by half the height of a code of the requested length.

    Args:
        latitude: Latitude in degrees
        code_length: Number of digits the latitude will be encoded with

    Returns:
        Latitude in [-90, 90)
    """
    latitude = clamp_latitude(latitude)
    if latitude < LATITUDE_MAX:
        return latitude
    return latitude - compute_precision_for_length(code_length) / 2


def normalize_longitude(longitude: float) -> float:
    """
    Wrap longitude into [-180, 180).

    Args:
        longitude: Longitude in degrees

    Returns:
        Equivalent longitude in [-180, 180)
    """
    _require_finite("longitude", longitude)
    while longitude < -LONGITUDE_MAX:
        longitude = longitude + 360
    while longitude >= LONGITUDE_MAX:
        longitude = longitude - 360
    return longitude


def adjust_coords(latitude: float, longitude: float, code_length: int) -> Tuple[float, float]:
    """
    Bring a coordinate pair into the range the codec works on.

    Args:
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        code_length: Code length used for the north pole adjustment

    Returns:
        Tuple of (adjusted_latitude, normalized_longitude)
    """
    return adjust_latitude(latitude, code_length), normalize_longitude(longitude)


def get_grid_dimensions() -> Tuple[int, int]:
    """
    Get the exclusive upper bounds of the fixed-point grid.

    Returns:
        Tuple of (lat_limit, lng_limit)
    """
    return (
        2 * LATITUDE_MAX * GRID_LAT_PRECISION_INVERSE,
        2 * LONGITUDE_MAX * GRID_LNG_PRECISION_INVERSE,
    )


def quantize(latitude: float, longitude: float) -> Tuple[int, int]:
    """
    Convert adjusted coordinates to fixed-point integers.

    Args:
        latitude: Latitude in degrees, already passed through adjust_latitude
        longitude: Longitude in degrees, already normalized

    Returns:
        Tuple of (lat_val, lng_val) as non-negative integers

    The conversion formula is:
        lat_val = int(90 * LAT_INV + latitude * LAT_INV)
        lng_val = int(180 * LNG_INV + longitude * LNG_INV)
    """
    _require_finite("latitude", latitude)
    _require_finite("longitude", longitude)

    lat_val = int(LATITUDE_MAX * GRID_LAT_PRECISION_INVERSE + latitude * GRID_LAT_PRECISION_INVERSE)
    lng_val = int(LONGITUDE_MAX * GRID_LNG_PRECISION_INVERSE + longitude * GRID_LNG_PRECISION_INVERSE)

    # Keep indices on the grid (handles floating point edge cases)
    lat_limit, lng_limit = get_grid_dimensions()
    lat_val = max(0, min(lat_limit - 1, lat_val))
    lng_val = max(0, min(lng_limit - 1, lng_val))

    return lat_val, lng_val
