"""
Shortening full codes against a reference location, and recovering them.

A short code omits leading pair digits. It only identifies an area when read
next to a reference location that is close to it; the closer the reference,
the more digits can be dropped.
"""

from .alphabet import (
    ENCODING_BASE,
    LATITUDE_MAX,
    PADDING_CHARACTER,
    SEPARATOR,
    SEPARATOR_POSITION,
    compute_precision_for_length,
)
from .decode import decode
from .encode import encode
from .quantize import adjust_coords
from .validate import code_length, is_full, is_short

# Leading digits that may be removed, most aggressive first
REMOVAL_LENGTHS = (8, 6, 4)

# Fraction of the removed area's size the reference must be within. The
# theoretical limit is 0.5.
SAFETY_FACTOR = 0.3


def shorten(code: str, latitude: float, longitude: float) -> str:
    """
    Remove leading digits from a full code using a nearby reference.

    Args:
        code: A full code
        latitude: Reference latitude in degrees
        longitude: Reference longitude in degrees

    Returns:
        The shortened code, or the code unchanged if it is not a full
        unpadded code or the reference is too far from it
    """
    if not is_full(code):
        return code
    if PADDING_CHARACTER in code:
        return code

    digit_count = code_length(code)
    center = decode(code).center
    latitude, longitude = adjust_coords(latitude, longitude, digit_count)

    # How close the reference is to the code center
    distance = max(abs(center.latitude - latitude), abs(center.longitude - longitude))

    for removal_length in REMOVAL_LENGTHS:
        # A short code keeps at least one pair of digits
        if removal_length >= digit_count:
            continue
        area_edge = compute_precision_for_length(removal_length) * SAFETY_FACTOR
        if distance < area_edge:
            return code[removal_length:]
    return code


def recover_nearest(short_code: str, latitude: float, longitude: float) -> str:
    """
    Recover the full code nearest to a reference location.

    The missing leading digits are taken from the reference location. If the
    resulting area is more than half a cell away from the reference, the
    neighbouring cell on that side is used instead. Latitude never moves
    across a pole; longitude is free to wrap.

    Args:
        short_code: A short code. Full codes are returned upper cased.
        latitude: Reference latitude in degrees
        longitude: Reference longitude in degrees

    Returns:
        The full code, upper case
    """
    if not is_short(short_code):
        return short_code.upper()

    digit_count = code_length(short_code)
    # Number of digits to recover
    padding_length = SEPARATOR_POSITION - short_code.index(SEPARATOR)
    # A reference on the north pole is moved into the top row of recovered cells
    latitude, longitude = adjust_coords(latitude, longitude, digit_count + padding_length)
    # Height and width of the area the recovered digits select, in degrees
    resolution = ENCODING_BASE ** (2 - padding_length / 2)
    half_res = resolution / 2

    prefix = encode(latitude, longitude)[:padding_length]
    center = decode(prefix + short_code).center
    center_lat = center.latitude
    center_lng = center.longitude

    if latitude + half_res < center_lat and center_lat - resolution > -LATITUDE_MAX:
        # More than half a cell north of the reference
        center_lat -= resolution
    elif latitude - half_res > center_lat and center_lat + resolution < LATITUDE_MAX:
        # More than half a cell south of the reference
        center_lat += resolution

    if longitude + half_res < center_lng:
        center_lng -= resolution
    elif longitude - half_res > center_lng:
        center_lng += resolution

    return encode(center_lat, center_lng, digit_count + padding_length)
