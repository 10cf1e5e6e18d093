"""
Encoding of coordinates into Plus Codes.

The coordinates are quantized once (see quantize.py) and the digits are then
peeled off the integers from least to most significant, the grid section
first and the pair section after it.
"""

from .alphabet import (
    CODE_ALPHABET,
    ENCODING_BASE,
    GRID_CODE_LENGTH,
    GRID_COLUMNS,
    GRID_ROWS,
    MAX_DIGIT_COUNT,
    MIN_DIGIT_COUNT,
    PADDING_CHARACTER,
    PAIR_CODE_LENGTH,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from .quantize import adjust_coords, quantize


def _normalize_code_length(code_length: int) -> int:
    code_length = max(MIN_DIGIT_COUNT, min(MAX_DIGIT_COUNT, code_length))
    # The pair section is consumed two digits at a time
    if code_length < PAIR_CODE_LENGTH and code_length % 2 == 1:
        code_length += 1
    return code_length


def encode(latitude: float, longitude: float, code_length: int = PAIR_CODE_LENGTH) -> str:
    """
    Encode a location into a Plus Code.

    Args:
        latitude: Latitude in degrees, clamped to [-90, 90]
        longitude: Longitude in degrees, wrapped into [-180, 180)
        code_length: Number of significant digits. Clamped to [2, 15];
            odd lengths below 10 are rounded up.

    Returns:
        The code, upper case, with separator and any padding

    Raises:
        ValueError: If latitude or longitude is not a finite number
    """
    code_length = _normalize_code_length(code_length)
    latitude, longitude = adjust_coords(latitude, longitude, code_length)
    lat_val, lng_val = quantize(latitude, longitude)

    digits = [""] * MAX_DIGIT_COUNT

    if code_length > PAIR_CODE_LENGTH:
        for pos in range(MAX_DIGIT_COUNT - 1, PAIR_CODE_LENGTH - 1, -1):
            lat_digit = lat_val % GRID_ROWS
            lng_digit = lng_val % GRID_COLUMNS
            digits[pos] = CODE_ALPHABET[lat_digit * GRID_COLUMNS + lng_digit]
            lat_val //= GRID_ROWS
            lng_val //= GRID_COLUMNS
    else:
        lat_val //= GRID_ROWS ** GRID_CODE_LENGTH
        lng_val //= GRID_COLUMNS ** GRID_CODE_LENGTH

    for pos in range(PAIR_CODE_LENGTH - 2, -1, -2):
        digits[pos + 1] = CODE_ALPHABET[lng_val % ENCODING_BASE]
        digits[pos] = CODE_ALPHABET[lat_val % ENCODING_BASE]
        lat_val //= ENCODING_BASE
        lng_val //= ENCODING_BASE

    code = "".join(digits[:SEPARATOR_POSITION]) + SEPARATOR + "".join(digits[SEPARATOR_POSITION:])

    if code_length >= SEPARATOR_POSITION:
        return code[:code_length + 1]

    padding = PADDING_CHARACTER * (SEPARATOR_POSITION - code_length)
    return code[:code_length] + padding + SEPARATOR
