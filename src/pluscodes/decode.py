"""
Decoding of Plus Codes into code areas.

The pair and grid sections are summed as integers in units of their own
final precision and only converted to degrees at the end.
"""

from .alphabet import (
    ENCODING_BASE,
    GRID_CODE_LENGTH,
    GRID_COLUMNS,
    GRID_LAT_PRECISION_INVERSE,
    GRID_LNG_PRECISION_INVERSE,
    GRID_ROWS,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    MAX_DIGIT_COUNT,
    PAIR_CODE_LENGTH,
    PAIR_PRECISION_INVERSE,
    alphabet_position,
)
from .codearea import CodeArea
from .validate import clean_code, is_full

# Decimal places kept in decoded bounds
ROUNDING_PLACES = 14


def decode(code: str) -> CodeArea:
    """
    Decode a full Plus Code into the area it represents.

    Digits beyond the fifteenth are ignored.

    Args:
        code: A full code, upper or lower case

    Returns:
        CodeArea with the bounds and the number of digits decoded

    Raises:
        ValueError: If the code is not a valid full code. Short codes must be
            recovered against a reference location first.
    """
    if not is_full(code):
        raise ValueError(f"Not a valid full Plus Code: {code!r}")

    digits = clean_code(code)[:MAX_DIGIT_COUNT]

    normal_lat = -LATITUDE_MAX * PAIR_PRECISION_INVERSE
    normal_lng = -LONGITUDE_MAX * PAIR_PRECISION_INVERSE
    extra_lat = 0
    extra_lng = 0

    # Place value of the most significant pair
    pair_count = min(PAIR_CODE_LENGTH, len(digits))
    pv = ENCODING_BASE ** (PAIR_CODE_LENGTH // 2 - 1)
    for i in range(0, pair_count - 1, 2):
        normal_lat += alphabet_position(digits[i]) * pv
        normal_lng += alphabet_position(digits[i + 1]) * pv
        if i < pair_count - 2:
            pv //= ENCODING_BASE

    lat_precision = pv / PAIR_PRECISION_INVERSE
    lng_precision = pv / PAIR_PRECISION_INVERSE

    if len(digits) > PAIR_CODE_LENGTH:
        row_pv = GRID_ROWS ** (GRID_CODE_LENGTH - 1)
        col_pv = GRID_COLUMNS ** (GRID_CODE_LENGTH - 1)
        for i in range(PAIR_CODE_LENGTH, len(digits)):
            row, col = divmod(alphabet_position(digits[i]), GRID_COLUMNS)
            extra_lat += row * row_pv
            extra_lng += col * col_pv
            if i < len(digits) - 1:
                row_pv //= GRID_ROWS
                col_pv //= GRID_COLUMNS

        lat_precision = row_pv / GRID_LAT_PRECISION_INVERSE
        lng_precision = col_pv / GRID_LNG_PRECISION_INVERSE

    lat = normal_lat / PAIR_PRECISION_INVERSE + extra_lat / GRID_LAT_PRECISION_INVERSE
    lng = normal_lng / PAIR_PRECISION_INVERSE + extra_lng / GRID_LNG_PRECISION_INVERSE

    return CodeArea(
        round(lat, ROUNDING_PLACES),
        round(lng, ROUNDING_PLACES),
        round(lat + lat_precision, ROUNDING_PLACES),
        round(lng + lng_precision, ROUNDING_PLACES),
        len(digits),
    )
