"""
Alphabet and precision constants for Plus Codes.

A code is made of digits from a 20-character alphabet. The first ten
significant digits are interleaved latitude/longitude pairs in base 20
(the "pair section"); up to five further digits each select one cell of a
4-column by 5-row grid (the "grid section").

All values here are computed once at import time and never mutated.
"""

from typing import Dict, Optional


SEPARATOR = "+"
SEPARATOR_POSITION = 8
PADDING_CHARACTER = "0"

# Digits 2-9 plus letters chosen to avoid look-alikes and spelling words.
CODE_ALPHABET = "23456789CFGHJMPQRVWX"
ENCODING_BASE = len(CODE_ALPHABET)

LATITUDE_MAX = 90
LONGITUDE_MAX = 180

MAX_DIGIT_COUNT = 15
MIN_DIGIT_COUNT = 2
PAIR_CODE_LENGTH = 10
GRID_CODE_LENGTH = MAX_DIGIT_COUNT - PAIR_CODE_LENGTH
GRID_COLUMNS = 4
GRID_ROWS = ENCODING_BASE // GRID_COLUMNS

# Inverse of the precision of the last pair digit in degrees (20^3).
PAIR_PRECISION_INVERSE = ENCODING_BASE ** 3

# Inverse of the precision of the last grid digit in degrees. The grid is
# not square, so latitude and longitude differ.
GRID_LAT_PRECISION_INVERSE = PAIR_PRECISION_INVERSE * GRID_ROWS ** GRID_CODE_LENGTH
GRID_LNG_PRECISION_INVERSE = PAIR_PRECISION_INVERSE * GRID_COLUMNS ** GRID_CODE_LENGTH

_POSITIONS: Dict[str, int] = {}
for _index, _char in enumerate(CODE_ALPHABET):
    _POSITIONS[_char] = _index
    _POSITIONS[_char.lower()] = _index
del _index, _char


def alphabet_position(char: str) -> Optional[int]:
    """
    Get the value of a code character.

    Args:
        char: A single character, upper or lower case

    Returns:
        Index of the character in the alphabet, or None if it is not a code digit
    """
    return _POSITIONS.get(char)


def compute_precision_for_length(code_length: int) -> float:
    """
    Compute the latitude precision in degrees of a code of a given length.

    Lengths up to 10 have the same precision for latitude and longitude.
    Beyond that each grid digit divides the latitude extent by the number
    of grid rows.

    Args:
        code_length: Number of significant digits in the code

    Returns:
        Height of the code area in degrees
    """
    if code_length <= PAIR_CODE_LENGTH:
        return ENCODING_BASE ** (2 - code_length // 2)
    return ENCODING_BASE ** -3 / GRID_ROWS ** (code_length - PAIR_CODE_LENGTH)
