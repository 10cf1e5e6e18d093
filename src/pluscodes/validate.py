"""
Syntax checks for code strings.

These functions never raise: anything that is not a well-formed code is
reported as False.
"""

from .alphabet import (
    ENCODING_BASE,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PADDING_CHARACTER,
    SEPARATOR,
    SEPARATOR_POSITION,
    alphabet_position,
)


def clean_code(code: str) -> str:
    """Strip the separator and everything from the first padding character on."""
    return code.replace(SEPARATOR, "").partition(PADDING_CHARACTER)[0]


def is_valid(code: str) -> bool:
    """
    Check if a string is a valid full or short code.

    A valid code has exactly one separator, at an even position no later
    than the eighth. Padding may only appear in full codes, must start at a
    non-zero even position, run up to the separator, and cannot be followed
    by any digits. A single digit after the separator is not allowed.

    Args:
        code: Candidate code string

    Returns:
        True if the code is well formed
    """
    if not code:
        return False
    if code.count(SEPARATOR) != 1:
        return False
    if len(code) == 1:
        return False

    separator_index = code.index(SEPARATOR)
    if separator_index > SEPARATOR_POSITION or separator_index % 2 == 1:
        return False

    padding_index = code.find(PADDING_CHARACTER)
    if padding_index != -1:
        # Short codes cannot be padded
        if separator_index < SEPARATOR_POSITION:
            return False
        if padding_index == 0 or padding_index % 2 == 1:
            return False
        if len(code) > separator_index + 1:
            return False
        if code[padding_index:SEPARATOR_POSITION].strip(PADDING_CHARACTER):
            return False

    if len(code) - separator_index - 1 == 1:
        return False

    for char in code:
        if char in (SEPARATOR, PADDING_CHARACTER):
            continue
        if alphabet_position(char) is None:
            return False

    return True


def is_short(code: str) -> bool:
    """Check if a code is valid and has digits missing before the separator."""
    if not is_valid(code):
        return False
    return code.index(SEPARATOR) < SEPARATOR_POSITION


def is_full(code: str) -> bool:
    """
    Check if a code is valid and identifies an area without a reference.

    The first latitude and longitude digits must also be in range: a first
    digit that would decode to latitude >= 90 or longitude >= 180 cannot
    have been produced by the encoder.

    Args:
        code: Candidate code string

    Returns:
        True for a full code
    """
    if not is_valid(code) or is_short(code):
        return False

    if alphabet_position(code[0]) * ENCODING_BASE >= LATITUDE_MAX * 2:
        return False
    if len(code) > 1:
        if alphabet_position(code[1]) * ENCODING_BASE >= LONGITUDE_MAX * 2:
            return False
    return True


def code_length(code: str) -> int:
    """Number of significant digits in a code, ignoring separator and padding."""
    return len(clean_code(code))
