"""
Geolocation value object carrying a coordinate and its Plus Code.
"""

from typing import Optional

from .alphabet import PAIR_CODE_LENGTH
from .codearea import CodeArea
from .decode import decode
from .encode import encode
from .validate import is_valid

# Stored in place of a plus code when the coordinates cannot be encoded
NOT_VALID = "Not Valid"


class Geolocation:
    """
    A latitude/longitude pair and the Plus Code computed for it.

    The code is computed once, at construction. Coordinates that cannot be
    encoded (NaN, infinity) get the NOT_VALID marker instead of raising.

    Example:
        location = Geolocation(20.375, 2.775, code_length=6)
        location.plus_code      # '7FG49Q00+'
        location.coordinates()  # 'Latitude: 20.375000 Longitude: 2.775000'
    """

    def __init__(self, latitude: float, longitude: float, code_length: int = PAIR_CODE_LENGTH):
        self.latitude = latitude
        self.longitude = longitude

        try:
            code = encode(latitude, longitude, code_length)
        except ValueError:
            code = NOT_VALID
        self.plus_code = code if is_valid(code) else NOT_VALID

    @property
    def is_valid(self) -> bool:
        """True if a plus code could be computed."""
        return self.plus_code != NOT_VALID

    def code_area(self) -> Optional[CodeArea]:
        """Decode the stored plus code, or None if there is none."""
        if not self.is_valid:
            return None
        return decode(self.plus_code)

    def coordinates(self) -> str:
        """Format the coordinates for display."""
        return f"Latitude: {self.latitude:.6f} Longitude: {self.longitude:.6f}"

    def __repr__(self) -> str:
        return f"Geolocation({self.latitude!r}, {self.longitude!r}, plus_code={self.plus_code!r})"
