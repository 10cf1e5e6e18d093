"""Tests for the Geolocation value object."""

import math

from pluscodes.encode import encode
from pluscodes.geolocation import NOT_VALID, Geolocation
from pluscodes.validate import is_valid


class TestGeolocation:
    """Tests for Geolocation class."""

    def test_plus_code(self):
        """Test the plus code is encoded at construction."""
        location = Geolocation(37.421998, -122.084)
        assert location.plus_code == encode(37.421998, -122.084)
        assert is_valid(location.plus_code)
        assert location.is_valid

    def test_code_length(self):
        """Test a custom code length."""
        location = Geolocation(20.375, 2.775, code_length=6)
        assert location.plus_code == "7FG49Q00+"

    def test_coordinates(self):
        """Test coordinate formatting."""
        location = Geolocation(37.421998, -122.084)
        assert location.coordinates() == "Latitude: 37.421998 Longitude: -122.084000"

    def test_out_of_range_still_valid(self):
        """Test out of range coordinates are clamped, not rejected."""
        location = Geolocation(100.0, 540.0)
        assert location.is_valid

    def test_nan_not_valid(self):
        """Test NaN coordinates get the marker instead of a code."""
        location = Geolocation(math.nan, 0.0)
        assert location.plus_code == NOT_VALID
        assert not location.is_valid
        assert location.code_area() is None

    def test_infinite_not_valid(self):
        """Test infinite longitude gets the marker."""
        assert Geolocation(0.0, math.inf).plus_code == "Not Valid"

    def test_code_area(self):
        """Test the code area contains the location."""
        location = Geolocation(-33.8688, 151.2093)
        area = location.code_area()
        assert area is not None
        assert area.contains(-33.8688, 151.2093)
        assert area.code_length == 10
