"""Tests for decoding codes into areas."""

import pytest
from pluscodes.decode import decode


class TestDecodeKnownValues:
    """Tests against known reference areas."""

    def test_padded_code(self):
        """Test decoding a six digit padded code."""
        area = decode("7FG49Q00+")
        assert area.latitude_lo == pytest.approx(20.35)
        assert area.latitude_hi == pytest.approx(20.4)
        assert area.longitude_lo == pytest.approx(2.75)
        assert area.longitude_hi == pytest.approx(2.8)
        assert area.code_length == 6

    def test_ten_digit_code(self):
        """Test decoding a full pair section."""
        area = decode("7FG49QCJ+2V")
        assert area.latitude_lo == pytest.approx(20.37)
        assert area.latitude_hi == pytest.approx(20.370125)
        assert area.longitude_lo == pytest.approx(2.782125)
        assert area.longitude_hi == pytest.approx(2.78225)
        assert area.code_length == 10

    def test_grid_digit(self):
        """Test one grid digit splits the cell into 5 rows and 4 columns."""
        area = decode("7FG49QCJ+2VX")
        assert area.latitude_lo == pytest.approx(20.3701)
        assert area.latitude_hi == pytest.approx(20.370125)
        assert area.longitude_lo == pytest.approx(2.78221875)
        assert area.longitude_hi == pytest.approx(2.78225)
        assert area.code_length == 11

    def test_two_digit_code(self):
        """Test the coarsest code covers 20 by 20 degrees."""
        area = decode("7F000000+")
        assert area.latitude_lo == pytest.approx(10.0)
        assert area.latitude_hi == pytest.approx(30.0)
        assert area.longitude_lo == pytest.approx(0.0)
        assert area.longitude_hi == pytest.approx(20.0)
        assert area.code_length == 2

    def test_origin_code(self):
        """Test the all-zero-digit code is the south west corner."""
        area = decode("22222222+22")
        assert area.latitude_lo == -90.0
        assert area.longitude_lo == -180.0

    def test_rounded(self):
        """Test bounds are rounded to 14 decimal places."""
        area = decode("7FG49QCJ+2VXGJ")
        for value in (area.latitude_lo, area.latitude_hi, area.longitude_lo, area.longitude_hi):
            assert round(value, 14) == value


class TestDecodeInput:
    """Tests for input handling."""

    def test_lower_case(self):
        """Test lower case codes decode the same as upper case."""
        assert decode("7fg49qcj+2vx") == decode("7FG49QCJ+2VX")

    def test_truncated_to_fifteen_digits(self):
        """Test digits past the fifteenth are ignored."""
        area = decode("7FG49QCJ+2VXGJ2222")
        assert area.code_length == 15
        assert area == decode("7FG49QCJ+2VXGJ22")

    def test_center(self):
        """Test the center of a decoded area."""
        center = decode("7FG49Q00+").center
        assert center.latitude == pytest.approx(20.375)
        assert center.longitude == pytest.approx(2.775)

    def test_pole_code(self):
        """Test the northernmost code stays below the pole."""
        area = decode("CFX2X2X2+X2")
        assert area.latitude_hi == pytest.approx(90.0)
        assert area.latitude_hi <= 90.0

    @pytest.mark.parametrize("code", ["", "+", "7FG49Q0+0", "7FG49QCJ2V", "7FG49QCJ+2"])
    def test_invalid_raises(self, code):
        """Test malformed codes raise ValueError."""
        with pytest.raises(ValueError):
            decode(code)

    def test_short_code_raises(self):
        """Test short codes must be recovered before decoding."""
        with pytest.raises(ValueError):
            decode("9QCJ+2V")

    def test_out_of_range_code_raises(self):
        """Test codes past the pole raise ValueError."""
        with pytest.raises(ValueError):
            decode("F2222222+22")
