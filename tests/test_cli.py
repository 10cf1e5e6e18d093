"""Tests for the command-line interface."""

import pytest
from pluscodes.cli import create_parser, main


class TestParser:
    """Tests for argument parsing."""

    def test_encode_defaults(self):
        """Test encode uses 10 digits by default."""
        args = create_parser().parse_args(["encode", "20.375", "2.775"])
        assert args.latitude == 20.375
        assert args.longitude == 2.775
        assert args.length == 10

    def test_negative_coordinates(self):
        """Test negative numbers are read as positional values."""
        args = create_parser().parse_args(["encode", "-33.8688", "-151.2093", "-l", "8"])
        assert args.latitude == -33.8688
        assert args.longitude == -151.2093
        assert args.length == 8

    def test_no_command(self, capsys):
        """Test running without a command prints help."""
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out


class TestCodecCommands:
    """Tests for the codec commands."""

    def test_encode(self, capsys):
        """Test encoding a location."""
        assert main(["encode", "20.375", "2.775", "--length", "6"]) == 0
        assert capsys.readouterr().out.strip() == "7FG49Q00+"

    def test_decode(self, capsys):
        """Test decoding a code."""
        assert main(["decode", "7fg49q00+"]) == 0
        out = capsys.readouterr().out
        assert "Code: 7FG49Q00+" in out
        assert "Code length: 6" in out
        assert "20.35 to 20.4" in out

    def test_decode_short_code(self, capsys):
        """Test decoding a short code fails with a hint."""
        assert main(["decode", "9QCJ+2V"]) == 1
        out = capsys.readouterr().out
        assert out.startswith("Error:")
        assert "recover" in out

    def test_shorten(self, capsys):
        """Test shortening a code."""
        assert main(["shorten", "8FVC2222+22", "47.0000625", "8.0000625"]) == 0
        assert capsys.readouterr().out.strip() == "+22"

    def test_shorten_upper_cases(self, capsys):
        """Test a lower case code is printed upper cased."""
        assert main(["shorten", "8fvc2222+22", "47.0000625", "8.1"]) == 0
        assert capsys.readouterr().out.strip() == "2222+22"

    def test_shorten_unchanged_upper_cases(self, capsys):
        """Test a code too far to shorten is printed upper cased."""
        assert main(["shorten", "8fvc2222+22", "-33.8688", "151.2093"]) == 0
        assert capsys.readouterr().out.strip() == "8FVC2222+22"

    def test_shorten_invalid(self, capsys):
        """Test shortening a short code fails."""
        assert main(["shorten", "9QCJ+2V", "47.0", "8.0"]) == 1
        assert capsys.readouterr().out.startswith("Error:")

    def test_recover(self, capsys):
        """Test recovering a short code."""
        assert main(["recover", "2222+22", "46.9", "8.0"]) == 0
        assert capsys.readouterr().out.strip() == "8FVC2222+22"

    def test_recover_invalid(self, capsys):
        """Test recovering an invalid code fails."""
        assert main(["recover", "9QC+J2V", "47.0", "8.0"]) == 1
        assert capsys.readouterr().out.startswith("Error:")

    def test_validate(self, capsys):
        """Test validating several codes."""
        assert main(["validate", "7FG49Q00+", "9QCJ+2V"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0] == "7FG49Q00+: valid=True short=False full=True digits=6"
        assert lines[1] == "9QCJ+2V: valid=True short=True full=False digits=6"

    def test_validate_invalid(self, capsys):
        """Test an invalid code sets the exit status."""
        assert main(["validate", "7FG49Q00+", "7FG49Q0+0"]) == 1
        out = capsys.readouterr().out
        assert "7FG49Q0+0: valid=False" in out

    def test_stats(self, capsys):
        """Test the cell size table."""
        assert main(["stats"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        # Header lines plus one row per code length
        assert len(lines) == 2 + 10
        assert lines[2].split() == ["2", "20", "20"]
        assert lines[3].split() == ["4", "1", "1"]


class TestAddressCommands:
    """Tests for the address commands."""

    def test_add_and_find(self, tmp_path, capsys):
        """Test adding an address and finding it by code."""
        db = str(tmp_path / "addresses.duckdb")
        assert main([
            "address", "add", "--db", db, "Herzl", "18", "47.0000625", "8.0000625",
            "--entity", "bakery", "--entity", "pharmacy",
        ]) == 0
        assert "plus code 8FVC2222+22" in capsys.readouterr().out

        assert main(["address", "find", "--db", db, "8FVC0000+"]) == 0
        out = capsys.readouterr().out
        assert "Found 1 address(es)" in out
        assert "Herzl 18" in out
        assert "[bakery, pharmacy]" in out

    def test_add_invalid_length(self, tmp_path, capsys):
        """Test an out of range code length is reported, not raised."""
        db = tmp_path / "addresses.duckdb"
        assert main([
            "address", "add", "--db", str(db), "Herzl", "18", "1.0", "2.0", "-l", "20",
        ]) == 1
        assert capsys.readouterr().out.startswith("Error: code_length")
        assert not db.exists()

    def test_find_near(self, tmp_path, capsys):
        """Test finding with a short code and reference location."""
        db = str(tmp_path / "addresses.duckdb")
        main(["address", "add", "--db", db, "Herzl", "18", "47.0000625", "8.0000625"])
        capsys.readouterr()

        assert main(["address", "find", "--db", db, "2222+22", "--near", "46.9", "8.0"]) == 0
        assert "Found 1 address(es)" in capsys.readouterr().out

    def test_find_short_without_reference(self, tmp_path, capsys):
        """Test a short code needs --near."""
        db = str(tmp_path / "addresses.duckdb")
        main(["address", "add", "--db", db, "Herzl", "18", "47.0000625", "8.0000625"])
        capsys.readouterr()

        assert main(["address", "find", "--db", db, "2222+22"]) == 1
        assert "--near" in capsys.readouterr().out

    def test_find_missing_database(self, tmp_path, capsys):
        """Test searching a missing database fails."""
        assert main(["address", "find", "--db", str(tmp_path / "none.duckdb"), "8FVC0000+"]) == 1
        assert capsys.readouterr().out.startswith("Error:")

    def test_missing_subcommand(self, capsys):
        """Test the address command needs add or find."""
        assert main(["address"]) == 1
