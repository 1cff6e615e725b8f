"""Tests for canonical number formatting."""

import math

import pytest

from svg_definitions.shared import format_number


class TestFormatNumber:
    """Test shortest round-trip and fixed precision formatting."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "0"),
            (1, "1"),
            (-1, "-1"),
            (10.5, "10.5"),
            (0.0, "0"),
            (-0.0, "0"),
            (1.0, "1"),
            (0.1, "0.1"),
            (123456.789, "123456.789"),
        ],
    )
    def test_shortest_form(self, value, expected) -> None:
        """Test numbers render without trailing zeros."""
        assert format_number(value) == expected

    @pytest.mark.parametrize("value", [0, 1, -1, 10.5, 0.0, 1 / 3, 2.5e-7, 1e21])
    def test_round_trips_through_float(self, value) -> None:
        """Test the formatted text parses back to the same number."""
        assert float(format_number(value)) == value

    def test_no_exponent_for_small_and_large_values(self) -> None:
        """Test positional notation is used for all magnitudes."""
        assert format_number(1e-05) == "0.00001"
        assert format_number(1e16) == "10000000000000000"
        assert "e" not in format_number(2.5e-7).lower()

    def test_fixed_precision_trimmed(self) -> None:
        """Test rounding to a precision strips trailing zeros by default."""
        assert format_number(3.14159, precision=2) == "3.14"
        assert format_number(3.0, precision=2) == "3"
        assert format_number(2.5, precision=0) == "2"

    def test_fixed_precision_untrimmed(self) -> None:
        """Test untrimmed output keeps every decimal place."""
        assert format_number(3, precision=2, trim=False) == "3.00"
        assert format_number(-0.001, precision=2, trim=False) == "0.00"
        assert format_number(20.7, precision=2, trim=False) == "20.70"

    def test_non_finite_values_rejected(self) -> None:
        """Test NaN and infinity cannot be formatted."""
        with pytest.raises(ValueError, match="non-finite"):
            format_number(math.nan)
        with pytest.raises(ValueError, match="non-finite"):
            format_number(math.inf)

    def test_negative_precision_rejected(self) -> None:
        """Test negative precision is rejected."""
        with pytest.raises(ValueError, match="precision must be >= 0 or None"):
            format_number(1.0, precision=-1)
