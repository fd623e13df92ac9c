"""Test module for glif2svg.number

The tests are run using pytest.
"""

import math

import pytest

from glif2svg.common import InvalidPrecisionError
from glif2svg.number import DEFAULT_PRECISION, NumberFormatter

SAMPLE_VALUES = [0.0, 1.0, 12.3456, -12.3456, 0.125, -0.125, 799.99, -199.5, 1234.5678, 1e-7, 3.0e6]

# written exactly in a source file, but not representable in binary
DECIMAL_VALUES = [0.29, 4.35, 1.005, 0.1, 2.675, -0.29, -4.35, 8.2, 0.7]


def neighbours(value: float, steps: int = 3):
    """_value_ and the _steps_ floats next to it on either side."""
    below = above = value
    result = [value]
    for _ in range(steps):
        below = math.nextafter(below, -math.inf)
        above = math.nextafter(above, math.inf)
        result.extend((below, above))
    return result


class TestTruncate:
    """Tests for NumberFormatter.truncate"""

    def test_truncate_positive(self):
        """Digits beyond the precision are cut off."""
        assert NumberFormatter.truncate(1.23456, 2) == pytest.approx(1.23)

    def test_truncate_negative_goes_toward_zero(self):
        """Negative values are truncated toward zero, not floored."""
        assert NumberFormatter.truncate(-1.23456, 2) == pytest.approx(-1.23)
        assert NumberFormatter.truncate(-2.999, 0) == -2.0

    def test_truncate_does_not_round(self):
        """2.999 with precision 0 is 2, not 3."""
        assert NumberFormatter.truncate(2.999, 0) == 2.0

    def test_truncate_small_negative_to_zero(self):
        """A value vanishing under truncation becomes 0 without sign."""
        assert NumberFormatter.truncate(-0.4, 0) == 0.0
        assert NumberFormatter.to_string(NumberFormatter.truncate(-0.4, 0)) == "0"

    def test_truncate_large_precision_keeps_value(self):
        """With precision far beyond the float resolution the value is unchanged."""
        assert NumberFormatter.truncate(1.5, 255) == 1.5
        assert NumberFormatter.truncate(123.456, DEFAULT_PRECISION) == 123.456

    @pytest.mark.parametrize("precision", [0, 1, 2, 3, 5, 16])
    def test_truncation_direction(self, precision):
        """The truncated value never lies further from zero than the original."""
        for value in SAMPLE_VALUES:
            truncated = float(NumberFormatter.format(value, precision))
            if value >= 0:
                assert truncated <= value
            else:
                assert truncated >= value

    def test_truncate_non_finite(self):
        """Infinity cannot be truncated."""
        with pytest.raises(ValueError):
            NumberFormatter.truncate(float("inf"), 2)


class TestFormat:
    """Tests for NumberFormatter.format and to_string"""

    def test_integral_values_without_fraction(self):
        """Integral values are written without trailing .0"""
        assert NumberFormatter.format(800.0) == "800"
        assert NumberFormatter.format(-200.0) == "-200"
        assert NumberFormatter.format(0) == "0"

    def test_fractional_values(self):
        """Fractional values are written with the shortest representation."""
        assert NumberFormatter.format(12.3456, 2) == "12.34"
        assert NumberFormatter.format(0.5) == "0.5"
        assert NumberFormatter.format(-0.125, 3) == "-0.125"

    def test_precision_zero(self):
        """Precision 0 writes integers only."""
        assert NumberFormatter.format(10.75, 0) == "10"
        assert NumberFormatter.format(-10.75, 0) == "-10"

    def test_no_exponent_notation(self):
        """Very large and very small numbers are written positionally."""
        assert NumberFormatter.format(1e20, 2) == "100000000000000000000"
        assert NumberFormatter.format(1e-7, 16) == "0.0000001"

    @pytest.mark.parametrize("precision", [0, 1, 2, 3, 16])
    def test_format_idempotent(self, precision):
        """Formatting an already formatted value again yields the same text."""
        for value in SAMPLE_VALUES:
            once = NumberFormatter.format(value, precision)
            assert NumberFormatter.format(float(once), precision) == once


class TestValidatePrecision:
    """Tests for NumberFormatter.validate_precision"""

    @pytest.mark.parametrize("value, expected", [(0, 0), (16, 16), (255, 255), ("4", 4), (" 12 ", 12)])
    def test_valid(self, value, expected):
        """Integers and decimal strings within 0..255 are accepted."""
        assert NumberFormatter.validate_precision(value) == expected

    @pytest.mark.parametrize("value", [-1, 256, "256", "-1", "abc", "", 1.5, True, None])
    def test_invalid(self, value):
        """Everything else is rejected."""
        with pytest.raises(InvalidPrecisionError):
            NumberFormatter.validate_precision(value)


class TestDecimalInput:
    """Coordinates given as decimal text keep their digits"""

    @pytest.mark.parametrize(
        "value, precision, expected",
        [
            (0.29, 2, "0.29"),
            (4.35, 2, "4.35"),
            (-4.35, 2, "-4.35"),
            (1.005, 3, "1.005"),
            (1.005, 2, "1"),
            (0.7, 1, "0.7"),
            (8.2, 1, "8.2"),
            (2.675, 2, "2.67"),
            (0.29000000000000004, 2, "0.29"),
        ],
    )
    def test_exact_text(self, value, precision, expected):
        """No digit is lost to the binary representation of the value."""
        assert NumberFormatter.format(value, precision) == expected

    def test_next_float_above(self):
        """The float next to 4.35 is written as 4.35 at precision 2."""
        assert NumberFormatter.format(math.nextafter(4.35, math.inf), 2) == "4.35"

    @pytest.mark.parametrize("precision", [1, 2, 3])
    def test_format_idempotent_near_decimals(self, precision):
        """Formatting the text of a formatted value again yields the same text."""
        for base in DECIMAL_VALUES:
            for value in neighbours(base):
                once = NumberFormatter.format(value, precision)
                assert NumberFormatter.format(float(once), precision) == once, value

    @pytest.mark.parametrize("precision", [1, 2, 3])
    def test_truncation_direction_near_decimals(self, precision):
        """Values next to decimals are still truncated toward zero."""
        for base in DECIMAL_VALUES:
            for value in neighbours(base):
                truncated = float(NumberFormatter.format(value, precision))
                assert abs(truncated) <= abs(value), value

    def test_floats_above_decimal(self):
        """A run of consecutive floats above 0.29 is written as 0.29 at precision 2."""
        value = 0.29
        for _ in range(2000):
            value = math.nextafter(value, math.inf)
            once = NumberFormatter.format(value, 2)
            assert once == "0.29"
            assert NumberFormatter.format(float(once), 2) == once
