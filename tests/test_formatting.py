"""Tests for duration digit grouping."""

import pytest

from parse_timing.benchmark import format_duration, format_duration_line, group_digits
from parse_timing.errors import FormatterInvariantError


class TestGroupDigits:
    """Concrete grouping scenarios."""

    @pytest.mark.parametrize("digits,expected", [
        ("0", "0"),
        ("7", "7"),
        ("42", "42"),
        ("999", "999"),
        ("1000", "1,000"),
        ("12345", "12,345"),
        ("123456", "123,456"),
        ("1234567", "1,234,567"),
        ("123456789", "123,456,789"),
        ("1234567890", "1,234,567,890"),
    ])
    def test_scenarios(self, digits, expected):
        """Test known digit strings."""
        assert group_digits(digits) == expected

    def test_leading_zeros_kept_verbatim(self):
        """Test grouping works on the digit string as given."""
        assert group_digits("0001") == "0,001"

    def test_empty_rejected(self):
        """Test empty digit string is invalid."""
        with pytest.raises(ValueError):
            group_digits("")

    @pytest.mark.parametrize("text", ["-1", "1.5", "12a", " 12", "١٢٣"])
    def test_non_digits_rejected(self, text):
        """Test strings with non-ASCII-digit characters are invalid."""
        with pytest.raises(ValueError):
            group_digits(text)

    def test_invariant_error_is_assertion(self):
        """Test the invariant fault is treated as an assertion failure."""
        assert issubclass(FormatterInvariantError, AssertionError)


class TestGroupingLaws:
    """Properties that hold for every nonnegative integer."""

    @pytest.mark.parametrize("n", [0, 1, 9, 10, 99, 100, 999, 1000, 10**6 - 1, 10**6, 2**63, 10**30 + 7])
    def test_removing_commas_restores_digits(self, n):
        """Test stripping separators gives back the original digits."""
        assert format_duration(n).replace(",", "") == str(n)

    @pytest.mark.parametrize("n", [5, 55, 555, 5555, 55555, 555555, 5555555])
    def test_group_sizes(self, n):
        """Test every group after the first has three digits."""
        groups = format_duration(n).split(",")
        length = len(str(n))
        assert len(groups[0]) == (length % 3 or 3)
        assert all(len(g) == 3 for g in groups[1:])

    def test_deterministic(self):
        """Test formatting the same value twice yields the same string."""
        assert format_duration(9876543210) == format_duration(9876543210)


class TestFormatDuration:
    """Tests for integer and line formatting."""

    def test_negative_rejected(self):
        """Test negative durations are rejected."""
        with pytest.raises(ValueError):
            format_duration(-1)

    def test_line_has_unit_suffix(self):
        """Test the duration line ends with the unit."""
        assert format_duration_line(1234567000, "ps") == "1,234,567,000 ps"

    def test_zero_line(self):
        """Test a zero duration line."""
        assert format_duration_line(0, "ps") == "0 ps"
