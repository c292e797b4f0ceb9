"""
Tests for rupee display formatting.

Tests: format_inr coercion, rounding, en-IN grouping
"""

import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from decimal import Decimal

import pytest
from services.currency import format_inr


class TestFormatInr:
    """Tests for format_inr()."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "amount, expected",
        [
            (0, "₹0"),
            (7, "₹7"),
            (999, "₹999"),
            (1000, "₹1,000"),
            (12345, "₹12,345"),
            (123456, "₹1,23,456"),
            (1234567, "₹12,34,567"),
            (123456789, "₹12,34,56,789"),
        ],
    )
    def test_indian_grouping(self, amount, expected):
        assert format_inr(amount) == expected

    @pytest.mark.unit
    def test_no_fraction_digits(self):
        """Fractions are rounded away, never rendered."""
        result = format_inr(1499.49)
        assert result == "₹1,499"
        assert "." not in result

    @pytest.mark.unit
    def test_half_rounds_up(self):
        assert format_inr(2.5) == "₹3"
        assert format_inr(999.5) == "₹1,000"

    @pytest.mark.unit
    def test_numeric_string(self):
        assert format_inr(" 2500 ") == "₹2,500"

    @pytest.mark.unit
    def test_decimal_input(self):
        assert format_inr(Decimal("1250.00")) == "₹1,250"

    @pytest.mark.unit
    @pytest.mark.parametrize("bad", [None, "", "abc", "12abc", float("nan"), object(), [], {}])
    def test_invalid_input_formats_as_zero(self, bad):
        """Anything non-numeric renders exactly like 0."""
        assert format_inr(bad) == format_inr(0) == "₹0"

    @pytest.mark.unit
    def test_booleans(self):
        assert format_inr(True) == "₹1"
        assert format_inr(False) == "₹0"

    @pytest.mark.unit
    def test_negative(self):
        assert format_inr(-1234567) == "-₹12,34,567"

    @pytest.mark.unit
    def test_infinity(self):
        assert format_inr(float("inf")) == "₹∞"

    @pytest.mark.unit
    @pytest.mark.parametrize("nan", [Decimal("NaN"), Decimal("sNaN")])
    def test_decimal_nan_formats_as_zero(self, nan):
        assert format_inr(nan) == "₹0"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text, expected",
        [("0x10", "₹16"), ("0b11", "₹3"), ("0o17", "₹15"), (" 1e3 ", "₹1,000"), ("+.5", "₹1")],
    )
    def test_javascript_numeric_strings(self, text, expected):
        assert format_inr(text) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["1_000", "inf", "nan", "-infinity", "0x", "1e"])
    def test_python_only_spellings_format_as_zero(self, text):
        assert format_inr(text) == "₹0"

    @pytest.mark.unit
    def test_infinity_spelling(self):
        assert format_inr("Infinity") == "₹∞"
        assert format_inr("-Infinity") == "-₹∞"

    @pytest.mark.unit
    def test_huge_int_is_infinity(self):
        assert format_inr(10 ** 400) == "₹∞"
        assert format_inr(-(10 ** 400)) == "-₹∞"

    @pytest.mark.unit
    def test_negative_zero_is_zero(self):
        """-0 is falsy, so it falls back to 0."""
        assert format_inr(-0.0) == "₹0"
        assert format_inr("-0") == "₹0"
