"""Tests for display formatting."""

from decimal import Decimal

from hotelledger.utils.formatting import MISSING, format_currency, format_diff, format_percent


def test_format_currency():
    """Test German currency formatting."""
    assert format_currency(Decimal("1234.56")) == "1.234,56 €"
    assert format_currency(Decimal("-1234567.5")) == "-1.234.567,50 €"
    assert format_currency(Decimal("0")) == "0,00 €"


def test_format_missing_values():
    """Test that missing values are shown as a dash, not zero."""
    assert format_currency(None) == MISSING
    assert format_diff(None) == MISSING
    assert format_percent(None) == MISSING


def test_format_percent():
    """Test signed percentages."""
    assert format_percent(Decimal("50")) == "+50.0%"
    assert format_percent(Decimal("-12.345")) == "-12.3%"
    assert format_percent(Decimal("0")) == "+0.0%"
