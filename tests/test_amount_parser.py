"""Tests for amount parsing."""

import pytest
from decimal import Decimal
from ledgerbook.utils.amount_parser import parse_amount, parse_qif_amount


def test_parse_simple_amount():
    """Test parsing simple amounts."""
    assert parse_amount("123.45") == Decimal("123.45")
    assert parse_amount("0.01") == Decimal("0.01")


def test_parse_amount_with_currency_and_separators():
    """Test parsing amounts with currency symbols and thousands separators."""
    assert parse_amount("$1,234.56") == Decimal("1234.56")
    assert parse_amount("€99") == Decimal("99")


def test_parse_parenthesized_negative():
    """Test parsing accounting-style negatives."""
    assert parse_amount("(45.00)") == Decimal("-45.00")


@pytest.mark.parametrize("text", ["", "   ", "abc", "NaN", "Infinity"])
def test_parse_invalid_amount(text):
    """Test that invalid amounts raise ValueError."""
    with pytest.raises(ValueError):
        parse_amount(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("-42.50", Decimal("-42.50")),
        ("1,500.00", Decimal("1500.00")),
        ("$-12.00", Decimal("-12.00")),
        (" 7 ", Decimal("7")),
        (".5", Decimal("0.5")),
        ("12.34.56", Decimal("12.34")),
    ],
)
def test_parse_qif_amount(text, expected):
    """Test QIF amount parsing keeps the leading signed number."""
    assert parse_qif_amount(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "-", "--5"])
def test_parse_qif_amount_without_number_is_zero(text):
    """Test QIF amounts with no leading number are zero."""
    assert parse_qif_amount(text) == Decimal("0")
