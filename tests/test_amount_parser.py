"""Tests for amount parsing and formatting."""

from decimal import Decimal

import pytest

from ledgerbook.utils.amount_parser import format_currency, parse_amount


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123.45", Decimal("123.45")),
        ("$123.45", Decimal("123.45")),
        ("1,234.56", Decimal("1234.56")),
        ("-$12.00", Decimal("-12.00")),
        ("(12.50)", Decimal("-12.50")),
        (" € 7 ", Decimal("7")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "12..5", "NaN", "Infinity"])
def test_parse_amount_invalid(text):
    with pytest.raises(ValueError):
        parse_amount(text)


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("0"), "$0.00"),
        (Decimal("1234.5"), "$1,234.50"),
        (Decimal("-40"), "-$40.00"),
        (Decimal("1000000"), "$1,000,000.00"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_currency_custom_symbol():
    assert format_currency(Decimal("5"), currency_symbol="€") == "€5.00"
