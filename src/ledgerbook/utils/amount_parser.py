"""Amount parsing and formatting utilities."""

from decimal import Decimal, InvalidOperation
import re

_CURRENCY_SYMBOLS = re.compile(r"[$€£¥\s]")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a money string into a Decimal.

    Handles "123.45", "$1,234.56", "-$12.00" and "(12.00)" for negatives.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    text = amount_str.strip()
    negative = text.startswith("(") and text.endswith(")")
    if negative:
        text = text[1:-1]
    text = _CURRENCY_SYMBOLS.sub("", text).replace(",", "")

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return -amount if negative else amount


def format_currency(amount: Decimal, currency_symbol: str = "$") -> str:
    """Format an amount with two decimals and thousands separators.

    Negative amounts put the sign before the symbol: -$40.00.
    """
    sign = "-" if amount < 0 else ""
    return f"{sign}{currency_symbol}{abs(amount):,.2f}"
