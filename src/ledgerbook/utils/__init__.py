"""Utility functions for ledgerbook."""

from ledgerbook.utils.date_parser import parse_date, get_date_range
from ledgerbook.utils.amount_parser import parse_amount, format_currency
from ledgerbook.utils.account_resolver import resolve_account

__all__ = ["parse_date", "get_date_range", "parse_amount", "format_currency", "resolve_account"]
