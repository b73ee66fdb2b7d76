"""Tests for account name/ID resolution."""

import pytest

from ledgerbook.domain.errors import NotFoundError
from ledgerbook.utils.account_resolver import resolve_account


def test_resolve_by_int_id(account_service, accounts):
    assert resolve_account(account_service, accounts["Cash"].id) == accounts["Cash"].id


def test_resolve_by_string_id(account_service, accounts):
    assert resolve_account(account_service, str(accounts["Revenue"].id)) == accounts["Revenue"].id


def test_resolve_by_name(account_service, accounts):
    assert resolve_account(account_service, "Rent Expense") == accounts["Rent Expense"].id


def test_resolve_by_name_ignoring_case(account_service, accounts):
    assert resolve_account(account_service, " rent expense ") == accounts["Rent Expense"].id


def test_exact_name_wins_over_case_insensitive(account_service):
    lower = account_service.create_account("cash", "asset")
    upper = account_service.create_account("Cash", "asset")

    assert resolve_account(account_service, "Cash") == upper.id
    assert resolve_account(account_service, "cash") == lower.id


def test_unknown_id(account_service, accounts):
    with pytest.raises(NotFoundError, match="Account ID 999 not found"):
        resolve_account(account_service, "999")


def test_unknown_name(account_service, accounts):
    with pytest.raises(NotFoundError, match="Account 'Petty Cash' not found"):
        resolve_account(account_service, "Petty Cash")
