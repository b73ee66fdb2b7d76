"""Tests for the ledger projection service."""

from datetime import date
from decimal import Decimal

from ledgerbook.domain.entities import Account, AccountType, JournalEntry, PostedLine, TransactionLine
from ledgerbook.domain.ledger import project_ledger, signed_effect


def test_asset_account_balance(ledger_service, accounts, post):
    cash, revenue, payable = accounts["Cash"], accounts["Revenue"], accounts["Accounts Payable"]
    post(date(2024, 1, 1), "Opening", (cash, 100, True), (revenue, 100, False))
    post(date(2024, 1, 5), "Pay supplier", (payable, 40, True), (cash, 40, False))

    view = ledger_service.get_ledger_account(cash.id)

    assert view.debit_total == Decimal("100")
    assert view.credit_total == Decimal("40")
    assert view.balance == Decimal("60")
    assert view.is_debit_nature is True


def test_large_and_fractional_amounts_balance_exactly(ledger_service, accounts, post):
    cash, revenue = accounts["Cash"], accounts["Revenue"]
    big = Decimal("12345678901234.5678")
    post(date(2024, 1, 1), "Large sale", (cash, big, True), (revenue, big, False))
    post(date(2024, 1, 2), "Tiny sale", (cash, "0.0001", True), (revenue, "0.0001", False))

    view = ledger_service.get_ledger_account(cash.id)

    assert view.balance == big + Decimal("0.0001")
    assert [line.running_balance for line in view.lines] == [big, big + Decimal("0.0001")]


def test_revenue_account_balance(ledger_service, accounts, post):
    cash, revenue = accounts["Cash"], accounts["Revenue"]
    post(date(2024, 1, 1), "Sale", (cash, 100, True), (revenue, 100, False))
    post(date(2024, 1, 2), "Refund", (revenue, 30, True), (cash, 30, False))

    view = ledger_service.get_ledger_account(revenue.id)

    assert view.credit_total == Decimal("100")
    assert view.debit_total == Decimal("30")
    assert view.balance == Decimal("70")
    assert view.is_debit_nature is False


def test_running_balance_follows_date_order(ledger_service, accounts, post):
    cash, revenue, rent = accounts["Cash"], accounts["Revenue"], accounts["Rent Expense"]
    # Posted out of date order on purpose
    post(date(2024, 3, 1), "Rent", (rent, 50, True), (cash, 50, False))
    post(date(2024, 1, 1), "Sale", (cash, 200, True), (revenue, 200, False))
    post(date(2024, 2, 1), "Sale", (cash, 25, True), (revenue, 25, False))

    view = ledger_service.get_ledger_account(cash.id)

    assert [row.journal_entry.date for row in view.lines] == [
        date(2024, 1, 1),
        date(2024, 2, 1),
        date(2024, 3, 1),
    ]
    assert [row.running_balance for row in view.lines] == [
        Decimal("200"),
        Decimal("225"),
        Decimal("175"),
    ]
    assert view.balance == view.lines[-1].running_balance


def test_same_day_lines_ordered_by_entry_id(ledger_service, accounts, post):
    cash, revenue = accounts["Cash"], accounts["Revenue"]
    first = post(date(2024, 1, 1), "Morning", (cash, 10, True), (revenue, 10, False))
    second = post(date(2024, 1, 1), "Evening", (cash, 20, True), (revenue, 20, False))

    view = ledger_service.get_ledger_account(cash.id)

    assert [row.journal_entry.id for row in view.lines] == [first.id, second.id]


def test_credit_nature_running_balance(ledger_service, accounts, post):
    cash, payable = accounts["Cash"], accounts["Accounts Payable"]
    post(date(2024, 1, 1), "Borrow", (cash, 300, True), (payable, 300, False))
    post(date(2024, 1, 2), "Repay", (payable, 120, True), (cash, 120, False))

    view = ledger_service.get_ledger_account(payable.id)

    assert [row.running_balance for row in view.lines] == [Decimal("300"), Decimal("180")]
    assert view.balance == Decimal("180")


def test_account_without_activity(ledger_service, accounts):
    view = ledger_service.get_ledger_account(accounts["Owner's Equity"].id)

    assert view.lines == ()
    assert view.debit_total == 0
    assert view.credit_total == 0
    assert view.balance == 0


def test_unknown_account_returns_none(ledger_service):
    assert ledger_service.get_ledger_account(999) is None


def test_list_ledger_accounts_covers_every_account(ledger_service, accounts, post):
    cash, revenue = accounts["Cash"], accounts["Revenue"]
    post(date(2024, 1, 1), "Sale", (cash, 80, True), (revenue, 80, False))

    views = ledger_service.list_ledger_accounts()

    assert [view.account.name for view in views] == list(accounts)
    by_name = {view.account.name: view for view in views}
    assert by_name["Cash"].balance == Decimal("80")
    assert by_name["Revenue"].balance == Decimal("80")
    assert by_name["Rent Expense"].balance == 0
    for view in views:
        assert view == ledger_service.get_ledger_account(view.account.id)


def test_reads_are_repeatable(ledger_service, accounts, post):
    cash, revenue = accounts["Cash"], accounts["Revenue"]
    post(date(2024, 1, 1), "Sale", (cash, 80, True), (revenue, 80, False))

    assert ledger_service.get_ledger_account(cash.id) == ledger_service.get_ledger_account(cash.id)
    assert ledger_service.list_ledger_accounts() == ledger_service.list_ledger_accounts()


def test_signed_effect():
    entry = JournalEntry(id=1, date=date(2024, 1, 1), description="x")
    debit = PostedLine(TransactionLine(1, 1, 1, Decimal("5"), True), entry)
    credit = PostedLine(TransactionLine(2, 1, 1, Decimal("5"), False), entry)

    assert signed_effect(debit, debit_nature=True) == Decimal("5")
    assert signed_effect(credit, debit_nature=True) == Decimal("-5")
    assert signed_effect(debit, debit_nature=False) == Decimal("-5")
    assert signed_effect(credit, debit_nature=False) == Decimal("5")


def test_project_ledger_negative_balance():
    """An overdrawn asset shows a negative balance rather than flipping sides."""
    cash = Account(id=1, name="Cash", account_type=AccountType.ASSET)
    entry = JournalEntry(id=1, date=date(2024, 1, 1), description="Overdraft")
    view = project_ledger(cash, [PostedLine(TransactionLine(1, 1, 1, Decimal("30"), False), entry)])

    assert view.credit_total == Decimal("30")
    assert view.balance == Decimal("-30")
    assert view.lines[0].running_balance == Decimal("-30")
