"""Domain model entities for ledgerbook.

These are pure data classes representing bookkeeping concepts, independent
of the storage backend. Derived views (ledgers, income statements) are
rebuilt from journal data on every read and never persisted.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class AccountType(str, Enum):
    """Closed set of account kinds in the chart of accounts."""

    ASSET = "asset"
    LIABILITY = "liability"
    EQUITY = "equity"
    REVENUE = "revenue"
    EXPENSE = "expense"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


DEBIT_NATURE_TYPES = frozenset({AccountType.ASSET, AccountType.EXPENSE})


def is_debit_nature(account_type: AccountType) -> bool:
    """Return True if the account type carries a normal debit balance.

    Assets and expenses grow with debits; liabilities, equity and revenue
    grow with credits.
    """
    return AccountType(account_type) in DEBIT_NATURE_TYPES


@dataclass(frozen=True)
class Account:
    """Chart of accounts entry."""

    id: int
    name: str
    account_type: AccountType
    description: Optional[str] = None

    @property
    def is_debit_nature(self) -> bool:
        return is_debit_nature(self.account_type)


@dataclass(frozen=True)
class JournalEntry:
    """Journal entry header."""

    id: int
    date: date
    description: str


@dataclass(frozen=True)
class TransactionLine:
    """Single debit or credit line of a journal entry."""

    id: int
    journal_entry_id: int
    account_id: int
    amount: Decimal
    is_debit: bool


@dataclass(frozen=True)
class NewTransactionLine:
    """Line submitted for a journal entry that has not been posted yet."""

    account_id: int
    amount: Decimal
    is_debit: bool


@dataclass(frozen=True)
class JournalLine:
    """Posted line together with its resolved account."""

    line: TransactionLine
    account: Account

    @property
    def amount(self) -> Decimal:
        return self.line.amount

    @property
    def is_debit(self) -> bool:
        return self.line.is_debit


@dataclass(frozen=True)
class JournalEntryWithLines:
    """Journal entry enriched with its lines."""

    entry: JournalEntry
    lines: tuple[JournalLine, ...]

    @property
    def id(self) -> int:
        return self.entry.id

    @property
    def date(self) -> date:
        return self.entry.date

    @property
    def description(self) -> str:
        return self.entry.description

    @property
    def debit_total(self) -> Decimal:
        return sum((jl.amount for jl in self.lines if jl.is_debit), Decimal("0"))

    @property
    def credit_total(self) -> Decimal:
        return sum((jl.amount for jl in self.lines if not jl.is_debit), Decimal("0"))


@dataclass(frozen=True)
class PostedLine:
    """Transaction line together with its parent journal entry."""

    line: TransactionLine
    journal_entry: JournalEntry


@dataclass(frozen=True)
class LedgerLine:
    """Ledger history row with the balance after applying the line."""

    line: TransactionLine
    journal_entry: JournalEntry
    running_balance: Decimal


@dataclass(frozen=True)
class LedgerView:
    """Per-account ledger derived from posted journal lines."""

    account: Account
    lines: tuple[LedgerLine, ...]
    debit_total: Decimal
    credit_total: Decimal
    balance: Decimal

    @property
    def is_debit_nature(self) -> bool:
        return self.account.is_debit_nature


@dataclass(frozen=True)
class IncomeStatementItem:
    """Revenue or expense line of an income statement."""

    account_id: int
    account_name: str
    amount: Decimal


@dataclass(frozen=True)
class InventoryInput:
    """Manually entered inventory figures for a period."""

    opening_stock: Decimal = Decimal("0")
    purchases: Decimal = Decimal("0")
    closing_stock: Decimal = Decimal("0")
    purchase_returns: Decimal = Decimal("0")


@dataclass(frozen=True)
class InventoryItem:
    """Inventory figures with the cost of goods sold derived from them."""

    opening_stock: Decimal
    purchases: Decimal
    closing_stock: Decimal
    purchase_returns: Decimal
    cogs: Decimal


@dataclass(frozen=True)
class IncomeStatement:
    """Income statement for an inclusive date range."""

    start_date: date
    end_date: date
    revenues: tuple[IncomeStatementItem, ...]
    expenses: tuple[IncomeStatementItem, ...]
    total_revenue: Decimal
    total_expenses: Decimal
    inventory: InventoryItem
    gross_profit: Decimal
    net_income: Decimal
