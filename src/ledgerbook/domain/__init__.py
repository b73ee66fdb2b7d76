"""Domain layer for ledgerbook application.

Services live in their own modules (account, journal, ledger,
income_statement) and are imported from there; this package only
re-exports entities and errors so the database layer can import them
without pulling the services in.
"""

from ledgerbook.domain.entities import (
    Account,
    AccountType,
    IncomeStatement,
    IncomeStatementItem,
    InventoryInput,
    InventoryItem,
    JournalEntry,
    JournalEntryWithLines,
    JournalLine,
    LedgerLine,
    LedgerView,
    NewTransactionLine,
    PostedLine,
    TransactionLine,
    is_debit_nature,
)
from ledgerbook.domain.errors import (
    DomainError,
    NotFoundError,
    UnbalancedEntryError,
    ValidationError,
)

__all__ = [
    "Account",
    "AccountType",
    "IncomeStatement",
    "IncomeStatementItem",
    "InventoryInput",
    "InventoryItem",
    "JournalEntry",
    "JournalEntryWithLines",
    "JournalLine",
    "LedgerLine",
    "LedgerView",
    "NewTransactionLine",
    "PostedLine",
    "TransactionLine",
    "is_debit_nature",
    "DomainError",
    "NotFoundError",
    "UnbalancedEntryError",
    "ValidationError",
]
