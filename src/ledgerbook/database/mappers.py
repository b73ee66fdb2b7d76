"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer keeps ORM rows out of the domain services, so a different
storage backend can hand back the same entities.
"""

from decimal import Decimal

from ledgerbook.domain import entities as domain
from ledgerbook.database.models import (
    Account as ORMAccount,
    JournalEntry as ORMJournalEntry,
    TransactionLine as ORMTransactionLine,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        account_type=domain.AccountType(orm_account.account_type),
        description=orm_account.description,
    )


def journal_entry_to_domain(orm_entry: ORMJournalEntry) -> domain.JournalEntry:
    """Convert SQLAlchemy JournalEntry model to domain JournalEntry entity."""
    return domain.JournalEntry(
        id=orm_entry.id,
        date=orm_entry.date,
        description=orm_entry.description,
    )


def transaction_line_to_domain(orm_line: ORMTransactionLine) -> domain.TransactionLine:
    """Convert SQLAlchemy TransactionLine model to domain TransactionLine entity."""
    # Stored amounts come back padded to the storage scale (500.0000)
    amount = Decimal(orm_line.amount)
    return domain.TransactionLine(
        id=orm_line.id,
        journal_entry_id=orm_line.journal_entry_id,
        account_id=orm_line.account_id,
        amount=_strip_scale(amount),
        is_debit=bool(orm_line.is_debit),
    )


def journal_entry_with_lines_to_domain(
    orm_entry: ORMJournalEntry,
) -> domain.JournalEntryWithLines:
    """Convert a JournalEntry row and its loaded lines to the enriched entity."""
    lines = tuple(
        domain.JournalLine(
            line=transaction_line_to_domain(orm_line),
            account=account_to_domain(orm_line.account),
        )
        for orm_line in orm_entry.transaction_lines
    )
    return domain.JournalEntryWithLines(entry=journal_entry_to_domain(orm_entry), lines=lines)


def posted_line_to_domain(orm_line: ORMTransactionLine) -> domain.PostedLine:
    """Convert a TransactionLine row and its entry to a PostedLine."""
    return domain.PostedLine(
        line=transaction_line_to_domain(orm_line),
        journal_entry=journal_entry_to_domain(orm_line.journal_entry),
    )


def _strip_scale(amount: Decimal) -> Decimal:
    if amount == amount.to_integral_value():
        return amount.quantize(Decimal("1"))
    return amount.normalize()
