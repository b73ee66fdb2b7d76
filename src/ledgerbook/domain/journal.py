"""Journal domain service.

Posting a journal entry is the only way money moves through the books.
Every entry is validated line by line, then checked for balance, and only
then handed to the database as one unit.
"""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Optional

from ledgerbook.database.base import Database
from ledgerbook.domain.amounts import to_amount
from ledgerbook.domain.entities import JournalEntryWithLines, NewTransactionLine
from ledgerbook.domain.errors import (
    NotFoundError,
    UnbalancedEntryError,
    ValidationError,
    account_not_found,
    journal_entry_not_found,
)

logger = logging.getLogger(__name__)

# Largest debit/credit difference still treated as balanced
BALANCE_TOLERANCE = Decimal("0.001")

MIN_LINES = 2


def to_entry_date(value: date) -> date:
    """Reduce an entry timestamp to its calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise ValidationError(f"Invalid date: {value!r}")


def is_balanced(debit_total: Decimal, credit_total: Decimal) -> bool:
    """Return True if debits and credits match within BALANCE_TOLERANCE."""
    return abs(debit_total - credit_total) < BALANCE_TOLERANCE


class JournalService:
    """Service for posting and reading journal entries."""

    def __init__(self, db: Database):
        """Initialize journal service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_journal_entry(
        self,
        entry_date: date,
        description: str,
        lines: Iterable[NewTransactionLine],
    ) -> JournalEntryWithLines:
        """Post a balanced journal entry.

        Args:
            entry_date: Entry date (a datetime is reduced to its date)
            description: Entry description
            lines: At least two debit/credit lines

        Returns:
            Posted entry with its lines and their accounts

        Raises:
            ValidationError: If the description is empty, fewer than two lines
                are given, an amount is not positive, or an account does not exist
            UnbalancedEntryError: If debits and credits differ
        """
        entry_date = to_entry_date(entry_date)
        description = (description or "").strip()
        if not description:
            raise ValidationError("Description is required")

        validated = self._validate_lines(lines)

        debit_total = sum((line.amount for line in validated if line.is_debit), Decimal("0"))
        credit_total = sum((line.amount for line in validated if not line.is_debit), Decimal("0"))
        if not is_balanced(debit_total, credit_total):
            logger.warning(
                "Rejected unbalanced entry %r (debits %s, credits %s)",
                description,
                debit_total,
                credit_total,
            )
            raise UnbalancedEntryError(debit_total, credit_total)

        entry_id = self.db.create_journal_entry(
            entry_date=entry_date, description=description, lines=validated
        )
        logger.info(
            "Posted journal entry %d on %s with %d lines (total %s)",
            entry_id,
            entry_date.isoformat(),
            len(validated),
            debit_total,
        )
        return self.require_journal_entry(entry_id)

    def _validate_lines(self, lines: Iterable[NewTransactionLine]) -> list[NewTransactionLine]:
        lines = list(lines)
        if len(lines) < MIN_LINES:
            raise ValidationError("At least two transaction lines are required")

        validated = []
        for index, line in enumerate(lines, start=1):
            amount = to_amount(line.amount)
            if amount <= 0:
                raise ValidationError(f"Line {index}: amount must be greater than 0")
            if self.db.get_account(line.account_id) is None:
                raise ValidationError(f"Line {index}: {account_not_found(line.account_id)}")
            validated.append(
                NewTransactionLine(
                    account_id=line.account_id, amount=amount, is_debit=bool(line.is_debit)
                )
            )
        return validated

    def get_journal_entry(self, entry_id: int) -> Optional[JournalEntryWithLines]:
        """Get journal entry by ID.

        Args:
            entry_id: Journal entry ID

        Returns:
            Entry with lines or None if not found
        """
        return self.db.get_journal_entry(entry_id)

    def require_journal_entry(self, entry_id: int) -> JournalEntryWithLines:
        """Get journal entry by ID, raising if it does not exist."""
        entry = self.db.get_journal_entry(entry_id)
        if entry is None:
            raise NotFoundError(journal_entry_not_found(entry_id))
        return entry

    def list_journal_entries(self) -> list[JournalEntryWithLines]:
        """List all journal entries in ID order."""
        return self.db.list_journal_entries()
