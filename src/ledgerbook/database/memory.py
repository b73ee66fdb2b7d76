"""In-memory database implementation.

Holds every record for the lifetime of the process with no durability
across restarts. Each entity type is an arena (ID -> record) with its own
monotonically increasing ID counter.
"""

import threading
from datetime import date
from typing import Optional, Sequence

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import (
    Account,
    AccountType,
    JournalEntry,
    JournalEntryWithLines,
    JournalLine,
    NewTransactionLine,
    PostedLine,
    TransactionLine,
)
from ledgerbook.domain.errors import ValidationError, account_not_found


class InMemoryDatabase(Database):
    """Dictionary-backed implementation of Database interface."""

    def __init__(self):
        self._lock = threading.RLock()
        self._accounts: dict[int, Account] = {}
        self._journal_entries: dict[int, JournalEntry] = {}
        self._transaction_lines: dict[int, TransactionLine] = {}
        self._next_account_id = 1
        self._next_journal_entry_id = 1
        self._next_transaction_line_id = 1

    def connect(self) -> None:
        """Connect to the database."""
        # Nothing to connect to
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    def create_account(
        self, name: str, account_type: AccountType, description: Optional[str] = None
    ) -> int:
        """Create a new account. Returns account ID."""
        with self._lock:
            account_id = self._next_account_id
            self._next_account_id += 1
            self._accounts[account_id] = Account(
                id=account_id,
                name=name,
                account_type=AccountType(account_type),
                description=description,
            )
            return account_id

    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        with self._lock:
            return self._accounts.get(account_id)

    def list_accounts(self) -> list[Account]:
        """List all accounts in creation order."""
        with self._lock:
            return list(self._accounts.values())

    # Journal operations
    def create_journal_entry(
        self, entry_date: date, description: str, lines: Sequence[NewTransactionLine]
    ) -> int:
        """Create a journal entry with all of its lines. Returns entry ID."""
        with self._lock:
            # Check references before touching any arena so a failure leaves no trace
            for new_line in lines:
                if new_line.account_id not in self._accounts:
                    raise ValidationError(account_not_found(new_line.account_id))

            entry_id = self._next_journal_entry_id
            entry = JournalEntry(id=entry_id, date=entry_date, description=description)

            line_id = self._next_transaction_line_id
            posted = {}
            for new_line in lines:
                posted[line_id] = TransactionLine(
                    id=line_id,
                    journal_entry_id=entry_id,
                    account_id=new_line.account_id,
                    amount=new_line.amount,
                    is_debit=new_line.is_debit,
                )
                line_id += 1

            self._journal_entries[entry_id] = entry
            self._transaction_lines.update(posted)
            self._next_journal_entry_id = entry_id + 1
            self._next_transaction_line_id = line_id
            return entry_id

    def get_journal_entry(self, entry_id: int) -> Optional[JournalEntryWithLines]:
        """Get journal entry with its lines by ID."""
        with self._lock:
            entry = self._journal_entries.get(entry_id)
            if entry is None:
                return None
            return self._with_lines(entry)

    def list_journal_entries(self) -> list[JournalEntryWithLines]:
        """List all journal entries with their lines, in ID order."""
        with self._lock:
            return [self._with_lines(entry) for entry in self._journal_entries.values()]

    def list_transaction_lines(
        self,
        account_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[PostedLine]:
        """List posted lines joined with their journal entry."""
        with self._lock:
            results = []
            for line in self._transaction_lines.values():
                if account_id is not None and line.account_id != account_id:
                    continue
                entry = self._journal_entries[line.journal_entry_id]
                if start_date is not None and entry.date < start_date:
                    continue
                if end_date is not None and entry.date > end_date:
                    continue
                results.append(PostedLine(line=line, journal_entry=entry))
            return results

    def _with_lines(self, entry: JournalEntry) -> JournalEntryWithLines:
        lines = tuple(
            JournalLine(line=line, account=self._accounts[line.account_id])
            for line in self._transaction_lines.values()
            if line.journal_entry_id == entry.id
        )
        return JournalEntryWithLines(entry=entry, lines=lines)
