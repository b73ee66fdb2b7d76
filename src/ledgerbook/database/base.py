"""Abstract database interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional, Sequence

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerbook.domain.entities import (
    Account,
    AccountType,
    JournalEntryWithLines,
    NewTransactionLine,
    PostedLine,
)


class Database(ABC):
    """Abstract storage interface for ledgerbook.

    Implementations own identifier assignment. Input validation (account
    types, balanced entries) happens in the domain services before any
    method here is called.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(
        self, name: str, account_type: AccountType, description: Optional[str] = None
    ) -> int:
        """Create a new account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts in creation order."""
        pass

    # Journal operations
    @abstractmethod
    def create_journal_entry(
        self, entry_date: date, description: str, lines: Sequence[NewTransactionLine]
    ) -> int:
        """Create a journal entry with all of its lines. Returns entry ID.

        The entry and its lines become visible together or not at all.
        """
        pass

    @abstractmethod
    def get_journal_entry(self, entry_id: int) -> Optional[JournalEntryWithLines]:
        """Get journal entry with its lines by ID."""
        pass

    @abstractmethod
    def list_journal_entries(self) -> list[JournalEntryWithLines]:
        """List all journal entries with their lines, in ID order."""
        pass

    @abstractmethod
    def list_transaction_lines(
        self,
        account_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[PostedLine]:
        """List posted lines joined with their journal entry.

        Args:
            account_id: Optional account ID filter
            start_date: Optional inclusive lower bound on the entry date
            end_date: Optional inclusive upper bound on the entry date
        """
        pass
