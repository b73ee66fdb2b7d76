"""Shared pytest fixtures for ledgerbook tests."""

import logging
import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from ledgerbook.database.factories import create_memory_database, create_sqlite_database
from ledgerbook.domain.account import AccountService
from ledgerbook.domain.entities import AccountType, NewTransactionLine
from ledgerbook.domain.income_statement import IncomeStatementService
from ledgerbook.domain.journal import JournalService
from ledgerbook.domain.ledger import LedgerService


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo root logger changes made by CLI invocations."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def memory_db():
    """Create a fresh in-memory database."""
    db = create_memory_database()
    db.connect()
    db.initialize_schema()
    yield db
    db.disconnect()


@pytest.fixture
def temp_db():
    """Create a temporary SQLite database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture(params=["memory", "sqlite"])
def db(request):
    """Run the test against every storage backend."""
    return request.getfixturevalue("memory_db" if request.param == "memory" else "temp_db")


@pytest.fixture
def account_service(db):
    """Create an AccountService."""
    return AccountService(db)


@pytest.fixture
def journal_service(db):
    """Create a JournalService."""
    return JournalService(db)


@pytest.fixture
def ledger_service(db):
    """Create a LedgerService."""
    return LedgerService(db)


@pytest.fixture
def income_service(db):
    """Create an IncomeStatementService."""
    return IncomeStatementService(db)


@pytest.fixture
def accounts(account_service):
    """Create a small chart of accounts and return them by name."""
    created = [
        account_service.create_account("Cash", AccountType.ASSET),
        account_service.create_account("Revenue", AccountType.REVENUE),
        account_service.create_account("Rent Expense", AccountType.EXPENSE),
        account_service.create_account("Accounts Payable", AccountType.LIABILITY),
        account_service.create_account("Owner's Equity", AccountType.EQUITY),
    ]
    return {acc.name: acc for acc in created}


@pytest.fixture
def post(journal_service):
    """Post an entry from (account, amount, is_debit) triples."""

    def _post(entry_date: date, description: str, *lines):
        return journal_service.create_journal_entry(
            entry_date=entry_date,
            description=description,
            lines=[
                NewTransactionLine(account_id=acc.id, amount=Decimal(str(amount)), is_debit=is_debit)
                for acc, amount, is_debit in lines
            ],
        )

    return _post


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def db_path(tmp_path):
    """Path for a SQLite file used by CLI tests."""
    return str(tmp_path / "ledgerbook.db")
