"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from ledgerbook.database.memory import InMemoryDatabase
from ledgerbook.database.sqlalchemy_db import SQLAlchemyDatabase


def create_memory_database() -> InMemoryDatabase:
    """Create a process-local database with no durability across restarts."""
    return InMemoryDatabase()


def create_database(database_url: str) -> SQLAlchemyDatabase:
    """Create a database instance for any SQLAlchemy URL.

    Args:
        database_url: SQLAlchemy database URL

    Returns:
        SQLAlchemyDatabase instance
    """
    return SQLAlchemyDatabase(database_url)


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks LEDGERBOOK_DB_PATH
            environment variable, then defaults to ~/.ledgerbook/ledgerbook.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("LEDGERBOOK_DB_PATH")

    if database_path is None:
        # Default to ~/.ledgerbook/ledgerbook.db
        home = Path.home()
        db_dir = home / ".ledgerbook"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "ledgerbook.db")

    return create_database(f"sqlite:///{database_path}")
