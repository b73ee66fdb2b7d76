"""SQLAlchemy models for ledgerbook database."""

from decimal import Decimal

from sqlalchemy import (
    BigInteger,
    Column,
    Integer,
    String,
    ForeignKey,
    Date,
    Boolean,
    create_engine,
)
from sqlalchemy.types import TypeDecorator
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

from ledgerbook.domain.amounts import AMOUNT_QUANTUM, AMOUNT_SCALE

Base = declarative_base()


class FixedPointAmount(TypeDecorator):
    """Decimal amount stored as an integer count of 1/10000 units.

    SQLite has no exact decimal type and NUMERIC round-trips through
    float, so amounts are scaled to integers on the way in and back to
    Decimal on the way out.
    """

    impl = BigInteger
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return int(Decimal(value).quantize(AMOUNT_QUANTUM).scaleb(AMOUNT_SCALE))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value).scaleb(-AMOUNT_SCALE)


class Account(Base):
    """Chart of accounts model."""

    __tablename__ = "accounts"
    # Never reuse identifiers on SQLite
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    account_type = Column(String(16), nullable=False)
    description = Column(String, nullable=True)

    # Relationships
    transaction_lines = relationship("TransactionLine", back_populates="account")


class JournalEntry(Base):
    """Journal entry header model."""

    __tablename__ = "journal_entries"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False)
    description = Column(String, nullable=False)

    # Relationships
    transaction_lines = relationship(
        "TransactionLine",
        back_populates="journal_entry",
        cascade="all, delete-orphan",
        order_by="TransactionLine.id",
    )


class TransactionLine(Base):
    """Debit or credit line model."""

    __tablename__ = "transaction_lines"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    journal_entry_id = Column(Integer, ForeignKey("journal_entries.id"), nullable=False)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    amount = Column(FixedPointAmount, nullable=False)
    is_debit = Column(Boolean, nullable=False)

    # Relationships
    journal_entry = relationship("JournalEntry", back_populates="transaction_lines")
    account = relationship("Account", back_populates="transaction_lines")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
