"""Shared domain error messages and error types."""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class UnbalancedEntryError(DomainError):
    """Journal entry debits and credits do not match."""

    def __init__(self, debit_total: Decimal, credit_total: Decimal):
        self.debit_total = debit_total
        self.credit_total = credit_total
        super().__init__(unbalanced_entry(debit_total, credit_total))


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def journal_entry_not_found(entry_id: int) -> str:
    """Return message for missing journal entry."""
    return f"Journal entry {entry_id} not found"


def invalid_account_type(account_type: object, allowed: list[str]) -> str:
    """Return message for an account type outside the chart's closed set."""
    return f"Invalid account type '{account_type}'. Must be one of: {', '.join(allowed)}"


def unbalanced_entry(debit_total: Decimal, credit_total: Decimal) -> str:
    """Return message when debits and credits differ."""
    return f"Debits must equal credits (debits: {debit_total}, credits: {credit_total})"
