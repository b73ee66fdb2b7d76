"""Account registry domain service."""

import logging
from typing import Optional

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import Account as AccountEntity, AccountType
from ledgerbook.domain.errors import (
    NotFoundError,
    ValidationError,
    account_not_found,
    invalid_account_type,
)

logger = logging.getLogger(__name__)

# Chart of accounts seeded into an empty registry: (name, type, description)
DEFAULT_ACCOUNTS = [
    ("Cash", AccountType.ASSET, "Cash on hand and in bank accounts"),
    ("Accounts Receivable", AccountType.ASSET, "Money owed to the company"),
    ("Inventory", AccountType.ASSET, "Items held for sale"),
    ("Supplies", AccountType.ASSET, "Office and operational supplies"),
    ("Equipment", AccountType.ASSET, "Business equipment"),
    ("Accounts Payable", AccountType.LIABILITY, "Money owed by the company"),
    ("Notes Payable", AccountType.LIABILITY, "Formal debt obligations"),
    ("Owner's Equity", AccountType.EQUITY, "Owner investment in the business"),
    ("Revenue", AccountType.REVENUE, "Income from sales or services"),
    ("Rent Expense", AccountType.EXPENSE, "Cost of renting space"),
    ("Salary Expense", AccountType.EXPENSE, "Employee salaries"),
    ("Utilities Expense", AccountType.EXPENSE, "Costs for electricity, water, etc."),
]


def parse_account_type(account_type: AccountType | str) -> AccountType:
    """Parse an account type, accepting any letter case.

    Raises:
        ValidationError: If the type is not one of the five account kinds
    """
    if isinstance(account_type, AccountType):
        return account_type
    if isinstance(account_type, str):
        try:
            return AccountType(account_type.strip().lower())
        except ValueError:
            pass
    raise ValidationError(invalid_account_type(account_type, AccountType.values()))


class AccountService:
    """Service for managing the chart of accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self,
        name: str,
        account_type: AccountType | str,
        description: Optional[str] = None,
    ) -> AccountEntity:
        """Create a new account.

        Args:
            name: Account name
            account_type: One of asset, liability, equity, revenue, expense
            description: Optional free-text description

        Returns:
            Created account entity

        Raises:
            ValidationError: If name is empty or account type is invalid
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Account name is required")
        parsed_type = parse_account_type(account_type)
        if description is not None:
            description = description.strip() or None

        account_id = self.db.create_account(
            name=name, account_type=parsed_type, description=description
        )
        logger.info("Created %s account %r (ID: %d)", parsed_type.value, name, account_id)
        return self.require_account(account_id)

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def require_account(self, account_id: int) -> AccountEntity:
        """Get account by ID, raising if it does not exist."""
        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        return account

    def list_accounts(self) -> list[AccountEntity]:
        """List all accounts in creation order."""
        return self.db.list_accounts()

    def ensure_default_accounts(self) -> int:
        """Seed the default chart of accounts into an empty registry.

        Returns:
            Number of accounts created (0 if the registry already had accounts)
        """
        if self.db.list_accounts():
            return 0

        for name, account_type, description in DEFAULT_ACCOUNTS:
            self.db.create_account(name=name, account_type=account_type, description=description)
        logger.info("Seeded default chart of accounts (%d accounts)", len(DEFAULT_ACCOUNTS))
        return len(DEFAULT_ACCOUNTS)
