"""Utility for resolving account names to IDs."""

from ledgerbook.domain.account import AccountService
from ledgerbook.domain.errors import NotFoundError


def resolve_account(account_service: AccountService, account: str | int) -> int:
    """Resolve account name or ID to account ID.

    Names match exactly first, then ignoring case.

    Args:
        account_service: AccountService instance
        account: Account name (str) or ID (int or string representation of int)

    Returns:
        Account ID

    Raises:
        NotFoundError: If account is not found
    """
    if isinstance(account, int):
        account_id = account
    else:
        account = account.strip()
        account_id = int(account) if account.isdigit() else None

    if account_id is not None:
        if account_service.get_account(account_id) is None:
            raise NotFoundError(f"Account ID {account_id} not found")
        return account_id

    accounts = account_service.list_accounts()
    for acc in accounts:
        if acc.name == account:
            return acc.id
    folded = account.casefold()
    for acc in accounts:
        if acc.name.casefold() == folded:
            return acc.id

    raise NotFoundError(f"Account '{account}' not found")
