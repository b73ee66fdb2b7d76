"""Ledger projection domain service."""

import logging
from decimal import Decimal
from typing import Optional

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import Account, LedgerLine, LedgerView, PostedLine

logger = logging.getLogger(__name__)


def signed_effect(posted: PostedLine, debit_nature: bool) -> Decimal:
    """Return how much a line moves an account's balance.

    Debits increase debit-natured accounts and decrease credit-natured ones.
    """
    amount = posted.line.amount
    return amount if posted.line.is_debit == debit_nature else -amount


def project_ledger(account: Account, posted_lines: list[PostedLine]) -> LedgerView:
    """Build the ledger view for one account from its posted lines.

    Lines are ordered by entry date, then entry ID, then line ID.
    """
    ordered = sorted(
        posted_lines,
        key=lambda p: (p.journal_entry.date, p.journal_entry.id, p.line.id),
    )
    debit_nature = account.is_debit_nature

    running = Decimal("0")
    debit_total = Decimal("0")
    credit_total = Decimal("0")
    ledger_lines = []
    for posted in ordered:
        running += signed_effect(posted, debit_nature)
        if posted.line.is_debit:
            debit_total += posted.line.amount
        else:
            credit_total += posted.line.amount
        ledger_lines.append(
            LedgerLine(
                line=posted.line,
                journal_entry=posted.journal_entry,
                running_balance=running,
            )
        )

    if debit_nature:
        balance = debit_total - credit_total
    else:
        balance = credit_total - debit_total

    return LedgerView(
        account=account,
        lines=tuple(ledger_lines),
        debit_total=debit_total,
        credit_total=credit_total,
        balance=balance,
    )


class LedgerService:
    """Service deriving per-account ledgers from the journal."""

    def __init__(self, db: Database):
        """Initialize ledger service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_ledger_account(self, account_id: int) -> Optional[LedgerView]:
        """Get the ledger for one account.

        Args:
            account_id: Account ID

        Returns:
            Ledger view or None if the account does not exist
        """
        account = self.db.get_account(account_id)
        if account is None:
            return None
        posted_lines = self.db.list_transaction_lines(account_id=account_id)
        logger.debug("Projecting ledger for account %d (%d lines)", account_id, len(posted_lines))
        return project_ledger(account, posted_lines)

    def list_ledger_accounts(self) -> list[LedgerView]:
        """Get ledgers for every account, including accounts with no activity."""
        posted_by_account: dict[int, list[PostedLine]] = {}
        for posted in self.db.list_transaction_lines():
            posted_by_account.setdefault(posted.line.account_id, []).append(posted)

        return [
            project_ledger(account, posted_by_account.get(account.id, []))
            for account in self.db.list_accounts()
        ]
