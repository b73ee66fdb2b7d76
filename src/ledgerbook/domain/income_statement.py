"""Income statement domain service."""

import logging
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Optional

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import (
    AccountType,
    IncomeStatement,
    IncomeStatementItem,
    InventoryInput,
)
from ledgerbook.domain.inventory import build_inventory
from ledgerbook.domain.journal import to_entry_date

logger = logging.getLogger(__name__)


class IncomeStatementService:
    """Service aggregating journal activity into an income statement."""

    def __init__(self, db: Database):
        """Initialize income statement service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_income_statement(
        self,
        start_date: date,
        end_date: date,
        inventory: Optional[InventoryInput] = None,
    ) -> IncomeStatement:
        """Build the income statement for an inclusive date range.

        Revenue accounts report credits minus debits and expense accounts
        report debits minus credits; accounts whose net activity is not
        positive are left out. Gross profit is revenue minus COGS, while net
        income is revenue minus operating expenses. COGS does not flow into
        net income.

        Args:
            start_date: First day included
            end_date: Last day included
            inventory: Optional inventory figures for the COGS calculation

        Returns:
            IncomeStatement for the range

        Raises:
            ValidationError: If a date is not a date or an inventory figure
                is negative
        """
        start_date = to_entry_date(start_date)
        end_date = to_entry_date(end_date)
        inventory_item = build_inventory(inventory)

        debits: dict[int, Decimal] = defaultdict(Decimal)
        credits: dict[int, Decimal] = defaultdict(Decimal)
        posted_lines = self.db.list_transaction_lines(start_date=start_date, end_date=end_date)
        for posted in posted_lines:
            bucket = debits if posted.line.is_debit else credits
            bucket[posted.line.account_id] += posted.line.amount

        revenues = []
        expenses = []
        for account in self.db.list_accounts():
            if account.account_type == AccountType.REVENUE:
                amount = credits[account.id] - debits[account.id]
                items = revenues
            elif account.account_type == AccountType.EXPENSE:
                amount = debits[account.id] - credits[account.id]
                items = expenses
            else:
                continue
            if amount > 0:
                items.append(
                    IncomeStatementItem(
                        account_id=account.id, account_name=account.name, amount=amount
                    )
                )

        total_revenue = sum((item.amount for item in revenues), Decimal("0"))
        total_expenses = sum((item.amount for item in expenses), Decimal("0"))
        logger.debug(
            "Income statement %s..%s over %d lines", start_date, end_date, len(posted_lines)
        )

        return IncomeStatement(
            start_date=start_date,
            end_date=end_date,
            revenues=tuple(revenues),
            expenses=tuple(expenses),
            total_revenue=total_revenue,
            total_expenses=total_expenses,
            inventory=inventory_item,
            gross_profit=total_revenue - inventory_item.cogs,
            net_income=total_revenue - total_expenses,
        )
