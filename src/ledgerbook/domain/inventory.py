"""Cost of goods sold from periodic inventory figures."""

from decimal import Decimal
from typing import Optional

from ledgerbook.domain.amounts import to_amount
from ledgerbook.domain.entities import InventoryInput, InventoryItem
from ledgerbook.domain.errors import ValidationError

FIGURE_LABELS = {
    "opening_stock": "Opening stock",
    "purchases": "Purchases",
    "closing_stock": "Closing stock",
    "purchase_returns": "Purchase returns",
}


def to_figure(label: str, value: Decimal | int | float | str) -> Decimal:
    """Normalize one inventory figure to a non-negative Decimal.

    Raises:
        ValidationError: If the value is not a valid amount or is negative
    """
    try:
        amount = to_amount(value)
    except ValidationError as e:
        raise ValidationError(f"{label}: {e}") from e
    if amount < 0:
        raise ValidationError(f"{label} must be a non-negative number")
    return amount


def calculate_cogs(
    opening_stock: Decimal,
    purchases: Decimal,
    closing_stock: Decimal,
    purchase_returns: Decimal,
) -> Decimal:
    """Compute cost of goods sold.

    COGS = opening stock + purchases - closing stock - purchase returns.
    The result is not clamped, so inconsistent figures show up as a
    negative COGS.

    Raises:
        ValidationError: If any figure is not a valid amount or is negative
    """
    opening_stock = to_figure("Opening stock", opening_stock)
    purchases = to_figure("Purchases", purchases)
    closing_stock = to_figure("Closing stock", closing_stock)
    purchase_returns = to_figure("Purchase returns", purchase_returns)

    return opening_stock + purchases - closing_stock - purchase_returns


def build_inventory(inventory: Optional[InventoryInput]) -> InventoryItem:
    """Build the inventory block of an income statement.

    Missing inventory figures mean no adjustment: everything is zero.
    """
    if inventory is None:
        inventory = InventoryInput()

    figures = {
        field: to_figure(label, getattr(inventory, field))
        for field, label in FIGURE_LABELS.items()
    }
    return InventoryItem(**figures, cogs=calculate_cogs(**figures))
