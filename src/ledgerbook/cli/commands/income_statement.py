"""Income statement command."""

from datetime import date

import click
from ledgerbook.cli.date_filters import resolve_cli_date_range
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.entities import IncomeStatement, InventoryInput
from ledgerbook.domain.errors import DomainError
from ledgerbook.domain.income_statement import IncomeStatementService
from ledgerbook.domain.inventory import build_inventory
from ledgerbook.utils.amount_parser import format_currency, parse_amount

# Statements without explicit dates cover everything up to today
EARLIEST_DATE = date(1970, 1, 1)


def _parse_inventory(ctx, figures: dict[str, str | None]) -> InventoryInput | None:
    """Build inventory input from CLI options; None if no figure was given."""
    if all(value is None for value in figures.values()):
        return None

    parsed = {}
    for field, value in figures.items():
        if value is None:
            continue
        try:
            parsed[field] = parse_amount(value)
        except ValueError as e:
            label = field.replace("_", "-")
            click.echo(f"Error: Invalid --{label}: {e}", err=True)
            ctx.exit(1)
    return InventoryInput(**parsed)


def _echo_line(label: str, amount, indent: int = 0) -> None:
    width = 50 - indent
    click.echo(f"{' ' * indent}{label:<{width}} {format_currency(amount):>16s}")


def _echo_cogs_block(inventory) -> None:
    _echo_line("Opening Stock", inventory.opening_stock, indent=4)
    _echo_line("Add: Purchases", inventory.purchases, indent=4)
    _echo_line("Less: Purchase Returns", inventory.purchase_returns, indent=4)
    _echo_line("Less: Closing Stock", inventory.closing_stock, indent=4)
    _echo_line("Cost of Goods Sold", inventory.cogs)


def _echo_statement(statement: IncomeStatement) -> None:
    click.echo(f"\nIncome Statement: {statement.start_date} to {statement.end_date}")
    click.echo("=" * 67)

    click.echo("Revenue")
    for item in statement.revenues:
        _echo_line(item.account_name, item.amount, indent=4)
    _echo_line("Total Revenue", statement.total_revenue)
    click.echo()

    click.echo("Cost of Goods Sold")
    _echo_cogs_block(statement.inventory)
    _echo_line("Gross Profit", statement.gross_profit)
    click.echo()

    click.echo("Expenses")
    for item in statement.expenses:
        _echo_line(item.account_name, item.amount, indent=4)
    _echo_line("Total Expenses", statement.total_expenses)
    click.echo("=" * 67)
    _echo_line("Net Income", statement.net_income)


@click.command("income-statement")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'yesterday')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--this-month", is_flag=True, help="Filter to current month")
@click.option("--this-year", is_flag=True, help="Filter to current year")
@click.option("--this-week", is_flag=True, help="Filter to current week")
@click.option("--last-month", is_flag=True, help="Filter to previous month")
@click.option("--last-year", is_flag=True, help="Filter to previous year")
@click.option("--last-week", is_flag=True, help="Filter to previous week")
@click.option("--opening-stock", help="Inventory value at the start of the period")
@click.option("--purchases", help="Inventory purchased during the period")
@click.option("--closing-stock", help="Inventory value at the end of the period")
@click.option("--purchase-returns", help="Purchases returned to suppliers")
@click.pass_context
def income_statement(
    ctx,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    this_year: bool,
    this_week: bool,
    last_month: bool,
    last_year: bool,
    last_week: bool,
    opening_stock: str | None,
    purchases: str | None,
    closing_stock: str | None,
    purchase_returns: str | None,
):
    """Show the income statement for a period.

    Without dates the statement covers everything up to today. Inventory
    figures are optional; any figure left out counts as 0.

    Examples:
        ledgerbook income-statement --this-year
        ledgerbook income-statement --start-date 2024-01-01 --end-date 2024-01-31
        ledgerbook income-statement --last-month --opening-stock 1000 --purchases 500 --closing-stock 800
    """
    db = ctx.obj["db"]
    service = IncomeStatementService(db)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags={
            "this-month": this_month,
            "this-year": this_year,
            "this-week": this_week,
            "last-month": last_month,
            "last-year": last_year,
            "last-week": last_week,
        },
        default_range=(EARLIEST_DATE, date.today()),
    )
    inventory = _parse_inventory(
        ctx,
        {
            "opening_stock": opening_stock,
            "purchases": purchases,
            "closing_stock": closing_stock,
            "purchase_returns": purchase_returns,
        },
    )

    try:
        statement = service.get_income_statement(start, end, inventory=inventory)
    except DomainError as e:
        handle_domain_error(ctx, e)
    _echo_statement(statement)


@click.command("cogs")
@click.option("--opening-stock", help="Inventory value at the start of the period")
@click.option("--purchases", help="Inventory purchased during the period")
@click.option("--closing-stock", help="Inventory value at the end of the period")
@click.option("--purchase-returns", help="Purchases returned to suppliers")
@click.pass_context
def cogs(
    ctx,
    opening_stock: str | None,
    purchases: str | None,
    closing_stock: str | None,
    purchase_returns: str | None,
):
    """Calculate cost of goods sold from inventory figures.

    Any figure left out counts as 0.

    Example:
        ledgerbook cogs --opening-stock 1000 --purchases 500 --closing-stock 800 --purchase-returns 50
    """
    inventory = _parse_inventory(
        ctx,
        {
            "opening_stock": opening_stock,
            "purchases": purchases,
            "closing_stock": closing_stock,
            "purchase_returns": purchase_returns,
        },
    )

    try:
        item = build_inventory(inventory)
    except DomainError as e:
        handle_domain_error(ctx, e)
    _echo_cogs_block(item)


def register_commands(cli):
    """Register income statement and COGS commands with main CLI."""
    cli.add_command(income_statement)
    cli.add_command(cogs)
