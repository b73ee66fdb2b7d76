"""Ledger commands."""

import click
from ledgerbook.cli.account_resolution import resolve_account_or_exit
from ledgerbook.domain.account import AccountService
from ledgerbook.domain.ledger import LedgerService
from ledgerbook.utils.amount_parser import format_currency


@click.group()
def ledger_group():
    """View account ledgers and balances."""
    pass


@ledger_group.command("list")
@click.pass_context
def list_ledgers(ctx):
    """List every account with its debit, credit and balance totals."""
    db = ctx.obj["db"]
    service = LedgerService(db)

    ledgers = service.list_ledger_accounts()
    if not ledgers:
        click.echo("No accounts found.")
        return

    click.echo(f"\n{'Account':28s} {'Type':9s} {'Debits':>14s} {'Credits':>14s} {'Balance':>14s}")
    click.echo("-" * 83)
    for view in ledgers:
        click.echo(
            f"{view.account.name:28s} {view.account.account_type.value:9s} "
            f"{format_currency(view.debit_total):>14s} "
            f"{format_currency(view.credit_total):>14s} "
            f"{format_currency(view.balance):>14s}"
        )


@ledger_group.command("show")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def show_ledger(ctx, account: str):
    """Show the transaction history of one account with running balance.

    ACCOUNT can be an account name or ID.
    """
    db = ctx.obj["db"]
    account_service = AccountService(db)
    service = LedgerService(db)

    account_id = resolve_account_or_exit(ctx, account_service, account)
    view = service.get_ledger_account(account_id)
    normal_side = "debit" if view.is_debit_nature else "credit"

    click.echo(
        f"\nLedger: {view.account.name} ({view.account.account_type.value}, normal {normal_side} balance)"
    )
    click.echo("-" * 90)
    if not view.lines:
        click.echo("No transactions found.")
    for row in view.lines:
        debit = format_currency(row.line.amount) if row.line.is_debit else ""
        credit = "" if row.line.is_debit else format_currency(row.line.amount)
        click.echo(
            f"{row.journal_entry.date} | #{row.journal_entry.id:<4d} | "
            f"{row.journal_entry.description[:28]:28s} | {debit:>12s} | {credit:>12s} | "
            f"{format_currency(row.running_balance):>12s}"
        )
    click.echo("-" * 90)
    click.echo(f"Total debits:  {format_currency(view.debit_total)}")
    click.echo(f"Total credits: {format_currency(view.credit_total)}")
    click.echo(f"Balance:       {format_currency(view.balance)}")


def register_commands(cli):
    """Register ledger commands with main CLI."""
    cli.add_command(ledger_group, name="ledger")
