"""Journal entry commands."""

import click
from ledgerbook.cli.account_resolution import resolve_account_or_exit
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.account import AccountService
from ledgerbook.domain.entities import JournalEntryWithLines, NewTransactionLine
from ledgerbook.domain.errors import DomainError
from ledgerbook.domain.journal import JournalService
from ledgerbook.utils.amount_parser import format_currency, parse_amount
from ledgerbook.utils.date_parser import parse_date


def _parse_line_option(ctx, account_service: AccountService, value: str, is_debit: bool):
    """Turn an ACCOUNT=AMOUNT option value into a transaction line."""
    side = "--debit" if is_debit else "--credit"
    account, sep, amount = value.rpartition("=")
    if not sep or not account.strip():
        click.echo(f"Error: {side} expects ACCOUNT=AMOUNT, got '{value}'", err=True)
        ctx.exit(1)

    account_id = resolve_account_or_exit(ctx, account_service, account)
    try:
        parsed = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)
    return NewTransactionLine(account_id=account_id, amount=parsed, is_debit=is_debit)


def _echo_entry(entry: JournalEntryWithLines) -> None:
    click.echo(f"Journal entry {entry.id} | {entry.date} | {entry.description}")
    for jl in entry.lines:
        debit = format_currency(jl.amount) if jl.is_debit else ""
        credit = "" if jl.is_debit else format_currency(jl.amount)
        # Credits are indented, as in a paper journal
        name = jl.account.name if jl.is_debit else f"    {jl.account.name}"
        click.echo(f"  {name:30s} {debit:>14s} {credit:>14s}")
    click.echo(
        f"  {'Total':30s} {format_currency(entry.debit_total):>14s} "
        f"{format_currency(entry.credit_total):>14s}"
    )


@click.group()
def journal_group():
    """Record and view journal entries."""
    pass


@journal_group.command("add")
@click.option(
    "--date",
    "entry_date",
    required=True,
    help="Entry date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--description", required=True, help="Entry description")
@click.option("--debit", "debits", multiple=True, help="Debit line as ACCOUNT=AMOUNT (repeatable)")
@click.option("--credit", "credits", multiple=True, help="Credit line as ACCOUNT=AMOUNT (repeatable)")
@click.pass_context
def add_entry(ctx, entry_date: str, description: str, debits: tuple, credits: tuple):
    """Post a balanced journal entry.

    ACCOUNT can be an account name or ID. Total debits must equal total
    credits.

    Examples:
        ledgerbook journal add --date 2024-01-15 --description "Cash sale" --debit Cash=500 --credit Revenue=500
        ledgerbook journal add --date today --description "Rent" --debit "Rent Expense=1200" --credit 1=1200
    """
    db = ctx.obj["db"]
    account_service = AccountService(db)
    journal_service = JournalService(db)

    try:
        parsed_date = parse_date(entry_date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    lines = [_parse_line_option(ctx, account_service, value, True) for value in debits]
    lines += [_parse_line_option(ctx, account_service, value, False) for value in credits]

    try:
        entry = journal_service.create_journal_entry(
            entry_date=parsed_date, description=description, lines=lines
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created journal entry {entry.id}")
    _echo_entry(entry)


@journal_group.command("list")
@click.pass_context
def list_entries(ctx):
    """List journal entries, newest first."""
    db = ctx.obj["db"]
    service = JournalService(db)

    entries = service.list_journal_entries()
    if not entries:
        click.echo("No journal entries found.")
        return

    entries.sort(key=lambda e: (e.date, e.id), reverse=True)
    click.echo("\nJournal entries:")
    click.echo("-" * 72)
    for entry in entries:
        accounts = ", ".join(jl.account.name for jl in entry.lines)
        click.echo(
            f"ID: {entry.id:3d} | {entry.date} | {entry.description:24s} | "
            f"{format_currency(entry.debit_total):>12s} | {accounts}"
        )


@journal_group.command("show")
@click.argument("entry_id", type=int, metavar="ENTRY_ID")
@click.pass_context
def show_entry(ctx, entry_id: int):
    """Show one journal entry with its lines."""
    db = ctx.obj["db"]
    service = JournalService(db)

    try:
        entry = service.require_journal_entry(entry_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    _echo_entry(entry)


def register_commands(cli):
    """Register journal commands with main CLI."""
    cli.add_command(journal_group, name="journal")
