"""Account management commands."""

import click
from ledgerbook.cli.account_resolution import resolve_account_or_exit
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.account import AccountService
from ledgerbook.domain.entities import AccountType
from ledgerbook.domain.errors import DomainError


@click.group()
def account_group():
    """Manage the chart of accounts."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option(
    "--type",
    "account_type",
    required=True,
    help=f"Account type ({', '.join(AccountType.values())})",
)
@click.option("--description", help="Optional account description")
@click.pass_context
def create_account(ctx, name: str, account_type: str, description: str | None):
    """Create a new account.

    Examples:
        ledgerbook account create "Bank Loan" --type liability
        ledgerbook account create "Consulting Income" --type revenue --description "Hourly work"
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    try:
        account = service.create_account(
            name=name, account_type=account_type, description=description
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(
        f"Created {account.account_type.value} account '{account.name}' (ID: {account.id})"
    )


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts."""
    db = ctx.obj["db"]
    service = AccountService(db)

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 72)
    for acc in accounts:
        click.echo(
            f"ID: {acc.id:3d} | {acc.name:24s} | {acc.account_type.value:9s} | {acc.description or ''}"
        )


@account_group.command("show")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def show_account(ctx, account: str):
    """Show one account.

    ACCOUNT can be an account name or ID.
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    account_id = resolve_account_or_exit(ctx, service, account)
    acc = service.require_account(account_id)
    normal_side = "debit" if acc.is_debit_nature else "credit"

    click.echo(f"Account {acc.id}: {acc.name}")
    click.echo(f"  Type: {acc.account_type.value}")
    click.echo(f"  Normal balance: {normal_side}")
    if acc.description:
        click.echo(f"  Description: {acc.description}")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
