"""Main CLI entry point."""

import logging

import click
from ledgerbook.database.factories import create_database, create_sqlite_database
from ledgerbook.domain.account import AccountService

# Import and register all commands at module level
from ledgerbook.cli.commands import (
    account,
    journal,
    ledger,
    income_statement,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to SQLite database file (overrides LEDGERBOOK_DB_PATH environment variable)",
    envvar="LEDGERBOOK_DB_PATH",
)
@click.option(
    "--db-url",
    help="SQLAlchemy database URL; takes precedence over --db-path",
    envvar="LEDGERBOOK_DB_URL",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="LEDGERBOOK_LOG_LEVEL",
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, db_path: str | None, db_url: str | None, log_level: str):
    """Ledgerbook - double-entry bookkeeping.

    Record balanced journal entries against a chart of accounts, inspect
    account ledgers, and produce income statements with cost of goods sold.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        if db_url:
            db = create_database(db_url)
        else:
            db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        AccountService(db).ensure_default_accounts()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
journal.register_commands(cli)
ledger.register_commands(cli)
income_statement.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
