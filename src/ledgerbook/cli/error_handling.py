"""CLI error handling helpers."""

import click

from ledgerbook.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError) -> None:
    """Print a domain error to stderr and exit with status 1.

    Services raise DomainError subclasses (ValidationError, NotFoundError,
    UnbalancedEntryError); their message is already user-facing.
    """
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
