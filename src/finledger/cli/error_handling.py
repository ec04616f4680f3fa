"""CLI error handling helpers."""

import logging

import click

from finledger.domain.errors import DomainError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    logger.debug("Command %s failed: %r", ctx.command_path, error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def save_ledger(ctx: click.Context) -> None:
    """Write the command's ledger back to the store."""
    ctx.obj["store"].save_ledger(ctx.obj["ledger"])
