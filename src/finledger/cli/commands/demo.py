"""Demo data command."""

import click
from finledger.cli.error_handling import handle_domain_error, save_ledger
from finledger.cli.formatting import format_amount
from finledger.domain.errors import DomainError
from finledger.domain.sample_data import SAMPLE_ACCOUNTS, load_sample_data


@click.command("demo")
@click.pass_context
def load_demo(ctx):
    """Load demonstration accounts and transactions.

    Creates three accounts (ACC_001 to ACC_003) with a month of sample
    activity. Fails if any of those account IDs is already in use.
    """
    ledger = ctx.obj["ledger"]

    existing = [account_id for account_id, *_ in SAMPLE_ACCOUNTS if ledger.get_account(account_id)]
    if existing:
        click.echo(f"Error: Sample accounts already exist: {', '.join(existing)}", err=True)
        ctx.exit(1)

    try:
        count = load_sample_data(ledger)
    except DomainError as e:
        handle_domain_error(ctx, e)

    save_ledger(ctx)
    click.echo(f"Loaded {len(SAMPLE_ACCOUNTS)} accounts and {count} transactions.")
    click.echo(f"Total balance: {format_amount(ledger.get_total_balance())}")


def register_commands(cli):
    """Register demo command with main CLI."""
    cli.add_command(load_demo)
