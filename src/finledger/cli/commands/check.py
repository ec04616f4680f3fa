"""Funds check command."""

import click
from finledger.cli.account_resolution import resolve_account_or_exit
from finledger.cli.error_handling import handle_domain_error
from finledger.cli.formatting import format_amount
from finledger.domain.entities import TransactionType
from finledger.domain.errors import DomainError
from finledger.utils.amount_parser import parse_amount


@click.command("check")
@click.option("--account", required=True, help="Account name or ID")
@click.option("--amount", required=True, help="Amount to check")
@click.option(
    "--type",
    "transaction_type",
    type=click.Choice(["income", "expense"], case_sensitive=False),
    default="expense",
    show_default=True,
    help="Transaction type",
)
@click.pass_context
def check_transaction(ctx, account: str, amount: str, transaction_type: str):
    """Check whether an account can cover a transaction.

    Exits with status 0 when it can and 2 when it cannot. Nothing is recorded.
    """
    ledger = ctx.obj["ledger"]
    account_id = resolve_account_or_exit(ctx, ledger, account)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_type = TransactionType.from_name(transaction_type)
        allowed = ledger.can_make_transaction(account_id, txn_amount, txn_type)
    except DomainError as e:
        handle_domain_error(ctx, e)

    acc = ledger.get_account(account_id)
    if allowed:
        click.echo(f"OK: '{acc.name}' can cover {str(txn_type).lower()} of {format_amount(txn_amount)}")
    else:
        click.echo(
            f"Insufficient funds: '{acc.name}' has {format_amount(acc.balance)}, "
            f"needs {format_amount(txn_amount)}"
        )
        ctx.exit(2)


def register_commands(cli):
    """Register check command with main CLI."""
    cli.add_command(check_transaction)
