"""Transfer command."""

import click
from finledger.cli.account_resolution import resolve_account_or_exit
from finledger.cli.error_handling import handle_domain_error, save_ledger
from finledger.cli.formatting import format_amount
from finledger.domain.errors import DomainError
from finledger.utils.amount_parser import parse_amount
from finledger.utils.date_parser import parse_date, to_transaction_datetime


@click.command("transfer")
@click.argument("from_account", metavar="FROM_ACCOUNT")
@click.argument("to_account", metavar="TO_ACCOUNT")
@click.option("--amount", required=True, help="Positive amount to move")
@click.option("--description", required=True, help="Transfer description")
@click.option("--date", help="Transfer date (YYYY-MM-DD or relative); defaults to now")
@click.pass_context
def transfer(ctx, from_account: str, to_account: str, amount: str, description: str, date: str | None):
    """Move money between two accounts.

    Records an expense on FROM_ACCOUNT and a matching income on TO_ACCOUNT.
    Accounts can be given by name or ID.

    Examples:
        finledger transfer ACC_001 ACC_002 --amount 500 --description "Monthly Savings"
    """
    ledger = ctx.obj["ledger"]
    from_id = resolve_account_or_exit(ctx, ledger, from_account)
    to_id = resolve_account_or_exit(ctx, ledger, to_account)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    txn_date = None
    if date:
        try:
            txn_date = to_transaction_datetime(parse_date(date))
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        debit, credit = ledger.transaction_factory.create_transfer(
            from_id, to_id, txn_amount, description, date=txn_date
        )
        ledger.add_transfer(debit, credit)
    except DomainError as e:
        handle_domain_error(ctx, e)

    save_ledger(ctx)
    source = ledger.get_account(from_id)
    destination = ledger.get_account(to_id)
    click.echo(f"Transferred {format_amount(debit.amount)} from '{source.name}' to '{destination.name}'")
    click.echo(f"  Debit:  {debit.id}")
    click.echo(f"  Credit: {credit.id}")
    click.echo(f"  {source.name} balance: {format_amount(source.balance)}")
    click.echo(f"  {destination.name} balance: {format_amount(destination.balance)}")


def register_commands(cli):
    """Register transfer command with main CLI."""
    cli.add_command(transfer)
