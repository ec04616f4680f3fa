"""Add transaction command."""

import click
from finledger.cli.account_resolution import resolve_account_or_exit
from finledger.cli.error_handling import handle_domain_error, save_ledger
from finledger.cli.formatting import format_amount
from finledger.domain.entities import Category, TransactionType
from finledger.domain.errors import DomainError
from finledger.utils.amount_parser import parse_amount
from finledger.utils.date_parser import parse_date, to_transaction_datetime

CATEGORY_NAMES = [category.name.lower() for category in Category]


@click.command("add")
@click.option("--account", required=True, help="Account name or ID")
@click.option(
    "--type",
    "transaction_type",
    type=click.Choice(["income", "expense"], case_sensitive=False),
    required=True,
    help="Transaction type",
)
@click.option("--amount", required=True, help="Positive amount (e.g., 123.45)")
@click.option("--description", required=True, help="Transaction description")
@click.option(
    "--category",
    type=click.Choice(CATEGORY_NAMES, case_sensitive=False),
    help="Transaction category",
)
@click.option(
    "--date",
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday'); defaults to now",
)
@click.pass_context
def add_transaction(
    ctx,
    account: str,
    transaction_type: str,
    amount: str,
    description: str,
    category: str | None,
    date: str | None,
):
    """Record an income or expense transaction.

    The account balance is updated immediately. Expenses larger than the
    balance are recorded anyway, with a warning.

    Examples:
        finledger add --account ACC_001 --type income --amount 3000 --description "Salary" --category salary
        finledger add --account "Main Checking" --type expense --amount 54.20 --description "Groceries" --category food --date yesterday
    """
    ledger = ctx.obj["ledger"]
    account_id = resolve_account_or_exit(ctx, ledger, account)

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
        txn_type = TransactionType.from_name(transaction_type)
        txn_category = Category.from_name(category) if category else None
        sufficient = ledger.can_make_transaction(account_id, txn_amount, txn_type)
        transaction = ledger.transaction_factory.create_transaction(
            account_id=account_id,
            transaction_type=txn_type,
            amount=txn_amount,
            description=description,
            category=txn_category,
            date=txn_date,
        )
        ledger.add_transaction(transaction)
    except DomainError as e:
        handle_domain_error(ctx, e)

    save_ledger(ctx)
    acc = ledger.get_account(account_id)
    click.echo(f"Created transaction {transaction.id}")
    click.echo(f"  Account: {acc.name}")
    click.echo(f"  Type: {transaction.transaction_type}")
    click.echo(f"  Date: {transaction.date:%Y-%m-%d}")
    click.echo(f"  Amount: {format_amount(transaction.amount)}")
    click.echo(f"  Description: {transaction.description}")
    if transaction.category:
        click.echo(f"  Category: {transaction.category}")
    click.echo(f"  New balance: {format_amount(acc.balance)}")
    if not sufficient:
        click.echo(f"Warning: account '{acc.name}' is overdrawn by this expense", err=True)


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
