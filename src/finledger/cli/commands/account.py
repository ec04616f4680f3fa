"""Account management commands."""

import click
from finledger.cli.account_resolution import resolve_account_or_exit
from finledger.cli.error_handling import handle_domain_error, save_ledger
from finledger.cli.formatting import TRANSACTION_HEADER, format_amount, transaction_row
from finledger.domain.entities import Account, AccountType, generate_account_id
from finledger.domain.errors import DomainError
from finledger.utils.amount_parser import parse_amount

ACCOUNT_TYPES = [account_type.name.lower() for account_type in AccountType]


@click.group()
def account_group():
    """Manage accounts."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option(
    "--type",
    "account_type",
    type=click.Choice(ACCOUNT_TYPES, case_sensitive=False),
    default="checking",
    show_default=True,
    help="Account type",
)
@click.option("--balance", default="0", help="Initial balance (may be negative, e.g. -500.00)")
@click.option("--description", help="Free-text description")
@click.option("--id", "account_id", help="Account ID (generated if not provided)")
@click.pass_context
def create_account(
    ctx,
    name: str,
    account_type: str,
    balance: str,
    description: str | None,
    account_id: str | None,
):
    """Create a new account.

    Examples:
        finledger account create "Main Checking" --balance 2500.00
        finledger account create "Credit Card" --type credit_card --balance -500
    """
    ledger = ctx.obj["ledger"]

    try:
        initial_balance = parse_amount(balance)
    except ValueError as e:
        click.echo(f"Error: Invalid balance: {e}", err=True)
        ctx.exit(1)

    try:
        account = Account(
            id=account_id or generate_account_id(),
            name=name,
            account_type=AccountType.from_name(account_type),
            balance=initial_balance,
            description=description,
        )
        ledger.add_account(account)
    except DomainError as e:
        handle_domain_error(ctx, e)

    save_ledger(ctx)
    click.echo(f"Created account '{account.name}' (ID: {account.id})")
    click.echo(f"  Type: {account.account_type}")
    click.echo(f"  Balance: {format_amount(account.balance)}")


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts."""
    ledger = ctx.obj["ledger"]

    accounts = ledger.get_all_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 78)
    for acc in accounts:
        click.echo(
            f"{acc.id:<14} | {acc.name:<22} | {str(acc.account_type):<18} | "
            f"{format_amount(acc.balance):>14}"
        )
    click.echo("-" * 78)
    click.echo(f"Total balance: {format_amount(ledger.get_total_balance())}")


@account_group.command("show")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def show_account(ctx, account: str):
    """Show an account and its transactions, newest first.

    ACCOUNT can be an account name or ID.
    """
    ledger = ctx.obj["ledger"]
    account_id = resolve_account_or_exit(ctx, ledger, account)
    acc = ledger.get_account(account_id)

    click.echo(f"\n{acc.name} (ID: {acc.id})")
    click.echo(f"  Type: {acc.account_type} - {acc.account_type.description}")
    click.echo(f"  Balance: {format_amount(acc.balance)}")
    if acc.description:
        click.echo(f"  Description: {acc.description}")
    click.echo(f"  Created: {acc.created_at:%Y-%m-%d %H:%M}")
    click.echo(f"  Updated: {acc.updated_at:%Y-%m-%d %H:%M}")

    transactions = ledger.get_transactions_for_account(account_id)
    if not transactions:
        click.echo("\nNo transactions.")
        return

    click.echo(f"\n{len(transactions)} transaction(s):")
    click.echo(TRANSACTION_HEADER)
    for txn in transactions:
        click.echo(transaction_row(txn, acc.name))


@account_group.command("edit")
@click.argument("account", metavar="ACCOUNT")
@click.option("--name", help="New account name")
@click.option(
    "--type",
    "account_type",
    type=click.Choice(ACCOUNT_TYPES, case_sensitive=False),
    help="New account type",
)
@click.option("--description", help="New description (empty string clears it)")
@click.pass_context
def edit_account(
    ctx, account: str, name: str | None, account_type: str | None, description: str | None
) -> None:
    """Change an account's name, type or description.

    ACCOUNT can be an account name or ID. The account ID never changes.

    Examples:
        finledger account edit ACC_001 --name "Joint Checking"
        finledger account edit "Credit Card" --type loan
    """
    if name is None and account_type is None and description is None:
        click.echo("Error: Nothing to change. Use --name, --type or --description.", err=True)
        ctx.exit(1)

    ledger = ctx.obj["ledger"]
    account_id = resolve_account_or_exit(ctx, ledger, account)
    acc = ledger.get_account(account_id)

    try:
        new_type = AccountType.from_name(account_type) if account_type else None
        if name is not None:
            acc.name = name
        if new_type is not None:
            acc.account_type = new_type
        if description is not None:
            acc.description = description or None
    except DomainError as e:
        handle_domain_error(ctx, e)

    save_ledger(ctx)
    click.echo(f"Updated account '{acc.name}' (ID: {acc.id})")


@account_group.command("delete")
@click.argument("account", metavar="ACCOUNT")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_account(ctx, account: str, yes: bool) -> None:
    """Delete an account together with all of its transactions.

    ACCOUNT can be an account name or ID.

    Examples:
        finledger account delete "Credit Card"
        finledger account delete ACC_003 --yes
    """
    ledger = ctx.obj["ledger"]
    account_id = resolve_account_or_exit(ctx, ledger, account)
    acc = ledger.get_account(account_id)
    count = len(ledger.get_transactions_for_account(account_id))

    if not yes:
        prompt = f"Delete account '{acc.name}' (ID: {account_id})"
        if count:
            prompt += f" and its {count} transaction{'s' if count != 1 else ''}"
        if not click.confirm(prompt + "?"):
            click.echo("Deletion cancelled.")
            return

    try:
        removed = ledger.remove_account(account_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    save_ledger(ctx)
    click.echo(f"Deleted account '{acc.name}'")
    if removed:
        click.echo(f"Removed {removed} transaction{'s' if removed != 1 else ''}")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
