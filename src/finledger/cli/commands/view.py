"""Transaction viewing commands."""

import click
from finledger.cli.account_resolution import resolve_account_or_exit
from finledger.cli.formatting import TRANSACTION_HEADER, transaction_row


@click.command("view")
@click.option("--account", help="Only show transactions for this account (name or ID)")
@click.option("--search", "term", help="Case-insensitive text to find in description or category")
@click.option("--limit", type=click.IntRange(min=0), help="Show at most this many transactions")
@click.option("--verbose", "-v", is_flag=True, help="Show every field of each transaction")
@click.pass_context
def view_transactions(ctx, account: str | None, term: str | None, limit: int | None, verbose: bool):
    """View transactions, newest first.

    Without options every transaction is listed in the order it was recorded.
    """
    ledger = ctx.obj["ledger"]

    if account:
        account_id = resolve_account_or_exit(ctx, ledger, account)
        transactions = ledger.get_transactions_for_account(account_id)
        if term:
            matches = set(ledger.search_transactions(term))
            transactions = [txn for txn in transactions if txn in matches]
    elif term:
        transactions = ledger.search_transactions(term)
    elif limit is not None:
        transactions = ledger.get_recent_transactions(limit)
    else:
        transactions = ledger.get_all_transactions()

    if limit is not None:
        transactions = transactions[:limit]

    if not transactions:
        click.echo("No transactions found.")
        return

    names = {acc.id: acc.name for acc in ledger.get_all_accounts()}

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    if verbose:
        click.echo("=" * 100)
        for txn in transactions:
            click.echo(f"\nTransaction ID: {txn.id}")
            click.echo(f"  Date: {txn.date:%Y-%m-%d %H:%M:%S}")
            click.echo(f"  Type: {txn.transaction_type}")
            click.echo(f"  Amount: ${txn.amount:,.2f}")
            click.echo(f"  Account: {names.get(txn.account_id, 'Unknown')} (ID: {txn.account_id})")
            click.echo(f"  Category: {txn.category or 'Uncategorized'}")
            click.echo(f"  Description: {txn.description or ''}")
            click.echo(f"  Recorded: {txn.created_at:%Y-%m-%d %H:%M:%S}")
            click.echo("-" * 100)
    else:
        click.echo("-" * 100)
        click.echo(TRANSACTION_HEADER)
        click.echo("-" * 100)
        for txn in transactions:
            click.echo(transaction_row(txn, names.get(txn.account_id, "Unknown")))


def register_commands(cli):
    """Register view command with main CLI."""
    cli.add_command(view_transactions)
