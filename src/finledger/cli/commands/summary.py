"""Summary and analytics commands."""

from datetime import date

import click
from finledger.cli.error_handling import handle_domain_error
from finledger.cli.formatting import format_amount
from finledger.domain.errors import DomainError
from finledger.utils.date_parser import parse_month


def _resolve_month(ctx, month: str | None) -> tuple[int, int]:
    """Resolve a MONTH argument, defaulting to the current month."""
    if not month:
        today = date.today()
        return today.month, today.year
    try:
        return parse_month(month)
    except ValueError as e:
        click.echo(f"Error: Invalid month: {e}", err=True)
        ctx.exit(1)


@click.group()
def summary_group():
    """Balances, monthly totals and budget reports."""
    pass


@summary_group.command("balance")
@click.pass_context
def show_balance(ctx):
    """Show the total balance across all accounts."""
    ledger = ctx.obj["ledger"]
    click.echo(f"Total balance: {format_amount(ledger.get_total_balance())}")


@summary_group.command("monthly")
@click.argument("month", required=False)
@click.pass_context
def show_monthly(ctx, month: str | None):
    """Show income, expenses and net for a month.

    MONTH may be '2024-03', '03/2024', 'March 2024' or 'last month';
    defaults to the current month.
    """
    ledger = ctx.obj["ledger"]
    month_num, year = _resolve_month(ctx, month)

    try:
        income = ledger.get_monthly_income(month_num, year)
        expenses = ledger.get_monthly_expenses(month_num, year)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\n{date(year, month_num, 1):%B %Y}")
    click.echo("-" * 40)
    click.echo(f"{'Income':<20} {format_amount(income):>19}")
    click.echo(f"{'Expenses':<20} {format_amount(expenses):>19}")
    click.echo("-" * 40)
    click.echo(f"{'Net':<20} {format_amount(income - expenses):>19}")


@summary_group.command("categories")
@click.argument("month", required=False)
@click.pass_context
def show_categories(ctx, month: str | None):
    """Show a month's expenses grouped by category, largest first."""
    ledger = ctx.obj["ledger"]
    month_num, year = _resolve_month(ctx, month)

    try:
        by_category = ledger.get_expenses_by_category(month_num, year)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not by_category:
        click.echo(f"No expenses in {date(year, month_num, 1):%B %Y}.")
        return

    click.echo(f"\nExpenses by category, {date(year, month_num, 1):%B %Y}")
    click.echo("-" * 50)
    for category, total in sorted(by_category.items(), key=lambda item: (-item[1], item[0].display_name)):
        click.echo(f"{category.display_name:<30} {format_amount(total):>19}")
    click.echo("-" * 50)
    click.echo(f"{'Total':<30} {format_amount(sum(by_category.values())):>19}")


@summary_group.command("budget")
@click.option("--all", "show_all", is_flag=True, help="Include categories with no recent spending")
@click.pass_context
def show_budget(ctx, show_all: bool):
    """Recommend monthly budgets from the last three months of spending.

    Each recommendation is the category's monthly average plus 10%.
    """
    ledger = ctx.obj["ledger"]
    recommendations = ledger.get_monthly_budget_recommendations()

    rows = [
        (category, amount)
        for category, amount in recommendations.items()
        if show_all or amount > 0
    ]
    if not rows:
        click.echo("No spending in the last three months to base a budget on.")
        return

    click.echo("\nRecommended monthly budget")
    click.echo("-" * 50)
    for category, amount in rows:
        click.echo(f"{category.display_name:<30} {format_amount(amount):>19}")


@summary_group.command("analytics")
@click.option(
    "--recent",
    type=click.IntRange(min=0),
    default=10,
    show_default=True,
    help="Number of recent transactions to show",
)
@click.pass_context
def show_analytics(ctx, recent: int):
    """Show total balance, account summary and recent transactions."""
    ledger = ctx.obj["ledger"]
    report = ledger.build_analytics_report(recent_limit=recent)

    click.echo("=== FINANCIAL ANALYTICS ===\n")
    click.echo(f"Total Balance: {format_amount(report.total_balance)}\n")

    click.echo("=== ACCOUNT SUMMARY ===")
    if not report.accounts:
        click.echo("No accounts.")
    for summary in report.accounts:
        click.echo(f"{summary.name} ({summary.account_type}): {format_amount(summary.balance)}")

    click.echo("\n=== RECENT TRANSACTIONS ===")
    if not report.recent_transactions:
        click.echo("No transactions.")
    for txn in report.recent_transactions:
        click.echo(f"{txn.transaction_type}: {txn.description} - {format_amount(txn.amount)}")


def register_commands(cli):
    """Register summary commands with main CLI."""
    cli.add_command(summary_group, name="summary")
