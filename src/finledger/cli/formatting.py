"""Display helpers shared by CLI commands."""

from decimal import Decimal

from finledger.domain.entities import Transaction


def format_amount(amount: Decimal) -> str:
    """Format an amount as currency, e.g. ``$1,234.56`` or ``-$500.00``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_signed(txn: Transaction) -> str:
    """Format a transaction amount with an explicit direction sign."""
    sign = "+" if txn.is_income else "-"
    return f"{sign}${txn.amount:,.2f}"


def transaction_row(txn: Transaction, account_name: str) -> str:
    """One line of the compact transaction table."""
    category = txn.category.display_name if txn.category else ""
    description = (txn.description or "")[:34]
    return (
        f"{txn.date:%Y-%m-%d %H:%M}  {format_signed(txn):>12}  {account_name[:18]:<18}  "
        f"{category[:18]:<18}  {description}"
    )


TRANSACTION_HEADER = (
    f"{'Date':<16}  {'Amount':>12}  {'Account':<18}  {'Category':<18}  Description"
)
