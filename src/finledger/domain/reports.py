"""Stateless analytics over accounts and transactions.

LedgerService delegates its report queries here; every function takes the
data it needs explicitly so it can be used without a ledger.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Sequence

from dateutil.relativedelta import relativedelta

from finledger.domain.entities import (
    Account,
    AccountType,
    Category,
    Transaction,
    TransactionType,
)
from finledger.domain.errors import ValidationError

BUDGET_LOOKBACK_MONTHS = 3
BUDGET_BUFFER = Decimal("1.1")
CENTS = Decimal("0.01")


@dataclass(frozen=True)
class AccountSummary:
    """One account's line in the analytics report."""

    account_id: str
    name: str
    account_type: AccountType
    balance: Decimal


@dataclass(frozen=True)
class AnalyticsReport:
    """Snapshot of the ledger for dashboard-style display."""

    total_balance: Decimal
    accounts: tuple[AccountSummary, ...]
    recent_transactions: tuple[Transaction, ...]


def validate_period(month: int, year: int) -> None:
    """Reject month numbers outside 1..12 and non-positive years."""
    if not isinstance(month, int) or not 1 <= month <= 12:
        raise ValidationError(f"Month must be between 1 and 12, got {month}", field="month")
    if not isinstance(year, int) or year < 1:
        raise ValidationError(f"Invalid year {year}", field="year")


def newest_first(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Order transactions by date descending.

    Transactions sharing a date come out most recently inserted first.
    """
    indexed = list(enumerate(transactions))
    indexed.sort(key=lambda pair: (pair[1].date, pair[0]), reverse=True)
    return [txn for _, txn in indexed]


def total_balance(accounts: Iterable[Account]) -> Decimal:
    """Sum of all account balances, zero when there are none."""
    return sum((account.balance for account in accounts), Decimal("0"))


def _in_period(txn: Transaction, month: int, year: int) -> bool:
    return txn.date.month == month and txn.date.year == year


def monthly_total(
    transactions: Iterable[Transaction],
    transaction_type: TransactionType,
    month: int,
    year: int,
) -> Decimal:
    """Sum unsigned amounts of one transaction type within a calendar month."""
    validate_period(month, year)
    return sum(
        (
            txn.amount
            for txn in transactions
            if txn.transaction_type is transaction_type and _in_period(txn, month, year)
        ),
        Decimal("0"),
    )


def expenses_by_category(
    transactions: Iterable[Transaction], month: int, year: int
) -> dict[Category, Decimal]:
    """Group a month's expenses by category.

    Categories without matching expenses are absent from the result.
    Uncategorized expenses are not grouped.
    """
    validate_period(month, year)
    totals: dict[Category, Decimal] = defaultdict(lambda: Decimal("0"))
    for txn in transactions:
        if not txn.is_expense or txn.category is None:
            continue
        if _in_period(txn, month, year):
            totals[txn.category] += txn.amount
    return dict(totals)


def search(transactions: Sequence[Transaction], term: Optional[str]) -> list[Transaction]:
    """Case-insensitive search on description or category display name.

    A blank term returns every transaction in insertion order; matches are
    returned newest first.
    """
    if term is None or not term.strip():
        return list(transactions)

    needle = term.lower()

    def matches(txn: Transaction) -> bool:
        if txn.description and needle in txn.description.lower():
            return True
        return txn.category is not None and needle in txn.category.display_name.lower()

    return newest_first(txn for txn in transactions if matches(txn))


def budget_recommendations(
    transactions: Iterable[Transaction], now: Optional[datetime] = None
) -> dict[Category, Decimal]:
    """Recommend a monthly budget for every expense category.

    The recommendation is the category's average monthly spend over the
    trailing three months (rounded half-up to cents) plus a 10% buffer.
    Categories with no spend still appear with a zero recommendation.
    ``now`` is naive local time, like transaction dates.

    Raises:
        ValidationError: If ``now`` carries a timezone
    """
    now = now or datetime.now()
    if now.tzinfo is not None:
        raise ValidationError("Reference time must be naive local time", field="now")
    cutoff = now - relativedelta(months=BUDGET_LOOKBACK_MONTHS)

    spent: dict[Category, Decimal] = {
        category: Decimal("0") for category in Category.expense_categories()
    }
    for txn in transactions:
        if txn.category in spent and cutoff < txn.date <= now:
            spent[txn.category] += txn.amount

    recommendations: dict[Category, Decimal] = {}
    for category, amount in spent.items():
        average = (amount / BUDGET_LOOKBACK_MONTHS).quantize(CENTS, rounding=ROUND_HALF_UP)
        recommendations[category] = average * BUDGET_BUFFER
    return recommendations


def build_analytics_report(
    accounts: Sequence[Account],
    transactions: Sequence[Transaction],
    recent_limit: int = 10,
) -> AnalyticsReport:
    """Build the total balance, per-account summary and recent activity."""
    summaries = tuple(
        AccountSummary(
            account_id=account.id,
            name=account.name,
            account_type=account.account_type,
            balance=account.balance,
        )
        for account in accounts
    )
    return AnalyticsReport(
        total_balance=total_balance(accounts),
        accounts=summaries,
        recent_transactions=tuple(newest_first(transactions)[:recent_limit]),
    )
