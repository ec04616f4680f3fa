"""Tests for stateless report helpers."""

import pytest
from datetime import datetime, timezone
from decimal import Decimal

from finledger.domain import reports
from finledger.domain.entities import Category, Transaction, TransactionType
from finledger.domain.errors import ValidationError


def _txn(txn_id, amount, when, category=Category.FOOD, txn_type=TransactionType.EXPENSE, description="Item"):
    return Transaction(
        id=txn_id,
        account_id="ACC_1",
        transaction_type=txn_type,
        amount=Decimal(amount),
        description=description,
        category=category,
        date=when,
    )


def test_newest_first_orders_by_date_then_reverse_insertion():
    jan = _txn("a", "1", datetime(2024, 1, 1))
    mar_first = _txn("b", "1", datetime(2024, 3, 1))
    feb = _txn("c", "1", datetime(2024, 2, 1))
    mar_second = _txn("d", "1", datetime(2024, 3, 1))

    ordered = reports.newest_first([jan, mar_first, feb, mar_second])

    assert [txn.id for txn in ordered] == ["d", "b", "c", "a"]


def test_expenses_by_category_skips_uncategorized():
    when = datetime(2024, 4, 2)
    transactions = [
        _txn("a", "10.00", when, category=None),
        _txn("b", "5.50", when, category=Category.UTILITIES),
    ]

    assert reports.expenses_by_category(transactions, 4, 2024) == {Category.UTILITIES: Decimal("5.50")}


def test_monthly_total_empty():
    assert reports.monthly_total([], TransactionType.INCOME, 1, 2024) == Decimal("0")


@pytest.mark.parametrize("month, year", [(0, 2024), (13, 2024), (6, 0), ("6", 2024)])
def test_validate_period_rejects(month, year):
    with pytest.raises(ValidationError):
        reports.validate_period(month, year)


def test_search_handles_missing_description_and_category():
    bare = Transaction("a", "ACC_1", TransactionType.EXPENSE, Decimal("1"))
    assert reports.search([bare], "anything") == []


def test_budget_window_excludes_future_and_old_spending():
    now = datetime(2024, 6, 15)
    transactions = [
        _txn("old", "300", datetime(2024, 3, 15), category=Category.TRAVEL),
        _txn("edge", "30", datetime(2024, 3, 15, 0, 0, 1), category=Category.TRAVEL),
        _txn("future", "900", datetime(2024, 7, 1), category=Category.TRAVEL),
        _txn("income", "600", datetime(2024, 6, 1), category=Category.SALARY, txn_type=TransactionType.INCOME),
    ]

    recommendations = reports.budget_recommendations(transactions, now)

    assert recommendations[Category.TRAVEL] == Decimal("11.00")
    assert Category.SALARY not in recommendations


def test_budget_rounds_half_up():
    now = datetime(2024, 6, 15)
    # 0.05 / 3 = 0.01666... -> 0.02
    transactions = [_txn("a", "0.05", datetime(2024, 6, 1), category=Category.SHOPPING)]

    recommendations = reports.budget_recommendations(transactions, now)

    assert recommendations[Category.SHOPPING] == Decimal("0.022")


def test_budget_rejects_timezone_aware_reference():
    transactions = [_txn("a", "10", datetime(2024, 6, 1), category=Category.SHOPPING)]

    with pytest.raises(ValidationError) as excinfo:
        reports.budget_recommendations(transactions, datetime(2024, 6, 15, tzinfo=timezone.utc))
    assert excinfo.value.field == "now"
