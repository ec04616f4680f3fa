"""Demonstration data for a fresh ledger."""

import logging
from decimal import Decimal

from finledger.domain.entities import Account, AccountType, Category
from finledger.domain.ledger import LedgerService

logger = logging.getLogger(__name__)

SAMPLE_ACCOUNTS = [
    ("ACC_001", "Main Checking", AccountType.CHECKING, "2500.00"),
    ("ACC_002", "Emergency Savings", AccountType.SAVINGS, "10000.00"),
    ("ACC_003", "Credit Card", AccountType.CREDIT_CARD, "-500.00"),
]

# (account_id, is_income, amount, description, category)
SAMPLE_TRANSACTIONS = [
    ("ACC_001", True, "3000.00", "Monthly Salary", Category.SALARY),
    ("ACC_001", True, "500.00", "Freelance Project", Category.FREELANCE),
    ("ACC_001", False, "1200.00", "Monthly Rent", Category.HOUSING),
    ("ACC_001", False, "150.00", "Weekly Groceries", Category.FOOD),
    ("ACC_001", False, "60.00", "Gas Station", Category.TRANSPORTATION),
    ("ACC_001", False, "15.99", "Netflix Subscription", Category.ENTERTAINMENT),
]

SAMPLE_TRANSFER = ("ACC_001", "ACC_002", "500.00", "Monthly Savings")


def load_sample_data(ledger: LedgerService) -> int:
    """Populate a ledger with demonstration accounts and transactions.

    Args:
        ledger: Ledger to populate; must not already contain the sample accounts

    Returns:
        Number of transactions recorded

    Raises:
        DuplicateKeyError: If a sample account ID is already in use
    """
    factory = ledger.transaction_factory

    for account_id, name, account_type, balance in SAMPLE_ACCOUNTS:
        ledger.add_account(Account(account_id, name, account_type, Decimal(balance)))

    count = 0
    for account_id, is_income, amount, description, category in SAMPLE_TRANSACTIONS:
        create = (
            factory.create_income_transaction
            if is_income
            else factory.create_expense_transaction
        )
        ledger.add_transaction(create(account_id, Decimal(amount), description, category))
        count += 1

    from_id, to_id, amount, description = SAMPLE_TRANSFER
    debit, credit = factory.create_transfer(from_id, to_id, Decimal(amount), description)
    ledger.add_transfer(debit, credit)
    count += 2

    logger.info(
        "Loaded %d sample accounts and %d transactions (total balance %s)",
        len(SAMPLE_ACCOUNTS),
        count,
        ledger.get_total_balance(),
    )
    return count
