"""Ledger domain service."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from finledger.domain import reports
from finledger.domain.entities import Account, Category, Transaction, TransactionType, to_decimal
from finledger.domain.errors import (
    DuplicateKeyError,
    NotFoundError,
    account_already_exists,
    account_not_found,
    transaction_account_not_found,
    transaction_already_exists,
)
from finledger.domain.reports import AnalyticsReport
from finledger.domain.transaction_factory import TransactionFactory


class LedgerService:
    """Service owning the accounts and transactions of one ledger.

    The ledger is the only mutator of account balances and the transaction
    list, and keeps the two consistent: every transaction references an
    existing account, transaction IDs are unique, and removing an account
    removes its transactions. All ``get_all_*`` accessors return new lists.

    Not thread-safe: one caller at a time.
    """

    def __init__(self, transaction_factory: Optional[TransactionFactory] = None):
        """Initialize an empty ledger.

        Args:
            transaction_factory: Factory handed to callers that build
                transactions for this ledger
        """
        self._accounts: dict[str, Account] = {}
        self._transactions: list[Transaction] = []
        self._transaction_ids: set[str] = set()
        self.transaction_factory = transaction_factory or TransactionFactory()

    @classmethod
    def restore(
        cls,
        accounts: list[Account],
        transactions: list[Transaction],
        transaction_factory: Optional[TransactionFactory] = None,
    ) -> "LedgerService":
        """Rebuild a ledger from previously saved state.

        Balances are taken as stored; transactions are recorded without
        being applied again.

        Raises:
            DuplicateKeyError: If two accounts or two transactions share an ID
            NotFoundError: If a transaction references a missing account
        """
        ledger = cls(transaction_factory)
        for account in accounts:
            ledger.add_account(account)
        for txn in transactions:
            ledger._check_new_transaction(txn)
            ledger._record(txn)
        return ledger

    # Account management
    def add_account(self, account: Account) -> None:
        """Add an account.

        Raises:
            DuplicateKeyError: If an account with the same ID exists
        """
        if account.id in self._accounts:
            raise DuplicateKeyError(account_already_exists(account.id))
        self._accounts[account.id] = account

    def get_account(self, account_id: str) -> Optional[Account]:
        """Get account by ID, or None if not found."""
        return self._accounts.get(account_id)

    def get_all_accounts(self) -> list[Account]:
        """List all accounts in the order they were added."""
        return list(self._accounts.values())

    def remove_account(self, account_id: str) -> int:
        """Remove an account and every transaction that references it.

        Returns:
            Number of transactions removed along with the account

        Raises:
            NotFoundError: If the account does not exist
        """
        if account_id not in self._accounts:
            raise NotFoundError(account_not_found(account_id))

        del self._accounts[account_id]
        remaining = [txn for txn in self._transactions if txn.account_id != account_id]
        removed = len(self._transactions) - len(remaining)
        self._transactions = remaining
        self._transaction_ids = {txn.id for txn in remaining}
        return removed

    # Transaction management
    def add_transaction(self, transaction: Transaction) -> None:
        """Apply a transaction to its account and record it.

        Raises:
            NotFoundError: If the transaction's account does not exist
            DuplicateKeyError: If a transaction with the same ID is recorded
        """
        self._check_new_transaction(transaction)
        self._apply(transaction)

    def add_transfer(self, debit: Transaction, credit: Transaction) -> None:
        """Apply both legs of a transfer, or neither.

        Raises:
            NotFoundError: If either leg's account does not exist
            DuplicateKeyError: If either leg's ID is already recorded, or
                both legs share one ID
        """
        self._check_new_transaction(debit)
        self._check_new_transaction(credit)
        if debit.id == credit.id:
            raise DuplicateKeyError(transaction_already_exists(credit.id))
        self._apply(debit)
        self._apply(credit)

    def _check_new_transaction(self, transaction: Transaction) -> None:
        if transaction.account_id not in self._accounts:
            raise NotFoundError(transaction_account_not_found(transaction.account_id))
        if transaction.id in self._transaction_ids:
            raise DuplicateKeyError(transaction_already_exists(transaction.id))

    def _apply(self, transaction: Transaction) -> None:
        self._accounts[transaction.account_id].update_balance(transaction.signed_amount)
        self._record(transaction)

    def _record(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)
        self._transaction_ids.add(transaction.id)

    def get_transactions_for_account(self, account_id: str) -> list[Transaction]:
        """List an account's transactions, newest first."""
        return reports.newest_first(
            txn for txn in self._transactions if txn.account_id == account_id
        )

    def get_all_transactions(self) -> list[Transaction]:
        """List all transactions in the order they were added."""
        return list(self._transactions)

    def get_recent_transactions(self, limit: int = 10) -> list[Transaction]:
        """List the most recent transactions across all accounts."""
        return reports.newest_first(self._transactions)[:limit]

    # Analytics and reporting
    def get_total_balance(self) -> Decimal:
        return reports.total_balance(self._accounts.values())

    def get_monthly_income(self, month: int, year: int) -> Decimal:
        return reports.monthly_total(self._transactions, TransactionType.INCOME, month, year)

    def get_monthly_expenses(self, month: int, year: int) -> Decimal:
        return reports.monthly_total(self._transactions, TransactionType.EXPENSE, month, year)

    def get_expenses_by_category(self, month: int, year: int) -> dict[Category, Decimal]:
        return reports.expenses_by_category(self._transactions, month, year)

    def search_transactions(self, term: Optional[str]) -> list[Transaction]:
        return reports.search(self._transactions, term)

    def get_monthly_budget_recommendations(
        self, now: Optional[datetime] = None
    ) -> dict[Category, Decimal]:
        """Recommend a monthly budget per expense category.

        Depends on the time of the call unless ``now`` is given.
        """
        return reports.budget_recommendations(self._transactions, now)

    def build_analytics_report(self, recent_limit: int = 10) -> AnalyticsReport:
        return reports.build_analytics_report(
            self.get_all_accounts(), self._transactions, recent_limit
        )

    # Business rules
    def can_make_transaction(
        self, account_id: str, amount, transaction_type: TransactionType
    ) -> bool:
        """Check whether a transaction would be covered by the account.

        Advisory only: ``add_transaction`` does not enforce it.
        """
        account = self._accounts.get(account_id)
        if account is None:
            return False
        if transaction_type is TransactionType.EXPENSE:
            return account.has_sufficient_funds(to_decimal(amount))
        return True
