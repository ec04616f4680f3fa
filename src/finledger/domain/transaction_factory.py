"""Transaction factory: validates raw input and builds transactions."""

import uuid
from datetime import datetime
from typing import Callable, Optional

from finledger.domain.entities import Category, Transaction, TransactionType, to_decimal
from finledger.domain.errors import (
    ValidationError,
    amount_not_positive,
    field_required,
    same_account_transfer,
)


def generate_transaction_id() -> str:
    """Return a fresh transaction identifier such as ``TXN_1A2B3C4D5E6F7A8B``."""
    return "TXN_" + uuid.uuid4().hex[:16].upper()


def _is_text(value) -> bool:
    return isinstance(value, str) and bool(value.strip())


class TransactionFactory:
    """Builds well-formed transactions.

    The factory never touches ledger state: callers pass what it returns to
    ``LedgerService.add_transaction``.
    """

    def __init__(self, id_factory: Optional[Callable[[], str]] = None):
        """Initialize transaction factory.

        Args:
            id_factory: Callable returning a fresh identifier. Defaults to a
                uuid-based ``TXN_`` token.
        """
        self.id_factory = id_factory or generate_transaction_id

    def create_transaction(
        self,
        account_id: str,
        transaction_type: TransactionType,
        amount,
        description: str,
        category: Optional[Category] = None,
        date: Optional[datetime] = None,
    ) -> Transaction:
        """Create a validated transaction.

        Args:
            account_id: ID of the account the transaction belongs to
            transaction_type: INCOME or EXPENSE
            amount: Strictly positive amount
            description: Non-blank description
            category: Optional category (not checked against the type)
            date: Optional transaction date, defaults to now

        Returns:
            New Transaction

        Raises:
            ValidationError: If any input is missing or out of range
        """
        self._validate_input(account_id, transaction_type, amount, description)
        return Transaction(
            id=self.id_factory(),
            account_id=account_id,
            transaction_type=transaction_type,
            amount=amount,
            description=description,
            category=category,
            date=date,
        )

    def create_income_transaction(
        self,
        account_id: str,
        amount,
        description: str,
        category: Optional[Category] = None,
        date: Optional[datetime] = None,
    ) -> Transaction:
        """Create an income transaction."""
        return self.create_transaction(
            account_id, TransactionType.INCOME, amount, description, category, date
        )

    def create_expense_transaction(
        self,
        account_id: str,
        amount,
        description: str,
        category: Optional[Category] = None,
        date: Optional[datetime] = None,
    ) -> Transaction:
        """Create an expense transaction."""
        return self.create_transaction(
            account_id, TransactionType.EXPENSE, amount, description, category, date
        )

    def create_transfer(
        self,
        from_account_id: str,
        to_account_id: str,
        amount,
        description: str,
        date: Optional[datetime] = None,
    ) -> tuple[Transaction, Transaction]:
        """Create the debit and credit legs of a transfer.

        Both legs share one correlation token: ``<token>_debit`` and
        ``<token>_credit``.

        Returns:
            Tuple of (debit, credit)

        Raises:
            ValidationError: If input is invalid or both accounts are the same
        """
        self._validate_input(from_account_id, TransactionType.EXPENSE, amount, description)
        if not _is_text(to_account_id):
            raise ValidationError(field_required("to_account_id"), field="to_account_id")
        if from_account_id == to_account_id:
            raise ValidationError(
                same_account_transfer(from_account_id), field="to_account_id"
            )

        token = self.id_factory()
        labelled = f"{description} (Transfer)"
        when = date or datetime.now()

        debit = Transaction(
            id=f"{token}_debit",
            account_id=from_account_id,
            transaction_type=TransactionType.EXPENSE,
            amount=amount,
            description=f"Transfer to {to_account_id} - {labelled}",
            category=Category.OTHER_EXPENSE,
            date=when,
        )
        credit = Transaction(
            id=f"{token}_credit",
            account_id=to_account_id,
            transaction_type=TransactionType.INCOME,
            amount=amount,
            description=f"Transfer from {from_account_id} - {labelled}",
            category=Category.OTHER_INCOME,
            date=when,
        )
        return debit, credit

    def _validate_input(
        self,
        account_id: Optional[str],
        transaction_type: Optional[TransactionType],
        amount,
        description: Optional[str],
    ) -> None:
        if not _is_text(account_id):
            raise ValidationError(field_required("account_id"), field="account_id")
        if transaction_type is None:
            raise ValidationError(
                field_required("transaction_type"), field="transaction_type"
            )
        if amount is None:
            raise ValidationError(field_required("amount"), field="amount")
        if to_decimal(amount, "amount") <= 0:
            raise ValidationError(amount_not_positive(amount), field="amount")
        if not _is_text(description):
            raise ValidationError(field_required("description"), field="description")
