"""Domain layer for finledger application."""

from finledger.domain.entities import (
    Account,
    AccountType,
    Category,
    Transaction,
    TransactionType,
)
from finledger.domain.ledger import LedgerService
from finledger.domain.transaction_factory import TransactionFactory

__all__ = [
    "Account",
    "AccountType",
    "Category",
    "Transaction",
    "TransactionType",
    "LedgerService",
    "TransactionFactory",
]
