"""Mapper functions to convert between domain models and SQLAlchemy models.

Enumerations are stored by member name so display labels can change
without touching stored data.
"""

from finledger.domain import entities as domain
from finledger.database.models import (
    Account as ORMAccount,
    Transaction as ORMTransaction,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        account_type=domain.AccountType[orm_account.account_type],
        balance=orm_account.balance,
        description=orm_account.description,
        created_at=orm_account.created_at,
        updated_at=orm_account.updated_at,
    )


def account_to_orm(account: domain.Account, position: int) -> ORMAccount:
    """Convert domain Account entity to SQLAlchemy Account model."""
    return ORMAccount(
        id=account.id,
        position=position,
        name=account.name,
        account_type=account.account_type.name,
        balance=account.balance,
        description=account.description,
        created_at=account.created_at,
        updated_at=account.updated_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    category = None
    if orm_transaction.category is not None:
        category = domain.Category[orm_transaction.category]
    return domain.Transaction(
        id=orm_transaction.id,
        account_id=orm_transaction.account_id,
        transaction_type=domain.TransactionType[orm_transaction.transaction_type],
        amount=orm_transaction.amount,
        description=orm_transaction.description,
        category=category,
        date=orm_transaction.date,
        created_at=orm_transaction.created_at,
    )


def transaction_to_orm(transaction: domain.Transaction) -> ORMTransaction:
    """Convert domain Transaction entity to SQLAlchemy Transaction model."""
    return ORMTransaction(
        id=transaction.id,
        account_id=transaction.account_id,
        transaction_type=transaction.transaction_type.name,
        amount=transaction.amount,
        description=transaction.description,
        category=transaction.category.name if transaction.category else None,
        date=transaction.date,
        created_at=transaction.created_at,
    )
