"""Shared pytest fixtures for finledger tests."""

import itertools
import os
import tempfile
from decimal import Decimal

import pytest

from finledger.database.factories import create_sqlite_store
from finledger.domain.entities import Account, AccountType
from finledger.domain.ledger import LedgerService
from finledger.domain.transaction_factory import TransactionFactory


@pytest.fixture
def temp_store():
    """Create a temporary SQLite ledger store for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    store = create_sqlite_store(database_path=db_path)
    # Store the path for tests that need it
    store.database_path = db_path
    store.connect()
    store.initialize_schema()

    yield store

    store.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def factory():
    """Create a TransactionFactory with predictable IDs."""
    counter = itertools.count(1)
    return TransactionFactory(id_factory=lambda: f"TXN_{next(counter):04d}")


@pytest.fixture
def ledger(factory):
    """Create an empty ledger."""
    return LedgerService(transaction_factory=factory)


@pytest.fixture
def checking(ledger):
    """Add a checking account with a 1000.00 balance."""
    account = Account("ACC_001", "Main Checking", AccountType.CHECKING, Decimal("1000.00"))
    ledger.add_account(account)
    return account


@pytest.fixture
def savings(ledger):
    """Add a savings account with a 5000.00 balance."""
    account = Account("ACC_002", "Emergency Savings", AccountType.SAVINGS, Decimal("5000.00"))
    ledger.add_account(account)
    return account


@pytest.fixture
def stored_account(temp_store):
    """Save a ledger holding one account to the temporary store."""
    ledger = LedgerService()
    account = Account("ACC_001", "Test Account", AccountType.CHECKING, Decimal("1000.00"))
    ledger.add_account(account)
    temp_store.save_ledger(ledger)
    return account


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def reload_ledger(temp_store):
    """Return a function that loads the stored ledger through a fresh store."""

    def _reload():
        store = create_sqlite_store(database_path=temp_store.database_path)
        try:
            return store.load_ledger()
        finally:
            store.disconnect()

    return _reload
