"""Tests for the SQLAlchemy ledger store."""

from datetime import datetime
from decimal import Decimal

import pytest

from finledger.database.factories import create_sqlite_store
from finledger.domain.entities import Account, AccountType, Category
from finledger.domain.errors import DuplicateKeyError
from finledger.domain.ledger import LedgerService


def test_empty_store_loads_empty_ledger(temp_store):
    ledger = temp_store.load_ledger()

    assert ledger.get_all_accounts() == []
    assert ledger.get_all_transactions() == []
    assert ledger.get_total_balance() == Decimal("0")


def test_save_and_load_preserves_state(temp_store, reload_ledger, ledger, factory, checking, savings):
    checking.description = "Everyday spending"
    rent = factory.create_expense_transaction(
        "ACC_001", Decimal("1200.10"), "Rent", Category.HOUSING, date=datetime(2024, 5, 1, 9, 30)
    )
    ledger.add_transaction(rent)
    debit, credit = factory.create_transfer("ACC_001", "ACC_002", Decimal("0.33"), "Round-up")
    ledger.add_transfer(debit, credit)

    temp_store.save_ledger(ledger)
    loaded = reload_ledger()

    assert [acc.id for acc in loaded.get_all_accounts()] == ["ACC_001", "ACC_002"]
    loaded_checking = loaded.get_account("ACC_001")
    assert loaded_checking.balance == Decimal("-200.43")
    assert loaded_checking.account_type is AccountType.CHECKING
    assert loaded_checking.description == "Everyday spending"
    assert loaded.get_account("ACC_002").balance == Decimal("5000.33")

    loaded_transactions = loaded.get_all_transactions()
    assert [txn.id for txn in loaded_transactions] == [rent.id, debit.id, credit.id]
    assert loaded_transactions[0].amount == Decimal("1200.10")
    assert loaded_transactions[0].category is Category.HOUSING
    assert loaded_transactions[0].date == datetime(2024, 5, 1, 9, 30)


def test_amounts_survive_without_float_rounding(temp_store, reload_ledger):
    ledger = LedgerService()
    ledger.add_account(Account("ACC_1", "Precise", AccountType.INVESTMENT, Decimal("12345678901234.5678")))
    temp_store.save_ledger(ledger)

    assert reload_ledger().get_account("ACC_1").balance == Decimal("12345678901234.5678")


def test_save_replaces_previous_snapshot(temp_store, reload_ledger, ledger, factory, checking, savings):
    ledger.add_transaction(factory.create_income_transaction("ACC_001", Decimal("1"), "Tip"))
    temp_store.save_ledger(ledger)

    ledger.remove_account("ACC_001")
    temp_store.save_ledger(ledger)

    loaded = reload_ledger()
    assert [acc.id for acc in loaded.get_all_accounts()] == ["ACC_002"]
    assert loaded.get_all_transactions() == []


def test_rejected_duplicate_leaves_ledger_saveable(temp_store, reload_ledger, ledger, factory, checking):
    txn = factory.create_expense_transaction("ACC_001", Decimal("10"), "Lunch", Category.FOOD)
    ledger.add_transaction(txn)
    with pytest.raises(DuplicateKeyError):
        ledger.add_transaction(txn)

    temp_store.save_ledger(ledger)

    loaded = reload_ledger()
    assert [t.id for t in loaded.get_all_transactions()] == [txn.id]
    assert loaded.get_account("ACC_001").balance == Decimal("990.00")


def test_same_store_can_load_after_save(temp_store, ledger, checking):
    temp_store.save_ledger(ledger)
    first = temp_store.load_ledger()
    first.get_account("ACC_001").name = "Renamed"
    temp_store.save_ledger(first)

    assert temp_store.load_ledger().get_account("ACC_001").name == "Renamed"


def test_uncategorized_transaction_round_trip(temp_store, reload_ledger, ledger, factory, checking):
    ledger.add_transaction(factory.create_expense_transaction("ACC_001", Decimal("3"), "Misc"))
    temp_store.save_ledger(ledger)

    assert reload_ledger().get_all_transactions()[0].category is None


def test_factory_uses_environment_variable(tmp_path, monkeypatch):
    db_path = tmp_path / "env.db"
    monkeypatch.setenv("FINLEDGER_DB_PATH", str(db_path))

    store = create_sqlite_store()
    try:
        assert store.database_url == f"sqlite:///{db_path}"
    finally:
        store.disconnect()


def test_factory_defaults_to_home_directory(tmp_path, monkeypatch):
    monkeypatch.delenv("FINLEDGER_DB_PATH", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    store = create_sqlite_store()
    try:
        assert store.database_url == f"sqlite:///{tmp_path / '.finledger' / 'finledger.db'}"
    finally:
        store.disconnect()
