"""Snapshot storage for finledger ledgers."""

from finledger.database.base import LedgerStore
from finledger.database.factories import create_sqlite_store

__all__ = ["LedgerStore", "create_sqlite_store"]
