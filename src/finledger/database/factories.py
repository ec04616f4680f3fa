"""Store factory functions for creating ledger store instances."""

import os
from pathlib import Path
from typing import Optional

from finledger.database.sqlalchemy_store import SQLAlchemyLedgerStore

DB_PATH_ENV = "FINLEDGER_DB_PATH"


def create_sqlite_store(database_path: Optional[str] = None) -> SQLAlchemyLedgerStore:
    """Create a SQLite ledger store.

    Args:
        database_path: Path to SQLite database file. If None, checks FINLEDGER_DB_PATH
            environment variable, then defaults to ~/.finledger/finledger.db

    Returns:
        SQLAlchemyLedgerStore instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV)

    if database_path is None:
        db_dir = Path.home() / ".finledger"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "finledger.db")

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyLedgerStore(database_url)
