"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from fintrack.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV = "FINTRACK_DB_PATH"
DEFAULT_DB_DIRNAME = ".fintrack"
DEFAULT_DB_FILENAME = "fintrack.db"


def default_database_path() -> Path:
    """Return ~/.fintrack/fintrack.db, creating the directory if needed."""
    db_dir = Path.home() / DEFAULT_DB_DIRNAME
    db_dir.mkdir(parents=True, exist_ok=True)
    return db_dir / DEFAULT_DB_FILENAME


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database for the ledger.

    The path is resolved from the argument, then the FINTRACK_DB_PATH
    environment variable, then the per-user default location.
    """
    path = database_path or os.environ.get(DB_PATH_ENV) or default_database_path()
    return SQLAlchemyDatabase(f"sqlite:///{path}")
