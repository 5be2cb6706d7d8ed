"""Shared pytest fixtures for fintrack tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from fintrack.database.factories import create_sqlite_database
from fintrack.domain.dashboard import DashboardService
from fintrack.domain.entities import Transaction, TransactionType
from fintrack.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def dashboard_service(temp_db):
    """Create a DashboardService with a temporary database."""
    return DashboardService(temp_db)


@pytest.fixture
def sample_transactions(transaction_service):
    """Store a small ledger and return the created IDs."""
    return [
        transaction_service.create_transaction(
            date=date(2024, 1, 1),
            amount=Decimal("100.00"),
            type=TransactionType.INCOME,
            description="Paycheck",
            category="Salary",
        ),
        transaction_service.create_transaction(
            date=date(2024, 1, 5),
            amount=Decimal("40.00"),
            type=TransactionType.EXPENSE,
            description="Groceries",
            category="Food",
        ),
        transaction_service.create_transaction(
            date=date(2024, 1, 10),
            amount=Decimal("25.50"),
            type=TransactionType.INCOME,
            description="Refund from friend",
        ),
    ]


@pytest.fixture
def make_transaction():
    """Build in-memory Transaction entities with sensible defaults."""
    counter = {"next_id": 1}

    def _make(amount, type, **kwargs):
        txn_id = kwargs.pop("id", counter["next_id"])
        counter["next_id"] += 1
        return Transaction(
            id=txn_id,
            date=kwargs.pop("date", date(2024, 1, 1)),
            amount=amount,
            type=type,
            **kwargs,
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def insert_raw_transaction(temp_db):
    """Write a row straight to SQLite, bypassing CHECK constraints.

    Stands in for data written by an older schema or edited by hand.
    """
    from sqlalchemy import text

    def _insert(amount, type, on="2024-01-01"):
        session = temp_db._get_session()
        session.execute(text("PRAGMA ignore_check_constraints = ON"))
        try:
            result = session.execute(
                text(
                    "INSERT INTO transactions (amount, date, type, created_at) "
                    "VALUES (:amount, :date, :type, '2024-01-01 00:00:00')"
                ),
                {"amount": amount, "date": on, "type": type},
            )
            row_id = result.lastrowid
            session.commit()
        finally:
            session.execute(text("PRAGMA ignore_check_constraints = OFF"))
            session.commit()
        return row_id

    return _insert
