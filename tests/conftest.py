"""Shared pytest fixtures for finova tests."""

import tempfile
import os
from datetime import date, timedelta
from decimal import Decimal
import pytest

from finova.database.factories import create_sqlite_database
from finova.domain.chart import DEFAULT_CHART
from finova.domain.entities import Transaction
from finova.domain.report import ReportService
from finova.domain.transaction import TransactionService


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
def chart():
    return DEFAULT_CHART


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def report_service(temp_db):
    """Create a ReportService with a temporary database."""
    return ReportService(temp_db)


@pytest.fixture
def make_txn():
    """Build in-memory transactions with sequential IDs and dates."""
    counter = {"id": 0}

    def _make(debit, credit, amount, txn_date=None, narration="", owner="admin"):
        counter["id"] += 1
        return Transaction(
            id=counter["id"],
            owner=owner,
            date=txn_date or date(2024, 1, 1) + timedelta(days=counter["id"] - 1),
            debit=debit,
            credit=credit,
            amount=Decimal(str(amount)),
            narration=narration,
        )

    return _make


@pytest.fixture
def scenario_transactions(make_txn):
    """Capital introduced, goods bought and sold for cash."""
    return [
        make_txn("cash", "capital", 5000, narration="Started business"),
        make_txn("purchases", "cash", 2000, narration="Bought goods"),
        make_txn("cash", "sales", 3000, narration="Sold goods"),
    ]


@pytest.fixture
def recorded_scenario(transaction_service):
    """Record the scenario transactions for the default owner."""
    ids = [
        transaction_service.record_transaction(
            owner="admin", date=date(2024, 1, 1), debit="cash", credit="capital",
            amount=Decimal("5000.00"), narration="Started business",
        ),
        transaction_service.record_transaction(
            owner="admin", date=date(2024, 1, 2), debit="purchases", credit="cash",
            amount=Decimal("2000.00"), narration="Bought goods",
        ),
        transaction_service.record_transaction(
            owner="admin", date=date(2024, 1, 3), debit="cash", credit="sales",
            amount=Decimal("3000.00"), narration="Sold goods",
        ),
    ]
    return ids


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
