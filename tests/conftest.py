"""Shared pytest fixtures for paytrack tests."""

import logging
import os
import tempfile
from datetime import date
from decimal import Decimal

import pytest

from paytrack.database.factories import create_sqlite_database
from paytrack.domain.budget import BudgetCategoryService
from paytrack.domain.overspending import OverspendingService
from paytrack.domain.pay_schedule import PayScheduleService
from paytrack.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def pay_schedule_service(temp_db):
    """Create a PayScheduleService with a temporary database."""
    return PayScheduleService(temp_db)


@pytest.fixture
def budget_service(temp_db):
    """Create a BudgetCategoryService with a temporary database."""
    return BudgetCategoryService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def overspending_service(temp_db):
    """Create an OverspendingService with a temporary database."""
    return OverspendingService(temp_db)


@pytest.fixture
def biweekly_schedule(pay_schedule_service):
    """Configure a biweekly schedule paid on 2025-01-03."""
    return pay_schedule_service.save_schedule(date(2025, 1, 3), "biweekly")


@pytest.fixture
def sample_budgets(budget_service):
    """Create sample budget categories and return their IDs by name."""
    return {
        "Groceries": budget_service.create_category("Groceries", Decimal("300")),
        "Dining Out": budget_service.create_category(
            "Dining Out", Decimal("150"), color="#F97316"
        ),
        "Transport": budget_service.create_category("Transport", Decimal("60")),
    }


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner.

    The CLI reconfigures root logging on every invocation, so the root
    logger is restored afterwards.
    """
    from click.testing import CliRunner

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level

    yield CliRunner()

    root.handlers[:] = handlers
    root.setLevel(level)
