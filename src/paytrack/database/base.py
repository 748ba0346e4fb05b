"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from paytrack.domain.entities import (
    BudgetCategory,
    PayFrequency,
    PaySchedule,
    Transaction,
)


class Database(ABC):
    """Abstract database interface for paytrack."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Pay schedule operations
    @abstractmethod
    def save_pay_schedule(self, last_pay_date: date, frequency: PayFrequency) -> int:
        """Replace the configured pay schedule. Returns settings ID."""
        pass

    @abstractmethod
    def get_pay_schedule(self) -> Optional[PaySchedule]:
        """Get the configured pay schedule, or None if not set up."""
        pass

    # Budget category operations
    @abstractmethod
    def create_budget_category(
        self,
        name: str,
        allocated_amount: Optional[Decimal],
        color: Optional[str] = None,
        is_active: bool = True,
    ) -> int:
        """Create a budget category. Returns category ID."""
        pass

    @abstractmethod
    def get_budget_category(self, category_id: int) -> Optional[BudgetCategory]:
        """Get budget category by ID."""
        pass

    @abstractmethod
    def list_budget_categories(self) -> list[BudgetCategory]:
        """List all budget categories ordered by name."""
        pass

    @abstractmethod
    def get_active_budget_categories(self) -> list[BudgetCategory]:
        """List active budget categories ordered by name."""
        pass

    @abstractmethod
    def set_budget_category_active(self, category_id: int, is_active: bool) -> None:
        """Activate or deactivate a budget category."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        date: date,
        name: str,
        amount: Decimal,
        category_id: Optional[int] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def get_transactions_in_range(
        self, start_date: date, end_date: date
    ) -> list[Transaction]:
        """List transactions dated between start_date and end_date inclusive.

        Uncategorized transactions are included. Results are ordered newest
        first (date, then ID, descending).
        """
        pass
