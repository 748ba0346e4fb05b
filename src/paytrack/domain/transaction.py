"""Transaction domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

from paytrack.database.base import Database
from paytrack.domain.budget import BudgetCategoryService
from paytrack.domain.entities import Transaction as TransactionEntity
from paytrack.domain.errors import ValidationError


class TransactionService:
    """Service for recording transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        date: date,
        name: str,
        amount: Decimal,
        category_id: Optional[int] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Create a transaction.

        Args:
            date: Transaction date
            name: Transaction name
            amount: Signed amount (expenses are usually negative)
            category_id: Optional budget category ID
            notes: Optional notes

        Returns:
            Transaction ID

        Raises:
            ValidationError: If the name is blank
            NotFoundError: If the category does not exist
        """
        if not name or not name.strip():
            raise ValidationError("Transaction name is required")
        if category_id is not None:
            BudgetCategoryService(self.db).require_category(category_id)

        return self.db.create_transaction(
            date=date,
            name=name.strip(),
            amount=amount,
            category_id=category_id,
            notes=notes,
        )

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID."""
        return self.db.get_transaction(transaction_id)
