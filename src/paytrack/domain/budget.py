"""Budget category domain service."""

from decimal import Decimal
from typing import Optional

from paytrack.database.base import Database
from paytrack.domain.entities import BudgetCategory
from paytrack.domain.errors import (
    NotFoundError,
    ValidationError,
    budget_category_not_found,
)


class BudgetCategoryService:
    """Service for managing budget categories."""

    def __init__(self, db: Database):
        """Initialize budget category service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_category(
        self,
        name: str,
        allocated_amount: Decimal,
        color: Optional[str] = None,
    ) -> int:
        """Create a budget category.

        Args:
            name: Category name
            allocated_amount: Nominal monthly budget
            color: Optional display color (hex)

        Returns:
            Category ID

        Raises:
            ValidationError: If the name is blank or the amount is negative
        """
        if not name or not name.strip():
            raise ValidationError("Category name is required")
        if allocated_amount < 0:
            raise ValidationError("Allocated amount cannot be negative")
        return self.db.create_budget_category(
            name=name.strip(), allocated_amount=allocated_amount, color=color
        )

    def require_category(self, category_id: int) -> BudgetCategory:
        """Get budget category by ID or raise NotFoundError."""
        category = self.db.get_budget_category(category_id)
        if category is None:
            raise NotFoundError(budget_category_not_found(category_id))
        return category

    def list_categories(self, include_inactive: bool = False) -> list[BudgetCategory]:
        """List budget categories, active only unless include_inactive is set."""
        if include_inactive:
            return self.db.list_budget_categories()
        return self.db.get_active_budget_categories()

    def set_active(self, category_id: int, is_active: bool) -> None:
        """Activate or deactivate a budget category."""
        self.require_category(category_id)
        self.db.set_budget_category_active(category_id, is_active)
