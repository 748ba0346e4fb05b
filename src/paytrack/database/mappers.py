"""Mapper functions to convert SQLAlchemy models into domain entities.

This layer isolates the conversion logic, so the overspending engine only
ever sees validated domain values.
"""

from paytrack.domain import entities as domain
from paytrack.database.models import (
    PaySettings as ORMPaySettings,
    BudgetCategory as ORMBudgetCategory,
    Transaction as ORMTransaction,
)


def pay_settings_to_domain(orm_settings: ORMPaySettings) -> domain.PaySchedule:
    """Convert SQLAlchemy PaySettings model to domain PaySchedule entity."""
    return domain.PaySchedule(
        last_pay_date=orm_settings.last_pay_date,
        frequency=orm_settings.frequency,
    )


def budget_category_to_domain(orm_category: ORMBudgetCategory) -> domain.BudgetCategory:
    """Convert SQLAlchemy BudgetCategory model to domain BudgetCategory entity."""
    return domain.BudgetCategory(
        id=orm_category.id,
        name=orm_category.name,
        allocated_amount=orm_category.allocated_amount,
        color=orm_category.color or domain.DEFAULT_CATEGORY_COLOR,
        is_active=bool(orm_category.is_active),
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        date=orm_transaction.date,
        name=orm_transaction.name,
        amount=orm_transaction.amount,
        category_id=orm_transaction.category_id,
        notes=orm_transaction.notes,
    )
