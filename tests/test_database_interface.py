"""Tests for Database interface returning domain models."""

from datetime import date
from decimal import Decimal

import pytest

from paytrack.domain import entities
from paytrack.domain.errors import NotFoundError


class TestPaySchedule:
    """Tests for pay schedule storage."""

    def test_no_schedule_returns_none(self, temp_db):
        assert temp_db.get_pay_schedule() is None

    def test_save_replaces_existing_schedule(self, temp_db):
        temp_db.save_pay_schedule(date(2024, 12, 6), entities.PayFrequency.WEEKLY)
        temp_db.save_pay_schedule(date(2025, 1, 3), entities.PayFrequency.BIWEEKLY)

        schedule = temp_db.get_pay_schedule()

        assert isinstance(schedule, entities.PaySchedule)
        assert schedule.last_pay_date == date(2025, 1, 3)
        assert schedule.frequency is entities.PayFrequency.BIWEEKLY


class TestBudgetCategories:
    """Tests for budget category storage."""

    def test_get_budget_category_returns_domain_model(self, temp_db):
        category_id = temp_db.create_budget_category("Groceries", Decimal("300"))

        category = temp_db.get_budget_category(category_id)

        assert isinstance(category, entities.BudgetCategory)
        assert category.name == "Groceries"
        assert category.allocated_amount == Decimal("300")
        assert category.color == entities.DEFAULT_CATEGORY_COLOR
        assert category.is_active is True

    def test_missing_category_returns_none(self, temp_db):
        assert temp_db.get_budget_category(999) is None

    def test_null_allocation_is_preserved(self, temp_db):
        category_id = temp_db.create_budget_category("Misc", None)

        assert temp_db.get_budget_category(category_id).allocated_amount is None

    def test_active_categories_sorted_by_name(self, temp_db):
        temp_db.create_budget_category("Transport", Decimal("60"))
        inactive = temp_db.create_budget_category("Books", Decimal("20"))
        temp_db.create_budget_category("Groceries", Decimal("300"))
        temp_db.set_budget_category_active(inactive, False)

        active = temp_db.get_active_budget_categories()
        everything = temp_db.list_budget_categories()

        assert [c.name for c in active] == ["Groceries", "Transport"]
        assert [c.name for c in everything] == ["Books", "Groceries", "Transport"]
        assert everything[0].is_active is False

    def test_set_active_on_missing_category_raises(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.set_budget_category_active(42, True)


class TestTransactions:
    """Tests for transaction storage."""

    def test_get_transaction_returns_domain_model(self, temp_db):
        txn_id = temp_db.create_transaction(
            date=date(2025, 1, 5), name="Supermarket", amount=Decimal("-82.15"), notes="weekly shop"
        )

        txn = temp_db.get_transaction(txn_id)

        assert isinstance(txn, entities.Transaction)
        assert txn.amount == Decimal("-82.15")
        assert isinstance(txn.amount, Decimal)
        assert txn.category_id is None
        assert txn.notes == "weekly shop"

    def test_range_is_inclusive_and_newest_first(self, temp_db):
        category_id = temp_db.create_budget_category("Groceries", Decimal("300"))
        for day, name, category in [
            (date(2025, 1, 2), "Before", category_id),
            (date(2025, 1, 3), "Start", category_id),
            (date(2025, 1, 10), "Uncategorized", None),
            (date(2025, 1, 16), "End", category_id),
            (date(2025, 1, 17), "After", category_id),
        ]:
            temp_db.create_transaction(date=day, name=name, amount=Decimal("-1"), category_id=category)

        transactions = temp_db.get_transactions_in_range(date(2025, 1, 3), date(2025, 1, 16))

        assert [t.name for t in transactions] == ["End", "Uncategorized", "Start"]

    def test_same_day_transactions_ordered_by_id_descending(self, temp_db):
        first = temp_db.create_transaction(date=date(2025, 1, 5), name="First", amount=Decimal("-1"))
        second = temp_db.create_transaction(date=date(2025, 1, 5), name="Second", amount=Decimal("-1"))

        transactions = temp_db.get_transactions_in_range(date(2025, 1, 5), date(2025, 1, 5))

        assert [t.id for t in transactions] == [second, first]
