"""Per-category spend aggregation for a single pay period."""

from decimal import Decimal
from fractions import Fraction
from typing import Optional, Sequence

from paytrack.domain.entities import (
    BudgetCategory,
    CategorySpend,
    PayPeriod,
    Transaction,
)

# Monthly allocations are pro-rated against a fixed 30-day month.
DAYS_PER_BUDGET_MONTH = 30


def prorate_budget(allocated_amount: Optional[Decimal], days_in_period: int) -> Fraction:
    """Scale a monthly allocation to a period of days_in_period days.

    The result is exact, so it is linear in days_in_period. A missing
    allocation counts as zero.
    """
    monthly = Fraction(allocated_amount) if allocated_amount is not None else Fraction(0)
    return monthly / DAYS_PER_BUDGET_MONTH * days_in_period


def to_decimal(value: Fraction) -> Decimal:
    """Convert an exact amount to Decimal in the current context."""
    return Decimal(value.numerator) / value.denominator


def aggregate_category_spend(
    period: PayPeriod,
    categories: Sequence[BudgetCategory],
    transactions: Sequence[Transaction],
) -> dict[int, CategorySpend]:
    """Sum absolute spend and pro-rated budget per active category.

    Only transactions dated inside the period count. Spend is the sum of
    absolute amounts, so expenses stored as negative or positive numbers
    give the same result. Every active category gets an entry, including
    those with no matching transactions.

    Args:
        period: Pay period to aggregate over
        categories: Budget categories; inactive ones are skipped
        transactions: Transactions for the period

    Returns:
        Dict of category ID to CategorySpend, in category input order
    """
    days_in_period = period.days
    in_period = [txn for txn in transactions if period.contains(txn.date)]

    by_category: dict[int, list[Transaction]] = {}
    for txn in in_period:
        if txn.category_id is not None:
            by_category.setdefault(txn.category_id, []).append(txn)

    results: dict[int, CategorySpend] = {}
    for category in categories:
        if not category.is_active:
            continue
        matching = tuple(by_category.get(category.id, ()))
        results[category.id] = CategorySpend(
            category=category,
            period_budget=prorate_budget(category.allocated_amount, days_in_period),
            spent=sum((abs(txn.amount) for txn in matching), Decimal(0)),
            matching_transactions=matching,
        )

    return results
