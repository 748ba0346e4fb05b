"""Overspending analysis domain service."""

import logging
from collections import defaultdict
from dataclasses import replace
from datetime import date
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Optional, Sequence

from paytrack.database.base import Database
from paytrack.domain.aggregation import aggregate_category_spend, to_decimal
from paytrack.domain.entities import (
    BudgetCategory,
    CategoryOverspending,
    OverspendingPeriod,
    OverspendingReport,
    OverspendingSummary,
    PayPeriod,
    ProblematicCategory,
    Transaction,
)
from paytrack.domain.errors import DataAccessError, DomainError, EmptyInputError
from paytrack.domain.periods import (
    current_pay_period,
    reconstruct_pay_periods,
    require_schedule,
    validate_period_count,
)

logger = logging.getLogger(__name__)

DEFAULT_PERIODS = 6
BIGGEST_TRANSACTIONS_LIMIT = 10
PROBLEMATIC_CATEGORIES_LIMIT = 5

ZERO = Decimal(0)


def analyze_period(
    period: PayPeriod,
    categories: Sequence[BudgetCategory],
    transactions: Sequence[Transaction],
) -> OverspendingPeriod:
    """Analyze one pay period for overspending.

    Totals cover every active category, not only the overspent ones. Only
    categories with a positive overspend are listed, largest first with ties
    broken by category ID.

    Args:
        period: Pay period being analyzed
        categories: Budget categories to evaluate
        transactions: Transactions dated within the period

    Returns:
        OverspendingPeriod for the period
    """
    spends = aggregate_category_spend(period, categories, transactions)

    # Accumulate exactly; amounts become Decimal only in the result
    total_budget = Fraction(0)
    total_spent = Fraction(0)
    overspent_categories: list[CategoryOverspending] = []

    for spend in spends.values():
        spent = Fraction(spend.spent)
        total_budget += spend.period_budget
        total_spent += spent

        overspent = max(Fraction(0), spent - spend.period_budget)
        if overspent <= 0:
            continue

        if spend.period_budget > 0:
            percentage = overspent / spend.period_budget * 100
        else:
            percentage = Fraction(0)

        overspent_categories.append(
            CategoryOverspending(
                category_id=spend.category.id,
                name=spend.category.name,
                color=spend.category.color,
                budget_amount=to_decimal(spend.period_budget),
                spent=spend.spent,
                overspent=to_decimal(overspent),
                overspent_percentage=to_decimal(percentage),
                matching_transactions=spend.matching_transactions,
            )
        )

    overspent_categories.sort(key=lambda cat: (-cat.overspent, cat.category_id))

    # Stable sort keeps storage order (newest first) among equal amounts
    by_magnitude = sorted(
        (
            replace(txn, amount=abs(txn.amount))
            for txn in transactions
            if period.contains(txn.date)
        ),
        key=lambda txn: txn.amount,
        reverse=True,
    )

    return OverspendingPeriod(
        start_date=period.start_date,
        end_date=period.end_date,
        total_budget=to_decimal(total_budget),
        total_spent=to_decimal(total_spent),
        overspent=to_decimal(max(Fraction(0), total_spent - total_budget)),
        categories=tuple(overspent_categories),
        biggest_transactions=tuple(by_magnitude[:BIGGEST_TRANSACTIONS_LIMIT]),
    )


def summarize_periods(periods: Sequence[OverspendingPeriod]) -> OverspendingSummary:
    """Roll per-period results into a cross-period summary.

    A category counts one occurrence for each period it is listed in; periods
    where it stayed within budget contribute nothing.

    Raises:
        EmptyInputError: If periods is empty
    """
    if not periods:
        raise EmptyInputError("Cannot summarize overspending over zero periods")

    total_overspent = sum((period.overspent for period in periods), ZERO)

    category_totals: dict[int, dict[str, Any]] = defaultdict(
        lambda: {"name": None, "color": None, "total": ZERO, "occurrences": 0}
    )
    for period in periods:
        for cat in period.categories:
            entry = category_totals[cat.category_id]
            entry["name"] = entry["name"] or cat.name
            entry["color"] = entry["color"] or cat.color
            entry["total"] += cat.overspent
            entry["occurrences"] += 1

    ranked = sorted(
        category_totals.items(), key=lambda item: (-item[1]["total"], item[0])
    )
    problematic = tuple(
        ProblematicCategory(
            category_id=category_id,
            name=data["name"],
            color=data["color"],
            total_overspent=data["total"],
            occurrences=data["occurrences"],
            average_overspent=data["total"] / data["occurrences"],
        )
        for category_id, data in ranked[:PROBLEMATIC_CATEGORIES_LIMIT]
    )

    return OverspendingSummary(
        total_overspent=total_overspent,
        average_overspent=total_overspent / len(periods),
        periods_analyzed=len(periods),
        problematic_categories=problematic,
    )


class OverspendingService:
    """Service for running pay-period overspending analysis."""

    def __init__(self, db: Database):
        """Initialize overspending service.

        Args:
            db: Database instance
        """
        self.db = db

    def _query(self, name: str, query: Callable[..., Any], *args: Any) -> Any:
        """Run a storage query, wrapping non-domain failures with its name."""
        try:
            return query(*args)
        except DomainError:
            raise
        except Exception as e:
            logger.warning("query_failed: query=%s error=%s", name, e)
            raise DataAccessError(name, e) from e

    def run_overspending_analysis(
        self,
        periods_requested: int = DEFAULT_PERIODS,
        as_of: Optional[date] = None,
    ) -> OverspendingReport:
        """Analyze the most recent completed pay periods.

        Any failure aborts the whole run; partial results are never returned.

        Args:
            periods_requested: Number of completed pay periods to analyze
            as_of: Reference date (defaults to today)

        Returns:
            OverspendingReport with per-period results and a summary

        Raises:
            InvalidArgumentError: If periods_requested is not a positive integer
            MissingScheduleError: If no pay schedule is configured
            DataAccessError: If a storage query fails
        """
        periods_requested = validate_period_count(periods_requested)
        if as_of is None:
            as_of = date.today()

        schedule = require_schedule(
            self._query("get_pay_schedule", self.db.get_pay_schedule)
        )
        categories = [
            category
            for category in self._query(
                "get_active_budget_categories", self.db.get_active_budget_categories
            )
            if category.is_active
        ]

        results = []
        for period in reconstruct_pay_periods(schedule, periods_requested, as_of):
            transactions = self._query(
                "get_transactions_in_range",
                self.db.get_transactions_in_range,
                period.start_date,
                period.end_date,
            )
            results.append(analyze_period(period, categories, transactions))

        summary = summarize_periods(results)
        logger.info(
            "overspending_analysis: periods=%d frequency=%s as_of=%s total_overspent=%s",
            summary.periods_analyzed,
            schedule.frequency.value,
            as_of,
            summary.total_overspent,
        )
        return OverspendingReport(
            periods=tuple(results),
            summary=summary,
            pay_frequency=schedule.frequency.value,
        )

    def get_current_pay_period(self, as_of: Optional[date] = None) -> PayPeriod:
        """Get the in-progress pay period containing as_of (defaults to today)."""
        schedule = self._query("get_pay_schedule", self.db.get_pay_schedule)
        return current_pay_period(schedule, as_of or date.today())
