"""Domain model entities for paytrack.

These are pure data classes representing business concepts, independent of
database schema. Inputs (schedule, categories, transactions) come from the
storage layer; the remaining entities are derived by the overspending engine.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from fractions import Fraction
from enum import Enum
from typing import Optional, Union

from paytrack.domain.errors import (
    InvalidFrequencyError,
    ValidationError,
    invalid_frequency,
)

DEFAULT_CATEGORY_COLOR = "#3B82F6"


class PayFrequency(Enum):
    """How often pay dates recur."""

    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"

    @property
    def days(self) -> int:
        """Length of one pay period in days."""
        return 7 if self is PayFrequency.WEEKLY else 14

    @classmethod
    def parse(cls, value: Union["PayFrequency", str, int]) -> "PayFrequency":
        """Resolve a frequency from its enum, string value or day count.

        Raises:
            InvalidFrequencyError: If the value is not a recognized frequency
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                raise InvalidFrequencyError(invalid_frequency(value)) from None
        if isinstance(value, int) and not isinstance(value, bool):
            for member in cls:
                if member.days == value:
                    return member
        raise InvalidFrequencyError(invalid_frequency(value))


@dataclass(frozen=True)
class PaySchedule:
    """Recurring anchor for pay period boundaries."""

    last_pay_date: date
    frequency: PayFrequency

    def __post_init__(self):
        # Pay dates are calendar dates; drop any time-of-day component.
        if isinstance(self.last_pay_date, datetime):
            object.__setattr__(self, "last_pay_date", self.last_pay_date.date())
        object.__setattr__(self, "frequency", PayFrequency.parse(self.frequency))

    @property
    def period_length(self) -> timedelta:
        return timedelta(days=self.frequency.days)


@dataclass(frozen=True)
class BudgetCategory:
    """Spending bucket with a nominal monthly allocation."""

    id: int
    name: str
    allocated_amount: Optional[Decimal]
    color: str = DEFAULT_CATEGORY_COLOR
    is_active: bool = True

    def __post_init__(self):
        if self.allocated_amount is not None and self.allocated_amount < 0:
            raise ValidationError(
                f"Budget category '{self.name}' has a negative allocation"
            )


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    The sign of ``amount`` is not meaningful to the overspending engine,
    which only ever looks at its magnitude.
    """

    id: int
    date: date
    name: str
    amount: Decimal
    category_id: Optional[int] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class PayPeriod:
    """Pay period, inclusive on both ends."""

    start_date: date
    end_date: date

    def __post_init__(self):
        if self.end_date < self.start_date:
            raise ValidationError(
                f"Pay period ends ({self.end_date}) before it starts ({self.start_date})"
            )

    @property
    def days(self) -> int:
        """Number of calendar days covered, counting both ends."""
        return (self.end_date - self.start_date).days + 1

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(frozen=True)
class CategorySpend:
    """Spend and pro-rated budget for one category in one period."""

    category: BudgetCategory
    period_budget: Fraction
    spent: Decimal
    matching_transactions: tuple[Transaction, ...] = ()


@dataclass(frozen=True)
class CategoryOverspending:
    """Category that went over its pro-rated budget in a period."""

    category_id: int
    name: str
    color: str
    budget_amount: Decimal
    spent: Decimal
    overspent: Decimal
    overspent_percentage: Decimal
    matching_transactions: tuple[Transaction, ...] = ()


@dataclass(frozen=True)
class OverspendingPeriod:
    """Overspending analysis result for a single pay period."""

    start_date: date
    end_date: date
    total_budget: Decimal
    total_spent: Decimal
    overspent: Decimal
    categories: tuple[CategoryOverspending, ...] = ()
    biggest_transactions: tuple[Transaction, ...] = ()


@dataclass(frozen=True)
class ProblematicCategory:
    """Category ranked by cumulative overspend across periods."""

    category_id: int
    name: str
    color: str
    total_overspent: Decimal
    occurrences: int
    average_overspent: Decimal


@dataclass(frozen=True)
class OverspendingSummary:
    """Cross-period rollup of overspending results."""

    total_overspent: Decimal
    average_overspent: Decimal
    periods_analyzed: int
    problematic_categories: tuple[ProblematicCategory, ...] = ()


@dataclass(frozen=True)
class OverspendingReport:
    """Complete result of an overspending analysis run."""

    periods: tuple[OverspendingPeriod, ...]
    summary: OverspendingSummary
    pay_frequency: str
