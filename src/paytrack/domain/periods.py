"""Pay period reconstruction from a recurring pay date anchor."""

import logging
from datetime import date, datetime, timedelta
from typing import Optional

from paytrack.domain.entities import PayPeriod, PaySchedule
from paytrack.domain.errors import (
    InvalidArgumentError,
    InvalidScheduleError,
    MissingScheduleError,
    invalid_periods_requested,
    pay_schedule_not_configured,
)

logger = logging.getLogger(__name__)

MAX_ANCHOR_STEPS = 10_000
ONE_DAY = timedelta(days=1)


def _as_calendar_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def require_schedule(schedule: Optional[PaySchedule]) -> PaySchedule:
    """Return the schedule or raise MissingScheduleError when absent."""
    if schedule is None:
        raise MissingScheduleError(pay_schedule_not_configured())
    return schedule


def validate_period_count(count: object) -> int:
    """Return count if it is a positive integer.

    Raises:
        InvalidArgumentError: If count is not a positive int
    """
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise InvalidArgumentError(invalid_periods_requested(count))
    return count


def latest_pay_date(schedule: PaySchedule, as_of: date) -> date:
    """Find the most recent pay date on or before as_of.

    Pay dates recur every ``frequency`` days from ``last_pay_date`` in both
    directions. A future anchor is walked back, a stale one walked forward.

    Raises:
        InvalidScheduleError: If no pay date is reached within MAX_ANCHOR_STEPS
            steps or the walk leaves the representable date range
    """
    as_of = _as_calendar_date(as_of)
    step = schedule.period_length
    pay_date = schedule.last_pay_date

    try:
        for _ in range(MAX_ANCHOR_STEPS):
            if pay_date <= as_of:
                break
            pay_date -= step
        else:
            raise InvalidScheduleError(
                f"Last pay date {schedule.last_pay_date} is too far after {as_of}"
            )

        for _ in range(MAX_ANCHOR_STEPS):
            if pay_date + step > as_of:
                break
            pay_date += step
        else:
            raise InvalidScheduleError(
                f"Last pay date {schedule.last_pay_date} is too far before {as_of}"
            )
    except OverflowError as e:
        raise InvalidScheduleError(
            f"Pay dates from {schedule.last_pay_date} leave the supported date range"
        ) from e

    return pay_date


def current_pay_period(schedule: Optional[PaySchedule], as_of: date) -> PayPeriod:
    """Return the pay period that contains as_of."""
    schedule = require_schedule(schedule)
    start = latest_pay_date(schedule, as_of)
    return PayPeriod(start_date=start, end_date=start + schedule.period_length - ONE_DAY)


def reconstruct_pay_periods(
    schedule: Optional[PaySchedule], count: int, as_of: date
) -> list[PayPeriod]:
    """Derive the most recent completed pay periods, oldest first.

    A period opens on a pay date and runs ``frequency`` days. It is completed
    once its end date is on or before ``as_of``.

    Args:
        schedule: Pay schedule anchor, or None if not configured
        count: Number of periods to produce
        as_of: Reference date for "completed"

    Returns:
        List of ``count`` contiguous PayPeriod objects in chronological order

    Raises:
        MissingScheduleError: If schedule is None
        InvalidArgumentError: If count is not a positive integer
        InvalidScheduleError: If the anchor cannot be resolved against as_of
    """
    schedule = require_schedule(schedule)
    count = validate_period_count(count)
    as_of = _as_calendar_date(as_of)
    length = schedule.period_length

    start = latest_pay_date(schedule, as_of)
    period_end = start + length - ONE_DAY
    if period_end > as_of:
        period_end = start - ONE_DAY

    periods: list[PayPeriod] = []
    try:
        for _ in range(count):
            period_start = period_end - (length - ONE_DAY)
            periods.insert(0, PayPeriod(start_date=period_start, end_date=period_end))
            period_end = period_start - ONE_DAY
    except OverflowError as e:
        raise InvalidScheduleError(
            f"Cannot reconstruct {count} periods before {as_of}"
        ) from e

    logger.debug(
        "reconstructed %d %s periods ending %s",
        len(periods),
        schedule.frequency.value,
        periods[-1].end_date,
    )
    return periods
