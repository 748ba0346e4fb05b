"""Tests for pay period reconstruction."""

from datetime import date, datetime, timedelta

import pytest

from paytrack.domain.entities import PayFrequency, PayPeriod, PaySchedule
from paytrack.domain.errors import (
    InvalidArgumentError,
    InvalidFrequencyError,
    InvalidScheduleError,
    MissingScheduleError,
)
from paytrack.domain.periods import (
    current_pay_period,
    latest_pay_date,
    reconstruct_pay_periods,
)


def _schedule(last_pay_date, frequency="biweekly"):
    return PaySchedule(last_pay_date=last_pay_date, frequency=frequency)


def test_biweekly_periods_from_january_anchor():
    periods = reconstruct_pay_periods(
        _schedule(date(2025, 1, 3)), 2, as_of=date(2025, 2, 1)
    )

    assert periods == [
        PayPeriod(date(2025, 1, 3), date(2025, 1, 16)),
        PayPeriod(date(2025, 1, 17), date(2025, 1, 30)),
    ]


def test_future_anchor_is_walked_back():
    periods = reconstruct_pay_periods(
        _schedule(date(2025, 3, 14)), 2, as_of=date(2025, 2, 1)
    )

    assert periods[-1] == PayPeriod(date(2025, 1, 17), date(2025, 1, 30))
    assert periods[0] == PayPeriod(date(2025, 1, 3), date(2025, 1, 16))


def test_period_ending_on_as_of_counts_as_completed():
    periods = reconstruct_pay_periods(
        _schedule(date(2025, 1, 3)), 1, as_of=date(2025, 1, 16)
    )

    assert periods == [PayPeriod(date(2025, 1, 3), date(2025, 1, 16))]


def test_period_starting_on_as_of_is_not_completed():
    periods = reconstruct_pay_periods(
        _schedule(date(2025, 1, 3)), 1, as_of=date(2025, 1, 3)
    )

    assert periods == [PayPeriod(date(2024, 12, 20), date(2025, 1, 2))]


def test_weekly_periods_are_seven_days():
    periods = reconstruct_pay_periods(
        _schedule(date(2025, 1, 3), "weekly"), 3, as_of=date(2025, 1, 20)
    )

    assert [p.days for p in periods] == [7, 7, 7]
    assert periods[-1] == PayPeriod(date(2025, 1, 10), date(2025, 1, 16))


@pytest.mark.parametrize("frequency", list(PayFrequency))
@pytest.mark.parametrize(
    "anchor,as_of",
    [
        (date(2025, 1, 3), date(2025, 2, 1)),
        (date(2025, 6, 20), date(2025, 2, 1)),
        (date(2020, 2, 28), date(2024, 3, 1)),
        (date(2024, 12, 31), date(2024, 12, 31)),
    ],
)
def test_periods_are_contiguous_and_most_recent(frequency, anchor, as_of):
    periods = reconstruct_pay_periods(_schedule(anchor, frequency), 8, as_of=as_of)

    assert len(periods) == 8
    for period in periods:
        assert period.days == frequency.days
        # Every period starts on a pay date
        assert (period.start_date - anchor).days % frequency.days == 0
    for earlier, later in zip(periods, periods[1:]):
        assert earlier.end_date + timedelta(days=1) == later.start_date

    assert periods[-1].end_date <= as_of
    assert periods[-1].end_date + timedelta(days=frequency.days) > as_of


def test_datetime_inputs_are_normalized_to_dates():
    schedule = _schedule(datetime(2025, 1, 3, 17, 45))
    periods = reconstruct_pay_periods(schedule, 1, as_of=datetime(2025, 2, 1, 9, 0))

    assert schedule.last_pay_date == date(2025, 1, 3)
    assert periods == [PayPeriod(date(2025, 1, 17), date(2025, 1, 30))]


def test_missing_schedule_raises():
    with pytest.raises(MissingScheduleError, match="not configured"):
        reconstruct_pay_periods(None, 6, as_of=date(2025, 2, 1))


@pytest.mark.parametrize("count", [0, -1, True, 2.0, "3", None])
def test_invalid_count_raises(count):
    with pytest.raises(InvalidArgumentError):
        reconstruct_pay_periods(_schedule(date(2025, 1, 3)), count, as_of=date(2025, 2, 1))


@pytest.mark.parametrize("frequency", ["monthly", "", 30, None])
def test_unrecognized_frequency_raises(frequency):
    with pytest.raises(InvalidFrequencyError):
        _schedule(date(2025, 1, 3), frequency)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("weekly", PayFrequency.WEEKLY),
        ("BiWeekly", PayFrequency.BIWEEKLY),
        (7, PayFrequency.WEEKLY),
        (14, PayFrequency.BIWEEKLY),
        (PayFrequency.BIWEEKLY, PayFrequency.BIWEEKLY),
    ],
)
def test_frequency_parsing(value, expected):
    assert PayFrequency.parse(value) is expected


def test_anchor_far_in_future_exceeds_step_ceiling():
    with pytest.raises(InvalidScheduleError):
        reconstruct_pay_periods(
            _schedule(date(9999, 12, 31), "weekly"), 1, as_of=date(2025, 2, 1)
        )


def test_anchor_far_in_past_exceeds_step_ceiling():
    with pytest.raises(InvalidScheduleError):
        reconstruct_pay_periods(
            _schedule(date(1, 1, 1), "weekly"), 1, as_of=date(2025, 2, 1)
        )


def test_periods_before_minimum_date_raise():
    with pytest.raises(InvalidScheduleError):
        reconstruct_pay_periods(
            _schedule(date(1, 1, 1), "weekly"), 100, as_of=date(1, 3, 1)
        )


def test_latest_pay_date_rolls_stale_anchor_forward():
    assert latest_pay_date(_schedule(date(2025, 1, 3)), date(2025, 2, 1)) == date(2025, 1, 31)


def test_current_pay_period_contains_as_of():
    period = current_pay_period(_schedule(date(2025, 1, 3)), date(2025, 2, 1))

    assert period == PayPeriod(date(2025, 1, 31), date(2025, 2, 13))
    assert period.contains(date(2025, 2, 1))


def test_current_pay_period_requires_schedule():
    with pytest.raises(MissingScheduleError):
        current_pay_period(None, date(2025, 2, 1))
