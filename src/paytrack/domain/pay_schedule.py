"""Pay schedule domain service."""

from datetime import date
from typing import Optional, Union

from paytrack.database.base import Database
from paytrack.domain.entities import PayFrequency, PaySchedule


class PayScheduleService:
    """Service for managing the pay schedule."""

    def __init__(self, db: Database):
        """Initialize pay schedule service.

        Args:
            db: Database instance
        """
        self.db = db

    def save_schedule(
        self, last_pay_date: date, frequency: Union[PayFrequency, str]
    ) -> PaySchedule:
        """Replace the pay schedule.

        Args:
            last_pay_date: Most recent pay date
            frequency: "weekly" or "biweekly"

        Returns:
            The saved PaySchedule

        Raises:
            InvalidFrequencyError: If frequency is not recognized
        """
        schedule = PaySchedule(last_pay_date=last_pay_date, frequency=frequency)
        self.db.save_pay_schedule(schedule.last_pay_date, schedule.frequency)
        return schedule

    def get_schedule(self) -> Optional[PaySchedule]:
        """Get the pay schedule, or None if not configured."""
        return self.db.get_pay_schedule()
