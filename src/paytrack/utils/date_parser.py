"""Date parsing utilities."""

import re
from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

_AGO_PATTERN = re.compile(r"^(\d+)\s+(day|week|month)s?\s+ago$")


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports absolute dates understood by dateutil ("2025-01-03",
    "January 3, 2025") and a few relative forms:
    - "today", "yesterday", "tomorrow"
    - "N days ago", "N weeks ago", "N months ago"

    Args:
        date_str: Date string
        today: Reference date for relative forms (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = today or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if text in relative_dates:
        return relative_dates[text]

    match = _AGO_PATTERN.match(text)
    if match:
        amount, unit = int(match.group(1)), match.group(2)
        try:
            if unit == "day":
                return today - timedelta(days=amount)
            if unit == "week":
                return today - timedelta(weeks=amount)
            return today - relativedelta(months=amount)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Could not parse date '{date_str}': {e}") from e

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}") from e
