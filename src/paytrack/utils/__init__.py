"""Utility functions for paytrack."""

from paytrack.utils.date_parser import parse_date
from paytrack.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_amount"]
