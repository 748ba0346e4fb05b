"""Database layer for paytrack application."""

from paytrack.database.base import Database
from paytrack.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
