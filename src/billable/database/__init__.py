"""Database layer for billable application."""

from billable.database.base import Database
from billable.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
