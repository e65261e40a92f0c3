"""Database layer for finova application."""

from finova.database.base import Database
from finova.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
