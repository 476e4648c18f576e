"""Database layer for adtrack application."""

from adtrack.database.base import Database
from adtrack.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
