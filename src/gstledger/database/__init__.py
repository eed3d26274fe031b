"""Database layer for gstledger application."""

from gstledger.database.base import Database
from gstledger.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
