"""Database layer for hotelledger application."""

from hotelledger.database.base import Database
from hotelledger.database.factories import create_memory_database, create_sqlite_database

__all__ = ["Database", "create_memory_database", "create_sqlite_database"]
