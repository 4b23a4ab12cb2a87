"""Database factory functions for creating database instances."""

from typing import Optional

from hotelledger.database.sqlalchemy_db import SQLAlchemyDatabase
from hotelledger.settings import Settings


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, falls back to
            Settings.from_env() (HOTELLEDGER_DB_PATH, then
            ~/.hotelledger/hotelledger.db)

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = Settings.from_env().resolve_db_path()

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)


def create_memory_database() -> SQLAlchemyDatabase:
    """Create an in-memory SQLite database instance."""
    return SQLAlchemyDatabase("sqlite://")
