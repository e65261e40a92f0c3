"""Database factory functions for creating database instances."""

from pathlib import Path
from typing import Optional

from finova.config import Settings
from finova.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks FINOVA_DB_PATH
            environment variable, then defaults to ~/.finova/finova.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = Settings.from_env().db_path

    if database_path is None:
        # Default to ~/.finova/finova.db
        home = Path.home()
        db_dir = home / ".finova"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "finova.db")

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)
