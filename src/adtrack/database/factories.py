"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from adtrack.database.sqlalchemy_db import SQLAlchemyDatabase

ENV_VAR = "ADTRACK_DB_PATH"
DEFAULT_DIR = ".adtrack"
DEFAULT_FILENAME = "adtrack.db"


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Work out which SQLite file to use.

    An explicit path wins over ADTRACK_DB_PATH, which wins over
    ~/.adtrack/adtrack.db. A leading ~ is expanded. Only the default
    directory is created here; a missing directory in a user-supplied path
    is left for the first write to report.
    """
    if database_path is None:
        database_path = os.environ.get(ENV_VAR) or None

    if database_path is not None:
        return Path(database_path).expanduser()

    db_dir = Path.home() / DEFAULT_DIR
    db_dir.mkdir(exist_ok=True)
    return db_dir / DEFAULT_FILENAME


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance for the resolved path.

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    path = resolve_database_path(database_path)
    return SQLAlchemyDatabase(f"sqlite:///{path}")
