"""Shared pytest fixtures for adtrack tests."""

import tempfile
import os
import pytest

from adtrack.database.factories import create_sqlite_database
from adtrack.domain.entities import DailyEntry, Platform, Project
from adtrack.domain.entry_store import EntryStore


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def entry_store(temp_db):
    """Create a loaded EntryStore with a temporary database."""
    store = EntryStore(temp_db)
    store.load()
    return store


@pytest.fixture
def make_entry():
    """Build DailyEntry values with sensible defaults."""
    counter = {"n": 0}

    def _make(
        date="2024-01-01",
        project=Project.AZZA,
        platform=Platform.META,
        spend=0.0,
        purchases=0.0,
        id=None,
    ):
        counter["n"] += 1
        return DailyEntry(
            id=id or f"entry-{counter['n']}",
            date=date,
            project=project,
            platform=platform,
            spend=spend,
            purchases=purchases,
        )

    return _make


@pytest.fixture
def stored_entries(temp_db):
    """Read entries back through a fresh connection to the same file."""

    def _read():
        db = create_sqlite_database(database_path=temp_db.database_path)
        try:
            return db.list_entries()
        finally:
            db.disconnect()

    return _read


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
