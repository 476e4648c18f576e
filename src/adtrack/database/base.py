"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    # domain/__init__.py imports services that import this module
    from adtrack.domain.entities import DailyEntry


class Database(ABC):
    """Abstract database interface for adtrack."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Entry operations
    @abstractmethod
    def list_entries(self) -> list["DailyEntry"]:
        """List all entries in insertion order."""
        pass

    @abstractmethod
    def create_entry(self, entry: "DailyEntry") -> None:
        """Append an entry."""
        pass

    @abstractmethod
    def update_entry(self, entry: "DailyEntry") -> None:
        """Replace every field of the entry with the same id."""
        pass

    @abstractmethod
    def delete_entry(self, entry_id: str) -> None:
        """Delete the entry with the given id."""
        pass

    @abstractmethod
    def replace_entries(self, entries: Sequence["DailyEntry"]) -> None:
        """Replace the whole collection atomically, keeping the given order."""
        pass
