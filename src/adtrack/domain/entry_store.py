"""Entry store: the single owner of the entry collection."""

import logging
import math
import uuid
from dataclasses import replace
from typing import Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from adtrack.database.base import Database
from adtrack.domain.entities import DailyEntry, EntrySnapshot, Platform, Project
from adtrack.domain.errors import (
    NotFoundError,
    StorageError,
    ValidationError,
    entry_not_found,
    negative_value,
    non_finite_value,
    storage_write_failed,
)
from adtrack.utils.date_parser import require_day

logger = logging.getLogger(__name__)


def validate_entry(entry: DailyEntry) -> None:
    """Check the invariants every stored entry must satisfy.

    Raises:
        ValidationError: If the entry is malformed
    """
    if not entry.id:
        raise ValidationError("Entry id cannot be empty")
    require_day(entry.date)
    if not isinstance(entry.project, Project):
        raise ValidationError(f"Invalid project: {entry.project!r}")
    if not isinstance(entry.platform, Platform):
        raise ValidationError(f"Invalid platform: {entry.platform!r}")
    for field_name in ("spend", "purchases"):
        if not math.isfinite(getattr(entry, field_name)):
            raise ValidationError(non_finite_value(field_name, getattr(entry, field_name)))
    if entry.spend < 0:
        raise ValidationError(negative_value("spend", entry.spend))
    if entry.purchases < 0:
        raise ValidationError(negative_value("purchases", entry.purchases))


def new_entry_id() -> str:
    """Mint a fresh entry id."""
    return uuid.uuid4().hex


class EntryStore:
    """Versioned collection of daily entries backed by durable storage.

    Every mutation persists first and then publishes a new immutable snapshot.
    Readers only ever see snapshots, never the store's internals.
    """

    def __init__(self, db: Database):
        """Initialize entry store.

        Args:
            db: Database instance
        """
        self.db = db
        self._snapshot = EntrySnapshot(version=0, entries=())

    def load(self) -> EntrySnapshot:
        """Load the collection from storage.

        A storage read failure falls back to an empty collection.

        Returns:
            The loaded snapshot
        """
        try:
            entries = tuple(self.db.list_entries())
        except (SQLAlchemyError, ValueError) as e:
            logger.warning("Failed to load entries from storage: %s", e)
            entries = ()
        self._publish(entries)
        return self._snapshot

    def snapshot(self) -> EntrySnapshot:
        """Return the current snapshot."""
        return self._snapshot

    def get_entry(self, entry_id: str) -> Optional[DailyEntry]:
        """Get entry by id.

        Args:
            entry_id: Entry id

        Returns:
            DailyEntry or None if not found
        """
        for entry in self._snapshot.entries:
            if entry.id == entry_id:
                return entry
        return None

    def require_entry(self, entry_id: str) -> DailyEntry:
        """Get entry by id, raising if it does not exist.

        Raises:
            NotFoundError: If no entry has this id
        """
        entry = self.get_entry(entry_id)
        if entry is None:
            raise NotFoundError(entry_not_found(entry_id))
        return entry

    def add_entry(
        self,
        date: str,
        project: Project,
        platform: Platform,
        spend: float,
        purchases: float,
    ) -> tuple[DailyEntry, EntrySnapshot]:
        """Append a new entry with a freshly minted id.

        Args:
            date: Day as YYYY-MM-DD
            project: Project
            platform: Platform
            spend: Non-negative spend
            purchases: Non-negative purchase count

        Returns:
            Tuple of (created entry, new snapshot)

        Raises:
            ValidationError: If any field is invalid
            StorageError: If the entry could not be persisted
        """
        entry = DailyEntry(
            id=new_entry_id(),
            date=date,
            project=project,
            platform=platform,
            spend=spend,
            purchases=purchases,
        )
        validate_entry(entry)
        self._write("add entry", self.db.create_entry, entry)
        self._publish(self._snapshot.entries + (entry,))
        return entry, self._snapshot

    def update_entry(self, entry: DailyEntry) -> EntrySnapshot:
        """Replace an existing entry, keeping its id and position.

        Raises:
            NotFoundError: If no entry has this id
            ValidationError: If any field is invalid
            StorageError: If the change could not be persisted
        """
        self.require_entry(entry.id)
        validate_entry(entry)
        self._write("update entry", self.db.update_entry, entry)
        self._publish(
            tuple(entry if e.id == entry.id else e for e in self._snapshot.entries)
        )
        return self._snapshot

    def update_fields(self, entry_id: str, **changes) -> EntrySnapshot:
        """Replace selected fields of an existing entry.

        Raises:
            NotFoundError: If no entry has this id
            ValidationError: If ``changes`` touches the id or a field is invalid
        """
        if "id" in changes:
            raise ValidationError("Entry id cannot be changed")
        current = self.require_entry(entry_id)
        return self.update_entry(replace(current, **changes))

    def delete_entry(self, entry_id: str) -> EntrySnapshot:
        """Remove an entry.

        Raises:
            NotFoundError: If no entry has this id
            StorageError: If the change could not be persisted
        """
        self.require_entry(entry_id)
        self._write("delete entry", self.db.delete_entry, entry_id)
        self._publish(tuple(e for e in self._snapshot.entries if e.id != entry_id))
        return self._snapshot

    def replace_all(self, entries: Sequence[DailyEntry]) -> EntrySnapshot:
        """Replace the whole collection.

        Raises:
            ValidationError: If any entry is invalid or ids repeat
            StorageError: If the collection could not be persisted
        """
        entries = tuple(entries)
        seen: set[str] = set()
        for entry in entries:
            validate_entry(entry)
            if entry.id in seen:
                raise ValidationError(f"Duplicate entry id '{entry.id}'")
            seen.add(entry.id)
        self._write("replace entries", self.db.replace_entries, entries)
        self._publish(entries)
        return self._snapshot

    def save(self) -> None:
        """Write the current snapshot to storage again.

        Raises:
            StorageError: If the collection could not be persisted
        """
        self._write("save entries", self.db.replace_entries, self._snapshot.entries)

    def _write(self, action: str, operation, *args) -> None:
        try:
            operation(*args)
        except SQLAlchemyError as e:
            logger.error("Storage write failed during %s: %s", action, e)
            raise StorageError(storage_write_failed(action, e)) from e

    def _publish(self, entries: tuple[DailyEntry, ...]) -> None:
        self._snapshot = EntrySnapshot(
            version=self._snapshot.version + 1, entries=entries
        )
