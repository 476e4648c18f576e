"""Domain layer for adtrack application."""

from adtrack.domain.entry_store import EntryStore
from adtrack.domain.backup_import import BackupImportService
from adtrack.domain.date_range import is_in_range
from adtrack.domain.stats import aggregate

__all__ = [
    "EntryStore",
    "BackupImportService",
    "is_in_range",
    "aggregate",
]
