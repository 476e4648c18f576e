"""JSON backup import domain service."""

import json
import math
from pathlib import Path
from typing import Any

from adtrack.domain.entities import DailyEntry, EntrySnapshot
from adtrack.domain.entry_store import EntryStore
from adtrack.domain.errors import (
    ImportFormatError,
    ValidationError,
    import_element_invalid,
)
from adtrack.domain.labels import resolve_platform, resolve_project
from adtrack.utils.date_parser import require_day

REQUIRED_FIELDS = ("id", "date", "project")


def _number(item: dict[str, Any], field_name: str, index: int) -> float:
    value = item.get(field_name, 0)
    if value is None:
        value = 0
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ImportFormatError(
            import_element_invalid(index, f"has non-numeric '{field_name}'")
        )
    try:
        number = float(value)
    except OverflowError:
        number = math.inf
    if not math.isfinite(number):
        raise ImportFormatError(
            import_element_invalid(index, f"has non-finite '{field_name}'")
        )
    if number < 0:
        raise ImportFormatError(
            import_element_invalid(index, f"has negative '{field_name}'")
        )
    return number


def _parse_element(item: Any, index: int) -> DailyEntry:
    if not isinstance(item, dict):
        raise ImportFormatError(import_element_invalid(index, "is not an object"))

    for field_name in REQUIRED_FIELDS:
        if not item.get(field_name):
            raise ImportFormatError(
                import_element_invalid(index, f"is missing '{field_name}'")
            )

    if "platform" not in item:
        raise ImportFormatError(import_element_invalid(index, "is missing 'platform'"))

    try:
        date = require_day(item["date"])
        project = resolve_project(item["project"])
        platform = resolve_platform(item["platform"])
    except ValidationError as e:
        raise ImportFormatError(import_element_invalid(index, f"is invalid: {e}")) from e

    return DailyEntry(
        id=str(item["id"]),
        date=date,
        project=project,
        platform=platform,
        spend=_number(item, "spend", index),
        purchases=_number(item, "purchases", index),
    )


def parse_backup(text: str) -> list[DailyEntry]:
    """Parse and validate a JSON backup.

    The payload must be a JSON array whose every element has a non-empty
    ``id``, ``date`` and ``project``. Any invalid element rejects the whole
    payload.

    Args:
        text: JSON text

    Returns:
        List of entries in payload order

    Raises:
        ImportFormatError: If the payload is malformed
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise ImportFormatError(f"Invalid backup file: not valid JSON ({e})") from e

    if not isinstance(payload, list):
        raise ImportFormatError("Invalid backup file: expected a JSON array")

    entries = [_parse_element(item, index) for index, item in enumerate(payload)]

    seen: set[str] = set()
    for index, entry in enumerate(entries):
        if entry.id in seen:
            raise ImportFormatError(
                import_element_invalid(index, f"repeats id '{entry.id}'")
            )
        seen.add(entry.id)

    return entries


class BackupImportService:
    """Service for restoring the entry collection from a JSON backup."""

    def __init__(self, store: EntryStore):
        """Initialize backup import service.

        Args:
            store: Entry store to replace on import
        """
        self.store = store

    def load_file(self, backup_file_path: str) -> list[DailyEntry]:
        """Read and validate a backup file without touching the store.

        Args:
            backup_file_path: Path to JSON backup file

        Returns:
            List of entries from the file

        Raises:
            ImportFormatError: If the file cannot be read or is malformed
        """
        path = Path(backup_file_path)
        try:
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise ImportFormatError(f"Could not read backup file '{backup_file_path}': {e}") from e
        return parse_backup(text)

    def apply(self, entries: list[DailyEntry]) -> EntrySnapshot:
        """Replace the whole collection with validated backup entries.

        Raises:
            StorageError: If the collection could not be persisted
        """
        return self.store.replace_all(entries)
