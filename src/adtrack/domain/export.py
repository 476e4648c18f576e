"""Export entries to spreadsheet text and JSON backups."""

import csv
import io
import json
from typing import Optional, Sequence

from adtrack.domain.entities import DailyEntry
from adtrack.domain.labels import export_headers, platform_label, project_label
from adtrack.domain.stats import entry_cpr

# Lets spreadsheet applications detect UTF-8 (needed for Arabic labels)
BOM = "\ufeff"

EXPORT_FILENAMES = {
    "backup": "adtrack_backup_{day}.json",
    "csv": "adtrack_report_{day}.csv",
    "tsv": "adtrack_report_{day}.tsv",
}


def format_number(value: float) -> str:
    """Render a number without a trailing '.0' when it is integral."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_cpr(entry: DailyEntry) -> str:
    """Render an entry's cost per result with 2 decimals, or '0'."""
    if entry.purchases > 0:
        return f"{entry_cpr(entry):.2f}"
    return "0"


def _rows(entries: Sequence[DailyEntry], locale: Optional[str]) -> list[list[str]]:
    return [
        [
            entry.date,
            project_label(entry.project, locale),
            platform_label(entry.platform, locale),
            format_number(entry.spend),
            format_number(entry.purchases),
            format_cpr(entry),
        ]
        for entry in entries
    ]


def _write_table(kind: str, entries: Sequence[DailyEntry], locale: Optional[str], delimiter: str) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=delimiter, lineterminator="\n")
    writer.writerow(export_headers(kind, locale))
    writer.writerows(_rows(entries, locale))
    return buffer.getvalue()


def generate_csv(entries: Sequence[DailyEntry], locale: Optional[str] = None) -> str:
    """Render entries as comma-separated text with a leading BOM.

    Args:
        entries: Entries to export, in output order
        locale: Label locale for headers, projects and platforms

    Returns:
        CSV text
    """
    return BOM + _write_table("csv", entries, locale, ",")


def generate_tsv(entries: Sequence[DailyEntry], locale: Optional[str] = None) -> str:
    """Render entries as tab-separated text for pasting into a spreadsheet."""
    return _write_table("tsv", entries, locale, "\t")


def generate_backup_json(entries: Sequence[DailyEntry]) -> str:
    """Render entries as a JSON array in the persisted layout."""
    return json.dumps([entry.to_dict() for entry in entries], indent=2, ensure_ascii=False)


def export_filename(kind: str, day: str) -> str:
    """Return the default file name for an export kind on a given day."""
    return EXPORT_FILENAMES[kind].format(day=day)
