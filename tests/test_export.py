"""Tests for CSV, TSV and JSON backup export."""

import csv
import io
import json

from adtrack.domain.backup_import import parse_backup
from adtrack.domain.entities import Platform, Project
from adtrack.domain.export import (
    BOM,
    export_filename,
    format_number,
    generate_backup_json,
    generate_csv,
    generate_tsv,
)


def _read(text, delimiter):
    return list(csv.reader(io.StringIO(text), delimiter=delimiter))


def test_csv_starts_with_bom_and_headers(make_entry):
    text = generate_csv([make_entry(platform=Platform.GOOGLE, spend=100, purchases=3)])

    assert text.startswith(BOM)
    rows = _read(text[len(BOM):], ",")
    assert rows[0] == ["Date", "Project", "Platform", "Spend (SAR)", "Purchases", "CPR"]
    assert rows[1] == ["2024-01-01", "Azza Al-Mutamayeza", "Google Ads", "100", "3", "33.33"]


def test_csv_zero_purchases_cpr(make_entry):
    rows = _read(generate_csv([make_entry(spend=40, purchases=0)])[len(BOM):], ",")
    assert rows[1][-1] == "0"


def test_csv_keeps_input_order(make_entry):
    entries = [make_entry(date="2024-01-03"), make_entry(date="2024-01-01")]
    rows = _read(generate_csv(entries)[len(BOM):], ",")
    assert [row[0] for row in rows[1:]] == ["2024-01-03", "2024-01-01"]


def test_csv_arabic_labels(make_entry):
    text = generate_csv([make_entry(project=Project.MARAYA)], locale="ar")
    rows = _read(text[len(BOM):], ",")
    assert rows[0][0] == "التاريخ"
    assert rows[1][1] == "مرايا عباية"


def test_csv_spend_has_no_thousands_separator(make_entry):
    text = generate_csv([make_entry(spend=1234.5, purchases=1)])
    rows = _read(text[len(BOM):], ",")
    assert rows[1][3] == "1234.5"
    assert len(rows[1]) == 6


def test_tsv_has_no_bom(make_entry):
    text = generate_tsv([make_entry(platform=Platform.SNAPCHAT, spend=12.25, purchases=5)])

    assert not text.startswith(BOM)
    rows = _read(text, "\t")
    assert rows[0] == ["Date", "Project", "Platform", "Spend", "Purchases", "CPR"]
    assert rows[1] == ["2024-01-01", "Azza Al-Mutamayeza", "Snapchat", "12.25", "5", "2.45"]


def test_empty_export_is_header_only():
    assert _read(generate_tsv([]), "\t") == [
        ["Date", "Project", "Platform", "Spend", "Purchases", "CPR"]
    ]


def test_backup_json_uses_stable_identifiers(make_entry):
    entry = make_entry(id="x1", project=Project.BRONZE, platform=Platform.TIKTOK, spend=9.5, purchases=2)

    payload = json.loads(generate_backup_json([entry]))

    assert payload == [
        {
            "id": "x1",
            "date": "2024-01-01",
            "project": "bronze",
            "platform": "tiktok",
            "spend": 9.5,
            "purchases": 2,
        }
    ]


def test_backup_json_can_be_imported_again(make_entry):
    entries = [
        make_entry(id="x1", platform=Platform.META, spend=10, purchases=1),
        make_entry(id="x2", date="2024-01-02", project=Project.SABORIO, platform=Platform.GOOGLE),
    ]
    assert parse_backup(generate_backup_json(entries)) == entries


def test_format_number():
    assert format_number(100.0) == "100"
    assert format_number(0) == "0"
    assert format_number(12.5) == "12.5"


def test_export_filename():
    assert export_filename("backup", "2024-03-15") == "adtrack_backup_2024-03-15.json"
    assert export_filename("csv", "2024-03-15") == "adtrack_report_2024-03-15.csv"
