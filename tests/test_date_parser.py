"""Tests for date parser with relative dates."""

import pytest
from datetime import date, timedelta

from adtrack.domain.errors import ValidationError
from adtrack.utils.date_parser import parse_date, parse_day, require_day

REFERENCE = date(2024, 3, 15)


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    result = parse_date("2024-01-15")
    assert result == date(2024, 1, 15)


def test_parse_today():
    """Test parsing 'today'."""
    assert parse_date("today") == date.today()
    assert parse_date("today", today=REFERENCE) == REFERENCE


def test_parse_yesterday():
    """Test parsing 'yesterday'."""
    assert parse_date("yesterday", today=REFERENCE) == date(2024, 3, 14)


def test_parse_tomorrow():
    """Test parsing 'tomorrow'."""
    assert parse_date("Tomorrow", today=REFERENCE) == date(2024, 3, 16)


def test_parse_days_ago():
    """Test parsing 'N days ago'."""
    assert parse_date("3 days ago", today=REFERENCE) == date(2024, 3, 12)
    assert parse_date("1 day ago", today=REFERENCE) == date(2024, 3, 14)
    assert parse_date("30 days ago", today=REFERENCE) == REFERENCE - timedelta(days=30)


def test_parse_long_form():
    """Test parsing written-out dates."""
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_invalid_date():
    """Test that unparseable input raises ValueError."""
    with pytest.raises(ValueError):
        parse_date("not a date at all")


def test_parse_day_returns_iso_string():
    assert parse_day("yesterday", today=REFERENCE) == "2024-03-14"
    assert parse_day("2024-02-29") == "2024-02-29"


@pytest.mark.parametrize("value", ["2024-01-01", "2024-02-29"])
def test_require_day_accepts_calendar_days(value):
    assert require_day(value) == value


@pytest.mark.parametrize(
    "value",
    ["2023-02-29", "2024-13-01", "2024-1-5", "01/02/2024", "", None, 20240101],
)
def test_require_day_rejects_other_values(value):
    with pytest.raises(ValidationError):
        require_day(value)
