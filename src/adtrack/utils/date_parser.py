"""Date parsing utilities."""

import re
from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser

from adtrack.domain.errors import ValidationError, invalid_day

_DAY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow", "3 days ago"

    Args:
        date_str: Date string in various formats
        today: Reference day for relative dates (defaults to the current day)

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    if today is None:
        today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    match = re.fullmatch(r"(\d+) days? ago", date_str)
    if match:
        return today - timedelta(days=int(match.group(1)))

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}") from e


def parse_day(date_str: str, today: Optional[date] = None) -> str:
    """Parse a date string and render it as YYYY-MM-DD."""
    return parse_date(date_str, today=today).isoformat()


def require_day(value: object) -> str:
    """Check that a value is a real calendar day written as YYYY-MM-DD.

    Raises:
        ValidationError: If the value is not a YYYY-MM-DD day
    """
    if not isinstance(value, str) or not _DAY_PATTERN.match(value):
        raise ValidationError(invalid_day(value))
    try:
        date.fromisoformat(value)
    except ValueError as e:
        raise ValidationError(invalid_day(value)) from e
    return value
