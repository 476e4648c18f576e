"""Utility functions for adtrack."""

from adtrack.utils.date_parser import parse_date, parse_day, require_day
from adtrack.utils.amount_parser import parse_amount, parse_count

__all__ = ["parse_date", "parse_day", "require_day", "parse_amount", "parse_count"]
