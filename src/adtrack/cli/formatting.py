"""Terminal formatting helpers shared by commands."""

from typing import Optional

from adtrack.domain.entities import DateFilterState, DateRangeOption, Platform, Project
from adtrack.domain.labels import platform_label, project_label, range_label


def format_currency(value: float) -> str:
    """Format a spend value, e.g. 'SAR 1,234.50'."""
    return f"SAR {value:,.2f}"


def format_count(value: float) -> str:
    """Format a purchases count without decimals when whole."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}"


def format_platform(platform: Optional[Platform], locale: Optional[str]) -> str:
    return platform_label(platform, locale)


def format_project(project: Optional[Project], locale: Optional[str]) -> str:
    if project is None:
        return "All projects" if locale != "ar" else "جميع المشاريع"
    return project_label(project, locale)


def describe_filter(date_filter: DateFilterState, locale: Optional[str]) -> str:
    """Describe a date filter, e.g. 'Custom range 2024-01-01 to 2024-01-31'."""
    label = range_label(date_filter.option, locale)
    if date_filter.option != DateRangeOption.CUSTOM:
        return label
    start = date_filter.custom_start_date
    if not start:
        return f"{label} (all dates)"
    end = date_filter.custom_end_date or start
    return f"{label} {start} to {end}"
