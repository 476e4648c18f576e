"""Date range resolution for daily entries.

Days are ``YYYY-MM-DD`` strings and are compared lexicographically. Only the
window boundaries are computed with calendar arithmetic; entry dates are never
parsed. ``today`` is always passed in by the caller.
"""

from datetime import date, timedelta
from typing import Iterable

from adtrack.domain.entities import DailyEntry, DateFilterState, DateRangeOption

# Window length in days for the rolling range options
ROLLING_WINDOWS = {
    DateRangeOption.LAST_7_DAYS: 7,
    DateRangeOption.LAST_30_DAYS: 30,
    DateRangeOption.LAST_3_MONTHS: 90,
}


def today_str() -> str:
    """Return the wall-clock day as YYYY-MM-DD."""
    return date.today().isoformat()


def days_before(day: str, days: int) -> str:
    """Return the day ``days`` calendar days before ``day``.

    Args:
        day: Day as YYYY-MM-DD
        days: Number of days to go back

    Returns:
        Resulting day as YYYY-MM-DD
    """
    return (date.fromisoformat(day) - timedelta(days=days)).isoformat()


def is_in_range(entry_date: str, date_filter: DateFilterState, today: str) -> bool:
    """Decide whether a day falls inside the selected date range.

    All ranges include both endpoints. Custom dates are ignored unless the
    option is CUSTOM, and unrecognized options match everything.

    Args:
        entry_date: Day to test, as YYYY-MM-DD
        date_filter: Selected range
        today: Reference day, as YYYY-MM-DD

    Returns:
        True if ``entry_date`` is inside the range
    """
    option = date_filter.option

    if option == DateRangeOption.TODAY:
        return entry_date == today

    if option == DateRangeOption.YESTERDAY:
        return entry_date == days_before(today, 1)

    if option in ROLLING_WINDOWS:
        return days_before(today, ROLLING_WINDOWS[option]) <= entry_date <= today

    if option == DateRangeOption.THIS_MONTH:
        return entry_date[:7] == today[:7]

    if option == DateRangeOption.CUSTOM:
        start = date_filter.custom_start_date
        if not start:
            return True
        # No end date selects the start day alone
        end = date_filter.custom_end_date or start
        return start <= entry_date <= end

    return True


def filter_by_date_range(
    entries: Iterable[DailyEntry], date_filter: DateFilterState, today: str
) -> tuple[DailyEntry, ...]:
    """Return the entries whose date is inside the range, in input order."""
    return tuple(
        entry for entry in entries if is_in_range(entry.date, date_filter, today)
    )
