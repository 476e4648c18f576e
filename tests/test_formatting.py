"""Tests for terminal formatting helpers."""

from adtrack.cli.formatting import describe_filter, format_count, format_currency, format_project
from adtrack.domain.entities import DateFilterState, DateRangeOption, Project


def test_format_currency():
    assert format_currency(1234.5) == "SAR 1,234.50"
    assert format_currency(0) == "SAR 0.00"


def test_format_count():
    assert format_count(12.0) == "12"
    assert format_count(1500) == "1,500"
    assert format_count(2.5) == "2.50"


def test_format_project_for_all_projects():
    assert format_project(None, "en") == "All projects"
    assert format_project(Project.AZZA, "en") == "Azza Al-Mutamayeza"


def test_describe_filter():
    assert describe_filter(DateFilterState(), "en") == "Today"
    assert describe_filter(DateFilterState(DateRangeOption.CUSTOM), "en") == "Custom range (all dates)"
    assert (
        describe_filter(DateFilterState(DateRangeOption.CUSTOM, custom_start_date="2024-02-01"), "en")
        == "Custom range 2024-02-01 to 2024-02-01"
    )
