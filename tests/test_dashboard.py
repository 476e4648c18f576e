"""Tests for dashboard composition."""

from adtrack.domain.dashboard import build_dashboard, build_project_view, filter_entries
from adtrack.domain.entities import DateFilterState, DateRangeOption, Platform, Project

TODAY = "2024-03-15"
ALL_DATES = DateFilterState(DateRangeOption.CUSTOM)
LAST_7 = DateFilterState(DateRangeOption.LAST_7_DAYS)


def _entries(make_entry):
    return [
        make_entry(date="2024-03-15", project=Project.AZZA, platform=Platform.META, spend=100, purchases=10),
        make_entry(date="2024-03-01", project=Project.AZZA, platform=Platform.GOOGLE, spend=50, purchases=20),
        make_entry(date="2024-03-14", project=Project.BRONZE, platform=Platform.TIKTOK, spend=30, purchases=0),
    ]


def test_filter_entries_applies_project_then_date(make_entry):
    entries = _entries(make_entry)
    result = filter_entries(entries, Project.AZZA, LAST_7, TODAY)
    assert [e.id for e in result] == [entries[0].id]


def test_filter_entries_without_project(make_entry):
    entries = _entries(make_entry)
    result = filter_entries(entries, None, LAST_7, TODAY)
    assert [e.id for e in result] == [entries[0].id, entries[2].id]


def test_project_view_sorts_entries_by_day(make_entry):
    view = build_project_view(_entries(make_entry), Project.AZZA, ALL_DATES, TODAY)

    assert [e.date for e in view.entries] == ["2024-03-01", "2024-03-15"]
    assert view.stats.total_spend == 150
    assert view.stats.best_platform == Platform.GOOGLE
    assert [p.date for p in view.daily] == ["2024-03-01", "2024-03-15"]
    assert len(view.platforms) == len(Platform)


def test_all_projects_selection_has_no_overview(make_entry):
    dashboard = build_dashboard(_entries(make_entry), None, ALL_DATES, TODAY)

    assert [v.project for v in dashboard.projects] == list(Project)
    assert dashboard.overview is None
    assert dashboard.overview_filter is None
    assert not dashboard.is_empty


def test_single_project_overview_defaults_to_today(make_entry):
    dashboard = build_dashboard(_entries(make_entry), Project.AZZA, ALL_DATES, TODAY)

    assert [v.project for v in dashboard.projects] == [Project.AZZA]
    assert dashboard.overview_filter.option == DateRangeOption.TODAY
    assert dashboard.overview.total_spend == 100
    assert dashboard.projects[0].stats.total_spend == 150


def test_overview_filter_does_not_change_project_sections(make_entry):
    entries = _entries(make_entry)
    narrow = build_dashboard(entries, Project.AZZA, ALL_DATES, TODAY)
    wide = build_dashboard(entries, Project.AZZA, ALL_DATES, TODAY, overview_filter=ALL_DATES)

    assert wide.overview.total_spend == 150
    assert narrow.projects == wide.projects


def test_per_project_filters(make_entry):
    dashboard = build_dashboard(
        _entries(make_entry),
        None,
        ALL_DATES,
        TODAY,
        project_filters={Project.AZZA: DateFilterState(DateRangeOption.TODAY)},
    )
    by_project = {v.project: v for v in dashboard.projects}

    assert by_project[Project.AZZA].stats.total_spend == 100
    assert by_project[Project.BRONZE].stats.total_spend == 30
    assert by_project[Project.MARAYA].entries == ()


def test_empty_collection():
    dashboard = build_dashboard([], Project.SABORIO, ALL_DATES, TODAY)
    assert dashboard.is_empty
    assert dashboard.projects[0].stats.total_spend == 0
