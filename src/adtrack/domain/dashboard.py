"""Dashboard composition: project selection, date filtering, statistics.

Filters always compose in the same order: entries are first selected by
project, then by date range, and statistics are computed on the result.
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from adtrack.domain.date_range import filter_by_date_range
from adtrack.domain.entities import (
    AggregatedStats,
    DailyEntry,
    DailyPoint,
    DateFilterState,
    PlatformShare,
    PlatformStats,
    Project,
)
from adtrack.domain.stats import aggregate, daily_series, platform_comparison, spend_share


@dataclass(frozen=True)
class ProjectView:
    """Everything one project section shows for its date range."""

    project: Project
    date_filter: DateFilterState
    entries: tuple[DailyEntry, ...]
    stats: AggregatedStats
    daily: tuple[DailyPoint, ...]
    platforms: tuple[PlatformStats, ...]
    shares: tuple[PlatformShare, ...]


@dataclass(frozen=True)
class DashboardView:
    """Project sections plus the optional single-project overview."""

    selection: Optional[Project]
    projects: tuple[ProjectView, ...]
    overview: Optional[AggregatedStats] = None
    overview_filter: Optional[DateFilterState] = None
    is_empty: bool = False


def select_project(
    entries: Sequence[DailyEntry], project: Optional[Project]
) -> tuple[DailyEntry, ...]:
    """Select entries of one project, or all entries when project is None."""
    if project is None:
        return tuple(entries)
    return tuple(entry for entry in entries if entry.project == project)


def filter_entries(
    entries: Sequence[DailyEntry],
    project: Optional[Project],
    date_filter: DateFilterState,
    today: str,
) -> tuple[DailyEntry, ...]:
    """Apply the project filter, then the date range filter."""
    return filter_by_date_range(select_project(entries, project), date_filter, today)


def build_project_view(
    entries: Sequence[DailyEntry],
    project: Project,
    date_filter: DateFilterState,
    today: str,
) -> ProjectView:
    """Build one project's section for a date range.

    Args:
        entries: Snapshot of all entries
        project: Project to show
        date_filter: Date range for this section
        today: Reference day, as YYYY-MM-DD

    Returns:
        ProjectView with entries sorted by day
    """
    selected = filter_entries(entries, project, date_filter, today)
    selected = tuple(sorted(selected, key=lambda e: e.date))
    return ProjectView(
        project=project,
        date_filter=date_filter,
        entries=selected,
        stats=aggregate(selected),
        daily=tuple(daily_series(selected)),
        platforms=tuple(platform_comparison(selected)),
        shares=tuple(spend_share(selected)),
    )


def build_dashboard(
    entries: Sequence[DailyEntry],
    selection: Optional[Project],
    date_filter: DateFilterState,
    today: str,
    overview_filter: Optional[DateFilterState] = None,
    project_filters: Optional[Mapping[Project, DateFilterState]] = None,
) -> DashboardView:
    """Build the dashboard for a project selection.

    The overview only exists when a single project is selected. It uses its
    own date filter and has no effect on the project sections.

    Args:
        entries: Snapshot of all entries
        selection: Selected project, or None for all projects
        date_filter: Date range for project sections without their own filter
        today: Reference day, as YYYY-MM-DD
        overview_filter: Date range for the overview (defaults to today)
        project_filters: Optional per-project date ranges

    Returns:
        DashboardView
    """
    project_filters = project_filters or {}
    projects = list(Project) if selection is None else [selection]
    views = tuple(
        build_project_view(
            entries, project, project_filters.get(project, date_filter), today
        )
        for project in projects
    )

    overview = None
    if selection is not None:
        overview_filter = overview_filter or DateFilterState()
        overview = aggregate(filter_entries(entries, selection, overview_filter, today))
    else:
        overview_filter = None

    return DashboardView(
        selection=selection,
        projects=views,
        overview=overview,
        overview_filter=overview_filter,
        is_empty=len(entries) == 0,
    )
