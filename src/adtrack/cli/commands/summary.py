"""Summary (dashboard) command."""

import click
from adtrack.cli.date_filters import (
    date_filter_options,
    resolve_cli_date_filter,
    resolve_project_ranges,
)
from adtrack.cli.error_handling import handle_domain_error
from adtrack.cli.formatting import (
    describe_filter,
    format_count,
    format_currency,
    format_platform,
    format_project,
)
from adtrack.domain.dashboard import ProjectView, build_dashboard
from adtrack.domain.entities import AggregatedStats, DateFilterState
from adtrack.domain.errors import DomainError
from adtrack.domain.labels import resolve_project
from adtrack.domain.stats import entry_cpr

WIDTH = 80


def _display_stats(stats: AggregatedStats, locale: str) -> None:
    """Display the four headline figures plus the costliest platform."""
    click.echo(f"{'Total spend':<50} {format_currency(stats.total_spend):>29}")
    click.echo(f"{'Total purchases':<50} {format_count(stats.total_purchases):>29}")
    click.echo(f"{'Cost per result':<50} {format_currency(stats.cpr):>29}")
    click.echo(f"{'Best platform (lowest CPR)':<50} {format_platform(stats.best_platform, locale):>29}")
    click.echo(
        f"{'Highest spend platform':<50} {format_platform(stats.highest_cost_platform, locale):>29}"
    )


def _display_platforms(view: ProjectView, locale: str) -> None:
    """Display spend, purchases, CPR and spend share per platform."""
    click.echo()
    click.echo(f"{'Platform':<20} {'Spend':>16} {'Share':>8} {'Purchases':>12} {'CPR':>16}")
    click.echo("-" * WIDTH)
    for stats, share in zip(view.platforms, view.shares):
        click.echo(
            f"{format_platform(stats.platform, locale):<20} {format_currency(stats.spend):>16} "
            f"{share.share:>8.0%} {format_count(stats.purchases):>12} {format_currency(stats.cpr):>16}"
        )


def _display_daily(view: ProjectView) -> None:
    """Display spend and CPR trends, one line per day."""
    click.echo()
    click.echo(f"{'Date':<20} {'Spend':>20} {'Purchases':>16} {'CPR':>20}")
    click.echo("-" * WIDTH)
    for point in view.daily:
        click.echo(
            f"{point.date:<20} {format_currency(point.spend):>20} "
            f"{format_count(point.purchases):>16} {format_currency(point.cpr):>20}"
        )


def _display_log(view: ProjectView, locale: str) -> None:
    """Display the daily log of entries."""
    click.echo()
    click.echo(f"{'ID':<10} {'Date':<12} {'Platform':<14} {'Spend':>16} {'Purchases':>10} {'CPR':>14}")
    click.echo("-" * WIDTH)
    for entry in view.entries:
        click.echo(
            f"{entry.id[:8]:<10} {entry.date:<12} {format_platform(entry.platform, locale):<14} "
            f"{format_currency(entry.spend):>16} {format_count(entry.purchases):>10} "
            f"{format_currency(entry_cpr(entry)):>14}"
        )


@click.command("summary")
@click.option("--project", help="Show a single project (id or name) plus its overview")
@date_filter_options(label="project sections (default: today)")
@date_filter_options(prefix="overview", label="the single-project overview (default: today)")
@click.option(
    "--project-range",
    "project_ranges",
    multiple=True,
    metavar="PROJECT=RANGE",
    help="Date range for one project section, e.g. bronze=this-month or azza=2024-03-01..2024-03-10 (repeatable)",
)
@click.option("--platforms", is_flag=True, help="Show the per-platform breakdown")
@click.option("--daily", is_flag=True, help="Show per-day spend and CPR trends")
@click.option("--entries", "show_entries", is_flag=True, help="Show the daily log of entries")
@click.pass_context
def summary(
    ctx,
    project: str | None,
    range: str | None,
    start_date: str | None,
    end_date: str | None,
    overview_range: str | None,
    overview_start_date: str | None,
    overview_end_date: str | None,
    project_ranges: tuple[str, ...],
    platforms: bool,
    daily: bool,
    show_entries: bool,
):
    """Show performance per project for a date range.

    With --project, a performance overview for that project is shown first.
    The overview has its own range options (--overview-range etc.) and does
    not affect the project section.

    --project-range gives a project section its own range, overriding
    --range for that project only.
    """
    store = ctx.obj["store"]
    locale = ctx.obj["locale"]
    today = ctx.obj["today"]

    selection = None
    if project:
        try:
            selection = resolve_project(project)
        except DomainError as e:
            handle_domain_error(ctx, e)

    date_filter = resolve_cli_date_filter(
        ctx,
        range_option=range,
        start_date=start_date,
        end_date=end_date,
        today=today,
        default=DateFilterState(),
    )
    overview_filter = resolve_cli_date_filter(
        ctx,
        range_option=overview_range,
        start_date=overview_start_date,
        end_date=overview_end_date,
        today=today,
        default=DateFilterState(),
    )
    project_filters = resolve_project_ranges(ctx, project_ranges, today=today)

    dashboard = build_dashboard(
        store.snapshot().entries,
        selection,
        date_filter,
        today,
        overview_filter=overview_filter,
        project_filters=project_filters,
    )

    if dashboard.is_empty:
        click.echo("No entries yet. Add one with 'adtrack add' or restore a backup with 'adtrack import'.")
        return

    if dashboard.overview is not None:
        click.echo(
            f"\nPerformance Overview: {format_project(selection, locale)} "
            f"({describe_filter(dashboard.overview_filter, locale)})"
        )
        click.echo("=" * WIDTH)
        _display_stats(dashboard.overview, locale)

    for view in dashboard.projects:
        click.echo(
            f"\n{format_project(view.project, locale)} ({describe_filter(view.date_filter, locale)})"
        )
        click.echo("=" * WIDTH)
        _display_stats(view.stats, locale)

        if not view.entries:
            click.echo("-" * WIDTH)
            click.echo("No entries in this period.")
            continue

        if platforms:
            _display_platforms(view, locale)
        if daily:
            _display_daily(view)
        if show_entries:
            _display_log(view, locale)


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
