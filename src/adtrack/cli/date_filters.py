"""CLI helpers for date range resolution."""

from datetime import date

import click

from adtrack.cli.error_handling import handle_domain_error
from adtrack.domain.entities import DateFilterState, DateRangeOption, Project
from adtrack.domain.errors import DomainError
from adtrack.domain.labels import resolve_project
from adtrack.utils.date_parser import parse_day

RANGE_CHOICES = [option.value for option in DateRangeOption]


def date_filter_options(prefix: str = "", label: str = "entries"):
    """Add --range, --start-date and --end-date options to a command.

    With a prefix such as "overview", the options become --overview-range,
    --overview-start-date and --overview-end-date.
    """
    flag = f"--{prefix}-" if prefix else "--"

    def decorator(command):
        command = click.option(
            f"{flag}end-date",
            help="End of a custom range (YYYY-MM-DD or relative like 'today'); implies --range custom",
        )(command)
        command = click.option(
            f"{flag}start-date",
            help="Start of a custom range (YYYY-MM-DD or relative like '7 days ago'); implies --range custom",
        )(command)
        command = click.option(
            f"{flag}range",
            type=click.Choice(RANGE_CHOICES, case_sensitive=False),
            help=f"Date range for {label}",
        )(command)
        return command

    return decorator


def resolve_cli_date_filter(
    ctx,
    *,
    range_option: str | None,
    start_date: str | None,
    end_date: str | None,
    today: str,
    default: DateFilterState | None = None,
) -> DateFilterState:
    """Resolve a date filter from CLI range options.

    Start and end dates imply a custom range and cannot be combined with any
    other named range. Without any option the default filter is returned, or
    a custom filter without dates (matches everything) when there is none.
    """
    if (start_date or end_date) and range_option not in (None, DateRangeOption.CUSTOM.value):
        click.echo(
            "Error: --start-date/--end-date can only be combined with --range custom.",
            err=True,
        )
        ctx.exit(1)

    if end_date and not start_date:
        click.echo("Error: --end-date requires --start-date.", err=True)
        ctx.exit(1)

    if range_option is None and not start_date:
        return default if default is not None else DateFilterState(DateRangeOption.CUSTOM)

    option = DateRangeOption(range_option.lower()) if range_option else DateRangeOption.CUSTOM
    if option != DateRangeOption.CUSTOM:
        return DateFilterState(option)

    reference = date.fromisoformat(today)
    start = None
    end = None

    if start_date:
        try:
            start = parse_day(start_date, today=reference)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    if end_date:
        try:
            end = parse_day(end_date, today=reference)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    return DateFilterState(
        DateRangeOption.CUSTOM, custom_start_date=start, custom_end_date=end
    )


def resolve_project_ranges(ctx, values, *, today: str) -> dict[Project, DateFilterState]:
    """Resolve repeated PROJECT=RANGE options into per-project filters.

    RANGE is a named range such as 'this-month', or a custom START..END where
    END may be left out for a single day. A later option for the same project
    wins.
    """
    filters = {}
    for value in values:
        name, sep, spec = value.partition("=")
        if not sep or not name.strip() or not spec.strip():
            click.echo(f"Error: Invalid --project-range '{value}': expected PROJECT=RANGE", err=True)
            ctx.exit(1)
        try:
            project = resolve_project(name.strip())
        except DomainError as e:
            handle_domain_error(ctx, e)

        spec = spec.strip()
        if spec.lower() in RANGE_CHOICES and spec.lower() != DateRangeOption.CUSTOM.value:
            filters[project] = DateFilterState(DateRangeOption(spec.lower()))
            continue

        start_date, _, end_date = spec.partition("..")
        filters[project] = resolve_cli_date_filter(
            ctx,
            range_option=DateRangeOption.CUSTOM.value,
            start_date=start_date.strip() or None,
            end_date=end_date.strip() or None,
            today=today,
        )
    return filters
