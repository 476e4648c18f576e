"""Entry management commands."""

from datetime import date as date_type

import click
from adtrack.cli.date_filters import date_filter_options, resolve_cli_date_filter
from adtrack.cli.error_handling import handle_domain_error
from adtrack.cli.formatting import (
    describe_filter,
    format_count,
    format_currency,
    format_platform,
    format_project,
)
from adtrack.domain.dashboard import filter_entries
from adtrack.domain.errors import DomainError
from adtrack.domain.labels import resolve_platform, resolve_project
from adtrack.domain.stats import aggregate, entry_cpr
from adtrack.utils.amount_parser import parse_amount, parse_count
from adtrack.utils.date_parser import parse_day
from adtrack.utils.entry_resolver import resolve_entry_id


@click.group()
def entry_group():
    """Manage daily entries."""
    pass


@entry_group.command("list")
@click.option("--project", help="Only entries of this project (id or name)")
@date_filter_options()
@click.pass_context
def list_entries(
    ctx,
    project: str | None,
    range: str | None,
    start_date: str | None,
    end_date: str | None,
):
    """View entries, sorted by date, with optional filters.

    Without range options all dates are listed.
    """
    store = ctx.obj["store"]
    locale = ctx.obj["locale"]

    selected_project = None
    if project:
        try:
            selected_project = resolve_project(project)
        except DomainError as e:
            handle_domain_error(ctx, e)

    date_filter = resolve_cli_date_filter(
        ctx,
        range_option=range,
        start_date=start_date,
        end_date=end_date,
        today=ctx.obj["today"],
    )

    entries = filter_entries(
        store.snapshot().entries, selected_project, date_filter, ctx.obj["today"]
    )
    entries = sorted(entries, key=lambda e: e.date)

    if not entries:
        click.echo("No entries found.")
        return

    click.echo(f"\nFound {len(entries)} entr{'y' if len(entries) == 1 else 'ies'} ({describe_filter(date_filter, locale)}):")
    click.echo("-" * 110)
    click.echo(
        f"{'ID':<10} {'Date':<12} {'Project':<22} {'Platform':<12} {'Spend':>16} {'Purchases':>10} {'CPR':>14}"
    )
    click.echo("-" * 110)

    for entry in entries:
        click.echo(
            f"{entry.id[:8]:<10} {entry.date:<12} {format_project(entry.project, locale):<22} "
            f"{format_platform(entry.platform, locale):<12} {format_currency(entry.spend):>16} "
            f"{format_count(entry.purchases):>10} {format_currency(entry_cpr(entry)):>14}"
        )

    stats = aggregate(entries)
    click.echo("-" * 110)
    click.echo(
        f"{'TOTAL':<10} Spend: {format_currency(stats.total_spend)} | "
        f"Purchases: {format_count(stats.total_purchases)} | "
        f"CPR: {format_currency(stats.cpr)} | Count: {len(entries)}"
    )


@entry_group.command("show")
@click.argument("entry_id")
@click.pass_context
def show_entry(ctx, entry_id: str) -> None:
    """Show one entry in full."""
    store = ctx.obj["store"]
    locale = ctx.obj["locale"]

    try:
        entry = store.require_entry(resolve_entry_id(store, entry_id))
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Entry ID: {entry.id}")
    click.echo(f"  Date: {entry.date}")
    click.echo(f"  Project: {format_project(entry.project, locale)}")
    click.echo(f"  Platform: {format_platform(entry.platform, locale)}")
    click.echo(f"  Spend: {format_currency(entry.spend)}")
    click.echo(f"  Purchases: {format_count(entry.purchases)}")
    click.echo(f"  CPR: {format_currency(entry_cpr(entry))}")


@entry_group.command("update")
@click.argument("entry_id")
@click.option("--date", help="Entry date (YYYY-MM-DD or relative like 'today', 'yesterday')")
@click.option("--project", help="Project id or name")
@click.option("--platform", help="Platform id or name")
@click.option("--spend", help="Amount spent")
@click.option("--purchases", help="Number of purchases")
@click.pass_context
def update_entry(
    ctx,
    entry_id: str,
    date: str | None,
    project: str | None,
    platform: str | None,
    spend: str | None,
    purchases: str | None,
) -> None:
    """Update an entry.

    Updates only the fields that are provided; the id never changes.

    Examples:
        adtrack entry update 3f2a9c1e --spend 120
        adtrack entry update 3f2a9c1e --platform snapchat --purchases 4
    """
    store = ctx.obj["store"]
    changes = {}

    if date is not None:
        try:
            changes["date"] = parse_day(date, today=date_type.fromisoformat(ctx.obj["today"]))
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    if spend is not None:
        try:
            changes["spend"] = parse_amount(spend)
        except ValueError as e:
            click.echo(f"Error: Invalid spend: {e}", err=True)
            ctx.exit(1)

    if purchases is not None:
        try:
            changes["purchases"] = parse_count(purchases)
        except ValueError as e:
            click.echo(f"Error: Invalid purchases: {e}", err=True)
            ctx.exit(1)

    try:
        if project is not None:
            changes["project"] = resolve_project(project)
        if platform is not None:
            changes["platform"] = resolve_platform(platform)
        full_id = resolve_entry_id(store, entry_id)
        if not changes:
            click.echo("Nothing to update.")
            return
        store.update_fields(full_id, **changes)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated entry {full_id}")


@entry_group.command("delete")
@click.argument("entry_id")
@click.option("--yes", "-y", is_flag=True, help="Delete without asking for confirmation")
@click.pass_context
def delete_entry(ctx, entry_id: str, yes: bool) -> None:
    """Delete an entry.

    Examples:
        adtrack entry delete 3f2a9c1e
    """
    store = ctx.obj["store"]

    try:
        full_id = resolve_entry_id(store, entry_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(f"Are you sure you want to delete entry {full_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        store.delete_entry(full_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted entry {full_id}")


def register_commands(cli: click.Group) -> None:
    """Register entry commands with main CLI."""
    cli.add_command(entry_group, name="entry")
