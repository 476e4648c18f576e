"""Add entry command."""

from datetime import date as date_type

import click
from adtrack.cli.error_handling import handle_domain_error
from adtrack.cli.formatting import format_count, format_currency, format_platform, format_project
from adtrack.domain.errors import DomainError
from adtrack.domain.labels import resolve_platform, resolve_project
from adtrack.utils.amount_parser import parse_amount, parse_count
from adtrack.utils.date_parser import parse_day


@click.command("add")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Entry date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--project", required=True, help="Project id or name (e.g., 'azza', 'Bronze Abaya')")
@click.option("--platform", required=True, help="Platform id or name (e.g., 'meta', 'Google Ads')")
@click.option("--spend", default="0", show_default=True, help="Amount spent (e.g., 150 or 1,250.50)")
@click.option("--purchases", default="0", show_default=True, help="Number of purchases")
@click.pass_context
def add_entry(
    ctx,
    date: str,
    project: str,
    platform: str,
    spend: str,
    purchases: str,
):
    """Record daily spend for a project on one platform.

    Examples:
        adtrack add --project azza --platform meta --spend 100 --purchases 10
        adtrack add --date yesterday --project saborio --platform tiktok --spend 75.5
    """
    store = ctx.obj["store"]
    locale = ctx.obj["locale"]
    today = date_type.fromisoformat(ctx.obj["today"])

    try:
        entry_date = parse_day(date, today=today)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        entry_spend = parse_amount(spend)
    except ValueError as e:
        click.echo(f"Error: Invalid spend: {e}", err=True)
        ctx.exit(1)

    try:
        entry_purchases = parse_count(purchases)
    except ValueError as e:
        click.echo(f"Error: Invalid purchases: {e}", err=True)
        ctx.exit(1)

    try:
        entry, _ = store.add_entry(
            date=entry_date,
            project=resolve_project(project),
            platform=resolve_platform(platform),
            spend=entry_spend,
            purchases=entry_purchases,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created entry {entry.id}")
    click.echo(f"  Date: {entry.date}")
    click.echo(f"  Project: {format_project(entry.project, locale)}")
    click.echo(f"  Platform: {format_platform(entry.platform, locale)}")
    click.echo(f"  Spend: {format_currency(entry.spend)}")
    click.echo(f"  Purchases: {format_count(entry.purchases)}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_entry)
