"""Export commands."""

from pathlib import Path

import click
from adtrack.cli.date_filters import date_filter_options, resolve_cli_date_filter
from adtrack.cli.error_handling import handle_domain_error
from adtrack.domain.dashboard import filter_entries
from adtrack.domain.errors import DomainError
from adtrack.domain.export import (
    export_filename,
    generate_backup_json,
    generate_csv,
    generate_tsv,
)
from adtrack.domain.labels import resolve_project


@click.group()
def export_group():
    """Export entries for spreadsheets or as a JSON backup."""
    pass


def _select_entries(ctx, project, range, start_date, end_date):
    """Select entries by project, then by date range (all dates by default)."""
    store = ctx.obj["store"]
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
    return filter_entries(
        store.snapshot().entries, selected_project, date_filter, ctx.obj["today"]
    )


def _write(ctx, path: Path, content: str) -> None:
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        click.echo(f"Error: Could not write '{path}': {e}", err=True)
        ctx.exit(1)


@export_group.command("csv")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Output file (default: adtrack_report_<today>.csv)")
@click.option("--project", help="Only entries of this project (id or name)")
@date_filter_options()
@click.pass_context
def export_csv(ctx, output, project, range, start_date, end_date):
    """Write entries to a CSV file that spreadsheet applications open directly."""
    entries = _select_entries(ctx, project, range, start_date, end_date)
    if not entries:
        click.echo("Error: No entries to export.", err=True)
        ctx.exit(1)

    path = Path(output or export_filename("csv", ctx.obj["today"]))
    _write(ctx, path, generate_csv(entries, ctx.obj["locale"]))
    click.echo(f"Exported {len(entries)} entries to {path}")


@export_group.command("tsv")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Output file (default: standard output)")
@click.option("--project", help="Only entries of this project (id or name)")
@date_filter_options()
@click.pass_context
def export_tsv(ctx, output, project, range, start_date, end_date):
    """Print entries as tab-separated text for pasting into a spreadsheet grid."""
    entries = _select_entries(ctx, project, range, start_date, end_date)
    if not entries:
        click.echo("Error: No entries to export.", err=True)
        ctx.exit(1)

    content = generate_tsv(entries, ctx.obj["locale"])
    if output is None:
        click.echo(content, nl=False)
        return

    _write(ctx, Path(output), content)
    click.echo(f"Exported {len(entries)} entries to {output}")


@export_group.command("backup")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Output file (default: adtrack_backup_<today>.json)")
@click.pass_context
def export_backup(ctx, output):
    """Write every entry to a JSON backup file."""
    entries = ctx.obj["store"].snapshot().entries
    path = Path(output or export_filename("backup", ctx.obj["today"]))
    _write(ctx, path, generate_backup_json(entries))
    click.echo(f"Backed up {len(entries)} entries to {path}")


def register_commands(cli: click.Group) -> None:
    """Register export commands with main CLI."""
    cli.add_command(export_group, name="export")
