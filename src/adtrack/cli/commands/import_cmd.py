"""Backup import command."""

import click
from adtrack.cli.error_handling import handle_domain_error
from adtrack.domain.backup_import import BackupImportService
from adtrack.domain.errors import DomainError


@click.command("import")
@click.argument("backup_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--yes", "-y", is_flag=True, help="Replace existing data without asking for confirmation")
@click.pass_context
def import_backup(ctx, backup_file: str, yes: bool):
    """Restore entries from a JSON backup, replacing all current data.

    The file is validated in full first; if any element is invalid nothing
    is imported.
    """
    store = ctx.obj["store"]
    service = BackupImportService(store)

    try:
        entries = service.load_file(backup_file)
    except DomainError as e:
        handle_domain_error(ctx, e)

    current = len(store.snapshot())
    if not yes and not click.confirm(
        f"This replaces all {current} current entries with {len(entries)} imported entries. Continue?"
    ):
        click.echo("Import cancelled.")
        return

    try:
        service.apply(entries)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo("\nImport complete:")
    click.echo(f"  Imported: {len(entries)} entries")
    click.echo(f"  Replaced: {current} entries")


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_backup)
