"""Main CLI entry point."""

import logging

import click
from sqlalchemy.exc import SQLAlchemyError

from adtrack.database.factories import create_sqlite_database
from adtrack.domain.date_range import today_str
from adtrack.domain.entry_store import EntryStore
from adtrack.domain.labels import DEFAULT_LOCALE, LOCALES
from adtrack.utils.date_parser import parse_day

# Import and register all commands at module level
from adtrack.cli.commands import (
    add,
    entry,
    summary,
    export,
    import_cmd,
    save,
)

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides ADTRACK_DB_PATH environment variable)",
    envvar="ADTRACK_DB_PATH",
)
@click.option(
    "--locale",
    type=click.Choice(LOCALES),
    default=DEFAULT_LOCALE,
    show_default=True,
    envvar="ADTRACK_LOCALE",
    help="Language for project, platform and column labels",
)
@click.option(
    "--today",
    envvar="ADTRACK_TODAY",
    help="Reference day for date ranges (defaults to the current day)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, locale: str, today: str | None, verbose: bool):
    """Adtrack - Daily ad-spend tracking.

    Record daily spend and purchases per project and advertising platform,
    then review cost per result, platform rankings and trends.
    """
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    reference_day = today_str()
    if today:
        try:
            reference_day = parse_day(today)
        except ValueError as e:
            click.echo(f"Error: Invalid --today value: {e}", err=True)
            ctx.exit(1)

    ctx.obj["locale"] = locale
    ctx.obj["today"] = reference_day

    # Open storage only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        try:
            db.initialize_schema()
        except SQLAlchemyError as e:
            # Reading falls back to an empty collection; writes will report the failure
            logger.warning("Could not open database %s: %s", db.database_url, e)
        ctx.call_on_close(db.disconnect)
        store = EntryStore(db)
        store.load()
        ctx.obj["db"] = db
        ctx.obj["store"] = store


# Register all commands
add.register_commands(cli)
entry.register_commands(cli)
summary.register_commands(cli)
export.register_commands(cli)
import_cmd.register_commands(cli)
save.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
