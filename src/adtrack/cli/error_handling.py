"""CLI error handling helpers."""

import logging

import click

from adtrack.domain.errors import DomainError, StorageError

logger = logging.getLogger(__name__)

STORAGE_HINT = "Check that the database file is writable (set with --db-path or ADTRACK_DB_PATH)."


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Report a failed operation on stderr and exit with status 1.

    Storage failures get a hint about where the database lives; the
    underlying driver error is only logged (see --verbose).
    """
    logger.debug("%s failed", ctx.command_path, exc_info=error)
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, StorageError):
        click.echo(STORAGE_HINT, err=True)
    ctx.exit(1)
