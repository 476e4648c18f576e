"""Manual save command."""

import click
from adtrack.cli.error_handling import handle_domain_error
from adtrack.domain.errors import DomainError


@click.command("save")
@click.pass_context
def save(ctx):
    """Write all entries to storage again.

    Every change is already saved as it happens; this forces a full rewrite,
    e.g. to check that storage is writable.
    """
    store = ctx.obj["store"]
    try:
        store.save()
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Saved {len(store.snapshot())} entries.")


def register_commands(cli):
    """Register save command with main CLI."""
    cli.add_command(save)
