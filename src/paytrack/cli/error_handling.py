"""CLI error handling helpers."""

import click

from paytrack.domain.errors import DataAccessError, DomainError, MissingScheduleError


def handle_domain_error(
    ctx: click.Context, error: DomainError | DataAccessError | ValueError
) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, MissingScheduleError):
        click.echo("Run 'paytrack pay-settings set' to configure it.", err=True)
    ctx.exit(1)
