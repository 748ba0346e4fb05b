"""Main CLI entry point."""

import click
from paytrack.database.factories import create_sqlite_database
from paytrack.logging_config import DEFAULT_LOG_LEVEL, setup_logging

# Import and register all commands at module level
from paytrack.cli.commands import (
    add,
    budget,
    overspending,
    pay_settings,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides PAYTRACK_DB_PATH environment variable)",
    envvar="PAYTRACK_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    envvar="PAYTRACK_LOG_LEVEL",
    help="Logging verbosity",
)
@click.option(
    "--log-json",
    is_flag=True,
    envvar="PAYTRACK_LOG_JSON",
    help="Write log lines as JSON",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str, log_json: bool):
    """Paytrack - pay-period budget tracking.

    Record budget categories and transactions, then see where you
    overspent across your recent pay periods.
    """
    ctx.ensure_object(dict)
    setup_logging(level=log_level, json_output=log_json)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
pay_settings.register_commands(cli)
budget.register_commands(cli)
add.register_commands(cli)
overspending.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
