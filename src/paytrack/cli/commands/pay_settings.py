"""Pay settings commands."""

import click

from paytrack.cli.error_handling import handle_domain_error
from paytrack.domain.entities import PayFrequency
from paytrack.domain.errors import DomainError
from paytrack.domain.pay_schedule import PayScheduleService
from paytrack.utils.date_parser import parse_date


@click.group()
def pay_settings_group():
    """Manage the pay schedule."""
    pass


@pay_settings_group.command("set")
@click.option(
    "--last-pay-date",
    required=True,
    help="Most recent pay date (YYYY-MM-DD or relative like 'today')",
)
@click.option(
    "--frequency",
    required=True,
    type=click.Choice([freq.value for freq in PayFrequency], case_sensitive=False),
    help="How often you are paid",
)
@click.pass_context
def set_pay_settings(ctx, last_pay_date: str, frequency: str):
    """Set the pay schedule used to reconstruct pay periods.

    Examples:
        paytrack pay-settings set --last-pay-date 2025-01-03 --frequency biweekly
    """
    service = PayScheduleService(ctx.obj["db"])

    try:
        pay_date = parse_date(last_pay_date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        schedule = service.save_schedule(last_pay_date=pay_date, frequency=frequency)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(
        f"Pay schedule saved: {schedule.frequency.value}, last paid {schedule.last_pay_date}"
    )


@pay_settings_group.command("show")
@click.pass_context
def show_pay_settings(ctx):
    """Show the current pay schedule."""
    service = PayScheduleService(ctx.obj["db"])

    schedule = service.get_schedule()
    if schedule is None:
        click.echo("No pay schedule configured. Run 'pay-settings set' first.")
        return

    click.echo(f"Frequency:     {schedule.frequency.value} ({schedule.frequency.days} days)")
    click.echo(f"Last pay date: {schedule.last_pay_date}")


def register_commands(cli):
    """Register pay settings commands with main CLI."""
    cli.add_command(pay_settings_group, name="pay-settings")
