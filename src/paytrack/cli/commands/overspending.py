"""Overspending analysis commands."""

import json

import click

from paytrack.cli.error_handling import handle_domain_error
from paytrack.domain.entities import OverspendingPeriod, OverspendingReport
from paytrack.domain.errors import DataAccessError, DomainError
from paytrack.domain.overspending import DEFAULT_PERIODS, OverspendingService
from paytrack.domain.serialization import pay_period_to_dict, report_to_dict
from paytrack.utils.date_parser import parse_date


def _resolve_as_of(ctx, as_of: str | None):
    if as_of is None:
        return None
    try:
        return parse_date(as_of)
    except ValueError as e:
        click.echo(f"Error: Invalid as-of date: {e}", err=True)
        ctx.exit(1)


def _display_period(period: OverspendingPeriod, top: int) -> None:
    click.echo(f"\n{period.start_date} to {period.end_date}")
    click.echo(
        f"  Budget: ${period.total_budget:,.2f}   Spent: ${period.total_spent:,.2f}"
        f"   Overspent: ${period.overspent:,.2f}"
    )

    if not period.categories:
        click.echo("  No categories over budget.")
    for cat in period.categories:
        click.echo(
            f"    {cat.name:<24} ${cat.spent:>10,.2f} of ${cat.budget_amount:>9,.2f}"
            f"   +${cat.overspent:,.2f} ({cat.overspent_percentage:.1f}%)"
        )

    if top and period.biggest_transactions:
        click.echo("  Biggest transactions:")
        for txn in period.biggest_transactions[:top]:
            click.echo(f"    {txn.date}  {txn.name:<30} ${txn.amount:>10,.2f}")


def _display_report(report: OverspendingReport, top: int) -> None:
    summary = report.summary
    click.echo(f"Overspending across {summary.periods_analyzed} {report.pay_frequency} pay periods")

    for period in report.periods:
        _display_period(period, top)

    over_count = sum(1 for period in report.periods if period.overspent > 0)
    click.echo("\nSummary")
    click.echo(f"  Total overspent:      ${summary.total_overspent:,.2f}")
    click.echo(f"  Average per period:   ${summary.average_overspent:,.2f}")
    click.echo(f"  Periods over budget:  {over_count} of {summary.periods_analyzed}")

    if summary.problematic_categories:
        click.echo("  Most problematic categories:")
        for cat in summary.problematic_categories:
            frequency = cat.occurrences / summary.periods_analyzed * 100
            click.echo(
                f"    {cat.name:<24} ${cat.total_overspent:>10,.2f}"
                f"   in {cat.occurrences} period(s) ({frequency:.1f}%)"
                f"   avg ${cat.average_overspent:,.2f}"
            )


@click.command("overspending")
@click.option(
    "--periods",
    "periods_requested",
    type=int,
    default=DEFAULT_PERIODS,
    show_default=True,
    help="Number of completed pay periods to analyze",
)
@click.option("--as-of", help="Reference date (YYYY-MM-DD or relative; defaults to today)")
@click.option(
    "--top",
    type=click.IntRange(min=0),
    default=5,
    show_default=True,
    help="Biggest transactions shown per period",
)
@click.option("--json", "as_json", is_flag=True, help="Output the full report as JSON")
@click.pass_context
def overspending(ctx, periods_requested: int, as_of: str | None, top: int, as_json: bool):
    """Analyze overspending across recent pay periods.

    Examples:
        paytrack overspending
        paytrack overspending --periods 12 --json
        paytrack overspending --as-of 2025-02-01 --periods 2
    """
    service = OverspendingService(ctx.obj["db"])
    as_of_date = _resolve_as_of(ctx, as_of)

    try:
        report = service.run_overspending_analysis(
            periods_requested=periods_requested, as_of=as_of_date
        )
    except (DomainError, DataAccessError) as e:
        handle_domain_error(ctx, e)
        return

    if as_json:
        click.echo(json.dumps(report_to_dict(report), indent=2))
        return

    _display_report(report, top)


@click.command("current-period")
@click.option("--as-of", help="Reference date (YYYY-MM-DD or relative; defaults to today)")
@click.option("--json", "as_json", is_flag=True, help="Output the period as JSON")
@click.pass_context
def current_period(ctx, as_of: str | None, as_json: bool):
    """Show the pay period in progress."""
    service = OverspendingService(ctx.obj["db"])
    as_of_date = _resolve_as_of(ctx, as_of)

    try:
        period = service.get_current_pay_period(as_of=as_of_date)
    except (DomainError, DataAccessError) as e:
        handle_domain_error(ctx, e)
        return

    if as_json:
        click.echo(json.dumps(pay_period_to_dict(period), indent=2))
        return

    click.echo(f"Current pay period: {period.start_date} to {period.end_date} ({period.days} days)")


def register_commands(cli):
    """Register overspending commands with main CLI."""
    cli.add_command(overspending)
    cli.add_command(current_period)
