"""Add transaction command."""

import click

from paytrack.cli.error_handling import handle_domain_error
from paytrack.domain.errors import DomainError
from paytrack.domain.transaction import TransactionService
from paytrack.utils.amount_parser import parse_amount
from paytrack.utils.date_parser import parse_date


@click.command("add")
@click.option(
    "--date",
    "date_str",
    required=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option(
    "--amount", required=True, help="Transaction amount (e.g., -45.20 for an expense)"
)
@click.option("--name", required=True, help="Transaction name or payee")
@click.option("--category-id", type=int, help="Budget category ID")
@click.option("--notes", help="Notes")
@click.pass_context
def add_transaction(
    ctx,
    date_str: str,
    amount: str,
    name: str,
    category_id: int | None,
    notes: str | None,
):
    """Add a transaction manually.

    Examples:
        paytrack add --date 2025-01-10 --amount -82.15 --name "Grocery store" --category-id 1
        paytrack add --date yesterday --amount -12.50 --name "Coffee"
    """
    service = TransactionService(ctx.obj["db"])

    try:
        txn_date = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        transaction_id = service.create_transaction(
            date=txn_date,
            name=name,
            amount=txn_amount,
            category_id=category_id,
            notes=notes,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Date: {txn_date}")
    click.echo(f"  Amount: ${txn_amount:,.2f}")
    click.echo(f"  Name: {name.strip()}")
    if category_id is not None:
        click.echo(f"  Category ID: {category_id}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
