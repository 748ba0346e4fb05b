"""Budget category commands."""

import click

from paytrack.cli.error_handling import handle_domain_error
from paytrack.domain.budget import BudgetCategoryService
from paytrack.domain.errors import DomainError
from paytrack.utils.amount_parser import parse_amount


@click.group()
def budget_group():
    """Manage budget categories."""
    pass


@budget_group.command("create")
@click.argument("name")
@click.option("--amount", required=True, help="Monthly allocation (e.g., 300 or 300.00)")
@click.option("--color", help="Display color as hex (default: #3B82F6)")
@click.pass_context
def create_budget(ctx, name: str, amount: str, color: str | None):
    """Create a budget category with a monthly allocation.

    Examples:
        paytrack budget create Groceries --amount 300
        paytrack budget create "Dining Out" --amount 150 --color "#F97316"
    """
    service = BudgetCategoryService(ctx.obj["db"])

    try:
        allocated = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        category_id = service.create_category(name=name, allocated_amount=allocated, color=color)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created budget category '{name.strip()}' (ID: {category_id})")


@budget_group.command("list")
@click.option("--all", "include_inactive", is_flag=True, help="Include inactive categories")
@click.pass_context
def list_budgets(ctx, include_inactive: bool):
    """List budget categories."""
    service = BudgetCategoryService(ctx.obj["db"])

    categories = service.list_categories(include_inactive=include_inactive)
    if not categories:
        click.echo("No budget categories found.")
        return

    click.echo("\nBudget categories:")
    click.echo("-" * 60)
    for cat in categories:
        amount = cat.allocated_amount if cat.allocated_amount is not None else 0
        status = "" if cat.is_active else "  (inactive)"
        click.echo(f"ID: {cat.id:3d} | {cat.name:20s} | ${amount:>10,.2f}/month{status}")


def _set_active(ctx, category_id: int, is_active: bool) -> None:
    service = BudgetCategoryService(ctx.obj["db"])
    try:
        service.set_active(category_id, is_active)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    state = "Activated" if is_active else "Deactivated"
    click.echo(f"{state} budget category {category_id}")


@budget_group.command("activate")
@click.argument("category_id", type=int)
@click.pass_context
def activate_budget(ctx, category_id: int):
    """Include a budget category in analysis again."""
    _set_active(ctx, category_id, True)


@budget_group.command("deactivate")
@click.argument("category_id", type=int)
@click.pass_context
def deactivate_budget(ctx, category_id: int):
    """Exclude a budget category from analysis."""
    _set_active(ctx, category_id, False)


def register_commands(cli):
    """Register budget commands with main CLI."""
    cli.add_command(budget_group, name="budget")
