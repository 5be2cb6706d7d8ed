"""Add transaction command."""

import click
from fintrack.domain.transaction import TransactionService
from fintrack.cli.error_handling import handle_domain_error
from fintrack.utils.date_parser import parse_date
from fintrack.utils.amount_parser import parse_amount

TYPE_CHOICE = click.Choice(["income", "expense"], case_sensitive=False)


@click.command("add")
@click.option(
    "--date",
    required=True,
    help="Transaction date (YYYY-MM-DD or 'today', 'yesterday')",
)
@click.option("--amount", required=True, help="Non-negative amount (e.g., 123.45)")
@click.option("--type", "txn_type", required=True, type=TYPE_CHOICE, help="income or expense")
@click.option("--description", help="Transaction description")
@click.option("--category", help="Category label (e.g., 'Groceries')")
@click.pass_context
def add_transaction(
    ctx,
    date: str,
    amount: str,
    txn_type: str,
    description: str | None,
    category: str | None,
):
    """Add a transaction.

    Examples:
        fintrack add --date 2024-01-15 --amount 50.00 --type expense --description "Grocery store"
        fintrack add --date today --amount 1000.00 --type income --category Salary
    """
    service = TransactionService(ctx.obj["db"])

    try:
        txn_date = parse_date(date)
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
            amount=txn_amount,
            type=txn_type,
            description=description,
            category=category,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    txn = service.require_transaction(transaction_id)
    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Type: {txn.type.value}")
    click.echo(f"  Amount: ${txn.amount:,.2f}")
    if txn.description:
        click.echo(f"  Description: {txn.description}")
    if txn.category:
        click.echo(f"  Category: {txn.category}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
