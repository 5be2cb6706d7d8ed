"""Transaction management commands."""

import click
from fintrack.domain.transaction import TransactionService
from fintrack.domain.entities import Transaction
from fintrack.cli.error_handling import handle_domain_error
from fintrack.cli.commands.add import TYPE_CHOICE
from fintrack.utils.date_parser import parse_date
from fintrack.utils.amount_parser import parse_amount


def _echo_details(txn: Transaction) -> None:
    click.echo(f"Transaction ID: {txn.id}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Type: {txn.type.value}")
    click.echo(f"  Amount: ${txn.amount:,.2f}")
    click.echo(f"  Description: {txn.description or ''}")
    click.echo(f"  Category: {txn.category or 'Uncategorized'}")
    if txn.created_at is not None:
        click.echo(f"  Created: {txn.created_at}")


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--start-date", help="Start date (YYYY-MM-DD or 'today', 'yesterday')")
@click.option("--end-date", help="End date (YYYY-MM-DD or 'today', 'yesterday')")
@click.option("--type", "txn_type", type=TYPE_CHOICE, help="Only income or only expense")
@click.option("--category", help="Exact category label")
@click.pass_context
def list_transactions(ctx, start_date: str, end_date: str, txn_type: str, category: str):
    """View transactions with optional filters."""
    service = TransactionService(ctx.obj["db"])

    start = None
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    end = None
    if end_date:
        try:
            end = parse_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    try:
        transactions = service.list_transactions(
            start_date=start, end_date=end, type=txn_type, category=category
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 90)
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Type':<8} {'Amount':>12}  {'Category':<20} {'Description':<30}"
    )
    click.echo("-" * 90)

    for txn in transactions:
        amount_str = f"${txn.signed_amount:,.2f}"
        description = (txn.description or "")[:30]
        click.echo(
            f"{txn.id:<6} {str(txn.date):<12} {txn.type.value:<8} {amount_str:>12}  "
            f"{(txn.category or ''):<20} {description:<30}"
        )


@transaction_group.command("show")
@click.argument("transaction_id", type=int)
@click.pass_context
def show_transaction(ctx, transaction_id: int) -> None:
    """Show a single transaction."""
    service = TransactionService(ctx.obj["db"])
    try:
        txn = service.require_transaction(transaction_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    _echo_details(txn)


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--date", help="Transaction date (YYYY-MM-DD or 'today', 'yesterday')")
@click.option("--amount", help="Non-negative amount (e.g., 123.45)")
@click.option("--type", "txn_type", type=TYPE_CHOICE, help="income or expense")
@click.option("--description", help="Transaction description, or empty string to clear")
@click.option("--category", help="Category label, or empty string to clear")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    date: str | None,
    amount: str | None,
    txn_type: str | None,
    description: str | None,
    category: str | None,
) -> None:
    """Update a transaction.

    Options that are not given keep their stored value; the resulting record
    then replaces the stored one.

    Examples:
        fintrack transaction update 1 --amount 75.00
        fintrack transaction update 1 --type income --category Salary
        fintrack transaction update 1 --category ""  # Clear category
    """
    service = TransactionService(ctx.obj["db"])

    try:
        current = service.require_transaction(transaction_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    txn_date = current.date
    if date is not None:
        try:
            txn_date = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    txn_amount = current.amount
    if amount is not None:
        try:
            txn_amount = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    try:
        service.update_transaction(
            transaction_id=transaction_id,
            date=txn_date,
            amount=txn_amount,
            type=txn_type if txn_type is not None else current.type,
            description=description if description is not None else current.description,
            category=category if category is not None else current.category,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction.

    Examples:
        fintrack transaction delete 1
    """
    service = TransactionService(ctx.obj["db"])

    txn = service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(
        f"Are you sure you want to delete transaction {transaction_id}?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_transaction(transaction_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
