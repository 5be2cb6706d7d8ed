"""Dashboard summary command."""

import json

import click
from fintrack.domain.dashboard import DashboardService
from fintrack.cli.error_handling import handle_domain_error


@click.command("summary")
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON")
@click.pass_context
def summary(ctx, as_json: bool):
    """Show total income, total expense and balance."""
    service = DashboardService(ctx.obj["db"])

    try:
        result = service.get_summary()
    except ValueError as e:
        handle_domain_error(ctx, e)

    if as_json:
        click.echo(json.dumps(result.as_dict()))
        return

    click.echo("\nDashboard Summary")
    click.echo("-" * 40)
    click.echo(f"{'Total Income':<20} {f'${result.total_income:,.2f}':>19}")
    click.echo(f"{'Total Expense':<20} {f'${result.total_expense:,.2f}':>19}")
    click.echo("-" * 40)
    click.echo(f"{'Balance':<20} {f'${result.balance:,.2f}':>19}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
