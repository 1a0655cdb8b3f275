"""Month overview command."""

import click
from billable.cli.client_resolution import rates_or_exit
from billable.cli.error_handling import handle_domain_error
from billable.domain.aggregation import slot_amount
from billable.domain.formatting import format_diff, format_hours, format_money
from billable.domain.report import ReportService
from billable.utils.date_parser import parse_month_param


@click.command("report")
@click.option(
    "--month",
    default="this month",
    show_default=True,
    help="Month to report (e.g., 'jan24', '2024-01', 'last month')",
)
@click.option("--details", is_flag=True, help="List the month's timeslots by day")
@click.pass_context
def report(ctx, month: str, details: bool):
    """Show revenue, billed time and active clients for a month.

    Revenue is converted into the preferred currency (--currency) and
    compared with the month before.

    Examples:
        billable report
        billable --currency EUR --rate USD=1 --rate EUR=0.9 report --month jan24
    """
    db = ctx.obj["db"]
    service = ReportService(db)

    try:
        month_start = parse_month_param(month)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    rates = rates_or_exit(ctx)

    try:
        result = service.month_report(month_start, ctx.obj["currency"], rates)
    except ValueError as e:
        handle_domain_error(ctx, e)

    current = result.current
    comparison = result.comparison

    click.echo(f"\n{result.month:%B %Y}")
    click.echo("=" * 40)
    click.echo(f"Total Revenue: {format_money(current.total_revenue)}")
    click.echo(f"  {format_diff(comparison.revenue_diff)} since last month")
    click.echo(f"Billed time: {format_hours(current.total_hours)} hours")
    click.echo(f"  {format_diff(comparison.hours_diff)} hours from last month")
    click.echo(f"Active Clients: {current.billed_client_count} billed this month")

    if not details:
        return

    if not result.slots_by_date:
        click.echo("\nNo time reported this month.")
        return

    for day, slots in result.slots_by_date.items():
        click.echo(f"\n{day}")
        for slot in slots:
            click.echo(
                f"  {(slot.client_name or ''):20s} {format_hours(slot.duration):>6s}h "
                f"{format_money(slot_amount(slot)):>14s}"
            )


def register_commands(cli):
    """Register report command with main CLI."""
    cli.add_command(report)
