"""Billing period commands."""

import click
from billable.cli.client_resolution import resolve_client_or_exit
from billable.cli.error_handling import handle_domain_error
from billable.domain.client import ClientService
from billable.domain.period import PeriodService
from billable.utils.date_parser import parse_date


def _parse_date_or_exit(ctx, value: str, label: str):
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


@click.group()
def period_group():
    """Open, close and list billing periods."""
    pass


@period_group.command("list")
@click.option("--client", help="Only list periods for this client (name or ID)")
@click.option("--open", "open_only", is_flag=True, help="Only list open periods")
@click.pass_context
def list_periods(ctx, client: str | None, open_only: bool):
    """List billing periods, newest first."""
    db = ctx.obj["db"]
    service = PeriodService(db)

    client_id = None
    if client is not None:
        client_id = resolve_client_or_exit(ctx, ClientService(db), client)

    if open_only:
        periods = service.list_open_periods()
        if client_id is not None:
            periods = [p for p in periods if p.client_id == client_id]
    else:
        periods = service.list_periods(client_id=client_id)

    if not periods:
        click.echo("No periods found.")
        return

    click.echo("\nPeriods:")
    click.echo("-" * 70)
    for p in periods:
        line = (
            f"ID: {p.id:3d} | Client: {p.client_id:3d} | {p.status.value:6s} | "
            f"{p.start_date} to {p.end_date}"
        )
        if p.closed_at is not None:
            line += f" | closed {p.closed_at:%Y-%m-%d}"
        click.echo(line)


@period_group.command("close")
@click.argument("period_id", type=int)
@click.option("--open-new", is_flag=True, help="Open the next period for the same client")
@click.option("--start", "start_date", help="Start of the new period")
@click.option("--end", "end_date", help="End of the new period")
@click.pass_context
def close_period(
    ctx, period_id: int, open_new: bool, start_date: str | None, end_date: str | None
):
    """Close a billing period.

    Examples:
        billable period close 3
        billable period close 3 --open-new --start 2024-02-01 --end 2024-02-29
    """
    db = ctx.obj["db"]
    service = PeriodService(db)

    start = _parse_date_or_exit(ctx, start_date, "start date") if start_date else None
    end = _parse_date_or_exit(ctx, end_date, "end date") if end_date else None

    try:
        new_period_id = service.close_period(
            period_id, open_new_period=open_new, period_start=start, period_end=end
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Closed period {period_id}")
    if new_period_id is not None:
        click.echo(f"Opened period {new_period_id} ({start} to {end})")


@period_group.command("open")
@click.argument("client", metavar="CLIENT")
@click.option("--start", "start_date", required=True, help="Start of the period")
@click.option("--end", "end_date", required=True, help="End of the period")
@click.pass_context
def open_period(ctx, client: str, start_date: str, end_date: str):
    """Open a billing period for a client without one.

    CLIENT can be a client name or ID.
    """
    db = ctx.obj["db"]
    client_id = resolve_client_or_exit(ctx, ClientService(db), client)
    start = _parse_date_or_exit(ctx, start_date, "start date")
    end = _parse_date_or_exit(ctx, end_date, "end date")

    try:
        period_id = PeriodService(db).open_period(client_id, start, end)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Opened period {period_id} ({start} to {end})")


def register_commands(cli):
    """Register period commands with main CLI."""
    cli.add_command(period_group, name="period")
