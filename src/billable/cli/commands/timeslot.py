"""Time reporting commands."""

import click
from datetime import date as date_type
from billable.cli.client_resolution import resolve_client_or_exit
from billable.cli.error_handling import handle_domain_error
from billable.domain.aggregation import slot_amount
from billable.domain.client import ClientService
from billable.domain.entities import Money
from billable.domain.formatting import format_money
from billable.domain.timeslot import TimeslotService
from billable.utils.amount_parser import parse_amount
from billable.utils.date_parser import parse_date


@click.group()
def time_group():
    """Report and manage time."""
    pass


@time_group.command("report")
@click.option("--client", required=True, help="Client name or ID")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Day worked (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--duration", required=True, help="Hours worked (e.g., 2.5 or 2:30)")
@click.option("--charge", help="Hourly charge (defaults to the client's charge)")
@click.option("--currency", help="Currency of the charge (defaults to the client's)")
@click.option("--description", help="What the time was spent on")
@click.pass_context
def report_time(
    ctx,
    client: str,
    date: str,
    duration: str,
    charge: str | None,
    currency: str | None,
    description: str | None,
):
    """Report time worked for a client in its open billing period.

    Examples:
        billable time report --client "Acme" --duration 2.5
        billable time report --client 1 --date yesterday --duration 1:30 --charge 60 --currency EUR
    """
    db = ctx.obj["db"]
    service = TimeslotService(db)
    client_id = resolve_client_or_exit(ctx, ClientService(db), client)

    try:
        slot_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        timeslot_id = service.report_time(
            client_id=client_id,
            date=slot_date,
            duration=duration,
            charge_rate=parse_amount(charge) if charge is not None else None,
            currency=currency,
            description=description,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    slot = service.require_timeslot(timeslot_id)
    click.echo(f"Created timeslot {timeslot_id}")
    click.echo(f"  Client: {slot.client_name}")
    click.echo(f"  Date: {slot.date}")
    click.echo(f"  Hours: {slot.duration}")
    click.echo(f"  Rate: {format_money(Money(slot.charge_rate, slot.currency))}/hour")
    click.echo(f"  Amount: {format_money(slot_amount(slot))}")


@time_group.command("list")
@click.option("--date", "day", default="today", show_default=True, help="Day to list")
@click.option("--month", is_flag=True, help="List the whole month containing --date")
@click.option("--client", help="Only list time for this client (name or ID)")
@click.pass_context
def list_time(ctx, day: str, month: bool, client: str | None):
    """List reported time for a day or a month."""
    db = ctx.obj["db"]
    service = TimeslotService(db)

    try:
        list_date: date_type = parse_date(day)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    client_id = None
    if client is not None:
        client_id = resolve_client_or_exit(ctx, ClientService(db), client)

    slots = service.list_timeslots(
        list_date, mode="month" if month else "exact", client_id=client_id
    )
    if not slots:
        click.echo("No timeslots found.")
        return

    click.echo(f"\nFound {len(slots)} timeslot(s):")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Client':<20} {'Hours':>6} {'Rate':>14} {'Amount':>14}  {'Description'}"
    )
    click.echo("-" * 100)
    for slot in slots:
        rate = format_money(Money(slot.charge_rate, slot.currency))
        amount = format_money(slot_amount(slot))
        description = (slot.description or "")[:30]
        click.echo(
            f"{slot.id:<6} {str(slot.date):<12} {(slot.client_name or ''):<20} "
            f"{slot.duration:>6} {rate:>14} {amount:>14}  {description}"
        )


@time_group.command("update")
@click.argument("timeslot_id", type=int)
@click.option("--duration", help="New hours worked")
@click.option("--charge", help="New hourly charge")
@click.option("--currency", help="New currency of the charge")
@click.pass_context
def update_time(
    ctx, timeslot_id: int, duration: str | None, charge: str | None, currency: str | None
):
    """Update the hours, charge or currency of a timeslot."""
    db = ctx.obj["db"]
    service = TimeslotService(db)

    if duration is None and charge is None and currency is None:
        click.echo(
            "Error: Nothing to update. Use --duration, --charge or --currency.", err=True
        )
        ctx.exit(1)

    try:
        service.update_timeslot(
            timeslot_id,
            duration=duration,
            charge_rate=parse_amount(charge) if charge is not None else None,
            currency=currency,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    slot = service.require_timeslot(timeslot_id)
    click.echo(
        f"Updated timeslot {timeslot_id}: {slot.duration} hours at "
        f"{format_money(Money(slot.charge_rate, slot.currency))}/hour"
    )


@time_group.command("delete")
@click.argument("timeslot_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_time(ctx, timeslot_id: int, yes: bool):
    """Delete a timeslot."""
    db = ctx.obj["db"]
    service = TimeslotService(db)

    if not yes and not click.confirm(
        f"Are you sure you want to delete timeslot {timeslot_id}?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_timeslot(timeslot_id)
        click.echo(f"Deleted timeslot {timeslot_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register time commands with main CLI."""
    cli.add_command(time_group, name="time")
