"""Client management commands."""

import click
from billable.cli.client_resolution import rates_or_exit, resolve_client_or_exit
from billable.cli.error_handling import handle_domain_error
from billable.domain.client import ClientService
from billable.domain.entities import BillingPeriod
from billable.domain.formatting import format_money
from billable.utils.amount_parser import parse_amount
from billable.utils.date_parser import parse_date

BILLING_PERIODS = [bp.value for bp in BillingPeriod]


@click.group()
def client_group():
    """Manage clients."""
    pass


@client_group.command("create")
@click.argument("name", metavar="CLIENT_NAME")
@click.option("--charge", required=True, help="Default hourly charge (e.g., 50 or 49.50)")
@click.option("--currency", default="USD", show_default=True, help="Currency of the charge")
@click.option(
    "--billing-period",
    type=click.Choice(BILLING_PERIODS),
    default=BillingPeriod.MONTHLY.value,
    show_default=True,
    help="How often the client is invoiced",
)
@click.option("--start-date", help="Start of the first billing period (defaults to today)")
@click.pass_context
def create_client(
    ctx,
    name: str,
    charge: str,
    currency: str,
    billing_period: str,
    start_date: str | None,
):
    """Create a new client and open its first billing period.

    Examples:
        billable client create "Acme" --charge 50
        billable client create "Globex" --charge 60 --currency EUR --billing-period weekly
    """
    db = ctx.obj["db"]
    service = ClientService(db)

    start = None
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    try:
        client_id = service.create_client(
            name=name,
            default_charge=parse_amount(charge),
            currency=currency,
            billing_period=BillingPeriod(billing_period),
            start_date=start,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    client = service.require_client(client_id)
    click.echo(f"Created client '{client.name}' (ID: {client_id})")
    click.echo(
        f"Invoiced {client.billing_period.value} at "
        f"{format_money(client.default_charge_money)} an hour"
    )


@client_group.command("list")
@click.pass_context
def list_clients(ctx):
    """List all clients."""
    db = ctx.obj["db"]
    service = ClientService(db)

    clients = service.list_clients()
    if not clients:
        click.echo("No clients found.")
        return

    click.echo("\nClients:")
    click.echo("-" * 70)
    for c in clients:
        charge = format_money(c.default_charge_money)
        click.echo(
            f"ID: {c.id:3d} | {c.name:20s} | {charge:>14s}/hour | {c.billing_period.value}"
        )


@client_group.command("show")
@click.argument("client", metavar="CLIENT")
@click.pass_context
def show_client(ctx, client: str):
    """Show a client's billing periods and total invoiced.

    CLIENT can be a client name or ID. Totals are converted into the
    preferred currency (--currency) using the supplied rates.
    """
    db = ctx.obj["db"]
    service = ClientService(db)
    client_id = resolve_client_or_exit(ctx, service, client)
    rates = rates_or_exit(ctx)

    try:
        summary = service.summarize_client(client_id, ctx.obj["currency"], rates)
    except ValueError as e:
        handle_domain_error(ctx, e)

    c = summary.client
    click.echo(f"\n{c.name} (ID: {c.id})")
    click.echo(f"  Created: {c.created_at:%B %d %Y}")
    click.echo(
        f"  Invoiced {c.billing_period.value} at "
        f"{format_money(c.default_charge_money)} an hour"
    )
    click.echo(f"  Total invoiced: {format_money(summary.total)}")

    if not summary.period_totals:
        click.echo("  No billing periods.")
        return

    click.echo("\nBilling Periods:")
    click.echo("-" * 70)
    for pt in summary.period_totals:
        p = pt.period
        click.echo(
            f"ID: {p.id:3d} | {p.status.value:6s} | {p.start_date} to {p.end_date} | "
            f"{format_money(pt.total):>14s}"
        )


@client_group.command("update")
@click.argument("client", metavar="CLIENT")
@click.option("--name", help="New client name")
@click.option("--charge", help="New default hourly charge")
@click.option("--currency", help="New currency of the charge")
@click.pass_context
def update_client(
    ctx, client: str, name: str | None, charge: str | None, currency: str | None
) -> None:
    """Update a client's name, default charge or currency.

    CLIENT can be a client name or ID.

    Examples:
        billable client update "Acme" --charge 55
        billable client update 1 --name "Acme Corp" --currency EUR
    """
    db = ctx.obj["db"]
    service = ClientService(db)
    client_id = resolve_client_or_exit(ctx, service, client)

    if name is None and charge is None and currency is None:
        click.echo("Error: Nothing to update. Use --name, --charge or --currency.", err=True)
        ctx.exit(1)

    try:
        service.update_client(
            client_id,
            name=name,
            default_charge=parse_amount(charge) if charge is not None else None,
            currency=currency,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    updated = service.require_client(client_id)
    click.echo(
        f"Updated client '{updated.name}' (ID: {client_id}): "
        f"{format_money(updated.default_charge_money)} an hour"
    )


@client_group.command("delete")
@click.argument("client", metavar="CLIENT")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_client(ctx, client: str, yes: bool) -> None:
    """Delete a client with all its billing periods and timeslots.

    CLIENT can be a client name or ID.
    """
    db = ctx.obj["db"]
    service = ClientService(db)
    client_id = resolve_client_or_exit(ctx, service, client)
    client_obj = service.require_client(client_id)

    if not yes and not click.confirm(
        f"Are you sure you want to delete client '{client_obj.name}' (ID: {client_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_client(client_id)
        click.echo(f"Deleted client '{client_obj.name}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register client commands with main CLI."""
    cli.add_command(client_group, name="client")
