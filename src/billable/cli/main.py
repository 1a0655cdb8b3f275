"""Main CLI entry point."""

import click
from billable.database.factories import create_sqlite_database
from billable.logging_config import LOG_LEVELS, configure_logging

# Import and register all commands at module level
from billable.cli.commands import (
    client,
    currencies,
    period,
    report,
    timeslot,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides BILLABLE_DB_PATH environment variable)",
    envvar="BILLABLE_DB_PATH",
)
@click.option(
    "--currency",
    default="USD",
    show_default=True,
    envvar="BILLABLE_CURRENCY",
    help="Preferred currency that totals are reported in",
)
@click.option(
    "--rates-file",
    type=click.Path(exists=True, dir_okay=False),
    envvar="BILLABLE_RATES_FILE",
    help="JSON file mapping currency codes to rates against a common base",
)
@click.option(
    "--rate",
    "rate_pairs",
    multiple=True,
    metavar="CODE=RATE",
    help="Exchange rate against the common base; repeatable, overrides --rates-file",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="BILLABLE_LOG_LEVEL",
    help="Log level for messages written to stderr",
)
@click.pass_context
def cli(
    ctx,
    db_path: str | None,
    currency: str,
    rates_file: str | None,
    rate_pairs: tuple[str, ...],
    log_level: str,
):
    """Billable - Time tracking and billing.

    Report hours against clients, close billing periods, and see revenue
    converted into your preferred currency.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    ctx.obj["currency"] = currency
    ctx.obj["rates_file"] = rates_file
    ctx.obj["rate_pairs"] = rate_pairs

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db


# Register all commands
client.register_commands(cli)
timeslot.register_commands(cli)
period.register_commands(cli)
report.register_commands(cli)
currencies.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
