"""Currency listing command."""

import click
from billable.domain.currency import list_currencies


@click.command("currencies")
def currencies():
    """List supported currencies and their minor units."""
    click.echo(f"{'Code':<6} {'Base':>4} {'Exp':>4}  Name")
    click.echo("-" * 50)
    for info in list_currencies():
        click.echo(f"{info.code:<6} {info.base:>4} {info.exponent:>4}  {info.name}")


def register_commands(cli):
    """Register currencies command with main CLI."""
    cli.add_command(currencies)
