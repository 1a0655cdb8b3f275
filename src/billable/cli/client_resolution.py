"""CLI helpers for client resolution and reporting options."""

from __future__ import annotations

from decimal import Decimal

import click
from billable.cli.error_handling import handle_domain_error
from billable.domain.client import ClientService
from billable.utils.client_resolver import resolve_client
from billable.utils.rates import build_rates


def resolve_client_or_exit(
    ctx: click.Context, client_service: ClientService, client: str | int
) -> int:
    """Resolve client name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_client(client_service, client)
    except ValueError as exc:
        handle_domain_error(ctx, exc)


def rates_or_exit(ctx: click.Context) -> dict[str, Decimal]:
    """Build the rate table from the global --rates-file and --rate options."""
    try:
        return build_rates(ctx.obj.get("rates_file"), ctx.obj.get("rate_pairs", ()))
    except (ValueError, OSError) as exc:
        handle_domain_error(ctx, exc)
