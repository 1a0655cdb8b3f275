"""Client domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from billable.database.base import Database
from billable.domain.aggregation import sum_period_totals
from billable.domain.calendar import billing_period_end
from billable.domain.conversion import ExchangeRates
from billable.domain.currency import parse_currency_code
from billable.domain.entities import (
    BillingPeriod,
    Client as ClientEntity,
    ClientSummary,
    PeriodTotal,
)
from billable.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    client_not_found,
    duplicate_client_name,
)
from billable.domain.money import to_minor_units

logger = logging.getLogger(__name__)


class ClientService:
    """Service for managing clients."""

    def __init__(self, db: Database):
        """Initialize client service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_client(
        self,
        name: str,
        default_charge: Decimal,
        currency: str = "USD",
        billing_period: BillingPeriod = BillingPeriod.MONTHLY,
        start_date: Optional[date] = None,
    ) -> int:
        """Create a new client and open its first billing period.

        Args:
            name: Client name
            default_charge: Hourly rate in major units (e.g. Decimal("50.00"))
            currency: Currency code of the hourly rate
            billing_period: How often the client is invoiced
            start_date: Start of the first period (defaults to today)

        Returns:
            Client ID

        Raises:
            ValidationError: If the name is blank or the charge is invalid
            ConflictError: If a client with the same name exists
            UnknownCurrencyError: If the currency is not registered
        """
        name = name.strip()
        if not name:
            raise ValidationError("Client name cannot be empty")
        if self.db.get_client_by_name(name) is not None:
            raise ConflictError(duplicate_client_name(name))

        charge = to_minor_units(default_charge, currency)
        if charge.is_negative():
            raise ValidationError("Default charge cannot be negative")
        billing_period = BillingPeriod(billing_period)

        client_id = self.db.create_client(
            name=name,
            default_charge=charge.amount,
            currency=charge.currency,
            billing_period=billing_period,
        )

        period_start = start_date or date.today()
        self.db.create_period(
            client_id=client_id,
            start_date=period_start,
            end_date=billing_period_end(period_start, billing_period),
        )
        logger.info(f"Created client '{name}' (ID: {client_id}) billed {billing_period.value}")
        return client_id

    def get_client(self, client_id: int) -> Optional[ClientEntity]:
        """Get client by ID.

        Args:
            client_id: Client ID

        Returns:
            Client entity or None if not found
        """
        return self.db.get_client(client_id)

    def require_client(self, client_id: int) -> ClientEntity:
        """Get client by ID or raise NotFoundError."""
        client = self.db.get_client(client_id)
        if client is None:
            raise NotFoundError(client_not_found(client_id))
        return client

    def list_clients(self) -> list[ClientEntity]:
        """List all clients."""
        return self.db.list_clients()

    def update_client(
        self,
        client_id: int,
        name: Optional[str] = None,
        default_charge: Optional[Decimal] = None,
        currency: Optional[str] = None,
    ) -> None:
        """Update a client's name, default charge or currency.

        A new currency without a new charge re-reads the stored charge in the
        new currency's major units, so "50.00 USD" becomes "50.00 EUR".

        Raises:
            NotFoundError: If the client does not exist
            ConflictError: If the new name is taken by another client
        """
        client = self.require_client(client_id)

        if name is not None:
            name = name.strip()
            if not name:
                raise ValidationError("Client name cannot be empty")
            existing = self.db.get_client_by_name(name)
            if existing is not None and existing.id != client_id:
                raise ConflictError(duplicate_client_name(name))

        charge_amount = None
        new_currency = None
        if currency is not None:
            new_currency = parse_currency_code(currency)
        if default_charge is not None or new_currency is not None:
            major = (
                default_charge
                if default_charge is not None
                else client.default_charge_money.to_decimal()
            )
            charge = to_minor_units(major, new_currency or client.currency)
            if charge.is_negative():
                raise ValidationError("Default charge cannot be negative")
            charge_amount = charge.amount

        self.db.update_client(
            client_id,
            name=name,
            default_charge=charge_amount,
            currency=new_currency,
        )
        logger.info(f"Updated client {client_id}")

    def delete_client(self, client_id: int) -> None:
        """Delete a client together with its periods and timeslots."""
        self.require_client(client_id)
        self.db.delete_client(client_id)
        logger.info(f"Deleted client {client_id}")

    def summarize_client(
        self, client_id: int, currency: str, rates: ExchangeRates
    ) -> ClientSummary:
        """Total invoiced per billing period and overall, in ``currency``.

        Periods are ordered newest first.
        """
        client = self.require_client(client_id)
        periods = self.db.list_periods(client_id=client_id)
        totals, grand_total = sum_period_totals(
            [self.db.list_timeslots(period_id=period.id) for period in periods],
            currency,
            rates,
        )
        return ClientSummary(
            client=client,
            period_totals=tuple(
                PeriodTotal(period=period, total=total)
                for period, total in zip(periods, totals)
            ),
            total=grand_total,
        )
