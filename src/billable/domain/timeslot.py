"""Timeslot domain service."""

import logging
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Literal, Optional

from billable.database.base import Database
from billable.domain.calendar import month_bounds
from billable.domain.duration import parse_duration
from billable.domain.entities import Client as ClientEntity, Timeslot as TimeslotEntity
from billable.domain.errors import (
    NotFoundError,
    ValidationError,
    client_not_found,
    no_open_period,
    timeslot_not_found,
)
from billable.domain.money import Money, Number, to_minor_units

logger = logging.getLogger(__name__)

_DURATION_QUANTUM = Decimal("0.01")


def normalize_duration(duration: Number) -> str:
    """Parse a duration and return the string stored for it ("2:30" -> "2.5")."""
    hours = parse_duration(duration).quantize(_DURATION_QUANTUM, rounding=ROUND_HALF_UP)
    if hours == 0:
        return "0"
    return format(hours.normalize(), "f")


class TimeslotService:
    """Service for reporting time."""

    def __init__(self, db: Database):
        """Initialize timeslot service.

        Args:
            db: Database instance
        """
        self.db = db

    def report_time(
        self,
        client_id: int,
        date: date,
        duration: Number,
        charge_rate: Optional[Number] = None,
        currency: Optional[str] = None,
        description: Optional[str] = None,
    ) -> int:
        """Report time worked for a client in its open billing period.

        Args:
            client_id: Client ID
            date: Day the work was done
            duration: Hours worked ("2.5" or "2:30")
            charge_rate: Hourly rate in major units; defaults to the client's
            currency: Currency of the rate; defaults to the client's
            description: Optional description

        Returns:
            Timeslot ID

        Raises:
            NotFoundError: If the client does not exist or has no open period
            InvalidAmountError: If the duration or charge rate is malformed
            UnknownCurrencyError: If the currency is not registered
        """
        client = self.db.get_client(client_id)
        if client is None:
            raise NotFoundError(client_not_found(client_id))

        stored_duration = normalize_duration(duration)
        rate = self._charge_rate(client, charge_rate, currency)

        period = self.db.get_open_period(client_id)
        if period is None:
            raise NotFoundError(no_open_period(client_id))

        logger.debug(f"Inserting timeslot for period {period.id}")
        timeslot_id = self.db.create_timeslot(
            client_id=client_id,
            period_id=period.id,
            date=date,
            duration=stored_duration,
            charge_rate=rate.amount,
            currency=rate.currency,
            description=description,
        )
        logger.info(
            f"Reported {stored_duration} hours for client {client_id} on {date} "
            f"(timeslot {timeslot_id})"
        )
        return timeslot_id

    def _charge_rate(
        self,
        client: ClientEntity,
        charge_rate: Optional[Number],
        currency: Optional[str],
    ) -> Money:
        if charge_rate is None and currency is None:
            return client.default_charge_money
        if charge_rate is None:
            charge_rate = client.default_charge_money.to_decimal()
        rate = to_minor_units(charge_rate, currency or client.currency)
        if rate.is_negative():
            raise ValidationError("Charge rate cannot be negative")
        return rate

    def get_timeslot(self, timeslot_id: int) -> Optional[TimeslotEntity]:
        """Get timeslot by ID."""
        return self.db.get_timeslot(timeslot_id)

    def require_timeslot(self, timeslot_id: int) -> TimeslotEntity:
        """Get timeslot by ID or raise NotFoundError."""
        timeslot = self.db.get_timeslot(timeslot_id)
        if timeslot is None:
            raise NotFoundError(timeslot_not_found(timeslot_id))
        return timeslot

    def update_timeslot(
        self,
        timeslot_id: int,
        duration: Optional[Number] = None,
        charge_rate: Optional[Number] = None,
        currency: Optional[str] = None,
    ) -> None:
        """Update the duration, charge rate or currency of a timeslot.

        Omitted values keep their stored value; a new currency without a new
        rate re-reads the stored rate in the new currency's major units.
        """
        timeslot = self.require_timeslot(timeslot_id)

        stored_duration = (
            normalize_duration(duration) if duration is not None else timeslot.duration
        )
        if charge_rate is None:
            charge_rate = Money(timeslot.charge_rate, timeslot.currency).to_decimal()
        rate = to_minor_units(charge_rate, currency or timeslot.currency)
        if rate.is_negative():
            raise ValidationError("Charge rate cannot be negative")

        self.db.update_timeslot(
            timeslot_id,
            duration=stored_duration,
            charge_rate=rate.amount,
            currency=rate.currency,
        )
        logger.info(f"Updated timeslot {timeslot_id}")

    def delete_timeslot(self, timeslot_id: int) -> None:
        """Delete a timeslot."""
        self.require_timeslot(timeslot_id)
        self.db.delete_timeslot(timeslot_id)
        logger.info(f"Deleted timeslot {timeslot_id}")

    def list_timeslots(
        self,
        day: date,
        mode: Literal["exact", "month"] = "exact",
        client_id: Optional[int] = None,
    ) -> list[TimeslotEntity]:
        """List timeslots on a day, or in the month containing it."""
        if mode == "exact":
            start, end = day, day
        elif mode == "month":
            start, end = month_bounds(day)
        else:
            raise ValidationError(f"Unknown timeslot listing mode '{mode}'")
        return self.db.list_timeslots(start_date=start, end_date=end, client_id=client_id)
