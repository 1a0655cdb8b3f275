"""Billing period domain service."""

import logging
from datetime import date, datetime, UTC
from typing import Optional

from billable.database.base import Database
from billable.domain.entities import Period as PeriodEntity, PeriodStatus
from billable.domain.errors import (
    NotFoundError,
    ValidationError,
    client_not_found,
    period_not_found,
)

logger = logging.getLogger(__name__)


class PeriodService:
    """Service for opening and closing billing periods."""

    def __init__(self, db: Database):
        """Initialize period service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_period(self, period_id: int) -> Optional[PeriodEntity]:
        """Get period by ID."""
        return self.db.get_period(period_id)

    def list_periods(self, client_id: Optional[int] = None) -> list[PeriodEntity]:
        """List periods, newest first, optionally for one client."""
        return self.db.list_periods(client_id=client_id)

    def list_open_periods(self) -> list[PeriodEntity]:
        """List all open periods."""
        return self.db.list_periods(status=PeriodStatus.OPEN)

    def close_period(
        self,
        period_id: int,
        open_new_period: bool = False,
        period_start: Optional[date] = None,
        period_end: Optional[date] = None,
    ) -> Optional[int]:
        """Close an open period and optionally open the next one.

        Args:
            period_id: Period to close
            open_new_period: If True, open a new period for the same client
            period_start: Start of the new period (required with open_new_period)
            period_end: End of the new period (required with open_new_period)

        Returns:
            ID of the newly opened period, or None

        Raises:
            NotFoundError: If the period does not exist
            ValidationError: If the period is already closed or the new
                period dates are missing or reversed
        """
        period = self.db.get_period(period_id)
        if period is None:
            raise NotFoundError(period_not_found(period_id))
        if not period.is_open:
            raise ValidationError(f"Period {period_id} is already closed")

        if open_new_period:
            if period_start is None or period_end is None:
                raise ValidationError("Opening a new period requires a start and end date")
            if period_start > period_end:
                raise ValidationError(
                    f"Period start {period_start} is after period end {period_end}"
                )

        self.db.close_period(period_id, closed_at=datetime.now(UTC))
        logger.info(f"Closed period {period_id} for client {period.client_id}")

        if not open_new_period:
            return None

        new_period_id = self.db.create_period(
            client_id=period.client_id,
            start_date=period_start,
            end_date=period_end,
        )
        logger.info(
            f"Opened period {new_period_id} ({period_start} to {period_end}) "
            f"for client {period.client_id}"
        )
        return new_period_id

    def open_period(self, client_id: int, period_start: date, period_end: date) -> int:
        """Open a period for a client that has none open."""
        if self.db.get_client(client_id) is None:
            raise NotFoundError(client_not_found(client_id))
        if self.db.get_open_period(client_id) is not None:
            raise ValidationError(f"Client {client_id} already has an open period")
        if period_start > period_end:
            raise ValidationError(
                f"Period start {period_start} is after period end {period_end}"
            )
        period_id = self.db.create_period(
            client_id=client_id, start_date=period_start, end_date=period_end
        )
        logger.info(f"Opened period {period_id} for client {client_id}")
        return period_id
