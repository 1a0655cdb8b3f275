"""Month report domain service."""

from collections import defaultdict
from datetime import date

from billable.database.base import Database
from billable.domain.aggregation import compare_aggregates, compute_period_aggregate
from billable.domain.calendar import month_bounds, previous_month
from billable.domain.conversion import ExchangeRates
from billable.domain.currency import parse_currency_code
from billable.domain.entities import MonthReport, Timeslot


class ReportService:
    """Service for building the month overview."""

    def __init__(self, db: Database):
        """Initialize report service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_month_timeslots(self, month: date) -> list[Timeslot]:
        """All timeslots dated within the month containing ``month``."""
        start, end = month_bounds(month)
        return self.db.list_timeslots(start_date=start, end_date=end)

    def month_report(
        self, month: date, currency: str, rates: ExchangeRates
    ) -> MonthReport:
        """Build revenue, hours and client totals for a month and the one before.

        Args:
            month: Any day in the reported month
            currency: Currency to report revenue in
            rates: One rate snapshot used for both months

        Returns:
            MonthReport with both aggregates, their difference and the
            month's slots grouped by ISO date
        """
        currency = parse_currency_code(currency)
        month_start, _ = month_bounds(month)
        month_slots = self.get_month_timeslots(month_start)
        last_month_slots = self.get_month_timeslots(previous_month(month_start))

        current = compute_period_aggregate(month_slots, currency, rates)
        previous = compute_period_aggregate(last_month_slots, currency, rates)

        return MonthReport(
            month=month_start,
            currency=currency,
            current=current,
            previous=previous,
            comparison=compare_aggregates(current, previous),
            slots_by_date=group_slots_by_date(month_slots),
        )


def group_slots_by_date(slots: list[Timeslot]) -> dict[str, tuple[Timeslot, ...]]:
    """Group slots by ``date.isoformat()`` keeping their order."""
    grouped: dict[str, list[Timeslot]] = defaultdict(list)
    for slot in slots:
        grouped[slot.date.isoformat()].append(slot)
    return {key: tuple(value) for key, value in grouped.items()}
