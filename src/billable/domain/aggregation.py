"""Summation of mixed-currency amounts and period aggregates."""

from decimal import Decimal
from typing import Iterable, Protocol, Sequence

from billable.domain.conversion import ExchangeRates, convert
from billable.domain.duration import parse_duration
from billable.domain.entities import PeriodAggregate, PeriodComparison
from billable.domain.money import Money, add, multiply_by_scalar, subtract, zero


class BillableSlot(Protocol):
    """Attributes of a timeslot used for billing."""

    client_id: int
    charge_rate: int
    currency: str
    duration: str


def sum_money(
    values: Iterable[Money], target_currency: str, rates: ExchangeRates
) -> Money:
    """Convert every amount into ``target_currency`` and add them up.

    Each amount is rounded to whole minor units when converted, so the total
    does not depend on the order of ``values``.
    """
    total = zero(target_currency)
    for value in values:
        total = add(total, convert(value, total.currency, rates))
    return total


def slot_amount(slot: BillableSlot) -> Money:
    """Billed amount of one slot: hourly charge rate times hours."""
    rate = Money(slot.charge_rate, slot.currency)
    return multiply_by_scalar(rate, parse_duration(slot.duration))


def slots_to_money(slots: Iterable[BillableSlot]) -> list[Money]:
    """Billed amount of each slot, in the slot's own currency."""
    return [slot_amount(slot) for slot in slots]


def compute_period_aggregate(
    slots: Sequence[BillableSlot], target_currency: str, rates: ExchangeRates
) -> PeriodAggregate:
    """Compute total hours, revenue and billed clients for a set of slots.

    Args:
        slots: Timeslots of one period or month (may be empty)
        target_currency: Currency to report revenue in
        rates: Rate snapshot used for every conversion in this pass

    Returns:
        PeriodAggregate; empty input gives zero hours, zero revenue and
        zero clients
    """
    total_hours = Decimal(0)
    billed_clients: set[int] = set()
    for slot in slots:
        hours = parse_duration(slot.duration)
        total_hours += hours
        if hours > 0:
            billed_clients.add(slot.client_id)

    return PeriodAggregate(
        total_hours=total_hours,
        total_revenue=sum_money(slots_to_money(slots), target_currency, rates),
        billed_client_count=len(billed_clients),
    )


def compare_aggregates(
    current: PeriodAggregate, previous: PeriodAggregate
) -> PeriodComparison:
    """Revenue and hour differences of ``current`` against ``previous``.

    Both aggregates must be reported in the same currency.
    """
    return PeriodComparison(
        revenue_diff=subtract(current.total_revenue, previous.total_revenue),
        hours_diff=current.total_hours - previous.total_hours,
    )


def sum_period_totals(
    periods_slots: Sequence[Sequence[BillableSlot]],
    target_currency: str,
    rates: ExchangeRates,
) -> tuple[list[Money], Money]:
    """Revenue of each period and the grand total across all of them."""
    period_totals = [
        sum_money(slots_to_money(slots), target_currency, rates)
        for slots in periods_slots
    ]
    return period_totals, sum_money(period_totals, target_currency, rates)
