"""Domain model entities for billable.

These are pure data classes representing business concepts, independent of
database schema. Monetary fields on persisted entities are integer minor
units plus a currency code; use the Money helpers to do arithmetic on them.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional

from billable.domain.money import Money


class BillingPeriod(str, Enum):
    """How often a client is invoiced."""

    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"


class PeriodStatus(str, Enum):
    """Lifecycle state of a billing period."""

    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class Client:
    """Client (customer) domain entity."""

    id: int
    name: str
    default_charge: int
    currency: str
    billing_period: BillingPeriod
    created_at: datetime

    @property
    def default_charge_money(self) -> Money:
        return Money(self.default_charge, self.currency)


@dataclass(frozen=True)
class Period:
    """Billing period domain entity."""

    id: int
    client_id: int
    status: PeriodStatus
    start_date: date
    end_date: date
    closed_at: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.status == PeriodStatus.OPEN


@dataclass(frozen=True)
class Timeslot:
    """A single billable entry.

    ``charge_rate`` is the hourly rate in minor units of ``currency`` and
    ``duration`` is a decimal string of hours, as stored.
    """

    id: int
    client_id: int
    period_id: int
    date: date
    duration: str
    charge_rate: int
    currency: str
    description: Optional[str] = None
    client_name: Optional[str] = None


@dataclass(frozen=True)
class TimeslotRecord:
    """Minimal read-only slot data the aggregation functions need."""

    client_id: int
    charge_rate: int
    currency: str
    duration: str


@dataclass(frozen=True)
class PeriodAggregate:
    """Totals derived from a set of timeslots."""

    total_hours: Decimal
    total_revenue: Money
    billed_client_count: int


@dataclass(frozen=True)
class PeriodComparison:
    """Difference between two aggregates (current minus previous)."""

    revenue_diff: Money
    hours_diff: Decimal


@dataclass(frozen=True)
class PeriodTotal:
    """Revenue of one billing period in the reporting currency."""

    period: Period
    total: Money


@dataclass(frozen=True)
class ClientSummary:
    """Per-period totals and grand total invoiced for a client."""

    client: Client
    period_totals: tuple[PeriodTotal, ...]
    total: Money


@dataclass(frozen=True)
class MonthReport:
    """Month overview compared with the previous month."""

    month: date
    currency: str
    current: PeriodAggregate
    previous: PeriodAggregate
    comparison: PeriodComparison
    slots_by_date: dict[str, tuple[Timeslot, ...]] = field(default_factory=dict)
