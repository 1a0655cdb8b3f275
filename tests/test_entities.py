"""Tests for domain entities."""

import pytest
from datetime import datetime, date, UTC
from decimal import Decimal

from billable.domain.entities import (
    BillingPeriod,
    Client,
    MonthReport,
    Period,
    PeriodAggregate,
    PeriodComparison,
    PeriodStatus,
    Timeslot,
)
from billable.domain.money import Money


class TestClient:
    """Tests for Client entity."""

    def test_create_client(self):
        """Test creating a Client entity."""
        client = Client(
            id=1,
            name="Acme",
            default_charge=5000,
            currency="USD",
            billing_period=BillingPeriod.MONTHLY,
            created_at=datetime.now(UTC),
        )
        assert client.id == 1
        assert client.name == "Acme"
        assert client.default_charge == 5000
        assert client.billing_period == BillingPeriod.MONTHLY
        assert isinstance(client.created_at, datetime)

    def test_default_charge_money(self):
        """Test the default charge as a Money value."""
        client = Client(
            id=1,
            name="Acme",
            default_charge=5000,
            currency="EUR",
            billing_period=BillingPeriod.WEEKLY,
            created_at=datetime.now(UTC),
        )
        assert client.default_charge_money == Money(5000, "EUR")

    def test_client_immutability(self):
        """Test that Client entities are immutable."""
        client = Client(
            id=1,
            name="Acme",
            default_charge=5000,
            currency="USD",
            billing_period=BillingPeriod.MONTHLY,
            created_at=datetime.now(UTC),
        )
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            client.name = "New Name"


class TestPeriod:
    """Tests for Period entity."""

    def test_open_period(self):
        """Test an open period has no closing time."""
        period = Period(
            id=1,
            client_id=1,
            status=PeriodStatus.OPEN,
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 31),
        )
        assert period.is_open
        assert period.closed_at is None

    def test_closed_period(self):
        period = Period(
            id=1,
            client_id=1,
            status=PeriodStatus.CLOSED,
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 31),
            closed_at=datetime.now(UTC),
        )
        assert not period.is_open


class TestTimeslot:
    """Tests for Timeslot entity."""

    def test_create_timeslot(self):
        """Test creating a Timeslot with optional fields left out."""
        slot = Timeslot(
            id=1,
            client_id=1,
            period_id=1,
            date=date(2024, 1, 15),
            duration="2.5",
            charge_rate=5000,
            currency="USD",
        )
        assert slot.description is None
        assert slot.client_name is None
        assert slot.duration == "2.5"


def test_billing_period_values():
    assert [bp.value for bp in BillingPeriod] == ["weekly", "biweekly", "monthly"]
    assert BillingPeriod("weekly") is BillingPeriod.WEEKLY


def test_month_report_defaults_to_no_slots():
    aggregate = PeriodAggregate(
        total_hours=Decimal(0), total_revenue=Money(0, "USD"), billed_client_count=0
    )
    report = MonthReport(
        month=date(2024, 1, 1),
        currency="USD",
        current=aggregate,
        previous=aggregate,
        comparison=PeriodComparison(revenue_diff=Money(0, "USD"), hours_diff=Decimal(0)),
    )
    assert report.slots_by_date == {}
