"""Tests for database mappers."""

import pytest
from datetime import datetime, date, UTC

from billable.database.models import (
    Client as ORMClient,
    Period as ORMPeriod,
    Timeslot as ORMTimeslot,
)
from billable.database.mappers import (
    client_to_domain,
    period_to_domain,
    timeslot_to_domain,
)
from billable.domain.entities import (
    BillingPeriod,
    Client,
    Period,
    PeriodStatus,
    Timeslot,
)


class TestClientMapper:
    """Tests for Client mapper."""

    def test_client_to_domain(self):
        """Test converting ORM Client to domain Client."""
        orm_client = ORMClient(
            id=1,
            name="Acme",
            default_charge=5000,
            currency="USD",
            billing_period="biweekly",
            created_at=datetime.now(UTC),
        )
        domain_client = client_to_domain(orm_client)

        assert isinstance(domain_client, Client)
        assert domain_client.id == 1
        assert domain_client.name == "Acme"
        assert domain_client.default_charge == 5000
        assert domain_client.currency == "USD"
        assert domain_client.billing_period == BillingPeriod.BIWEEKLY
        assert domain_client.created_at == orm_client.created_at


class TestPeriodMapper:
    """Tests for Period mapper."""

    def test_period_to_domain(self):
        """Test converting ORM Period to domain Period."""
        closed_at = datetime.now(UTC)
        orm_period = ORMPeriod(
            id=3,
            client_id=1,
            status="closed",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 31),
            closed_at=closed_at,
        )
        domain_period = period_to_domain(orm_period)

        assert isinstance(domain_period, Period)
        assert domain_period.status == PeriodStatus.CLOSED
        assert domain_period.start_date == date(2024, 1, 1)
        assert domain_period.end_date == date(2024, 1, 31)
        assert domain_period.closed_at == closed_at


class TestTimeslotMapper:
    """Tests for Timeslot mapper."""

    def test_timeslot_to_domain(self):
        """Test converting ORM Timeslot with its client to domain Timeslot."""
        orm_client = ORMClient(
            id=1,
            name="Acme",
            default_charge=5000,
            currency="USD",
            billing_period="monthly",
            created_at=datetime.now(UTC),
        )
        orm_timeslot = ORMTimeslot(
            id=7,
            client_id=1,
            period_id=2,
            date=date(2024, 1, 15),
            duration="2.5",
            charge_rate=6000,
            currency="EUR",
            description="Design review",
            client=orm_client,
        )
        domain_timeslot = timeslot_to_domain(orm_timeslot)

        assert isinstance(domain_timeslot, Timeslot)
        assert domain_timeslot.id == 7
        assert domain_timeslot.period_id == 2
        assert domain_timeslot.duration == "2.5"
        assert domain_timeslot.charge_rate == 6000
        assert domain_timeslot.currency == "EUR"
        assert domain_timeslot.description == "Design review"
        assert domain_timeslot.client_name == "Acme"

    def test_timeslot_to_domain_without_client(self):
        """Test converting ORM Timeslot with no loaded client."""
        orm_timeslot = ORMTimeslot(
            id=7,
            client_id=1,
            period_id=2,
            date=date(2024, 1, 15),
            duration="1",
            charge_rate=5000,
            currency="USD",
        )
        domain_timeslot = timeslot_to_domain(orm_timeslot)

        assert domain_timeslot.client_name is None
        assert domain_timeslot.description is None
