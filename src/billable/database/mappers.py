"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, making it easy to change when
the database schema changes.
"""

from billable.domain import entities as domain
from billable.database.models import (
    Client as ORMClient,
    Period as ORMPeriod,
    Timeslot as ORMTimeslot,
)


def client_to_domain(orm_client: ORMClient) -> domain.Client:
    """Convert SQLAlchemy Client model to domain Client entity."""
    return domain.Client(
        id=orm_client.id,
        name=orm_client.name,
        default_charge=orm_client.default_charge,
        currency=orm_client.currency,
        billing_period=domain.BillingPeriod(orm_client.billing_period),
        created_at=orm_client.created_at,
    )


def period_to_domain(orm_period: ORMPeriod) -> domain.Period:
    """Convert SQLAlchemy Period model to domain Period entity."""
    return domain.Period(
        id=orm_period.id,
        client_id=orm_period.client_id,
        status=domain.PeriodStatus(orm_period.status),
        start_date=orm_period.start_date,
        end_date=orm_period.end_date,
        closed_at=orm_period.closed_at,
    )


def timeslot_to_domain(orm_timeslot: ORMTimeslot) -> domain.Timeslot:
    """Convert SQLAlchemy Timeslot model to domain Timeslot entity."""
    client_name = orm_timeslot.client.name if orm_timeslot.client is not None else None
    return domain.Timeslot(
        id=orm_timeslot.id,
        client_id=orm_timeslot.client_id,
        period_id=orm_timeslot.period_id,
        date=orm_timeslot.date,
        duration=orm_timeslot.duration,
        charge_rate=orm_timeslot.charge_rate,
        currency=orm_timeslot.currency,
        description=orm_timeslot.description,
        client_name=client_name,
    )
