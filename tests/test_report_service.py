"""Tests for the month report service."""

import pytest
from datetime import date
from decimal import Decimal

from billable.domain.errors import MissingRateError, UnknownCurrencyError
from billable.domain.money import Money
from billable.domain.report import group_slots_by_date


@pytest.fixture
def two_months(timeslot_service, sample_client, euro_client):
    """January and February time for a USD and a EUR client.

    January: 2h at $100 and 1h at 60 EUR.
    February: 1h at $100.
    """
    timeslot_service.report_time(sample_client.id, date(2024, 1, 10), "2")
    timeslot_service.report_time(euro_client.id, date(2024, 1, 10), "1")
    timeslot_service.report_time(sample_client.id, date(2024, 2, 5), "1")


def test_month_report(report_service, two_months, usd_eur_rates):
    report = report_service.month_report(date(2024, 2, 14), "USD", usd_eur_rates)

    assert report.month == date(2024, 2, 1)
    assert report.currency == "USD"
    assert report.current.total_revenue == Money(10000, "USD")
    assert report.current.total_hours == Decimal(1)
    assert report.current.billed_client_count == 1
    assert report.previous.total_revenue == Money(26667, "USD")
    assert report.previous.total_hours == Decimal(3)
    assert report.previous.billed_client_count == 2
    assert report.comparison.revenue_diff == Money(-16667, "USD")
    assert report.comparison.hours_diff == Decimal(-2)


def test_month_report_in_euros(report_service, two_months, usd_eur_rates):
    report = report_service.month_report(date(2024, 1, 1), "eur", usd_eur_rates)

    assert report.currency == "EUR"
    # $200 -> 180 EUR, plus 60 EUR
    assert report.current.total_revenue == Money(24000, "EUR")
    assert report.previous.total_revenue == Money(0, "EUR")


def test_month_report_groups_slots_by_date(report_service, two_months, usd_eur_rates):
    report = report_service.month_report(date(2024, 1, 1), "USD", usd_eur_rates)

    assert list(report.slots_by_date) == ["2024-01-10"]
    assert [s.client_name for s in report.slots_by_date["2024-01-10"]] == ["Acme", "Globex"]


def test_month_report_empty(report_service):
    report = report_service.month_report(date(2024, 5, 1), "USD", {})

    assert report.current.total_revenue == Money(0, "USD")
    assert report.current.billed_client_count == 0
    assert report.comparison.revenue_diff == Money(0, "USD")
    assert report.slots_by_date == {}


def test_month_report_missing_rate(report_service, two_months):
    with pytest.raises(MissingRateError):
        report_service.month_report(date(2024, 1, 1), "USD", {"USD": 1})


def test_month_report_unknown_currency(report_service):
    with pytest.raises(UnknownCurrencyError):
        report_service.month_report(date(2024, 1, 1), "XYZ", {})


def test_get_month_timeslots(report_service, two_months):
    slots = report_service.get_month_timeslots(date(2024, 1, 31))
    assert len(slots) == 2


def test_group_slots_by_date_empty():
    assert group_slots_by_date([]) == {}
