"""Shared pytest fixtures for billable tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from billable.database.factories import create_sqlite_database
from billable.domain.client import ClientService
from billable.domain.entities import BillingPeriod
from billable.domain.period import PeriodService
from billable.domain.report import ReportService
from billable.domain.timeslot import TimeslotService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def client_service(temp_db):
    """Create a ClientService with a temporary database."""
    return ClientService(temp_db)


@pytest.fixture
def timeslot_service(temp_db):
    """Create a TimeslotService with a temporary database."""
    return TimeslotService(temp_db)


@pytest.fixture
def period_service(temp_db):
    """Create a PeriodService with a temporary database."""
    return PeriodService(temp_db)


@pytest.fixture
def report_service(temp_db):
    """Create a ReportService with a temporary database."""
    return ReportService(temp_db)


@pytest.fixture
def sample_client(client_service):
    """Create a USD client billed monthly from January 2024."""
    client_id = client_service.create_client(
        name="Acme",
        default_charge=Decimal("100"),
        currency="USD",
        billing_period=BillingPeriod.MONTHLY,
        start_date=date(2024, 1, 1),
    )
    return client_service.get_client(client_id)


@pytest.fixture
def euro_client(client_service):
    """Create a EUR client billed monthly from January 2024."""
    client_id = client_service.create_client(
        name="Globex",
        default_charge=Decimal("60"),
        currency="EUR",
        start_date=date(2024, 1, 1),
    )
    return client_service.get_client(client_id)


@pytest.fixture
def usd_eur_rates():
    """Rates against a USD base."""
    return {"USD": Decimal("1.0"), "EUR": Decimal("0.9")}


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
