"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date, datetime

# Import entities directly; the domain package only re-exports the pure core
from billable.domain.entities import (
    BillingPeriod,
    Client,
    Period,
    PeriodStatus,
    Timeslot,
)


class Database(ABC):
    """Abstract database interface for billable."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Client operations
    @abstractmethod
    def create_client(
        self,
        name: str,
        default_charge: int,
        currency: str,
        billing_period: BillingPeriod = BillingPeriod.MONTHLY,
    ) -> int:
        """Create a client. Returns client ID."""
        pass

    @abstractmethod
    def get_client(self, client_id: int) -> Optional[Client]:
        """Get client by ID."""
        pass

    @abstractmethod
    def get_client_by_name(self, name: str) -> Optional[Client]:
        """Get client by name."""
        pass

    @abstractmethod
    def list_clients(self) -> list[Client]:
        """List all clients ordered by name."""
        pass

    @abstractmethod
    def update_client(
        self,
        client_id: int,
        name: Optional[str] = None,
        default_charge: Optional[int] = None,
        currency: Optional[str] = None,
    ) -> None:
        """Update client fields; None leaves a field unchanged."""
        pass

    @abstractmethod
    def delete_client(self, client_id: int) -> None:
        """Delete a client with its periods and timeslots."""
        pass

    # Period operations
    @abstractmethod
    def create_period(self, client_id: int, start_date: date, end_date: date) -> int:
        """Create an open billing period. Returns period ID."""
        pass

    @abstractmethod
    def get_period(self, period_id: int) -> Optional[Period]:
        """Get period by ID."""
        pass

    @abstractmethod
    def get_open_period(self, client_id: int) -> Optional[Period]:
        """Get the open period of a client, if any."""
        pass

    @abstractmethod
    def list_periods(
        self,
        client_id: Optional[int] = None,
        status: Optional[PeriodStatus] = None,
    ) -> list[Period]:
        """List periods, newest start date first, optionally filtered."""
        pass

    @abstractmethod
    def close_period(self, period_id: int, closed_at: datetime) -> None:
        """Mark a period as closed."""
        pass

    # Timeslot operations
    @abstractmethod
    def create_timeslot(
        self,
        client_id: int,
        period_id: int,
        date: date,
        duration: str,
        charge_rate: int,
        currency: str,
        description: Optional[str] = None,
    ) -> int:
        """Create a timeslot. Returns timeslot ID."""
        pass

    @abstractmethod
    def get_timeslot(self, timeslot_id: int) -> Optional[Timeslot]:
        """Get timeslot by ID."""
        pass

    @abstractmethod
    def update_timeslot(
        self, timeslot_id: int, duration: str, charge_rate: int, currency: str
    ) -> None:
        """Update the billed fields of a timeslot."""
        pass

    @abstractmethod
    def delete_timeslot(self, timeslot_id: int) -> None:
        """Delete a timeslot."""
        pass

    @abstractmethod
    def list_timeslots(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        client_id: Optional[int] = None,
        period_id: Optional[int] = None,
    ) -> list[Timeslot]:
        """List timeslots with optional filters, ordered by date.

        Args:
            start_date: Optional inclusive start date filter
            end_date: Optional inclusive end date filter
            client_id: Optional client ID filter
            period_id: Optional period ID filter
        """
        pass
