"""SQLAlchemy models for billable database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Client(Base):
    """Client model."""

    __tablename__ = "clients"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    # Hourly rate in minor units of currency
    default_charge = Column(Integer, nullable=False)
    currency = Column(String(3), nullable=False)
    billing_period = Column(String, default="monthly", nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    periods = relationship("Period", back_populates="client", cascade="all, delete-orphan")
    timeslots = relationship("Timeslot", back_populates="client", cascade="all, delete-orphan")


class Period(Base):
    """Billing period model."""

    __tablename__ = "periods"

    id = Column(Integer, primary_key=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False)
    status = Column(String, default="open", nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    closed_at = Column(DateTime, nullable=True)

    # Relationships
    client = relationship("Client", back_populates="periods")
    timeslots = relationship("Timeslot", back_populates="period")


class Timeslot(Base):
    """Timeslot model."""

    __tablename__ = "timeslots"

    id = Column(Integer, primary_key=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False)
    period_id = Column(Integer, ForeignKey("periods.id"), nullable=False)
    date = Column(Date, nullable=False)
    # Decimal hours kept as text so they read back exactly as written
    duration = Column(String, nullable=False)
    charge_rate = Column(Integer, nullable=False)
    currency = Column(String(3), nullable=False)
    description = Column(String, nullable=True)

    # Relationships
    client = relationship("Client", back_populates="timeslots")
    period = relationship("Period", back_populates="timeslots")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
