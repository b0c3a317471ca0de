"""
Job card model for database.
"""
from sqlalchemy import Column, Integer, String, Float, DateTime, JSON, Enum as SQLEnum
from sqlalchemy.sql import func
from autodetail.database import Base
import enum


class JobStatus(str, enum.Enum):
    """Job card status enumeration."""
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class JobCard(Base):
    """
    Job card database model.

    Line items are stored as snapshots ({id, name, price, quantity}), so later
    edits to the masters never change a saved job card.
    """

    __tablename__ = "job_cards"

    id = Column(Integer, primary_key=True, index=True)
    job_no = Column(String, unique=True, nullable=False, index=True)

    # Customer
    customer_name = Column(String, nullable=False, index=True)
    phone_number = Column(String, nullable=False, index=True)
    email_address = Column(String, nullable=True)
    referral_source = Column(String, nullable=False)
    referrer_name = Column(String, nullable=True)
    referrer_phone = Column(String, nullable=True)

    # Vehicle
    make = Column(String, nullable=False)
    model = Column(String, nullable=False)
    year = Column(String, nullable=False)
    license_plate = Column(String, nullable=False)
    vin = Column(String, nullable=True)
    vehicle_type = Column(String, nullable=True)

    # Line items and billing
    services = Column(JSON, nullable=False, default=list)
    ppfs = Column(JSON, nullable=False, default=list)
    accessories = Column(JSON, nullable=False, default=list)
    labor_charge = Column(Float, nullable=False, default=0)
    discount = Column(Float, nullable=False, default=0)
    gst = Column(Float, nullable=False, default=18)
    estimated_cost = Column(Float, nullable=False, default=0)
    business = Column(String, nullable=False)

    service_notes = Column(String, nullable=True)
    status = Column(SQLEnum(JobStatus), default=JobStatus.PENDING, nullable=False)
    technician = Column(String, nullable=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class JobNumberSequence(Base):
    """Last job number handed out per year, so numbers are never reused."""

    __tablename__ = "job_number_sequences"

    year = Column(Integer, primary_key=True)
    last_seq = Column(Integer, nullable=False, default=0)
