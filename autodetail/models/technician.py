"""
Technician model for database.
"""
from sqlalchemy import Column, Integer, String, DateTime, Enum as SQLEnum
from sqlalchemy.sql import func
from autodetail.database import Base
import enum


class TechnicianStatus(str, enum.Enum):
    """Technician status enumeration."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class Technician(Base):
    """Technician database model."""

    __tablename__ = "technicians"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    specialty = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    status = Column(SQLEnum(TechnicianStatus), default=TechnicianStatus.ACTIVE, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
