"""
Vehicle type master.
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from autodetail.database import Base


class VehicleType(Base):
    """Vehicle type; its name is the key used in every pricing table."""

    __tablename__ = "vehicle_types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
