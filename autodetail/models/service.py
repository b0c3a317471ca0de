"""
Service master model.
"""
from sqlalchemy import Column, Integer, String, DateTime, JSON
from sqlalchemy.sql import func
from autodetail.database import Base


class ServiceMaster(Base):
    """Detailing service with a flat price per vehicle type."""

    __tablename__ = "service_masters"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    # [{"vehicle_type": "SUV", "price": 1500.0}, ...]
    pricing_by_vehicle_type = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
