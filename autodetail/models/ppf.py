"""
PPF (paint protection film) master model.
"""
from sqlalchemy import Column, Integer, String, DateTime, JSON
from sqlalchemy.sql import func
from autodetail.database import Base


class PPFMaster(Base):
    """PPF product priced by vehicle type and warranty option, with stock rolls."""

    __tablename__ = "ppf_masters"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    # [{"vehicle_type": "SUV", "options": [{"warranty_name": "5 Years", "price": 60000.0}]}]
    pricing_by_vehicle_type = Column(JSON, nullable=False, default=list)
    # [{"name": "Roll A", "stock": 150.0}]
    rolls = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
