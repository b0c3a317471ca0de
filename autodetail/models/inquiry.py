"""
Inquiry (pre-sale lead) model for database.
"""
from sqlalchemy import Column, Integer, String, Float, DateTime, JSON
from sqlalchemy.sql import func
from autodetail.database import Base


class Inquiry(Base):
    """Inquiry database model. Keeps our price next to the quoted customer price."""

    __tablename__ = "inquiries"

    id = Column(Integer, primary_key=True, index=True)
    inquiry_id = Column(String, unique=True, nullable=False, index=True)
    customer_name = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=False)
    email = Column(String, nullable=True)
    services = Column(JSON, nullable=False, default=list)
    accessories = Column(JSON, nullable=False, default=list)
    notes = Column(String, nullable=True)
    our_price = Column(Float, nullable=False, default=0)
    customer_price = Column(Float, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    @property
    def markup(self) -> float:
        return (self.customer_price or 0) - (self.our_price or 0)
