"""
Pydantic schemas for Technician.
"""
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional
from autodetail.models.technician import TechnicianStatus


class TechnicianBase(BaseModel):
    """Base technician schema with common fields."""
    name: str = Field(min_length=1)
    specialty: str = Field(min_length=1)
    phone: Optional[str] = None
    status: TechnicianStatus = TechnicianStatus.ACTIVE


class TechnicianCreate(TechnicianBase):
    """Schema for creating a technician."""
    pass


class TechnicianUpdate(BaseModel):
    """Schema for updating a technician."""
    name: Optional[str] = Field(default=None, min_length=1)
    specialty: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = None
    status: Optional[TechnicianStatus] = None


class Technician(TechnicianBase):
    """Schema for technician responses."""
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
