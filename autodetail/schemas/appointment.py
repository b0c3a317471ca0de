"""
Pydantic schemas for Appointment.
"""
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional
from autodetail.models.appointment import AppointmentStatus


class AppointmentBase(BaseModel):
    """Base appointment schema with common fields."""
    customer_name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    vehicle_info: str = Field(min_length=1)
    service_type: str = Field(min_length=1)
    date: str = Field(min_length=1)
    time: str = Field(min_length=1)
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    cancel_reason: Optional[str] = None


class AppointmentCreate(AppointmentBase):
    """Schema for creating an appointment."""
    pass


class AppointmentUpdate(BaseModel):
    """Schema for updating an appointment."""
    customer_name: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = Field(default=None, min_length=1)
    vehicle_info: Optional[str] = Field(default=None, min_length=1)
    service_type: Optional[str] = Field(default=None, min_length=1)
    date: Optional[str] = Field(default=None, min_length=1)
    time: Optional[str] = Field(default=None, min_length=1)
    status: Optional[AppointmentStatus] = None
    cancel_reason: Optional[str] = None


class Appointment(AppointmentBase):
    """Schema for appointment responses."""
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
