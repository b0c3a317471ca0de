"""
Pydantic schemas for the service master.
"""
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import List, Optional


class VehiclePrice(BaseModel):
    """Price of a service for one vehicle type."""
    vehicle_type: str
    price: float = Field(ge=0)


class ServiceMasterBase(BaseModel):
    """Base service schema with common fields."""
    name: str = Field(min_length=1)
    pricing_by_vehicle_type: List[VehiclePrice] = []


class ServiceMasterCreate(ServiceMasterBase):
    """Schema for creating a service."""
    pass


class ServiceMasterUpdate(BaseModel):
    """Schema for updating a service."""
    name: Optional[str] = Field(default=None, min_length=1)
    pricing_by_vehicle_type: Optional[List[VehiclePrice]] = None


class ServiceMaster(ServiceMasterBase):
    """Schema for service responses."""
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
