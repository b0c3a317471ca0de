"""
Pydantic schemas for the PPF master.
"""
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import List, Optional


class WarrantyOption(BaseModel):
    """One warranty tier and its price."""
    warranty_name: str
    price: float = Field(ge=0)


class PPFVehiclePricing(BaseModel):
    """Warranty options offered for one vehicle type."""
    vehicle_type: str
    options: List[WarrantyOption] = []


class PPFRoll(BaseModel):
    """A film roll in stock; stock is in square feet."""
    name: str
    stock: float = Field(ge=0)


class PPFMasterBase(BaseModel):
    """Base PPF schema with common fields."""
    name: str = Field(min_length=1)
    pricing_by_vehicle_type: List[PPFVehiclePricing] = []
    rolls: List[PPFRoll] = []


class PPFMasterCreate(PPFMasterBase):
    """Schema for creating a PPF product."""
    pass


class PPFMasterUpdate(BaseModel):
    """Schema for updating a PPF product."""
    name: Optional[str] = Field(default=None, min_length=1)
    pricing_by_vehicle_type: Optional[List[PPFVehiclePricing]] = None
    rolls: Optional[List[PPFRoll]] = None


class PPFMaster(PPFMasterBase):
    """Schema for PPF responses."""
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
