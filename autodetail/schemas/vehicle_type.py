"""
Pydantic schemas for VehicleType.
"""
from pydantic import BaseModel, ConfigDict, Field


class VehicleTypeCreate(BaseModel):
    """Schema for creating a vehicle type."""
    name: str = Field(min_length=1)

    model_config = ConfigDict(str_strip_whitespace=True)


class VehicleTypeUpdate(VehicleTypeCreate):
    """Schema for renaming a vehicle type."""
    pass


class VehicleType(BaseModel):
    """Schema for vehicle type responses."""
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
