"""
Pydantic schemas for accessories and accessory categories.
"""
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional


class AccessoryCategoryCreate(BaseModel):
    """Schema for creating a category."""
    name: str = Field(min_length=1)

    model_config = ConfigDict(str_strip_whitespace=True)


class AccessoryCategoryUpdate(AccessoryCategoryCreate):
    """Schema for renaming a category."""
    pass


class AccessoryCategory(BaseModel):
    """Schema for category responses."""
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class AccessoryBase(BaseModel):
    """Base accessory schema with common fields."""
    category: str = Field(min_length=1)
    name: str = Field(min_length=1)
    quantity: int = Field(default=0, ge=0)
    price: float = Field(ge=0)


class AccessoryCreate(AccessoryBase):
    """Schema for creating an accessory."""
    pass


class AccessoryUpdate(BaseModel):
    """Schema for updating an accessory."""
    category: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = Field(default=None, min_length=1)
    quantity: Optional[int] = Field(default=None, ge=0)
    price: Optional[float] = Field(default=None, ge=0)


class Accessory(AccessoryBase):
    """Schema for accessory responses."""
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
