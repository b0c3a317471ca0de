"""
Pydantic schemas for Inquiry.
"""
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import List, Optional


class InquiryService(BaseModel):
    """A service the customer asked about, with our price and the quoted price."""
    service_id: Optional[int] = None
    service_name: str
    vehicle_type: Optional[str] = None
    warranty_name: Optional[str] = None
    price: float = Field(default=0, ge=0)
    customer_price: float = Field(default=0, ge=0)


class InquiryAccessory(BaseModel):
    """An accessory the customer asked about."""
    accessory_id: Optional[int] = None
    accessory_name: str
    category: Optional[str] = None
    price: float = Field(default=0, ge=0)
    customer_price: float = Field(default=0, ge=0)


class InquiryCreate(BaseModel):
    """Schema for creating an inquiry. Price totals are computed server-side."""
    customer_name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    email: Optional[str] = None
    services: List[InquiryService] = []
    accessories: List[InquiryAccessory] = []
    notes: Optional[str] = None


class Inquiry(BaseModel):
    """Schema for inquiry responses."""
    id: int
    inquiry_id: str
    customer_name: str
    phone: str
    email: Optional[str] = None
    services: List[InquiryService] = []
    accessories: List[InquiryAccessory] = []
    notes: Optional[str] = None
    our_price: float
    customer_price: float
    markup: float
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
