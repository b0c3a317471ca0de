"""
Pydantic schemas for JobCard.
"""
from pydantic import BaseModel, EmailStr, ConfigDict, Field, field_validator
from datetime import datetime
from typing import List, Optional
from autodetail.models.job_card import JobStatus


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class LineItemIn(BaseModel):
    """
    A selected service or accessory.

    Leave price out to have it looked up from the master by id (and the job
    card's vehicle type, for services).
    """
    id: Optional[int] = None
    name: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    quantity: int = Field(default=1, ge=1)


class PPFLineItemIn(LineItemIn):
    """A PPF application, optionally consuming film from a roll."""
    warranty_name: Optional[str] = None
    roll_name: Optional[str] = None
    roll_used: Optional[float] = Field(default=None, ge=0)


class LineItem(BaseModel):
    """Stored line-item snapshot."""
    id: Optional[int] = None
    name: str
    price: float
    quantity: int = 1


class PPFLineItem(LineItem):
    """Stored PPF line-item snapshot."""
    warranty_name: Optional[str] = None
    roll_name: Optional[str] = None
    roll_used: Optional[float] = None


class JobCardCreate(BaseModel):
    """Schema for creating a job card. Any client-side total is ignored."""
    customer_name: str = Field(min_length=1)
    phone_number: str = Field(min_length=10)
    email_address: Optional[EmailStr] = None
    referral_source: str = Field(min_length=1)
    referrer_name: Optional[str] = None
    referrer_phone: Optional[str] = None

    make: str = Field(min_length=1)
    model: str = Field(min_length=1)
    year: str = Field(min_length=4)
    license_plate: str = Field(min_length=1)
    vin: Optional[str] = None
    vehicle_type: Optional[str] = None

    services: List[LineItemIn] = []
    ppfs: List[PPFLineItemIn] = []
    accessories: List[LineItemIn] = []
    labor_charge: float = Field(default=0, ge=0)
    discount: float = Field(default=0, ge=0)
    gst: Optional[float] = Field(default=None, ge=0)
    business: Optional[str] = None

    service_notes: Optional[str] = None
    status: JobStatus = JobStatus.PENDING
    technician: Optional[str] = None

    @field_validator("email_address", mode="before")
    @classmethod
    def blank_email_is_none(cls, value):
        return _blank_to_none(value)


class JobCardUpdate(BaseModel):
    """Schema for updating a job card."""
    customer_name: Optional[str] = Field(default=None, min_length=1)
    phone_number: Optional[str] = Field(default=None, min_length=10)
    email_address: Optional[EmailStr] = None
    referral_source: Optional[str] = Field(default=None, min_length=1)
    referrer_name: Optional[str] = None
    referrer_phone: Optional[str] = None

    make: Optional[str] = Field(default=None, min_length=1)
    model: Optional[str] = Field(default=None, min_length=1)
    year: Optional[str] = Field(default=None, min_length=4)
    license_plate: Optional[str] = Field(default=None, min_length=1)
    vin: Optional[str] = None
    vehicle_type: Optional[str] = None

    services: Optional[List[LineItemIn]] = None
    ppfs: Optional[List[PPFLineItemIn]] = None
    accessories: Optional[List[LineItemIn]] = None
    labor_charge: Optional[float] = Field(default=None, ge=0)
    discount: Optional[float] = Field(default=None, ge=0)
    gst: Optional[float] = Field(default=None, ge=0)
    business: Optional[str] = None

    service_notes: Optional[str] = None
    status: Optional[JobStatus] = None
    technician: Optional[str] = None

    @field_validator("email_address", mode="before")
    @classmethod
    def blank_email_is_none(cls, value):
        return _blank_to_none(value)


class JobCard(BaseModel):
    """Schema for job card responses."""
    id: int
    job_no: str
    customer_name: str
    phone_number: str
    email_address: Optional[str] = None
    referral_source: str
    referrer_name: Optional[str] = None
    referrer_phone: Optional[str] = None

    make: str
    model: str
    year: str
    license_plate: str
    vin: Optional[str] = None
    vehicle_type: Optional[str] = None

    services: List[LineItem] = []
    ppfs: List[PPFLineItem] = []
    accessories: List[LineItem] = []
    labor_charge: float
    discount: float
    gst: float
    estimated_cost: float
    business: str

    service_notes: Optional[str] = None
    status: JobStatus
    technician: Optional[str] = None
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PriceQuoteRequest(BaseModel):
    """Line items and charges to price without saving a job card."""
    vehicle_type: Optional[str] = None
    services: List[LineItemIn] = []
    ppfs: List[PPFLineItemIn] = []
    accessories: List[LineItemIn] = []
    labor_charge: float = Field(default=0, ge=0)
    discount: float = Field(default=0, ge=0)
    gst: Optional[float] = Field(default=None, ge=0)


class PriceQuote(BaseModel):
    """Computed totals."""
    subtotal: float
    discount: float
    after_discount: float
    tax: float
    total: float
