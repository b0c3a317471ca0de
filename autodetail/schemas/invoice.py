"""
Pydantic schemas for invoices. Invoices are built from completed job cards.
"""
from pydantic import BaseModel
from datetime import datetime
from typing import List, Optional


class InvoiceItem(BaseModel):
    name: str
    price: float


class Invoice(BaseModel):
    """Schema for invoice responses."""
    invoice_no: str
    job_card_id: int
    job_no: str
    business: str
    customer_name: str
    phone_number: str
    vehicle_info: str
    items: List[InvoiceItem]
    labor_charge: float
    subtotal: float
    discount: float
    taxable_amount: float
    gst: float
    gst_amount: float
    total: float
    created_at: Optional[datetime] = None
