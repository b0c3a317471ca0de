"""
Pydantic schemas for request/response validation.
"""
from autodetail.schemas.user import LoginRequest, User
from autodetail.schemas.vehicle_type import VehicleTypeCreate, VehicleTypeUpdate, VehicleType
from autodetail.schemas.service import (
    VehiclePrice, ServiceMasterCreate, ServiceMasterUpdate, ServiceMaster,
)
from autodetail.schemas.ppf import (
    WarrantyOption, PPFVehiclePricing, PPFRoll, PPFMasterCreate, PPFMasterUpdate, PPFMaster,
)
from autodetail.schemas.accessory import (
    AccessoryCategoryCreate, AccessoryCategoryUpdate, AccessoryCategory,
    AccessoryCreate, AccessoryUpdate, Accessory,
)
from autodetail.schemas.technician import TechnicianCreate, TechnicianUpdate, Technician
from autodetail.schemas.appointment import AppointmentCreate, AppointmentUpdate, Appointment
from autodetail.schemas.job_card import (
    LineItemIn, PPFLineItemIn, LineItem, PPFLineItem,
    JobCardCreate, JobCardUpdate, JobCard, PriceQuoteRequest, PriceQuote,
)
from autodetail.schemas.inquiry import InquiryService, InquiryAccessory, InquiryCreate, Inquiry
from autodetail.schemas.invoice import InvoiceItem, Invoice
from autodetail.schemas.dashboard import Stat, ChartPoint, DashboardData

__all__ = [
    "LoginRequest", "User",
    "VehicleTypeCreate", "VehicleTypeUpdate", "VehicleType",
    "VehiclePrice", "ServiceMasterCreate", "ServiceMasterUpdate", "ServiceMaster",
    "WarrantyOption", "PPFVehiclePricing", "PPFRoll", "PPFMasterCreate", "PPFMasterUpdate", "PPFMaster",
    "AccessoryCategoryCreate", "AccessoryCategoryUpdate", "AccessoryCategory",
    "AccessoryCreate", "AccessoryUpdate", "Accessory",
    "TechnicianCreate", "TechnicianUpdate", "Technician",
    "AppointmentCreate", "AppointmentUpdate", "Appointment",
    "LineItemIn", "PPFLineItemIn", "LineItem", "PPFLineItem",
    "JobCardCreate", "JobCardUpdate", "JobCard", "PriceQuoteRequest", "PriceQuote",
    "InquiryService", "InquiryAccessory", "InquiryCreate", "Inquiry",
    "InvoiceItem", "Invoice",
    "Stat", "ChartPoint", "DashboardData",
]
