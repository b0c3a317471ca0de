"""
SQLAlchemy database models.
"""
from autodetail.models.user import User, UserSession
from autodetail.models.vehicle_type import VehicleType
from autodetail.models.service import ServiceMaster
from autodetail.models.ppf import PPFMaster
from autodetail.models.accessory import AccessoryCategory, AccessoryMaster
from autodetail.models.technician import Technician, TechnicianStatus
from autodetail.models.appointment import Appointment, AppointmentStatus
from autodetail.models.job_card import JobCard, JobStatus, JobNumberSequence
from autodetail.models.inquiry import Inquiry

__all__ = [
    "User", "UserSession", "VehicleType", "ServiceMaster", "PPFMaster",
    "AccessoryCategory", "AccessoryMaster", "Technician", "TechnicianStatus",
    "Appointment", "AppointmentStatus", "JobCard", "JobStatus", "JobNumberSequence", "Inquiry",
]
