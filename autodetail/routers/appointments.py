"""
Appointment routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List

from autodetail.auth import get_current_user
from autodetail.database import get_db
from autodetail.models.appointment import Appointment, AppointmentStatus
from autodetail.models.user import User
from autodetail.schemas.appointment import (
    Appointment as AppointmentSchema, AppointmentCreate, AppointmentUpdate,
)

router = APIRouter(prefix="/appointments", tags=["appointments"])


@router.get("", response_model=List[AppointmentSchema])
async def get_appointments(
    status_filter: AppointmentStatus = None,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get appointments ordered by date and time, with optional status filter.
    """
    query = select(Appointment)

    if status_filter:
        query = query.where(Appointment.status == status_filter)

    result = await db.execute(query.order_by(Appointment.date, Appointment.time))
    return result.scalars().all()


@router.post("", response_model=AppointmentSchema, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    appointment: AppointmentCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Book an appointment.
    """
    db_appointment = Appointment(**appointment.model_dump())
    db.add(db_appointment)
    await db.commit()
    await db.refresh(db_appointment)

    return db_appointment


@router.patch("/{appointment_id}", response_model=AppointmentSchema)
async def update_appointment(
    appointment_id: int,
    appointment_update: AppointmentUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Update an appointment. A cancel reason is only kept on cancelled appointments.
    """
    db_appointment = await db.get(Appointment, appointment_id)

    if not db_appointment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Appointment not found"
        )

    update_data = appointment_update.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        if value is None and field != "cancel_reason":
            continue
        setattr(db_appointment, field, value)

    if db_appointment.status != AppointmentStatus.CANCELLED:
        db_appointment.cancel_reason = None

    await db.commit()
    await db.refresh(db_appointment)

    return db_appointment


@router.delete("/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_appointment(
    appointment_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Delete an appointment.
    """
    db_appointment = await db.get(Appointment, appointment_id)

    if not db_appointment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Appointment not found"
        )

    await db.delete(db_appointment)
    await db.commit()

    return None
