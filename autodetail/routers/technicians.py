"""
Technician routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List

from autodetail.database import get_db
from autodetail.models.technician import Technician, TechnicianStatus
from autodetail.schemas.technician import (
    Technician as TechnicianSchema, TechnicianCreate, TechnicianUpdate,
)

router = APIRouter(prefix="/technicians", tags=["technicians"])


@router.get("", response_model=List[TechnicianSchema])
async def get_technicians(
    status_filter: TechnicianStatus = None,
    db: AsyncSession = Depends(get_db)
):
    """
    Get all technicians with optional status filter.
    """
    query = select(Technician)

    if status_filter:
        query = query.where(Technician.status == status_filter)

    result = await db.execute(query.order_by(Technician.id))
    return result.scalars().all()


@router.post("", response_model=TechnicianSchema, status_code=status.HTTP_201_CREATED)
async def create_technician(
    technician: TechnicianCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Create a new technician.
    """
    db_technician = Technician(**technician.model_dump())
    db.add(db_technician)
    await db.commit()
    await db.refresh(db_technician)

    return db_technician


@router.patch("/{technician_id}", response_model=TechnicianSchema)
async def update_technician(
    technician_id: int,
    technician_update: TechnicianUpdate,
    db: AsyncSession = Depends(get_db)
):
    """
    Update a technician.
    """
    db_technician = await db.get(Technician, technician_id)

    if not db_technician:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Technician not found"
        )

    update_data = technician_update.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        if value is None and field != "phone":
            continue
        setattr(db_technician, field, value)

    await db.commit()
    await db.refresh(db_technician)

    return db_technician


@router.delete("/{technician_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_technician(
    technician_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    Delete a technician.
    """
    db_technician = await db.get(Technician, technician_id)

    if not db_technician:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Technician not found"
        )

    await db.delete(db_technician)
    await db.commit()

    return None
