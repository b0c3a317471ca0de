"""
Vehicle type master routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List

from autodetail.database import get_db
from autodetail.models.vehicle_type import VehicleType
from autodetail.schemas.vehicle_type import (
    VehicleType as VehicleTypeSchema, VehicleTypeCreate, VehicleTypeUpdate,
)

router = APIRouter(prefix="/masters/vehicle-types", tags=["masters"])


async def _ensure_unique_name(db: AsyncSession, name: str, exclude_id: int = None):
    query = select(VehicleType).where(VehicleType.name == name)
    if exclude_id is not None:
        query = query.where(VehicleType.id != exclude_id)
    result = await db.execute(query)
    if result.scalar_one_or_none() is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Vehicle type already exists"
        )


@router.get("", response_model=List[VehicleTypeSchema])
async def get_vehicle_types(db: AsyncSession = Depends(get_db)):
    """
    Get all vehicle types.
    """
    result = await db.execute(select(VehicleType).order_by(VehicleType.id))
    return result.scalars().all()


@router.post("", response_model=VehicleTypeSchema, status_code=status.HTTP_201_CREATED)
async def create_vehicle_type(
    vehicle_type: VehicleTypeCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Create a vehicle type.
    """
    name = vehicle_type.name
    await _ensure_unique_name(db, name)

    db_vehicle_type = VehicleType(name=name)
    db.add(db_vehicle_type)
    await db.commit()
    await db.refresh(db_vehicle_type)

    return db_vehicle_type


@router.patch("/{vehicle_type_id}", response_model=VehicleTypeSchema)
async def update_vehicle_type(
    vehicle_type_id: int,
    vehicle_type_update: VehicleTypeUpdate,
    db: AsyncSession = Depends(get_db)
):
    """
    Rename a vehicle type. Existing price rows keep the old name.
    """
    db_vehicle_type = await db.get(VehicleType, vehicle_type_id)
    if not db_vehicle_type:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Vehicle type not found"
        )

    name = vehicle_type_update.name
    await _ensure_unique_name(db, name, exclude_id=vehicle_type_id)
    db_vehicle_type.name = name

    await db.commit()
    await db.refresh(db_vehicle_type)

    return db_vehicle_type


@router.delete("/{vehicle_type_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vehicle_type(
    vehicle_type_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    Delete a vehicle type.
    """
    db_vehicle_type = await db.get(VehicleType, vehicle_type_id)
    if not db_vehicle_type:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Vehicle type not found"
        )

    await db.delete(db_vehicle_type)
    await db.commit()

    return None
