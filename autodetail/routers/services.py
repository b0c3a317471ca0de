"""
Service master routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List

from autodetail.database import get_db
from autodetail.models.service import ServiceMaster
from autodetail.schemas.service import (
    ServiceMaster as ServiceMasterSchema, ServiceMasterCreate, ServiceMasterUpdate,
)

router = APIRouter(prefix="/masters/services", tags=["masters"])


@router.get("", response_model=List[ServiceMasterSchema])
async def get_services(
    skip: int = 0,
    limit: int = 100,
    db: AsyncSession = Depends(get_db)
):
    """
    Get all services with pagination.
    """
    result = await db.execute(select(ServiceMaster).order_by(ServiceMaster.id).offset(skip).limit(limit))
    return result.scalars().all()


@router.get("/{service_id}", response_model=ServiceMasterSchema)
async def get_service(
    service_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    Get a specific service by ID.
    """
    service = await db.get(ServiceMaster, service_id)

    if not service:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Service not found"
        )

    return service


@router.post("", response_model=ServiceMasterSchema, status_code=status.HTTP_201_CREATED)
async def create_service(
    service: ServiceMasterCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Create a new service.
    """
    db_service = ServiceMaster(**service.model_dump())
    db.add(db_service)
    await db.commit()
    await db.refresh(db_service)

    return db_service


@router.patch("/{service_id}", response_model=ServiceMasterSchema)
async def update_service(
    service_id: int,
    service_update: ServiceMasterUpdate,
    db: AsyncSession = Depends(get_db)
):
    """
    Update a service. Job cards already priced keep their snapshot.
    """
    db_service = await db.get(ServiceMaster, service_id)

    if not db_service:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Service not found"
        )

    # Update only provided fields
    update_data = service_update.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(db_service, field, value)

    await db.commit()
    await db.refresh(db_service)

    return db_service


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service(
    service_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    Delete a service.
    """
    db_service = await db.get(ServiceMaster, service_id)

    if not db_service:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Service not found"
        )

    await db.delete(db_service)
    await db.commit()

    return None
