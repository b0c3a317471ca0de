"""
PPF master routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List

from autodetail.database import get_db
from autodetail.models.ppf import PPFMaster
from autodetail.schemas.ppf import PPFMaster as PPFMasterSchema, PPFMasterCreate, PPFMasterUpdate

router = APIRouter(prefix="/masters/ppf", tags=["masters"])


async def _get_ppf_or_404(db: AsyncSession, ppf_id: int) -> PPFMaster:
    ppf = await db.get(PPFMaster, ppf_id)
    if not ppf:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="PPF not found"
        )
    return ppf


@router.get("", response_model=List[PPFMasterSchema])
async def get_ppfs(db: AsyncSession = Depends(get_db)):
    """
    Get all PPF products with their pricing matrix and rolls.
    """
    result = await db.execute(select(PPFMaster).order_by(PPFMaster.id))
    return result.scalars().all()


@router.get("/{ppf_id}", response_model=PPFMasterSchema)
async def get_ppf(ppf_id: int, db: AsyncSession = Depends(get_db)):
    """
    Get a specific PPF product by ID.
    """
    return await _get_ppf_or_404(db, ppf_id)


@router.post("", response_model=PPFMasterSchema, status_code=status.HTTP_201_CREATED)
async def create_ppf(
    ppf: PPFMasterCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Create a PPF product.
    """
    db_ppf = PPFMaster(**ppf.model_dump())
    db.add(db_ppf)
    await db.commit()
    await db.refresh(db_ppf)

    return db_ppf


@router.patch("/{ppf_id}", response_model=PPFMasterSchema)
async def update_ppf(
    ppf_id: int,
    ppf_update: PPFMasterUpdate,
    db: AsyncSession = Depends(get_db)
):
    """
    Update a PPF product. Sending rolls replaces the whole roll list.
    """
    db_ppf = await _get_ppf_or_404(db, ppf_id)

    update_data = ppf_update.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(db_ppf, field, value)

    await db.commit()
    await db.refresh(db_ppf)

    return db_ppf


@router.delete("/{ppf_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ppf(ppf_id: int, db: AsyncSession = Depends(get_db)):
    """
    Delete a PPF product.
    """
    db_ppf = await _get_ppf_or_404(db, ppf_id)

    await db.delete(db_ppf)
    await db.commit()

    return None
