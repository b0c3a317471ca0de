"""
Accessory and accessory category master routes.

Accessories point at their category by name, so renaming a category also
renames the category on its accessories.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update
from typing import List

from autodetail.database import get_db
from autodetail.models.accessory import AccessoryCategory, AccessoryMaster
from autodetail.schemas.accessory import (
    Accessory as AccessorySchema, AccessoryCreate, AccessoryUpdate,
    AccessoryCategory as AccessoryCategorySchema, AccessoryCategoryCreate, AccessoryCategoryUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/masters/accessories", tags=["masters"])
category_router = APIRouter(prefix="/masters/accessory-categories", tags=["masters"])


async def _get_category_or_404(db: AsyncSession, category_id: int) -> AccessoryCategory:
    category = await db.get(AccessoryCategory, category_id)
    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found"
        )
    return category


async def _ensure_unique_category(db: AsyncSession, name: str, exclude_id: int = None):
    query = select(AccessoryCategory).where(AccessoryCategory.name == name)
    if exclude_id is not None:
        query = query.where(AccessoryCategory.id != exclude_id)
    result = await db.execute(query)
    if result.scalar_one_or_none() is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Category already exists"
        )


async def _get_accessory_or_404(db: AsyncSession, accessory_id: int) -> AccessoryMaster:
    accessory = await db.get(AccessoryMaster, accessory_id)
    if not accessory:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Accessory not found"
        )
    return accessory


# Categories

@category_router.get("", response_model=List[AccessoryCategorySchema])
async def get_categories(db: AsyncSession = Depends(get_db)):
    """
    Get all accessory categories.
    """
    result = await db.execute(select(AccessoryCategory).order_by(AccessoryCategory.name))
    return result.scalars().all()


@category_router.post("", response_model=AccessoryCategorySchema, status_code=status.HTTP_201_CREATED)
async def create_category(
    category: AccessoryCategoryCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Create an accessory category.
    """
    name = category.name
    await _ensure_unique_category(db, name)

    db_category = AccessoryCategory(name=name)
    db.add(db_category)
    await db.commit()
    await db.refresh(db_category)

    return db_category


@category_router.get("/{category_id}/accessories", response_model=List[AccessorySchema])
async def get_category_accessories(category_id: int, db: AsyncSession = Depends(get_db)):
    """
    Get the accessories filed under a category.
    """
    category = await _get_category_or_404(db, category_id)
    result = await db.execute(
        select(AccessoryMaster)
        .where(AccessoryMaster.category == category.name)
        .order_by(AccessoryMaster.name)
    )
    return result.scalars().all()


@category_router.patch("/{category_id}", response_model=AccessoryCategorySchema)
async def update_category(
    category_id: int,
    category_update: AccessoryCategoryUpdate,
    db: AsyncSession = Depends(get_db)
):
    """
    Rename a category and the accessories filed under it.
    """
    db_category = await _get_category_or_404(db, category_id)
    name = category_update.name
    await _ensure_unique_category(db, name, exclude_id=category_id)

    old_name = db_category.name
    if name != old_name:
        await db.execute(
            update(AccessoryMaster)
            .where(AccessoryMaster.category == old_name)
            .values(category=name)
        )
        db_category.name = name
        logger.info("Renamed accessory category %r to %r", old_name, name)

    await db.commit()
    await db.refresh(db_category)

    return db_category


@category_router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: int, db: AsyncSession = Depends(get_db)):
    """
    Delete a category. Its accessories are kept.
    """
    db_category = await _get_category_or_404(db, category_id)

    await db.delete(db_category)
    await db.commit()

    return None


# Accessories

@router.get("", response_model=List[AccessorySchema])
async def get_accessories(
    category: str = None,
    db: AsyncSession = Depends(get_db)
):
    """
    Get all accessories, optionally only one category.
    """
    query = select(AccessoryMaster)

    if category:
        query = query.where(AccessoryMaster.category == category)

    result = await db.execute(query.order_by(AccessoryMaster.id))
    return result.scalars().all()


@router.post("", response_model=AccessorySchema, status_code=status.HTTP_201_CREATED)
async def create_accessory(
    accessory: AccessoryCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Create an accessory.
    """
    db_accessory = AccessoryMaster(**accessory.model_dump())
    db.add(db_accessory)
    await db.commit()
    await db.refresh(db_accessory)

    return db_accessory


@router.patch("/{accessory_id}", response_model=AccessorySchema)
async def update_accessory(
    accessory_id: int,
    accessory_update: AccessoryUpdate,
    db: AsyncSession = Depends(get_db)
):
    """
    Update an accessory.
    """
    db_accessory = await _get_accessory_or_404(db, accessory_id)

    update_data = accessory_update.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(db_accessory, field, value)

    await db.commit()
    await db.refresh(db_accessory)

    return db_accessory


@router.delete("/{accessory_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_accessory(accessory_id: int, db: AsyncSession = Depends(get_db)):
    """
    Delete an accessory.
    """
    db_accessory = await _get_accessory_or_404(db, accessory_id)

    await db.delete(db_accessory)
    await db.commit()

    return None
