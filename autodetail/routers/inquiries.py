"""
Inquiry (sales lead) routes.
"""
import time

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import or_, select
from typing import List

from autodetail.auth import get_current_user
from autodetail.database import get_db
from autodetail.models.inquiry import Inquiry
from autodetail.models.user import User
from autodetail.pricing import inquiry_totals
from autodetail.schemas.inquiry import Inquiry as InquirySchema, InquiryCreate

router = APIRouter(prefix="/inquiries", tags=["inquiries"])


async def next_inquiry_id(db: AsyncSession) -> str:
    """INQ-<epoch millis>, bumped by a millisecond on collision."""
    stamp = int(time.time() * 1000)
    while await db.scalar(select(Inquiry.id).where(Inquiry.inquiry_id == f"INQ-{stamp}")) is not None:
        stamp += 1
    return f"INQ-{stamp}"


@router.get("", response_model=List[InquirySchema])
async def get_inquiries(
    search: str = None,
    service: str = None,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get inquiries, newest first.

    search matches customer name (case-insensitive) or phone; service keeps
    inquiries that asked about a service with that exact name.
    """
    query = select(Inquiry)

    if search:
        query = query.where(or_(
            Inquiry.customer_name.ilike(f"%{search}%"),
            Inquiry.phone.contains(search),
        ))

    result = await db.execute(query.order_by(Inquiry.created_at.desc(), Inquiry.id.desc()))
    inquiries = result.scalars().all()

    if service:
        inquiries = [
            inquiry for inquiry in inquiries
            if any(line.get("service_name") == service for line in inquiry.services or [])
        ]
    return inquiries


@router.get("/{inquiry_id}", response_model=InquirySchema)
async def get_inquiry(
    inquiry_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get a specific inquiry by ID.
    """
    inquiry = await db.get(Inquiry, inquiry_id)

    if not inquiry:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Inquiry not found"
        )

    return inquiry


@router.post("", response_model=InquirySchema, status_code=status.HTTP_201_CREATED)
async def create_inquiry(
    inquiry: InquiryCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Record an inquiry. Our price and customer price are summed from the lines.
    """
    data = inquiry.model_dump()
    our_price, customer_price = inquiry_totals(data["services"], data["accessories"])

    db_inquiry = Inquiry(
        **data,
        inquiry_id=await next_inquiry_id(db),
        our_price=float(our_price),
        customer_price=float(customer_price),
    )
    db.add(db_inquiry)
    await db.commit()
    await db.refresh(db_inquiry)

    return db_inquiry


@router.delete("/{inquiry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_inquiry(
    inquiry_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Delete an inquiry.
    """
    db_inquiry = await db.get(Inquiry, inquiry_id)

    if not db_inquiry:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Inquiry not found"
        )

    await db.delete(db_inquiry)
    await db.commit()

    return None
