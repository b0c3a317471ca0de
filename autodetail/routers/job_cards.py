"""
Job card routes.

The estimated cost is always recomputed here from the stored line items;
whatever total the client sends is ignored.
"""
import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List

from autodetail.auth import get_current_user
from autodetail.config import get_settings
from autodetail.database import get_db
from autodetail.job_card_service import (
    apply_roll_usage, next_job_no, recalculate,
    resolve_accessories, resolve_ppfs, resolve_services,
)
from autodetail.models.job_card import JobCard, JobStatus
from autodetail.models.user import User
from autodetail.pricing import compute_totals
from autodetail.schemas.job_card import (
    JobCard as JobCardSchema, JobCardCreate, JobCardUpdate, PriceQuote, PriceQuoteRequest,
)

logger = logging.getLogger(__name__)

settings = get_settings()

router = APIRouter(prefix="/job-cards", tags=["job-cards"])

LINE_FIELDS = {"services", "ppfs", "accessories"}
# Columns that may be cleared by sending null
NULLABLE_FIELDS = {
    "email_address", "referrer_name", "referrer_phone", "vin",
    "vehicle_type", "service_notes", "technician",
}


async def _get_job_or_404(db: AsyncSession, job_card_id: int) -> JobCard:
    job = await db.get(JobCard, job_card_id)
    if not job:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Job card not found"
        )
    return job


@router.get("", response_model=List[JobCardSchema])
async def get_job_cards(
    skip: int = 0,
    limit: int = 100,
    status_filter: JobStatus = None,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get job cards, newest first, with pagination and optional status filter.
    """
    query = select(JobCard)

    if status_filter:
        query = query.where(JobCard.status == status_filter)

    result = await db.execute(
        query.order_by(JobCard.created_at.desc(), JobCard.id.desc()).offset(skip).limit(limit)
    )
    return result.scalars().all()


@router.post("/quote", response_model=PriceQuote)
async def quote_job_card(
    quote: PriceQuoteRequest,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Price a set of line items without saving anything.
    """
    lines = [
        *await resolve_services(db, quote.services, quote.vehicle_type),
        *await resolve_ppfs(db, quote.ppfs, quote.vehicle_type),
        *await resolve_accessories(db, quote.accessories),
    ]
    gst = quote.gst if quote.gst is not None else settings.default_gst
    breakdown = compute_totals(lines, quote.labor_charge, quote.discount, gst)

    return PriceQuote(
        subtotal=float(breakdown.subtotal),
        discount=float(breakdown.discount),
        after_discount=float(breakdown.after_discount),
        tax=float(breakdown.tax),
        total=float(breakdown.total),
    )


@router.get("/{job_card_id}", response_model=JobCardSchema)
async def get_job_card(
    job_card_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get a specific job card by ID.
    """
    return await _get_job_or_404(db, job_card_id)


@router.post("", response_model=JobCardSchema, status_code=status.HTTP_201_CREATED)
async def create_job_card(
    job_card: JobCardCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Create a job card with the next job number for this year.

    Line items are copied onto the job card; PPF roll usage is taken off the
    roll stock.
    """
    services = await resolve_services(db, job_card.services, job_card.vehicle_type)
    ppfs = await resolve_ppfs(db, job_card.ppfs, job_card.vehicle_type)
    accessories = await resolve_accessories(db, job_card.accessories)
    await apply_roll_usage(db, [], ppfs)

    data = job_card.model_dump(exclude=LINE_FIELDS | {"gst", "business"})
    db_job = JobCard(
        **data,
        job_no=await next_job_no(db),
        services=services,
        ppfs=ppfs,
        accessories=accessories,
        gst=job_card.gst if job_card.gst is not None else settings.default_gst,
        business=job_card.business or settings.default_business,
    )
    if db_job.status == JobStatus.COMPLETED:
        db_job.completed_at = datetime.utcnow()
    recalculate(db_job)

    db.add(db_job)
    await db.commit()
    await db.refresh(db_job)

    logger.info("Created job card %s for %s (%.2f)", db_job.job_no, db_job.customer_name, db_job.estimated_cost)
    return db_job


@router.patch("/{job_card_id}", response_model=JobCardSchema)
async def update_job_card(
    job_card_id: int,
    job_update: JobCardUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Update a job card and recompute its estimated cost.
    """
    db_job = await _get_job_or_404(db, job_card_id)

    # Update only provided fields
    update_data = job_update.model_dump(exclude_unset=True, exclude=LINE_FIELDS)

    # Auto-set completed_at when status changes to completed
    if "status" in update_data and update_data["status"] == JobStatus.COMPLETED:
        if db_job.status != JobStatus.COMPLETED:
            update_data["completed_at"] = datetime.utcnow()

    for field, value in update_data.items():
        if value is None and field not in NULLABLE_FIELDS:
            continue
        setattr(db_job, field, value)

    if job_update.services is not None:
        db_job.services = await resolve_services(db, job_update.services, db_job.vehicle_type)
    if job_update.ppfs is not None:
        ppfs = await resolve_ppfs(db, job_update.ppfs, db_job.vehicle_type)
        await apply_roll_usage(db, db_job.ppfs or [], ppfs)
        db_job.ppfs = ppfs
    if job_update.accessories is not None:
        db_job.accessories = await resolve_accessories(db, job_update.accessories)

    recalculate(db_job)

    await db.commit()
    await db.refresh(db_job)

    return db_job


@router.delete("/{job_card_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_job_card(
    job_card_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Delete a job card. Film already taken from rolls is not returned.
    """
    db_job = await _get_job_or_404(db, job_card_id)

    await db.delete(db_job)
    await db.commit()

    logger.info("Deleted job card %s", db_job.job_no)
    return None
