"""
Invoice routes. Read-only: an invoice is the billing view of a completed job card.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List

from autodetail.auth import get_current_user
from autodetail.database import get_db
from autodetail.job_card_service import build_invoice
from autodetail.models.job_card import JobCard, JobStatus
from autodetail.models.user import User
from autodetail.schemas.invoice import Invoice

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.get("", response_model=List[Invoice])
async def get_invoices(
    search: str = None,
    business: str = None,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get invoices for all completed job cards, newest first.

    search matches invoice number, customer name or job number
    (case-insensitive); business filters on the billing business.
    """
    query = select(JobCard).where(JobCard.status == JobStatus.COMPLETED)

    if business:
        query = query.where(JobCard.business == business)

    result = await db.execute(query.order_by(JobCard.completed_at.desc(), JobCard.id.desc()))
    invoices = [build_invoice(job) for job in result.scalars().all()]

    if search:
        needle = search.lower()
        invoices = [
            invoice for invoice in invoices
            if needle in invoice.invoice_no.lower()
            or needle in invoice.customer_name.lower()
            or needle in invoice.job_no.lower()
        ]
    return invoices


@router.get("/{job_card_id}", response_model=Invoice)
async def get_invoice(
    job_card_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get the invoice of a job card. Only completed job cards have one.
    """
    job = await db.get(JobCard, job_card_id)

    if not job or job.status != JobStatus.COMPLETED:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Invoice not found"
        )

    return build_invoice(job)
