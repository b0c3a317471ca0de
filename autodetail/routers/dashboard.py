"""
Dashboard route: one snapshot of today's numbers and a few chart series.
"""
from collections import Counter
from datetime import date, datetime, timedelta
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from autodetail.auth import get_current_user
from autodetail.database import get_db
from autodetail.models.inquiry import Inquiry
from autodetail.models.job_card import JobCard, JobStatus
from autodetail.models.ppf import PPFMaster
from autodetail.models.user import User
from autodetail.pricing import ZERO, to_decimal
from autodetail.schemas.dashboard import ChartPoint, DashboardData, Stat

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def _day(value: Optional[datetime]) -> Optional[date]:
    return value.date() if value is not None else None


def build_dashboard(jobs, inquiries, ppfs, today: date) -> DashboardData:
    """Assemble the dashboard from already-loaded rows."""
    completed = [job for job in jobs if job.status == JobStatus.COMPLETED]

    def sales_on(day: date) -> float:
        return sum(job.estimated_cost or 0 for job in completed if _day(job.completed_at) == day)

    todays_sales = sales_on(today)
    active_jobs = sum(1 for job in jobs if job.status == JobStatus.IN_PROGRESS)
    inquiries_today = sum(1 for inquiry in inquiries if _day(inquiry.created_at) == today)
    customers = {job.phone_number for job in jobs} | {inquiry.phone for inquiry in inquiries}

    stats = [
        Stat(label="TODAY'S SALES", value=f"₹{todays_sales:,.0f}",
             subtext="Total sales generated today", icon="IndianRupee"),
        Stat(label="ACTIVE SERVICE JOBS", value=str(active_jobs),
             subtext="Service jobs in progress", icon="Box"),
        Stat(label="INQUIRIES TODAY", value=str(inquiries_today),
             subtext="Inquiries received today", icon="MessageSquare"),
        Stat(label="TOTAL CUSTOMERS", value=str(len(customers)),
             subtext="Registered customers", icon="Users"),
    ]

    sales_trends = []
    for days_ago in range(6, -1, -1):
        day = today - timedelta(days=days_ago)
        sales_trends.append(ChartPoint(name=day.strftime("%a"), value=sales_on(day)))

    status_counts = Counter(job.status for job in jobs)
    customer_status = [ChartPoint(name="New Lead", value=len(inquiries))]
    customer_status += [
        ChartPoint(name=job_status.value, value=status_counts.get(job_status, 0))
        for job_status in JobStatus
    ]

    customer_growth = []
    for weeks_ago in range(3, -1, -1):
        end = today - timedelta(days=7 * weeks_ago)
        start = end - timedelta(days=6)
        count = sum(1 for job in jobs if _day(job.created_at) and start <= _day(job.created_at) <= end)
        customer_growth.append(ChartPoint(name=f"Week {4 - weeks_ago}", value=count))

    inventory_by_category = [
        ChartPoint(
            name=ppf.name,
            value=float(sum((to_decimal(roll.get("stock")) for roll in ppf.rolls or []), ZERO)),
        )
        for ppf in ppfs
    ]

    return DashboardData(
        stats=stats,
        sales_trends=sales_trends,
        customer_status=customer_status,
        customer_growth=customer_growth,
        inventory_by_category=inventory_by_category,
    )


@router.get("", response_model=DashboardData)
async def get_dashboard(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get dashboard statistics.
    """
    jobs = (await db.execute(select(JobCard))).scalars().all()
    inquiries = (await db.execute(select(Inquiry))).scalars().all()
    ppfs = (await db.execute(select(PPFMaster).order_by(PPFMaster.id))).scalars().all()

    return build_dashboard(jobs, inquiries, ppfs, datetime.utcnow().date())
