"""
Job card helpers shared by the job card, quote and invoice routes.

- resolving submitted line items into stored snapshots
- PPF roll stock bookkeeping
- job numbers (JC-<year>-<seq>)
- the invoice view of a completed job card
"""
import logging
import re
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from autodetail.models.accessory import AccessoryMaster
from autodetail.models.job_card import JobCard, JobNumberSequence
from autodetail.models.ppf import PPFMaster
from autodetail.models.service import ServiceMaster
from autodetail.pricing import (
    ZERO, PriceBreakdown, find_by_name, job_card_totals, line_total,
    ppf_price, service_price, to_decimal,
)
from autodetail.schemas.invoice import Invoice, InvoiceItem
from autodetail.schemas.job_card import LineItem, LineItemIn, PPFLineItem, PPFLineItemIn

logger = logging.getLogger(__name__)

JOB_NO_PATTERN = re.compile(r"^JC-(\d{4})-(\d+)$")


def bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


async def load_by_ids(db: AsyncSession, model, ids: Iterable[Optional[int]]) -> Dict[int, Any]:
    """Fetch rows of model by id, keyed by id. Missing ids are simply absent."""
    wanted = {i for i in ids if i is not None}
    if not wanted:
        return {}
    result = await db.execute(select(model).where(model.id.in_(wanted)))
    return {row.id: row for row in result.scalars().all()}


def _resolve(
    kind: str,
    items: Sequence[LineItemIn],
    masters: Dict[int, Any],
    lookup_price: Callable[[Any, LineItemIn], Optional[Decimal]],
) -> List[Tuple[LineItemIn, str, Decimal]]:
    resolved = []
    for item in items:
        master = masters.get(item.id) if item.id is not None else None
        if item.id is not None and master is None and (item.name is None or item.price is None):
            raise bad_request(f"{kind} {item.id} not found")

        name = item.name or (master.name if master is not None else None)
        if item.price is not None:
            price = to_decimal(item.price)
        elif master is not None:
            price = lookup_price(master, item)
        else:
            price = None

        if not name:
            raise bad_request(f"{kind} line needs an id or a name")
        if price is None:
            raise bad_request(f"No price for {kind.lower()} '{name}'")
        resolved.append((item, name, price))
    return resolved


async def resolve_services(
    db: AsyncSession, items: Sequence[LineItemIn], vehicle_type: Optional[str]
) -> List[dict]:
    """Snapshot service lines, pricing unpriced ones by the job's vehicle type."""
    masters = await load_by_ids(db, ServiceMaster, (i.id for i in items))
    resolved = _resolve(
        "Service", items, masters,
        lambda master, item: service_price(master.pricing_by_vehicle_type, vehicle_type),
    )
    return [
        LineItem(id=item.id, name=name, price=float(price), quantity=item.quantity).model_dump()
        for item, name, price in resolved
    ]


async def resolve_accessories(db: AsyncSession, items: Sequence[LineItemIn]) -> List[dict]:
    """Snapshot accessory lines at the master unit price unless one is given."""
    masters = await load_by_ids(db, AccessoryMaster, (i.id for i in items))
    resolved = _resolve(
        "Accessory", items, masters,
        lambda master, item: to_decimal(master.price),
    )
    return [
        LineItem(id=item.id, name=name, price=float(price), quantity=item.quantity).model_dump()
        for item, name, price in resolved
    ]


async def resolve_ppfs(
    db: AsyncSession, items: Sequence[PPFLineItemIn], vehicle_type: Optional[str]
) -> List[dict]:
    """Snapshot PPF lines, pricing unpriced ones by vehicle type and warranty."""
    masters = await load_by_ids(db, PPFMaster, (i.id for i in items))
    resolved = _resolve(
        "PPF", items, masters,
        lambda master, item: ppf_price(master.pricing_by_vehicle_type, vehicle_type, item.warranty_name),
    )
    lines = []
    for item, name, price in resolved:
        if item.roll_name and item.roll_used and item.id is None:
            raise bad_request(f"PPF '{name}' uses a roll but has no PPF id")
        lines.append(PPFLineItem(
            id=item.id,
            name=name,
            price=float(price),
            quantity=item.quantity,
            warranty_name=item.warranty_name,
            roll_name=item.roll_name,
            roll_used=item.roll_used,
        ).model_dump())
    return lines


def roll_usage(lines: Iterable[dict]) -> Dict[Tuple[int, str], Decimal]:
    """Total film used per (ppf id, roll name)."""
    usage: Dict[Tuple[int, str], Decimal] = {}
    for line in lines or []:
        used = to_decimal(line.get("roll_used"))
        if line.get("id") is None or not line.get("roll_name") or used <= 0:
            continue
        key = (line["id"], line["roll_name"])
        usage[key] = usage.get(key, ZERO) + used
    return usage


async def apply_roll_usage(db: AsyncSession, old_lines: Iterable[dict], new_lines: Iterable[dict]):
    """
    Move PPF roll stock by the difference between old and new usage.

    Called with no old lines when a job card is created. Stock is changed on
    the session only; the caller's commit persists it with the job card.
    """
    old = roll_usage(old_lines)
    new = roll_usage(new_lines)
    deltas = {
        key: new.get(key, ZERO) - old.get(key, ZERO)
        for key in set(old) | set(new)
    }
    deltas = {key: delta for key, delta in deltas.items() if delta != 0}
    if not deltas:
        return

    masters = await load_by_ids(db, PPFMaster, (ppf_id for ppf_id, _ in deltas))
    rolls_by_master: Dict[int, List[dict]] = {}
    for (ppf_id, roll_name), delta in sorted(deltas.items()):
        master = masters.get(ppf_id)
        if master is None:
            if delta < 0:
                logger.warning("PPF %s is gone; %s of roll '%s' not returned", ppf_id, -delta, roll_name)
                continue
            raise bad_request(f"PPF {ppf_id} not found")
        rolls = rolls_by_master.setdefault(ppf_id, [dict(r) for r in master.rolls or []])
        roll = find_by_name(rolls, roll_name)
        if roll is None:
            if delta < 0:
                logger.warning("Roll '%s' is gone from PPF '%s'; %s not returned", roll_name, master.name, -delta)
                continue
            raise bad_request(f"Roll '{roll_name}' not found on PPF '{master.name}'")
        remaining = to_decimal(roll.get("stock")) - delta
        if remaining < 0:
            raise bad_request(f"Insufficient stock on roll '{roll_name}'")
        roll["stock"] = float(remaining)

    for ppf_id, rolls in rolls_by_master.items():
        # New list so the JSON column is flagged dirty
        masters[ppf_id].rolls = rolls
        logger.info("Roll stock updated for PPF %s", masters[ppf_id].name)


async def next_job_no(db: AsyncSession, year: Optional[int] = None) -> str:
    """
    Reserve the next job number for the year.

    The per-year counter starts from the highest number already on file, so
    numbers keep increasing even when job cards are deleted.
    """
    year = year or datetime.utcnow().year
    sequence = await db.get(JobNumberSequence, year)
    if sequence is None:
        result = await db.execute(select(JobCard.job_no).where(JobCard.job_no.like(f"JC-{year}-%")))
        highest = 0
        for job_no in result.scalars():
            match = JOB_NO_PATTERN.match(job_no)
            if match and int(match.group(1)) == year:
                highest = max(highest, int(match.group(2)))
        sequence = JobNumberSequence(year=year, last_seq=highest)
        db.add(sequence)

    sequence.last_seq += 1
    return f"JC-{year}-{sequence.last_seq:03d}"


def recalculate(job: JobCard) -> PriceBreakdown:
    """Recompute and store the job's estimated cost from its own line items."""
    breakdown = job_card_totals(job)
    job.estimated_cost = float(breakdown.total)
    return breakdown


def invoice_no_for(job_no: str) -> str:
    """JC-2026-007 -> INV-2026-007"""
    return "INV-" + job_no.split("-", 1)[-1]


def build_invoice(job: JobCard) -> Invoice:
    """Invoice view of a job card; always re-derived from the stored snapshots."""
    breakdown = job_card_totals(job)
    items = []
    for line in [*(job.services or []), *(job.ppfs or []), *(job.accessories or [])]:
        quantity = line.get("quantity") or 1
        name = line.get("name") or ""
        if quantity > 1:
            name = f"{name} x{quantity}"
        items.append(InvoiceItem(name=name, price=float(line_total(line))))

    return Invoice(
        invoice_no=invoice_no_for(job.job_no),
        job_card_id=job.id,
        job_no=job.job_no,
        business=job.business,
        customer_name=job.customer_name,
        phone_number=job.phone_number,
        vehicle_info=f"{job.make} {job.model} ({job.license_plate})",
        items=items,
        labor_charge=job.labor_charge or 0,
        subtotal=float(breakdown.subtotal),
        discount=float(breakdown.discount),
        taxable_amount=float(breakdown.after_discount),
        gst=job.gst,
        gst_amount=float(breakdown.tax),
        total=float(breakdown.total),
        created_at=job.completed_at or job.created_at,
    )
