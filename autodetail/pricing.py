"""
Job card pricing.

All money arithmetic goes through Decimal. The job card total is:

    subtotal       = Σ(price × quantity) + labor_charge
    after_discount = subtotal − discount
    tax            = after_discount × gst / 100
    total          = after_discount + tax, rounded to a whole currency unit

The discount is not clamped: a discount larger than the subtotal gives a
negative after_discount, tax and total. Existing records were priced that way.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_FLOOR
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

ZERO = Decimal("0")
HUNDRED = Decimal("100")
HALF = Decimal("0.5")


@dataclass(frozen=True)
class PriceBreakdown:
    subtotal: Decimal
    discount: Decimal
    after_discount: Decimal
    tax: Decimal
    total: Decimal


def to_decimal(value: Any) -> Decimal:
    """Convert a float, int, str or None to Decimal without float noise."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_currency(value: Decimal) -> Decimal:
    """Round to the nearest whole unit, halves going up (towards +inf)."""
    return (value + HALF).to_integral_value(rounding=ROUND_FLOOR)


def line_total(item: Mapping[str, Any]) -> Decimal:
    """Price of one line item: unit price × quantity (quantity defaults to 1)."""
    quantity = item.get("quantity")
    if quantity is None:
        quantity = 1
    return to_decimal(item.get("price")) * to_decimal(quantity)


def compute_totals(
    line_items: Iterable[Mapping[str, Any]],
    labor_charge: Any = 0,
    discount: Any = 0,
    gst_percent: Any = 0,
) -> PriceBreakdown:
    """
    Compute subtotal, tax and total for a set of line items.

    Args:
        line_items: services, PPF applications and accessories, each a mapping
            with "price" and optionally "quantity"
        labor_charge: flat labor amount added to the subtotal
        discount: amount taken off the subtotal before tax
        gst_percent: GST rate in percent (18 means 18%)

    Returns:
        PriceBreakdown
    """
    subtotal = sum((line_total(item) for item in line_items), ZERO) + to_decimal(labor_charge)
    discount = to_decimal(discount)
    after_discount = subtotal - discount
    tax = after_discount * to_decimal(gst_percent) / HUNDRED
    total = round_currency(after_discount + tax)

    return PriceBreakdown(
        subtotal=subtotal,
        discount=discount,
        after_discount=after_discount,
        tax=tax,
        total=total,
    )


def job_card_totals(job: Any) -> PriceBreakdown:
    """Totals for a job card (model or any object with the same attributes)."""
    items: List[Mapping[str, Any]] = [
        *(job.services or []),
        *(job.ppfs or []),
        *(job.accessories or []),
    ]
    return compute_totals(items, job.labor_charge, job.discount, job.gst)


def inquiry_totals(
    services: Sequence[Mapping[str, Any]],
    accessories: Sequence[Mapping[str, Any]],
) -> Tuple[Decimal, Decimal]:
    """Return (our_price, customer_price) summed over all inquiry lines."""
    lines = [*services, *accessories]
    our_price = sum((to_decimal(line.get("price")) for line in lines), ZERO)
    customer_price = sum((to_decimal(line.get("customer_price")) for line in lines), ZERO)
    return our_price, customer_price


# Master-data lookups: exact match on a string key, first match wins.

def find_by_name(
    rows: Optional[Iterable[Mapping[str, Any]]],
    name: Optional[str],
    key: str = "name",
) -> Optional[Mapping[str, Any]]:
    if not rows or name is None:
        return None
    for row in rows:
        if row.get(key) == name:
            return row
    return None


def service_price(pricing_by_vehicle_type, vehicle_type: Optional[str]) -> Optional[Decimal]:
    """Flat service price for a vehicle type, or None if the type is not priced."""
    row = find_by_name(pricing_by_vehicle_type, vehicle_type, key="vehicle_type")
    if row is None or row.get("price") is None:
        return None
    return to_decimal(row["price"])


def ppf_price(
    pricing_by_vehicle_type,
    vehicle_type: Optional[str],
    warranty_name: Optional[str],
) -> Optional[Decimal]:
    """PPF price for a vehicle type and warranty option, or None."""
    row = find_by_name(pricing_by_vehicle_type, vehicle_type, key="vehicle_type")
    if row is None:
        return None
    option = find_by_name(row.get("options"), warranty_name, key="warranty_name")
    if option is None or option.get("price") is None:
        return None
    return to_decimal(option["price"])
