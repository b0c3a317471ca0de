"""
Pydantic schemas for the dashboard snapshot.
"""
from pydantic import BaseModel
from typing import List, Optional


class Stat(BaseModel):
    label: str
    value: str
    subtext: str
    icon: Optional[str] = None


class ChartPoint(BaseModel):
    name: str
    value: float


class DashboardData(BaseModel):
    """Schema for the dashboard response."""
    stats: List[Stat]
    sales_trends: List[ChartPoint]
    customer_status: List[ChartPoint]
    customer_growth: List[ChartPoint]
    inventory_by_category: List[ChartPoint]
