from datetime import datetime
from typing import List, Optional

from .common import CamelModel
from .budget import BudgetRead, ServiceItem
from ..models.job import JobStatus


class JobRead(CamelModel):
    id: int
    seq: int
    title: str
    client_id: Optional[int] = None
    client_name: Optional[str] = None
    site: Optional[str] = None
    site_latitude: Optional[float] = None
    site_longitude: Optional[float] = None
    team: Optional[str] = None
    team_id: Optional[int] = None
    status: JobStatus
    planned_date: Optional[str] = None
    planned_at: Optional[datetime] = None
    started_at: Optional[str] = None
    finished_at: Optional[str] = None
    notes: Optional[str] = None
    services: List[ServiceItem] = []
    value: Optional[float] = None
    discount_percent: Optional[float] = None
    discount_value: Optional[float] = None
    final_value: Optional[float] = None
    selected_address: Optional[str] = None
    travel_distance_km: Optional[float] = None
    travel_price: Optional[float] = None
    travel_description: Optional[str] = None
    cancellation_reason: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class BudgetConversionRead(CamelModel):
    """Result of converting a budget: the new job plus the updated budget."""

    data: JobRead
    budget: BudgetRead
