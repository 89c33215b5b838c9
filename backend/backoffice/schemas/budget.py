from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field, model_validator

from .common import CamelModel
from ..models.budget import BudgetStatus


class ServiceItem(CamelModel):
    """A priced service line (drilling diameter/depth/quantity)."""

    catalog_id: Optional[str] = None
    service: str = Field(min_length=1)
    local_type: Optional[str] = None
    soil_type: Optional[str] = None
    access: Optional[str] = None
    diametro: Optional[str] = None
    profundidade: Optional[str] = None
    quantidade: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    value: Optional[float] = Field(default=None, ge=0)
    discount_percent: Optional[float] = Field(default=None, ge=0, le=100)
    discount_value: Optional[float] = Field(default=None, ge=0)
    final_value: Optional[float] = Field(default=None, ge=0)
    base_price: Optional[float] = Field(default=None, ge=0)
    execution_time: Optional[float] = Field(default=None, ge=0)


class BudgetFields(CamelModel):
    client_name: Optional[str] = None
    value: Optional[float] = Field(default=None, ge=0)
    discount_percent: Optional[float] = Field(default=None, ge=0, le=100)
    discount_value: Optional[float] = Field(default=None, ge=0)
    final_value: Optional[float] = Field(default=None, ge=0)
    status: Optional[BudgetStatus] = None
    notes: Optional[str] = None
    valid_until: Optional[str] = None
    selected_address: Optional[str] = None
    travel_distance_km: Optional[float] = Field(default=None, ge=0)
    travel_price: Optional[float] = Field(default=None, ge=0)
    travel_description: Optional[str] = None


class BudgetCreate(BudgetFields):
    client_id: int
    services: List[ServiceItem] = Field(min_length=1)


class BudgetUpdate(BudgetFields):
    client_id: Optional[int] = None
    services: Optional[List[ServiceItem]] = Field(default=None, min_length=1)


class BudgetRead(BudgetFields):
    id: int
    seq: int
    title: Optional[str] = None
    client_id: int
    services: List[ServiceItem] = []
    status: BudgetStatus
    job_id: Optional[int] = None
    approved: bool = False
    approved_at: Optional[datetime] = None
    client_signed_at: Optional[datetime] = None
    rejected: bool = False
    rejected_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class BudgetSummary(CamelModel):
    id: int
    seq: int
    title: Optional[str] = None
    client_id: int
    client_name: Optional[str] = None
    status: BudgetStatus
    final_value: Optional[float] = None
    valid_until: Optional[str] = None
    job_id: Optional[int] = None
    services_count: int = 0
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_budget(cls, budget) -> "BudgetSummary":
        summary = cls.model_validate(budget)
        summary.services_count = len(budget.services or [])
        return summary


class BudgetConvertRequest(CamelModel):
    # Team name is kept for older clients; team_id is preferred
    team: Optional[str] = None
    team_id: Optional[int] = None
    planned_date: str = Field(min_length=1)
    site: Optional[str] = None
    notes: Optional[str] = None

    @model_validator(mode="after")
    def require_team(self) -> "BudgetConvertRequest":
        if not self.team and self.team_id is None:
            raise ValueError("Equipe é obrigatória")
        return self


class PublicLinkRead(CamelModel):
    public_token: str
    public_link: str


class BudgetApproveRequest(CamelModel):
    signature: str = Field(min_length=1)


class BudgetRejectRequest(CamelModel):
    rejection_reason: str = Field(min_length=1)
