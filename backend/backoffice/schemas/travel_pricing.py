from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel
from ..models.travel_pricing import PricingType


class TravelPricingRuleBase(CamelModel):
    type: PricingType
    up_to_km: Optional[float] = Field(default=None, ge=0)
    price_per_km: Optional[float] = Field(default=None, ge=0)
    fixed_price: Optional[float] = Field(default=None, ge=0)
    description: str = Field(min_length=1)
    round_trip: bool = True
    order: int = 0
    is_default: bool = False


class TravelPricingRuleCreate(TravelPricingRuleBase):
    pass


class TravelPricingRuleRead(TravelPricingRuleBase):
    id: int
    created_at: datetime
    updated_at: datetime
