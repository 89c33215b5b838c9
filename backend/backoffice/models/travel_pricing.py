import enum
from sqlalchemy import (
    Boolean,
    Column,
    Float,
    Integer,
    String,
    Enum as SQLAlchemyEnum,
)

from .base import BaseModel


class PricingType(str, enum.Enum):
    PER_KM = "per_km"
    FIXED = "fixed"


class TravelPricingRule(BaseModel):
    __tablename__ = "travel_pricing_rules"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(
        SQLAlchemyEnum(
            PricingType,
            name="pricingtype",
            values_callable=lambda enum: [e.value for e in enum],
        ),
        nullable=False,
    )
    # NULL means "no ceiling" (e.g. "Acima de 100km")
    up_to_km = Column(Float, nullable=True)
    price_per_km = Column(Float, nullable=True)
    fixed_price = Column(Float, nullable=True)
    description = Column(String, nullable=False)
    round_trip = Column(Boolean, nullable=False, default=True)
    is_default = Column(Boolean, nullable=False, default=False)
    # "order" is reserved in SQL
    order = Column("sort_order", Integer, nullable=False, default=0, index=True)
