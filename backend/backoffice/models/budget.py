import enum
from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    Enum as SQLAlchemyEnum,
)
from sqlalchemy.orm import relationship

from .base import BaseModel


class BudgetStatus(str, enum.Enum):
    PENDING = "pendente"
    APPROVED = "aprovado"
    REJECTED = "rejeitado"
    CONVERTED = "convertido"


class Budget(BaseModel):
    __tablename__ = "budgets"

    id = Column(Integer, primary_key=True, index=True)
    seq = Column(Integer, nullable=False, unique=True, index=True)
    title = Column(String, nullable=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    client_name = Column(String, nullable=True)
    services = Column(JSON, nullable=False, default=list)
    value = Column(Float, nullable=True)
    discount_percent = Column(Float, nullable=True)
    discount_value = Column(Float, nullable=True)
    final_value = Column(Float, nullable=True)
    status = Column(
        SQLAlchemyEnum(
            BudgetStatus,
            name="budgetstatus",
            values_callable=lambda enum: [e.value for e in enum],
        ),
        nullable=False,
        default=BudgetStatus.PENDING,
        index=True,
    )
    notes = Column(String, nullable=True)
    valid_until = Column(String, nullable=True)
    job_id = Column(Integer, ForeignKey("jobs.id"), nullable=True)

    # Travel snapshot taken when the budget was priced
    selected_address = Column(String, nullable=True)
    travel_distance_km = Column(Float, nullable=True)
    travel_price = Column(Float, nullable=True)
    travel_description = Column(String, nullable=True)

    # Public approval link
    public_token = Column(String, nullable=True, unique=True, index=True)
    approved = Column(Boolean, nullable=False, default=False)
    approved_at = Column(DateTime, nullable=True)
    client_signature = Column(Text, nullable=True)
    client_signed_at = Column(DateTime, nullable=True)
    rejected = Column(Boolean, nullable=False, default=False)
    rejected_at = Column(DateTime, nullable=True)
    rejection_reason = Column(String, nullable=True)

    client = relationship("Client")
    job = relationship("Job", foreign_keys=[job_id])
