import enum
from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Enum as SQLAlchemyEnum,
)
from sqlalchemy.orm import relationship

from .base import BaseModel


class JobStatus(str, enum.Enum):
    PENDING = "pendente"
    IN_PROGRESS = "em_execucao"
    DONE = "concluida"
    CANCELLED = "cancelada"


class Job(BaseModel):
    """Work order (Ordem de Serviço)."""

    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    seq = Column(Integer, nullable=False, unique=True, index=True)
    title = Column(String, nullable=False)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="SET NULL"), nullable=True, index=True)
    client_name = Column(String, nullable=True)
    site = Column(String, nullable=True)
    site_latitude = Column(Float, nullable=True)
    site_longitude = Column(Float, nullable=True)
    team = Column(String, nullable=True)
    team_id = Column(Integer, ForeignKey("teams.id", ondelete="SET NULL"), nullable=True, index=True)
    status = Column(
        SQLAlchemyEnum(
            JobStatus,
            name="jobstatus",
            values_callable=lambda enum: [e.value for e in enum],
        ),
        nullable=False,
        default=JobStatus.PENDING,
    )
    # Kept as the ISO string the scheduler sent, like started_at/finished_at
    planned_date = Column(String, nullable=True)
    # Same instant in naive UTC; list ordering uses it since offsets vary
    planned_at = Column(DateTime, nullable=True, index=True)
    started_at = Column(String, nullable=True)
    finished_at = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    services = Column(JSON, nullable=False, default=list)
    value = Column(Float, nullable=True)
    discount_percent = Column(Float, nullable=True)
    discount_value = Column(Float, nullable=True)
    final_value = Column(Float, nullable=True)
    selected_address = Column(String, nullable=True)
    travel_distance_km = Column(Float, nullable=True)
    travel_price = Column(Float, nullable=True)
    travel_description = Column(String, nullable=True)
    cancellation_reason = Column(String, nullable=True)

    assigned_team = relationship("Team", foreign_keys=[team_id])
