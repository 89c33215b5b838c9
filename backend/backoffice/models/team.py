import enum
from sqlalchemy import (
    JSON,
    Column,
    Integer,
    String,
    Enum as SQLAlchemyEnum,
)

from .base import BaseModel


class TeamStatus(str, enum.Enum):
    ACTIVE = "ativa"
    INACTIVE = "inativa"


class Team(BaseModel):
    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    status = Column(
        SQLAlchemyEnum(
            TeamStatus,
            name="teamstatus",
            values_callable=lambda enum: [e.value for e in enum],
        ),
        nullable=False,
        default=TeamStatus.ACTIVE,
    )
    leader = Column(String, nullable=True)
    members = Column(JSON, nullable=False, default=list)
    notes = Column(String, nullable=True)
    # Shared secret for the field portal; operation_token is the legacy link id
    operation_pass = Column(String, nullable=True)
    operation_token = Column(String, nullable=True, unique=True)
