from datetime import datetime, timezone
from sqlalchemy import Column, DateTime
from ..database import Base  # This is the same Base created by declarative_base()


def utcnow() -> datetime:
    """Naive UTC timestamp (SQLite drops tzinfo on round trip)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class BaseModel(Base):
    __abstract__ = True

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
