from sqlalchemy import Column, Integer, String

from ..database import Base


class Counter(Base):
    """Named monotonically increasing sequence ("budget", "job")."""

    __tablename__ = "counters"

    name = Column(String, primary_key=True)
    value = Column(Integer, nullable=False, default=0)
