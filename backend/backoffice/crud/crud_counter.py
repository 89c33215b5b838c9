"""Named sequence counters ("budget", "job") with database-level atomicity.

``next_value`` increments with a single ``UPDATE ... RETURNING`` so two
concurrent transactions can never read the same value. The counter row is
created on first use with ``INSERT ... ON CONFLICT DO NOTHING``, seeded from
the current maximum of the numbered table so existing data keeps counting
up.
"""

from typing import Callable, Optional

from sqlalchemy import insert, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session
import logging

from ..models.counter import Counter

logger = logging.getLogger(__name__)

BUDGET = "budget"
JOB = "job"

_UPSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": pg_insert,
}


def _increment(db: Session, name: str) -> Optional[int]:
    stmt = (
        update(Counter)
        .where(Counter.name == name)
        .values(value=Counter.value + 1)
        .returning(Counter.value)
        .execution_options(synchronize_session=False)
    )
    return db.execute(stmt).scalar_one_or_none()


def _create(db: Session, name: str, start: int) -> None:
    dialect = db.get_bind().dialect.name
    upsert = _UPSERTS.get(dialect)
    if upsert is not None:
        stmt = upsert(Counter).values(name=name, value=start).on_conflict_do_nothing(
            index_elements=["name"]
        )
    else:
        stmt = insert(Counter).values(name=name, value=start)
    db.execute(stmt)


def next_value(
    db: Session, name: str, seed: Optional[Callable[[], int]] = None
) -> int:
    """Reserve and return the next value of counter ``name``.

    ``seed`` returns the value to start from when the counter row does not
    exist yet (typically ``max(seq)`` of the numbered table). Runs inside the
    caller's transaction; nothing is committed here.
    """
    value = _increment(db, name)
    if value is None:
        start = int(seed() or 0) if seed is not None else 0
        logger.info("Creating counter %s starting at %s", name, start)
        _create(db, name, start)
        value = _increment(db, name)
    return int(value)
