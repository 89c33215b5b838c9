from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from backoffice.core.config import settings
import os
import logging

logger = logging.getLogger(__name__)

if os.getenv("PYTEST_RUN") == "1":
    SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"
else:
    SQLALCHEMY_DATABASE_URL = settings.SQLALCHEMY_DATABASE_URL

is_sqlite = SQLALCHEMY_DATABASE_URL.startswith("sqlite")

pool_kwargs = {
    # Avoid stale idle connections causing first-hit failures after inactivity
    "pool_pre_ping": True,
}
if is_sqlite:
    connect_args = {"check_same_thread": False, "timeout": 15}
else:
    connect_args = {}
    pool_kwargs.update({
        "pool_size": int(os.getenv("DB_POOL_SIZE") or 5),
        "max_overflow": int(os.getenv("DB_MAX_OVERFLOW") or 5),
        "pool_recycle": int(os.getenv("DB_POOL_RECYCLE") or 300),
        "pool_timeout": float(os.getenv("DB_POOL_TIMEOUT") or 5.0),
    })

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args=connect_args,
    **pool_kwargs,
)


def _set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    try:
        # FK enforcement is off by default in SQLite; budgets -> jobs relies on it.
        cursor.execute("PRAGMA foreign_keys=ON;")
        cursor.execute("PRAGMA busy_timeout=15000;")
    finally:
        cursor.close()


if is_sqlite:
    event.listen(engine, "connect", _set_sqlite_pragma)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


# Dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
