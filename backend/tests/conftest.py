import os
from pathlib import Path

from dotenv import load_dotenv
import pytest

# Load environment variables for tests before any backoffice import
load_dotenv(Path(__file__).resolve().parents[1] / ".env.test")
os.environ.setdefault("PYTEST_RUN", "1")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine, event  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from backoffice.database import Base, _set_sqlite_pragma, get_db  # noqa: E402
from backoffice.main import app  # noqa: E402
from factories import FakeResponse, distance_payload  # noqa: E402


@pytest.fixture
def Session():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", _set_sqlite_pragma)
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def db(Session):
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(Session):
    def override_db():
        session = Session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def fake_maps(monkeypatch):
    """Patch ``httpx.get`` in the Maps services; returns the recorded calls."""
    from backoffice.services import distance_service, geocode

    calls = []
    state = {"payload": distance_payload(12700)}

    def fake_get(url, params=None, timeout=None):
        calls.append({"url": url, "params": params, "timeout": timeout})
        return FakeResponse(state["payload"])

    monkeypatch.setattr(distance_service.httpx, "get", fake_get)
    monkeypatch.setattr(geocode.httpx, "get", fake_get)

    def set_payload(payload):
        state["payload"] = payload

    fake_get.calls = calls
    fake_get.set_payload = set_payload
    return fake_get
