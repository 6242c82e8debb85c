import pytest
from datetime import timedelta
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.database import Base, get_db
from app.main import app
from app.models.user import User
from app.models.session import ServiceSession
from app.utils.time_utils import to_db

TEST_DB_URL = "sqlite:///./test_altar.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_users(db):
    users = {
        "moderator": User(id="mod001", email="mod@church.org", first_name="Maria", last_name="Lopez", role="moderator"),
        "server": User(id="srv001", email="server1@church.org", first_name="Joseph", last_name="Perez", role="server"),
        "server2": User(id="srv002", email="server2@church.org", first_name="Ana", last_name="Garcia", role="server"),
    }
    for u in users.values():
        db.add(u)
    db.commit()
    for u in users.values():
        db.refresh(u)
    return users


def add_session(db, user_id, clock_in, minutes=None, active=False, service_type="General Service"):
    """Insert a session directly; `minutes` is the stored duration of a closed session."""
    session = ServiceSession(
        user_id=user_id,
        clock_in_time=to_db(clock_in),
        service_type=service_type,
        is_active=active,
    )
    if not active:
        session.clock_out_time = to_db(clock_in + timedelta(minutes=minutes or 0))
        session.duration_minutes = minutes
    db.add(session)
    db.commit()
    db.refresh(session)
    return session


def get_token(client, email: str) -> str:
    resp = client.post("/api/auth/login", json={"email": email})
    assert resp.status_code == 200, resp.text
    # Keep requests explicit: authenticate via the header, not the cookie jar.
    client.cookies.clear()
    return resp.json()["access_token"]


def auth_headers(client, email: str) -> dict:
    return {"Authorization": f"Bearer {get_token(client, email)}"}
