import pytest

from app.config import settings
from app.exceptions import ConflictError
from app.models.user import User
from app.schemas.user import UserUpsert
from app.services import user_service
from tests.conftest import auth_headers

def test_login_existing_user(client, seed_users):
    resp = client.post("/api/auth/login", json={"email": "mod@church.org"})
    assert resp.status_code == 200
    data = resp.json()
    assert "access_token" in data
    assert data["user"]["id"] == "mod001"
    assert data["user"]["role"] == "moderator"
    assert settings.SESSION_COOKIE_NAME in resp.cookies

def test_first_login_creates_server(client, db):
    resp = client.post(
        "/api/auth/login",
        json={"id": "google-123", "email": "new@church.org", "firstName": "Luis", "lastName": "Diaz"},
    )
    assert resp.status_code == 200, resp.text
    user = resp.json()["user"]
    assert user["id"] == "google-123"
    assert user["role"] == "server"
    assert user["firstName"] == "Luis"
    assert db.query(User).count() == 1

def test_repeat_login_refreshes_profile_but_keeps_role(client, db, seed_users):
    resp = client.post(
        "/api/auth/login",
        json={"id": "mod001", "email": "mod@church.org", "firstName": "Mary"},
    )
    assert resp.status_code == 200
    user = resp.json()["user"]
    assert user["firstName"] == "Mary"
    assert user["lastName"] == "Lopez"
    assert user["role"] == "moderator"
    assert db.query(User).count() == 3

def test_login_requires_email(client):
    assert client.post("/api/auth/login", json={}).status_code == 400
    blank = client.post("/api/auth/login", json={"email": "  "})
    assert blank.status_code == 400
    assert blank.json()["detail"] == "Email is required to sign in"

def test_login_with_email_owned_by_another_user_rejected(client, db, seed_users):
    resp = client.post("/api/auth/login", json={"id": "srv001", "email": "server2@church.org"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Email is already linked to another account"

    db.expire_all()
    assert db.query(User).filter(User.id == "srv001").one().email == "server1@church.org"
    assert db.query(User).filter(User.id == "srv002").one().email == "server2@church.org"

def test_upsert_email_race_maps_to_conflict(db, seed_users, monkeypatch):
    # Simulate a login that looked the email up before another one inserted it.
    monkeypatch.setattr(user_service, "get_user_by_email", lambda _db, _email: None)
    with pytest.raises(ConflictError):
        user_service.upsert_user(db, UserUpsert(id="new001", email="server1@church.org"))
    assert db.query(User).count() == 3

def test_current_user_with_bearer(client, seed_users):
    headers = auth_headers(client, "server1@church.org")
    resp = client.get("/api/auth/user", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["email"] == "server1@church.org"

def test_current_user_with_session_cookie(client, seed_users):
    login = client.post("/api/auth/login", json={"email": "server1@church.org"})
    assert login.status_code == 200
    resp = client.get("/api/auth/user")
    assert resp.status_code == 200
    assert resp.json()["id"] == "srv001"

def test_current_user_unauthenticated(client):
    resp = client.get("/api/auth/user")
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Unauthorized"

def test_token_for_deleted_user_rejected(client, db, seed_users):
    headers = auth_headers(client, "server2@church.org")
    db.delete(seed_users["server2"])
    db.commit()
    assert client.get("/api/auth/user", headers=headers).status_code == 401

def test_logout_clears_cookie(client, seed_users):
    client.post("/api/auth/login", json={"email": "server1@church.org"})
    assert client.get("/api/auth/user").status_code == 200

    resp = client.post("/api/auth/logout")
    assert resp.status_code == 200
    set_cookie = resp.headers["set-cookie"]
    assert set_cookie.startswith(f"{settings.SESSION_COOKIE_NAME}=")
    assert "Max-Age=0" in set_cookie

def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
