"""Auth service: token issue/decoding and the mock SSO login."""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import UnauthorizedError, ValidationError
from app.models.user import User
from app.schemas.user import LoginRequest
from app.services import user_service

ALGORITHM = "HS256"


def create_access_token(user_id: str) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {"sub": str(user_id), "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise UnauthorizedError("Invalid or expired token")


def mock_sso_login(db: Session, data: LoginRequest) -> User:
    # Stands in for the identity-provider callback: the provider profile is
    # posted directly and the user row is created or refreshed from it.
    if not data.email or not data.email.strip():
        raise ValidationError("Email is required to sign in")
    return user_service.upsert_user(db, data)
