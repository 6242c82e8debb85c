from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.exceptions import UnauthorizedError
from app.models.user import User
from app.services.auth_service import decode_token
from app.utils.permissions import Principal, ensure_moderator

security = HTTPBearer(auto_error=False)


def _extract_token(request: Request, credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    token = _extract_token(request, credentials)
    if not token:
        raise UnauthorizedError("Unauthorized")

    payload = decode_token(token)
    user_id = payload.get("sub")
    if user_id is None:
        raise UnauthorizedError("Invalid token payload")

    # Always re-read the row so role changes apply on the next request.
    user = db.query(User).filter(User.id == str(user_id)).first()
    if not user:
        raise UnauthorizedError("User not found")
    return user


def get_current_principal(current_user: User = Depends(get_current_user)) -> Principal:
    return Principal(user_id=current_user.id, role=current_user.role)


def require_moderator(principal: Principal = Depends(get_current_principal)) -> Principal:
    ensure_moderator(principal)
    return principal
