"""User request/response contracts."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, field_validator

from app.schemas.common import ApiIn, ApiOut, utc_or_none


class UserOut(ApiOut):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("created_at", "updated_at")
    @classmethod
    def ensure_utc(cls, value):
        return utc_or_none(value)


class UserUpsert(ApiIn):
    id: Optional[str] = None
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None


class UserRoleUpdate(ApiIn):
    role: Literal["server", "moderator"]


class LoginRequest(UserUpsert):
    pass


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut
