"""Role constants and access checks shared by routers and services."""

from dataclasses import dataclass

from app.exceptions import ForbiddenError, ValidationError


SERVER = "server"
MODERATOR = "moderator"

ALL_ROLES = (SERVER, MODERATOR)


@dataclass(frozen=True)
class Principal:
    """The authenticated caller, resolved from the user row on each request."""

    user_id: str
    role: str


def is_moderator(principal: Principal) -> bool:
    return principal.role == MODERATOR


def ensure_moderator(principal: Principal) -> None:
    if not is_moderator(principal):
        raise ForbiddenError("Moderator access required")


def validate_role(role) -> str:
    if not isinstance(role, str) or role not in ALL_ROLES:
        raise ValidationError(f"Invalid role. Allowed: {', '.join(ALL_ROLES)}")
    return role
