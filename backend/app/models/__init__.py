"""SQLAlchemy model package."""

from app.models.user import User
from app.models.session import ServiceSession

__all__ = [
    "User",
    "ServiceSession",
]
