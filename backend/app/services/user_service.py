"""User service layer: profile upsert on login and moderator role management."""

import logging
import uuid
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import ConflictError, NotFoundError
from app.models.user import User
from app.schemas.user import UserUpsert
from app.utils.permissions import SERVER, Principal, ensure_moderator, validate_role

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def upsert_user(db: Session, data: UserUpsert) -> User:
    """Create the user on first login, otherwise refresh profile fields.

    The role is only ever set on creation; later logins never touch it.
    """
    email = data.email.strip()
    user = get_user(db, data.id) if data.id else None
    if user is None:
        user = get_user_by_email(db, email)

    if user is None:
        user = User(
            id=data.id or uuid.uuid4().hex,
            email=email,
            first_name=data.first_name,
            last_name=data.last_name,
            profile_image_url=data.profile_image_url,
            role=SERVER,
        )
        db.add(user)
        logger.info("created user %s (%s)", user.id, email)
    else:
        owner = get_user_by_email(db, email)
        if owner is not None and owner.id != user.id:
            raise ConflictError("Email is already linked to another account")
        user.email = email
        for field in ("first_name", "last_name", "profile_image_url"):
            value = getattr(data, field)
            if value is not None:
                setattr(user, field, value)
    try:
        db.commit()
    except IntegrityError:
        # Another login claimed the same id or email first.
        db.rollback()
        raise ConflictError("Email is already linked to another account")
    db.refresh(user)
    return user


def list_users(db: Session, principal: Principal) -> list[User]:
    ensure_moderator(principal)
    return db.query(User).order_by(User.created_at.desc(), User.id).all()


def update_user_role(db: Session, principal: Principal, user_id: str, role: str) -> User:
    ensure_moderator(principal)
    role = validate_role(role)

    user = get_user(db, user_id)
    if not user:
        raise NotFoundError("User not found", status_code=404)

    previous = user.role
    user.role = role
    db.commit()
    db.refresh(user)
    logger.info("user %s role changed %s -> %s by %s", user_id, previous, role, principal.user_id)
    return user
