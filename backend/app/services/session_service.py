"""Service session ledger: clock-in, clock-out and session history."""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import ConflictError, NotFoundError
from app.models.session import DEFAULT_SERVICE_TYPE, ServiceSession
from app.services.geo_service import verify_church_location
from app.utils.permissions import Principal, ensure_moderator
from app.utils.time_utils import elapsed_minutes, to_db, utcnow

logger = logging.getLogger(__name__)


def get_current_active_session(db: Session, user_id: str) -> Optional[ServiceSession]:
    return (
        db.query(ServiceSession)
        .filter(ServiceSession.user_id == user_id, ServiceSession.is_active == True)  # noqa: E712
        .order_by(ServiceSession.clock_in_time.desc())
        .first()
    )


def clock_in(
    db: Session,
    principal: Principal,
    service_type: Optional[str] = None,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    now: Optional[datetime] = None,
) -> ServiceSession:
    if get_current_active_session(db, principal.user_id):
        logger.warning("clock-in rejected for %s: session already active", principal.user_id)
        raise ConflictError("You are already clocked in")

    location_verified = None
    if latitude is not None and longitude is not None:
        location_verified = verify_church_location(latitude, longitude)

    session = ServiceSession(
        user_id=principal.user_id,
        clock_in_time=to_db(now or utcnow()),
        service_type=" ".join((service_type or "").split()) or DEFAULT_SERVICE_TYPE,
        is_active=True,
        clock_in_latitude=latitude,
        clock_in_longitude=longitude,
        clock_in_location_verified=location_verified,
    )
    db.add(session)
    try:
        db.commit()
    except IntegrityError:
        # A concurrent clock-in committed first; the one-active index caught it.
        db.rollback()
        logger.warning("clock-in for %s lost a race with a concurrent request", principal.user_id)
        raise ConflictError("You are already clocked in")
    db.refresh(session)
    logger.info(
        "user %s clocked in (session %s, location_verified=%s)",
        principal.user_id, session.id, location_verified,
    )
    return session


def clock_out(db: Session, principal: Principal, now: Optional[datetime] = None) -> ServiceSession:
    session = get_current_active_session(db, principal.user_id)
    if not session:
        raise NotFoundError("No active session found")

    clock_out_time = now or utcnow()
    session.clock_out_time = to_db(clock_out_time)
    session.duration_minutes = elapsed_minutes(session.clock_in_time, clock_out_time)
    session.is_active = False
    db.commit()
    db.refresh(session)
    logger.info(
        "user %s clocked out (session %s, %s min)",
        principal.user_id, session.id, session.duration_minutes,
    )
    return session


def get_current_session(db: Session, principal: Principal) -> Optional[ServiceSession]:
    return get_current_active_session(db, principal.user_id)


def get_history(db: Session, principal: Principal, limit: int = 10) -> list[ServiceSession]:
    return (
        db.query(ServiceSession)
        .filter(ServiceSession.user_id == principal.user_id)
        .order_by(ServiceSession.clock_in_time.desc())
        .limit(limit)
        .all()
    )


def list_all_sessions(db: Session, principal: Principal, limit: int = 100) -> list[ServiceSession]:
    ensure_moderator(principal)
    return (
        db.query(ServiceSession)
        .order_by(ServiceSession.clock_in_time.desc())
        .limit(limit)
        .all()
    )
