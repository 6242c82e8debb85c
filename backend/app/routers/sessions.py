"""Service session API router: clock-in/out, history and personal stats."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.middleware.auth_middleware import get_current_principal
from app.schemas.session import ClockInRequest, ServiceSessionOut, UserStatsOut
from app.services import session_service, stats_service
from app.utils.permissions import Principal
from app.utils.pagination import parse_limit

MAX_HISTORY_LIMIT = 500

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.post("/clock-in", response_model=ServiceSessionOut)
def clock_in(
    data: Optional[ClockInRequest] = None,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    data = data or ClockInRequest()
    return session_service.clock_in(
        db,
        principal,
        service_type=data.service_type,
        latitude=data.latitude,
        longitude=data.longitude,
    )


@router.post("/clock-out", response_model=ServiceSessionOut)
def clock_out(
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    return session_service.clock_out(db, principal)


@router.get("/current", response_model=Optional[ServiceSessionOut])
def current_session(
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    return session_service.get_current_session(db, principal)


@router.get("/history", response_model=List[ServiceSessionOut])
def session_history(
    limit: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    return session_service.get_history(
        db, principal, limit=parse_limit(limit, settings.HISTORY_DEFAULT_LIMIT, MAX_HISTORY_LIMIT)
    )


@router.get("/stats", response_model=UserStatsOut)
def my_stats(
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    return stats_service.get_user_stats(db, principal.user_id)
