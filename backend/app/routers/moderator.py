"""Moderator API router: user roles, all sessions, overall stats and CSV export."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.middleware.auth_middleware import require_moderator
from app.schemas.session import OverallStatsOut, ServiceSessionOut
from app.schemas.user import UserOut, UserRoleUpdate
from app.services import export_service, session_service, stats_service, user_service
from app.utils.permissions import Principal
from app.utils.pagination import parse_limit

MAX_SESSIONS_LIMIT = 5000

router = APIRouter(prefix="/api/moderator", tags=["moderator"])


@router.get("/users", response_model=List[UserOut])
def list_users(
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_moderator),
):
    return user_service.list_users(db, principal)


@router.get("/sessions", response_model=List[ServiceSessionOut])
def list_sessions(
    limit: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_moderator),
):
    return session_service.list_all_sessions(
        db, principal, limit=parse_limit(limit, settings.MODERATOR_SESSIONS_DEFAULT_LIMIT, MAX_SESSIONS_LIMIT)
    )


@router.get("/stats", response_model=OverallStatsOut)
def overall_stats(
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_moderator),
):
    return stats_service.get_overall_stats(db, principal)


@router.put("/users/{user_id}/role", response_model=UserOut)
def update_user_role(
    user_id: str,
    data: UserRoleUpdate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_moderator),
):
    return user_service.update_user_role(db, principal, user_id, data.role)


@router.get("/export")
def export_sessions(
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_moderator),
):
    csv_text = export_service.export_csv(db, principal)
    return Response(
        content=csv_text,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{export_service.EXPORT_FILENAME}"'},
    )
