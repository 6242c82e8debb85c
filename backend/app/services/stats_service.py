"""Hour and service totals over the weekly and monthly reporting windows.

The two windows deliberately differ: "weekly" is a rolling 7x24h period
ending now, "monthly" runs from the start of the current calendar month.
Only completed sessions contribute hours or service counts.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.session import ServiceSession
from app.models.user import User
from app.schemas.session import OverallStatsOut, UserStatsOut
from app.utils.permissions import Principal, ensure_moderator
from app.utils.time_utils import minutes_to_hours, month_window_start, to_db, utcnow, week_window_start


def _completed_totals(db: Session, since: datetime, user_id: Optional[str] = None) -> tuple[int, int]:
    query = db.query(
        func.coalesce(func.sum(ServiceSession.duration_minutes), 0),
        func.count(ServiceSession.id),
    ).filter(
        ServiceSession.clock_in_time >= to_db(since),
        ServiceSession.is_active == False,  # noqa: E712
    )
    if user_id is not None:
        query = query.filter(ServiceSession.user_id == user_id)
    minutes, count = query.one()
    return int(minutes or 0), int(count or 0)


def get_user_stats(db: Session, user_id: str, now: Optional[datetime] = None) -> UserStatsOut:
    now = now or utcnow()
    weekly_minutes, weekly_count = _completed_totals(db, week_window_start(now), user_id)
    monthly_minutes, monthly_count = _completed_totals(db, month_window_start(now), user_id)
    return UserStatsOut(
        weekly_hours=minutes_to_hours(weekly_minutes),
        weekly_services=weekly_count,
        monthly_hours=minutes_to_hours(monthly_minutes),
        monthly_services=monthly_count,
    )


def count_recently_active_users(db: Session, since: datetime) -> int:
    """Distinct users with any session, open or closed, clocked in since `since`."""
    return (
        db.query(func.count(func.distinct(ServiceSession.user_id)))
        .filter(ServiceSession.clock_in_time >= to_db(since))
        .scalar()
        or 0
    )


def get_overall_stats(db: Session, principal: Principal, now: Optional[datetime] = None) -> OverallStatsOut:
    ensure_moderator(principal)
    now = now or utcnow()
    week_start = week_window_start(now)
    weekly_minutes, _ = _completed_totals(db, week_start)
    monthly_minutes, _ = _completed_totals(db, month_window_start(now))
    return OverallStatsOut(
        total_users=db.query(User).count(),
        recently_active_users=count_recently_active_users(db, week_start),
        total_hours_this_week=minutes_to_hours(weekly_minutes),
        total_hours_this_month=minutes_to_hours(monthly_minutes),
    )
