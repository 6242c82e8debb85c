"""CSV export of every service session for moderators."""

import csv
import io
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from app.models.session import ServiceSession
from app.utils.permissions import Principal, ensure_moderator
from app.utils.time_utils import as_utc, iso_utc, local_zone

EXPORT_FILENAME = "altar_server_logs.csv"

CSV_HEADER = [
    "User ID",
    "User Name",
    "Email",
    "Service Type",
    "Clock In Time",
    "Clock Out Time",
    "Duration (minutes)",
    "Status",
    "Date",
]


def _iso(value: Optional[datetime]) -> str:
    return iso_utc(value) if value else ""


def session_row(session: ServiceSession) -> list[str]:
    user = session.user
    clock_in = as_utc(session.clock_in_time)
    return [
        session.user_id,
        user.display_name if user else "",
        (user.email or "") if user else "",
        session.service_type or "",
        _iso(session.clock_in_time),
        _iso(session.clock_out_time),
        str(session.duration_minutes or 0),
        "Active" if session.is_active else "Completed",
        clock_in.astimezone(local_zone()).date().isoformat(),
    ]


def export_csv(db: Session, principal: Principal) -> str:
    ensure_moderator(principal)
    sessions = (
        db.query(ServiceSession)
        .options(joinedload(ServiceSession.user))
        .order_by(ServiceSession.clock_in_time.desc())
        .all()
    )

    output = io.StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for session in sessions:
        writer.writerow(session_row(session))
    return output.getvalue()
