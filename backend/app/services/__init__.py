"""Service layer package."""

from app.services import (
    user_service,
    auth_service,
    geo_service,
    session_service,
    stats_service,
    export_service,
)
