"""Service session request/response schemas."""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from app.schemas.common import ApiIn, ApiOut, utc_or_none


class ClockInRequest(ApiIn):
    service_type: Optional[str] = Field(default=None, max_length=100)
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class ServiceSessionOut(ApiOut):
    id: int
    user_id: str
    clock_in_time: datetime
    clock_out_time: Optional[datetime] = None
    service_type: Optional[str] = None
    duration_minutes: Optional[int] = Field(default=None, serialization_alias="duration")
    is_active: bool
    clock_in_latitude: Optional[float] = None
    clock_in_longitude: Optional[float] = None
    clock_in_location_verified: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("clock_in_time", "clock_out_time", "created_at", "updated_at")
    @classmethod
    def ensure_utc(cls, value):
        return utc_or_none(value)


class UserStatsOut(ApiOut):
    weekly_hours: float
    weekly_services: int
    monthly_hours: float
    monthly_services: int


class OverallStatsOut(ApiOut):
    total_users: int
    # Distinct users with any session clocked in during the trailing week.
    recently_active_users: int = Field(serialization_alias="totalActiveUsers")
    total_hours_this_week: float
    total_hours_this_month: float
