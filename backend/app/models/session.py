"""Service session (clock-in/clock-out interval) model."""

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.database import Base

DEFAULT_SERVICE_TYPE = "General Service"


class ServiceSession(Base):
    __tablename__ = "service_sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    clock_in_time = Column(DateTime, nullable=False)
    clock_out_time = Column(DateTime, nullable=True)
    service_type = Column(String(100), default=DEFAULT_SERVICE_TYPE)
    duration_minutes = Column(Integer, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    clock_in_latitude = Column(Float, nullable=True)
    clock_in_longitude = Column(Float, nullable=True)
    clock_in_location_verified = Column(Boolean, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="service_sessions")

    __table_args__ = (
        # At most one open session per user.
        Index(
            "uq_service_sessions_one_active",
            user_id,
            unique=True,
            sqlite_where=is_active == True,  # noqa: E712
            postgresql_where=is_active == True,  # noqa: E712
        ),
        Index("ix_service_sessions_clock_in_time", clock_in_time),
    )
