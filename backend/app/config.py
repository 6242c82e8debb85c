"""Centralised application settings loaded from environment variables."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./altar_server.db"
    SECRET_KEY: str = "change-me-to-a-random-secret-key"
    DEBUG: bool = True
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]
    LOG_LEVEL: str = "INFO"

    # JWT / session cookie
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 7 * 24 * 60  # one week
    SESSION_COOKIE_NAME: str = "altar_session"
    SESSION_COOKIE_SECURE: bool = False

    # Calendar month boundaries are computed in this timezone
    TIMEZONE: str = "America/New_York"

    HISTORY_DEFAULT_LIMIT: int = 10
    MODERATOR_SESSIONS_DEFAULT_LIMIT: int = 100

    class Config:
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
