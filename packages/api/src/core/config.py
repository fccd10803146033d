# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
Database settings live in ``db.config`` so the db package stays importable on
its own (alembic, scripts).
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parents[4]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "apartment-cost-analyzer"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # -- Server --
    HOST: str = "0.0.0.0"
    PORT: int = Field(default=3001, ge=1, le=65535)

    # -- CORS --
    ALLOWED_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
        "https://apartment-affordability-checker.vercel.app",
        "https://apartment-affordability-checker-pascal-georges-projects.vercel.app",
        "https://apartment-cost-analyzer-backend.vercel.app",
    ]

    # -- Feedback --
    FEEDBACK_MAX_LENGTH: int = Field(
        default=5000,
        ge=1,
        description="Maximum feedback length in characters, measured after trimming.",
    )


settings = Settings()
