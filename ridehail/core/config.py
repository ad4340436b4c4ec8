"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables and .env file. Required
values have no defaults, so a missing one stops the process at import time.
"""
import re
from datetime import timedelta
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DURATION_PATTERN = re.compile(r"^\s*(\d+)\s*([smhdw]?)\s*$")

_DURATION_UNITS = {
    "": "seconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
    "w": "weeks",
}


def parse_duration(value: str) -> timedelta:
    """Parse a compact duration such as ``"1d"``, ``"12h"`` or ``"3600"``.

    A bare number is read as seconds.

    Raises:
        ValueError: If the value is not a positive duration
    """
    match = _DURATION_PATTERN.match(value or "")
    if match is None:
        raise ValueError(f"Invalid duration: {value!r}")

    amount, unit = int(match.group(1)), match.group(2).lower()
    if amount <= 0:
        raise ValueError(f"Duration must be positive: {value!r}")

    return timedelta(**{_DURATION_UNITS[unit]: amount})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # =========================================================================
    # Application
    # =========================================================================
    app_name: str = "Ride Hailing Backend"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"
    port: int = Field(..., ge=1, le=65535, description="HTTP port to listen on")
    author_name: str = Field(..., min_length=1, description="Display name shown at startup")
    cors_origins: list[str] = ["*"]

    # =========================================================================
    # Security & Authentication
    # =========================================================================
    jwt_secret: str = Field(
        ...,
        min_length=1,
        description="Secret key for JWT signing (use openssl rand -hex 32)",
    )
    jwt_algorithm: str = "HS256"
    jwt_expires_in: str = Field(
        ...,
        description="Token lifetime, e.g. 1d, 12h, 30m or seconds",
    )

    encryption_key: str = Field(
        ...,
        min_length=32,
        description="Symmetric key for national ID encryption (first 32 chars used)",
    )

    # =========================================================================
    # Database
    # =========================================================================
    database_url: str = Field(
        ...,
        description="PostgreSQL connection URL (async)",
    )

    db_pool_size: int = 10
    db_max_overflow: int = 20

    @field_validator("jwt_expires_in")
    @classmethod
    def expiry_must_parse(cls, v: str) -> str:
        parse_duration(v)
        return v

    @property
    def jwt_expires_delta(self) -> timedelta:
        """Token lifetime as a timedelta."""
        return parse_duration(self.jwt_expires_in)

    @property
    def database_url_sync(self) -> str:
        """Sync psycopg2 URL for Alembic migrations."""
        _, sep, rest = self.database_url.partition("://")
        return f"postgresql+psycopg2{sep}{rest}" if sep else self.database_url


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience alias
settings = get_settings()
