# backend/fieldbook/core/config.py
from functools import lru_cache
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

logger = logging.getLogger(__name__)

_BACKEND_ROOT = Path(__file__).resolve().parents[2]

# Load .env file only if not in CI
if not os.getenv("CI"):
    env_path = _BACKEND_ROOT / ".env"
    logger.debug("[CONFIG] Looking for .env at: %s (exists=%s)", env_path, env_path.exists())
    load_dotenv(env_path)


class Settings(BaseSettings):
    """
    Process configuration read from the environment.

    Every field without a default is required; a missing or malformed value
    raises pydantic.ValidationError when Settings() is constructed.
    """

    # Application
    app_port: int = Field(..., description="Port the HTTP server binds to")
    app_host: str = "0.0.0.0"
    log_level: str = "INFO"

    # Tokens
    jwt_secret: SecretStr = Field(..., description="HMAC secret for signing access tokens")
    jwt_algorithm: str = "HS256"
    access_token_expire_hours: int = Field(default=24, gt=0)

    # PostgreSQL
    postgres_host: str = Field(...)
    postgres_port: int = Field(...)
    postgres_dbname: str = Field(...)
    postgres_username: str = Field(...)
    postgres_password: SecretStr = Field(...)

    database_url_override: Optional[str] = Field(
        default=None,
        alias="DATABASE_URL",
        description="Full SQLAlchemy URL; takes precedence over the POSTGRES_* values",
    )

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    @field_validator(
        "postgres_host",
        "postgres_dbname",
        "postgres_username",
        "log_level",
        mode="after",
    )
    @classmethod
    def _require_non_blank(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("jwt_secret", "postgres_password", mode="after")
    @classmethod
    def _require_non_blank_secret(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("app_port", "postgres_port", mode="after")
    @classmethod
    def _validate_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError(f"invalid port {value}")
        return value

    @field_validator("log_level", mode="after")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the configured database."""
        if self.database_url_override:
            return self.database_url_override
        url = URL.create(
            "postgresql+psycopg2",
            username=self.postgres_username,
            password=self.postgres_password.get_secret_value(),
            host=self.postgres_host,
            port=self.postgres_port,
            database=self.postgres_dbname,
        )
        return url.render_as_string(hide_password=False)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build settings once per process."""
    return Settings()
