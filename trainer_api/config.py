"""
Trainer API — Application Configuration
=========================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
       Missing database credentials fail the process at import time.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.

Database URL resolution:
    1. DATABASE_URL, if set, is used verbatim (any SQLAlchemy async URL).
    2. Otherwise the URL is built from POSTGRES_USER / POSTGRES_PASSWORD /
       POSTGRES_HOST / POSTGRES_PORT / POSTGRES_DB for the asyncpg driver.
       User and password are mandatory in that case.
"""

from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Full async URL, e.g. postgresql+asyncpg://user:pw@host:5432/db
    database_url_override: Optional[str] = Field(
        default=None,
        alias="DATABASE_URL",
        description="Complete async database URL; takes precedence over POSTGRES_*",
    )

    postgres_user: Optional[str] = Field(default=None)
    postgres_password: Optional[str] = Field(default=None)
    postgres_host: str = Field(default="localhost")
    postgres_port: int = Field(default=5432, ge=1, le=65535)
    postgres_db: str = Field(default="postgres")

    # Pool sizing; not applied to SQLite URLs
    db_pool_size: int = Field(default=20, ge=1, le=100)
    db_max_overflow: int = Field(default=10, ge=0, le=50)
    db_pool_pre_ping: bool = Field(default=True)

    # ── Domain Assembly ───────────────────────────────────────────────────
    # "join":   one outer-join query per assembly step
    # "fanout": one round trip per parent row and per child row
    assembly_strategy: str = Field(default="join")

    # When True, zero-row lookups/deletes on a top-level id answer 404
    # instead of an empty list / empty 200.
    strict_not_found: bool = Field(default=False)

    # ── CORS ──────────────────────────────────────────────────────────────
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=3000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @field_validator("assembly_strategy")
    @classmethod
    def validate_assembly_strategy(cls, v: str) -> str:
        lower = v.lower()
        if lower not in {"join", "fanout"}:
            raise ValueError(f"Invalid assembly_strategy '{v}'. Must be 'join' or 'fanout'")
        return lower

    @model_validator(mode="after")
    def require_database_credentials(self) -> "Settings":
        """
        Fails construction when no usable database location is configured.

        Raised at import of this module, so the process never starts
        without somewhere to send queries.
        """
        if self.database_url_override:
            return self
        missing = [
            name
            for name, value in (
                ("POSTGRES_USER", self.postgres_user),
                ("POSTGRES_PASSWORD", self.postgres_password),
            )
            if not value
        ]
        if missing:
            raise ValueError(
                "Database configuration is incomplete. Set DATABASE_URL or: "
                + ", ".join(missing)
            )
        return self

    @property
    def database_url(self) -> str:
        """The async SQLAlchemy URL the engine connects to."""
        if self.database_url_override:
            return self.database_url_override
        return URL.create(
            drivername="postgresql+asyncpg",
            username=self.postgres_user,
            password=self.postgres_password,
            host=self.postgres_host,
            port=self.postgres_port,
            database=self.postgres_db,
        ).render_as_string(hide_password=False)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "populate_by_name": True,
        "extra": "ignore",
    }


# Singleton instance — imported throughout the application
settings = Settings()
