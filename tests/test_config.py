"""
Trainer API — Configuration Tests
===================================

What we test:
    ✅ Missing database credentials fail Settings construction
    ✅ DATABASE_URL takes precedence over the POSTGRES_* parts
    ✅ The asyncpg URL is built from parts, with the password escaped
    ✅ Invalid strategy / log level are rejected
"""

import pytest
from pydantic import ValidationError

from trainer_api.config import Settings

DB_ENV = (
    "DATABASE_URL",
    "POSTGRES_USER",
    "POSTGRES_PASSWORD",
    "POSTGRES_HOST",
    "POSTGRES_PORT",
    "POSTGRES_DB",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in DB_ENV:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestDatabaseSettings:

    def test_missing_credentials_is_fatal(self, clean_env):
        with pytest.raises(ValidationError, match="POSTGRES_USER"):
            Settings(_env_file=None)

    def test_missing_password_is_fatal(self, clean_env):
        clean_env.setenv("POSTGRES_USER", "ash")
        with pytest.raises(ValidationError, match="POSTGRES_PASSWORD"):
            Settings(_env_file=None)

    def test_url_built_from_parts(self, clean_env):
        clean_env.setenv("POSTGRES_USER", "ash")
        clean_env.setenv("POSTGRES_PASSWORD", "pika@chu")
        clean_env.setenv("POSTGRES_HOST", "db")
        clean_env.setenv("POSTGRES_DB", "pokedex")

        settings = Settings(_env_file=None)

        assert settings.database_url == "postgresql+asyncpg://ash:pika%40chu@db:5432/pokedex"

    def test_database_url_wins(self, clean_env):
        clean_env.setenv("DATABASE_URL", "sqlite+aiosqlite:///./other.db")
        clean_env.setenv("POSTGRES_USER", "ash")

        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite+aiosqlite:///./other.db"


class TestBehaviourSettings:

    def test_defaults(self, clean_env):
        clean_env.setenv("DATABASE_URL", "sqlite+aiosqlite:///./x.db")
        clean_env.delenv("LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.assembly_strategy == "join"
        assert settings.strict_not_found is False
        assert settings.backend_port == 3000
        assert settings.cors_origins_list == ["*"]

    def test_strategy_is_normalized(self, clean_env):
        clean_env.setenv("DATABASE_URL", "sqlite+aiosqlite:///./x.db")
        clean_env.setenv("ASSEMBLY_STRATEGY", "FanOut")
        assert Settings(_env_file=None).assembly_strategy == "fanout"

    def test_invalid_strategy(self, clean_env):
        clean_env.setenv("DATABASE_URL", "sqlite+aiosqlite:///./x.db")
        clean_env.setenv("ASSEMBLY_STRATEGY", "graphql")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_invalid_log_level(self, clean_env):
        clean_env.setenv("DATABASE_URL", "sqlite+aiosqlite:///./x.db")
        clean_env.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_cors_origins_split(self, clean_env):
        clean_env.setenv("DATABASE_URL", "sqlite+aiosqlite:///./x.db")
        clean_env.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
        assert Settings(_env_file=None).cors_origins_list == ["http://a.test", "http://b.test"]
