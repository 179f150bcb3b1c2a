"""
Trainer API — Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets a fresh SQLite database file (aiosqlite) built from the
       ORM metadata. The app's session dependency is overridden so HTTP tests
       talk to that database instead of PostgreSQL.

Fixture Hierarchy:
    db_engine        → per-test async engine on a temp SQLite file, foreign
                       keys enforced
    session_factory  → async_sessionmaker bound to db_engine
    db_session       → one session, for service / assembler tests
    seeded           → db_session with the standard dataset loaded
    test_client      → httpx AsyncClient over ASGITransport
    mock_db_session  → AsyncMock session for failure paths
"""

import os
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

# Must be set BEFORE any trainer_api import: Settings() fails without a database
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"

from trainer_api.config import settings  # noqa: E402
from trainer_api.database import Base, build_engine, get_db_session  # noqa: E402
from trainer_api.models.pokemon import Ability, Pokemon, PokemonAbility, Region  # noqa: E402
from trainer_api.models.trainer import Trainer, TrainerPokemon  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Standard Dataset
# ══════════════════════════════════════════════════════════════════════════
#
#   Ash   (1, not a leader) owns Pikachu, Charmander, Pikachu (duplicate link)
#   Brock (2, leader)       owns Chikorita
#   Misty (3, leader)       owns nothing
#
#   Pikachu (1, Kanto)    → Thunderbolt, Static
#   Charmander (2, Kanto) → Ember
#   Chikorita (3, Johto)  → no abilities

def standard_rows():
    return [
        Region(region_id=1, region_name="Kanto"),
        Region(region_id=2, region_name="Johto"),
        Ability(ability_id=1, name="Thunderbolt", damage=90, status_effect="paralysis"),
        Ability(ability_id=2, name="Static", damage=0, status_effect="paralysis on contact"),
        Ability(ability_id=3, name="Ember", damage=40, status_effect="burn"),
        Pokemon(pokemon_id=1, name="Pikachu", region_id=1),
        Pokemon(pokemon_id=2, name="Charmander", region_id=1),
        Pokemon(pokemon_id=3, name="Chikorita", region_id=2),
        PokemonAbility(id=1, pokemon_id=1, ability_id=1),
        PokemonAbility(id=2, pokemon_id=1, ability_id=2),
        PokemonAbility(id=3, pokemon_id=2, ability_id=3),
        Trainer(trainer_id=1, name="Ash", gym_leader=False),
        Trainer(trainer_id=2, name="Brock", gym_leader=True),
        Trainer(trainer_id=3, name="Misty", gym_leader=True),
        TrainerPokemon(id=1, trainer_id=1, pokemon_id=1),
        TrainerPokemon(id=2, trainer_id=1, pokemon_id=2),
        TrainerPokemon(id=3, trainer_id=1, pokemon_id=1),
        TrainerPokemon(id=4, trainer_id=2, pokemon_id=3),
    ]


async def load_rows(session: AsyncSession, rows) -> None:
    # Flush in list order: the models declare no relationship(), so the unit
    # of work would not order inserts by foreign-key dependency on its own.
    for row in rows:
        session.add(row)
        await session.flush()
    await session.commit()


async def load_unchecked_rows(session: AsyncSession, rows) -> None:
    """
    Commit rows whose foreign keys point at nothing.

    Foreign key enforcement is switched off for the connection doing the
    insert only; later connections enforce it again.
    """
    await session.execute(text("PRAGMA foreign_keys=OFF"))
    session.add_all(rows)
    await session.commit()


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine(tmp_path):
    engine = build_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'trainer_api.db'}",
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded(db_session) -> AsyncSession:
    """db_session with the standard dataset committed."""
    await load_rows(db_session, standard_rows())
    return db_session


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.side_effect = OperationalError("SELECT 1", {}, Exception())
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture(params=["join", "fanout"])
def assembly_strategy(request, monkeypatch):
    """Runs the requesting test once per assembly strategy."""
    monkeypatch.setattr(settings, "assembly_strategy", request.param)
    return request.param


@pytest.fixture
def strict_mode(monkeypatch):
    monkeypatch.setattr(settings, "strict_not_found", True)


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient talking to the FastAPI app over ASGITransport.

    get_db_session is overridden with the same commit/rollback contract,
    bound to the per-test SQLite database.
    """
    from trainer_api.main import app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
