"""
Trainer API — Database Engine Tests
=====================================

What we test:
    ✅ Pool arguments are applied to server databases only
    ✅ SQLite connections enforce foreign keys
    ✅ Deleting a trainer cascades to its ownership links
"""

import pytest
from sqlalchemy import func, select, text
from sqlalchemy.exc import IntegrityError

from tests.conftest import load_rows
from trainer_api.database import engine_options
from trainer_api.models.trainer import TrainerPokemon
from trainer_api.services import statements


class TestEngineOptions:

    def test_postgres_gets_pool_arguments(self):
        options = engine_options("postgresql+asyncpg://ash:pw@db:5432/pokedex")
        assert options["pool_size"] == 20
        assert options["max_overflow"] == 10
        assert options["pool_recycle"] == 3600

    def test_sqlite_skips_pool_arguments(self):
        options = engine_options("sqlite+aiosqlite:///./trainer.db")
        assert "pool_size" not in options
        assert "max_overflow" not in options


class TestForeignKeys:

    @pytest.mark.asyncio
    async def test_pragma_is_on(self, db_session):
        result = await db_session.execute(text("PRAGMA foreign_keys"))
        assert result.scalar_one() == 1

    @pytest.mark.asyncio
    async def test_link_to_missing_trainer_rejected(self, seeded):
        seeded.add(TrainerPokemon(id=20, trainer_id=999, pokemon_id=1))
        with pytest.raises(IntegrityError):
            await seeded.commit()
        await seeded.rollback()

    @pytest.mark.asyncio
    async def test_trainer_delete_cascades(self, seeded):
        await load_rows(seeded, [TrainerPokemon(id=10, trainer_id=3, pokemon_id=2)])

        await seeded.execute(statements.delete_trainer(3))
        await seeded.commit()

        remaining = await seeded.execute(
            select(func.count()).select_from(TrainerPokemon).where(TrainerPokemon.trainer_id == 3)
        )
        assert remaining.scalar_one() == 0
