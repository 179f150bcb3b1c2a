"""Create trainer, pokemon, region, ability and link tables

Revision ID: 001
Revises: None
Create Date: 2024-03-02 00:00:00.000000+00:00

What:  Creates the six tables the service reads and writes.
How:   Lookup tables first (region, ability), then pokemon and trainer, then
       the two link tables with surrogate ids.

Rollback: downgrade() drops every table (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "region",
        sa.Column("region_id", sa.Integer(), nullable=False),
        sa.Column("region_name", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("region_id"),
    )

    op.create_table(
        "ability",
        sa.Column("ability_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("damage", sa.Integer(), nullable=False),
        sa.Column("status_effect", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("ability_id"),
    )

    op.create_table(
        "pokemon",
        sa.Column("pokemon_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("region_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["region_id"], ["region.region_id"]),
        sa.PrimaryKeyConstraint("pokemon_id"),
    )

    # trainer_id is store-assigned (SERIAL)
    op.create_table(
        "trainer",
        sa.Column("trainer_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("gym_leader", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("trainer_id"),
    )

    op.create_table(
        "pokemonabilities",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("pokemon_id", sa.Integer(), nullable=False),
        sa.Column("ability_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["pokemon_id"], ["pokemon.pokemon_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["ability_id"], ["ability.ability_id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_pokemonabilities_pokemon_id", "pokemonabilities", ["pokemon_id"]
    )

    op.create_table(
        "trainerspokemon",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("trainer_id", sa.Integer(), nullable=False),
        sa.Column("pokemon_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["trainer_id"], ["trainer.trainer_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["pokemon_id"], ["pokemon.pokemon_id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_trainerspokemon_trainer_id", "trainerspokemon", ["trainer_id"]
    )


def downgrade() -> None:
    op.drop_index("ix_trainerspokemon_trainer_id", table_name="trainerspokemon")
    op.drop_table("trainerspokemon")
    op.drop_index("ix_pokemonabilities_pokemon_id", table_name="pokemonabilities")
    op.drop_table("pokemonabilities")
    op.drop_table("trainer")
    op.drop_table("pokemon")
    op.drop_table("ability")
    op.drop_table("region")
