"""
Trainer API — Trainer Request/Response Schemas
================================================

What:  Pydantic models for trainers in request and response bodies.

Canonical Trainer shape:
    {trainer_id, name, gym_leader, pokemon}
    - pokemon: resolved roster on GET /trainer; null on GET /trainer/{id}
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from trainer_api.schemas.pokemon import Pokemon


class Trainer(BaseModel):
    model_config = ConfigDict(frozen=True)

    trainer_id: int = Field(description="Store-assigned trainer identifier")
    name: str = Field(description="Trainer name")
    gym_leader: bool = Field(description="Whether the trainer leads a gym")
    pokemon: Optional[List[Pokemon]] = Field(
        default=None,
        description="Owned creatures; null when the roster is not resolved",
    )


class TrainerListResponse(BaseModel):
    """Body of GET /trainer and GET /trainer/{id}."""

    trainers: List[Trainer]


class TrainerCreate(BaseModel):
    """
    Body of POST /trainer.

    Lax pydantic coercion applies ("true" → True); nothing beyond type
    coercion is validated.
    """

    name: str
    gym_leader: bool
