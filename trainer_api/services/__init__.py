# Services package init
"""
Trainer API — Services Layer
==============================

What:  Business logic layer sitting between routes (HTTP) and the database.
How:   Services receive a request-scoped session, run statements through the
       data access layer and return response schemas.

Service Inventory:
    - statements:        SQLAlchemy Core statement builders
    - DataAccess:        query/execute facade, QueryError translation
    - Assembler:         abstract nested-record assembly interface
    - FanOutAssembler:   one round trip per parent and child row
    - JoinAssembler:     one outer-join query per assembly step
    - TrainerService:    list / get / create / delete trainers
    - PokemonService:    list pokemon, list a pokemon's abilities
"""

from trainer_api.config import settings
from trainer_api.services.assembly_base import Assembler
from trainer_api.services.data_access import DataAccess
from trainer_api.services.fanout_assembler import FanOutAssembler
from trainer_api.services.join_assembler import JoinAssembler


def get_assembler(data: DataAccess, strategy: str = "") -> Assembler:
    """Build the assembler selected by `strategy` (default: settings)."""
    if (strategy or settings.assembly_strategy) == "fanout":
        return FanOutAssembler(data)
    return JoinAssembler(data)
