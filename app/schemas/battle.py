from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.core.enums import BattleWinner


class BattleSimulate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    pokemon1_id: str = Field(min_length=1, description="ID or name of the first Pokémon")
    pokemon2_id: str = Field(min_length=1, description="ID or name of the second Pokémon")


class BattleOutcome(BaseModel):
    """Winner and texts of a resolved battle, whichever way it was resolved."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    winner: BattleWinner
    reasoning: str = Field(min_length=1)
    battle_narrative: str = Field(min_length=1, alias="battleNarrative")


class BattlePokemon(BaseModel):
    id: str
    name: str


class BattleResult(BaseModel):
    battle_id: str
    pokemon1: BattlePokemon
    pokemon2: BattlePokemon
    winner: BattlePokemon
    battle_narrative: str
    reasoning: str
    created_at: datetime


class BattleHistoryItem(BaseModel):
    id: str
    pokemon1_id: str
    pokemon1_name: str
    pokemon2_id: str
    pokemon2_name: str
    winner_id: str
    winner_name: str
    battle_log: dict
    created_at: datetime


class BattleHistory(BaseModel):
    total: int
    battles: list[BattleHistoryItem]
