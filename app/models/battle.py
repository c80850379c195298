import uuid

import sqlmodel

from ._base import BaseModel


def _generate_battle_id() -> str:
    return str(uuid.uuid4())


class Battle(BaseModel, table=True):
    __tablename__: str = "battles"

    id: str = sqlmodel.Field(default_factory=_generate_battle_id, primary_key=True, max_length=36)
    pokemon1_id: str
    pokemon1_name: str
    pokemon2_id: str
    pokemon2_name: str
    winner_id: str
    winner_name: str
    # reasoning, battleNarrative, pokemon1Stats, pokemon2Stats
    battle_log: dict = sqlmodel.Field(sa_column=sqlmodel.Column(sqlmodel.JSON, nullable=False))
