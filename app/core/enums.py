from enum import StrEnum


class BattleWinner(StrEnum):
    POKEMON1 = "pokemon1"
    POKEMON2 = "pokemon2"
