from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PokemonSummary(BaseModel):
    id: int
    name: str
    types: list[str]
    image: str | None


class PokemonList(BaseModel):
    count: int
    next: str | None
    previous: str | None
    results: list[PokemonSummary]


class PokemonStats(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    hp: int = Field(default=0, ge=0)
    attack: int = Field(default=0, ge=0)
    defense: int = Field(default=0, ge=0)
    special_attack: int = Field(default=0, ge=0)
    special_defense: int = Field(default=0, ge=0)
    speed: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return (
            self.hp
            + self.attack
            + self.defense
            + self.special_attack
            + self.special_defense
            + self.speed
        )


class PokemonSprites(BaseModel):
    front_default: str | None = None
    front_shiny: str | None = None
    official_artwork: str | None = None


class PokemonDetail(BaseModel):
    id: int
    name: str
    height: int
    weight: int
    types: list[str]
    abilities: list[str]
    stats: PokemonStats
    sprites: PokemonSprites = Field(default_factory=PokemonSprites)
