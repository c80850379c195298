"""Shapes of the PokeAPI payloads this service consumes.

Only the fields that are read are declared; anything else upstream sends is ignored.
"""

from pydantic import BaseModel, Field


class NamedResource(BaseModel):
    name: str
    url: str


class ListPage(BaseModel):
    count: int
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource]


class TypeSlot(BaseModel):
    type: NamedResource


class AbilitySlot(BaseModel):
    ability: NamedResource


class StatEntry(BaseModel):
    stat: NamedResource
    base_stat: int = Field(ge=0)


class ArtworkSprites(BaseModel):
    front_default: str | None = None


class OtherSprites(BaseModel):
    official_artwork: ArtworkSprites = Field(
        default_factory=ArtworkSprites, alias="official-artwork"
    )


class Sprites(BaseModel):
    front_default: str | None = None
    front_shiny: str | None = None
    other: OtherSprites = Field(default_factory=OtherSprites)


class Pokemon(BaseModel):
    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    height: int = Field(ge=0)
    weight: int = Field(ge=0)
    types: list[TypeSlot] = Field(min_length=1)
    abilities: list[AbilitySlot]
    stats: list[StatEntry]
    sprites: Sprites

    def base_stat(self, name: str) -> int:
        """Return the base value of the named stat, or 0 when upstream omits it."""
        return next((entry.base_stat for entry in self.stats if entry.stat.name == name), 0)
