"""Shared fixtures: a fake PokeAPI, Pokémon builders and an in-memory database."""

import os

os.environ["DB_URL"] = "sqlite+aiosqlite://"
os.environ["OPENAI_API_KEY"] = ""

from collections.abc import AsyncGenerator, Callable  # noqa: E402
from typing import Any  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
import sqlmodel  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from app.models.battle import Battle  # noqa: E402, F401
from app.schemas.pokemon import PokemonDetail, PokemonStats  # noqa: E402
from app.services.pokemon import PokemonService  # noqa: E402

POKEAPI_BASE_URL = "https://pokeapi.test/api/v2"

STAT_NAMES = {
    "hp": "hp",
    "attack": "attack",
    "defense": "defense",
    "special_attack": "special-attack",
    "special_defense": "special-defense",
    "speed": "speed",
}


def build_pokemon_payload(
    pokemon_id: int, name: str, types: list[str], **stats: int
) -> dict[str, Any]:
    """Build a PokeAPI /pokemon/{id} payload. Stats not given are left out entirely."""
    return {
        "id": pokemon_id,
        "name": name,
        "height": 7,
        "weight": 69,
        "types": [
            {"slot": slot, "type": {"name": type_, "url": f"{POKEAPI_BASE_URL}/type/{type_}/"}}
            for slot, type_ in enumerate(types, start=1)
        ],
        "abilities": [
            {
                "ability": {"name": f"{name}-ability", "url": f"{POKEAPI_BASE_URL}/ability/1/"},
                "is_hidden": False,
                "slot": 1,
            }
        ],
        "stats": [
            {
                "base_stat": value,
                "effort": 0,
                "stat": {"name": STAT_NAMES[key], "url": f"{POKEAPI_BASE_URL}/stat/1/"},
            }
            for key, value in stats.items()
        ],
        "sprites": {
            "front_default": f"https://img.test/{pokemon_id}.png",
            "front_shiny": f"https://img.test/shiny/{pokemon_id}.png",
            "other": {
                "official-artwork": {"front_default": f"https://img.test/artwork/{pokemon_id}.png"}
            },
        },
    }


DEFAULT_POKEMON = [
    build_pokemon_payload(
        1, "bulbasaur", ["grass", "poison"],
        hp=45, attack=49, defense=49, special_attack=65, special_defense=65, speed=45,
    ),
    build_pokemon_payload(
        4, "charmander", ["fire"],
        hp=39, attack=52, defense=43, special_attack=60, special_defense=50, speed=65,
    ),
    build_pokemon_payload(
        7, "squirtle", ["water"],
        hp=44, attack=48, defense=65, special_attack=50, special_defense=64, speed=43,
    ),
    build_pokemon_payload(
        25, "pikachu", ["electric"],
        hp=35, attack=55, defense=40, special_attack=50, special_defense=50, speed=90,
    ),
]  # fmt: skip


class FakePokeAPI:
    """In-process stand-in for PokeAPI that records every request it serves."""

    def __init__(self, pokemon: list[dict[str, Any]]) -> None:
        self.pokemon: dict[str, dict[str, Any]] = {}
        self.calls: list[str] = []
        self.status_override: int | None = None
        self.raise_error: httpx.HTTPError | None = None
        for payload in pokemon:
            self.add(payload)

    def add(self, payload: dict[str, Any]) -> None:
        self.pokemon[str(payload["id"])] = payload
        self.pokemon[payload["name"]] = payload

    @property
    def unique_pokemon(self) -> list[dict[str, Any]]:
        by_id = {payload["id"]: payload for payload in self.pokemon.values()}
        return [by_id[pokemon_id] for pokemon_id in sorted(by_id)]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request.url.path)
        if self.raise_error is not None:
            raise self.raise_error
        if self.status_override is not None:
            return httpx.Response(self.status_override, text="upstream failure")

        path = request.url.path.removeprefix("/api/v2").rstrip("/")
        if path == "/pokemon":
            limit = int(request.url.params["limit"])
            offset = int(request.url.params["offset"])
            everything = self.unique_pokemon
            return httpx.Response(
                200,
                json={
                    "count": len(everything),
                    "next": None,
                    "previous": None,
                    "results": [
                        {"name": p["name"], "url": f"{POKEAPI_BASE_URL}/pokemon/{p['id']}/"}
                        for p in everything[offset : offset + limit]
                    ],
                },
            )

        payload = self.pokemon.get(path.removeprefix("/pokemon/"))
        if payload is None:
            return httpx.Response(404, text="Not Found")
        return httpx.Response(200, json=payload)


@pytest.fixture()
def pokeapi() -> FakePokeAPI:
    return FakePokeAPI(DEFAULT_POKEMON)


@pytest.fixture()
def pokemon_payload() -> Callable[..., dict[str, Any]]:
    return build_pokemon_payload


@pytest.fixture()
async def pokemon_service(pokeapi: FakePokeAPI) -> AsyncGenerator[PokemonService]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(pokeapi.handler)) as client:
        yield PokemonService(client, POKEAPI_BASE_URL)


@pytest.fixture()
def make_pokemon() -> Callable[..., PokemonDetail]:
    def _make_pokemon(  # noqa: PLR0913
        name: str,
        types: list[str],
        *,
        pokemon_id: int = 1,
        hp: int = 50,
        attack: int = 50,
        defense: int = 50,
        special_attack: int = 50,
        special_defense: int = 50,
        speed: int = 50,
    ) -> PokemonDetail:
        return PokemonDetail(
            id=pokemon_id,
            name=name,
            height=10,
            weight=100,
            types=types,
            abilities=[],
            stats=PokemonStats(
                hp=hp,
                attack=attack,
                defense=defense,
                special_attack=special_attack,
                special_defense=special_defense,
                speed=speed,
            ),
        )

    return _make_pokemon


@pytest.fixture()
async def session() -> AsyncGenerator[AsyncSession]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(sqlmodel.SQLModel.metadata.create_all)

    async with AsyncSession(engine, expire_on_commit=False) as db:
        yield db

    await engine.dispose()
