import asyncio
from typing import Annotated, Any

import httpx
from fastapi import Depends, Request
from loguru import logger

from app.core.errors import NotFoundError, RetrievalError
from app.schemas import pokeapi
from app.schemas.pokemon import (
    PokemonDetail,
    PokemonList,
    PokemonSprites,
    PokemonStats,
    PokemonSummary,
)


class PokemonService:
    """PokeAPI client that memoizes every successful response for the process lifetime.

    One instance is created at startup and shared by all requests. Entries are never
    evicted, so a given list page or Pokémon is fetched from upstream at most once.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str) -> None:
        self.client = client
        self.base_url = base_url.rstrip("/")
        self._cache: dict[str, PokemonList | PokemonDetail] = {}

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear_cache(self) -> None:
        self._cache.clear()

    async def _get_json(self, url: str, *, params: dict[str, Any] | None = None) -> Any:
        response = await self.client.get(url, params=params)
        response.raise_for_status()
        return response.json()

    async def _get_pokemon_summary(self, url: str) -> PokemonSummary:
        data = pokeapi.Pokemon.model_validate(await self._get_json(url))
        return PokemonSummary(
            id=data.id,
            name=data.name,
            types=[slot.type.name for slot in data.types],
            image=data.sprites.other.official_artwork.front_default,
        )

    async def get_pokemons(self, limit: int = 20, offset: int = 0) -> PokemonList:
        """Get a page of Pokémon with the image and types of each one.

        Args:
            limit: Number of Pokémon to return (1-100).
            offset: Number of Pokémon to skip.

        Raises:
            RetrievalError: If the page or any of its Pokémon could not be fetched.
        """
        cache_key = f"list:{limit}:{offset}"
        if (cached := self._cache.get(cache_key)) is not None:
            return cached  # pyright: ignore[reportReturnType]

        try:
            page = pokeapi.ListPage.model_validate(
                await self._get_json(
                    f"{self.base_url}/pokemon", params={"limit": limit, "offset": offset}
                )
            )
            results = await asyncio.gather(
                *(self._get_pokemon_summary(resource.url) for resource in page.results)
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Failed to fetch Pokémon list (limit={limit}, offset={offset}): {e}")
            msg = "Failed to fetch Pokémon from PokeAPI"
            raise RetrievalError(msg) from e

        result = PokemonList(
            count=page.count, next=page.next, previous=page.previous, results=list(results)
        )
        self._cache[cache_key] = result
        return result

    async def get_pokemon(self, identifier: str | int) -> PokemonDetail:
        """Get the full record of a Pokémon by ID or name.

        Raises:
            NotFoundError: If PokeAPI has no Pokémon with this identifier.
            RetrievalError: If PokeAPI could not be reached or sent an unexpected payload.
        """
        cache_key = f"detail:{identifier}"
        if (cached := self._cache.get(cache_key)) is not None:
            return cached  # pyright: ignore[reportReturnType]

        try:
            data = pokeapi.Pokemon.model_validate(
                await self._get_json(f"{self.base_url}/pokemon/{identifier}")
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code == httpx.codes.NOT_FOUND:
                raise NotFoundError(identifier) from e
            logger.error(f"PokeAPI returned {e.response.status_code} for Pokémon {identifier}")
            msg = "Failed to fetch Pokémon details"
            raise RetrievalError(msg) from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Failed to fetch Pokémon {identifier}: {e}")
            msg = "Failed to fetch Pokémon details"
            raise RetrievalError(msg) from e

        result = PokemonDetail(
            id=data.id,
            name=data.name,
            height=data.height,
            weight=data.weight,
            types=[slot.type.name for slot in data.types],
            abilities=[slot.ability.name for slot in data.abilities],
            stats=PokemonStats(
                hp=data.base_stat("hp"),
                attack=data.base_stat("attack"),
                defense=data.base_stat("defense"),
                special_attack=data.base_stat("special-attack"),
                special_defense=data.base_stat("special-defense"),
                speed=data.base_stat("speed"),
            ),
            sprites=PokemonSprites(
                front_default=data.sprites.front_default,
                front_shiny=data.sprites.front_shiny,
                official_artwork=data.sprites.other.official_artwork.front_default,
            ),
        )
        self._cache[cache_key] = result
        return result


def get_pokemon_service(request: Request) -> PokemonService:
    return request.app.state.pokemon_service


PokemonServiceDep = Annotated[PokemonService, Depends(get_pokemon_service)]
