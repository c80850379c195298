from typing import Annotated

from fastapi import APIRouter, Query

from app.schemas.common import APIResponse
from app.schemas.pokemon import PokemonDetail, PokemonList
from app.services.pokemon import PokemonServiceDep

router = APIRouter(prefix="/pokemon", tags=["pokemon"])


@router.get("")
async def get_pokemons(
    service: PokemonServiceDep,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> APIResponse[PokemonList]:
    pokemons = await service.get_pokemons(limit=limit, offset=offset)
    return APIResponse(data=pokemons)


@router.get("/{identifier}")
async def get_pokemon(identifier: str, service: PokemonServiceDep) -> APIResponse[PokemonDetail]:
    pokemon = await service.get_pokemon(identifier)
    return APIResponse(data=pokemon)
