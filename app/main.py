from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.db import engine
from app.core.errors import PokemonAPIError
from app.services.ai import BattleJudgeService
from app.services.pokemon import PokemonService
from app.utils.exception_handlers import (
    general_exception_handler,
    http_exception_handler,
    pokemon_api_exception_handler,
    validation_exception_handler,
)
from app.utils.router_discovery import register_routers


@asynccontextmanager
async def app_lifespan(app: FastAPI) -> AsyncGenerator[None, FastAPI]:
    async with httpx.AsyncClient(timeout=settings.pokeapi_timeout) as client:
        app.state.pokemon_service = PokemonService(client, settings.pokeapi_base_url)
        app.state.battle_judge_service = BattleJudgeService()
        yield

    await engine.dispose()


app = FastAPI(title="Pokémon Battle API", lifespan=app_lifespan)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


register_routers(app)

app.add_exception_handler(PokemonAPIError, pokemon_api_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)


@app.get("/")
async def healthz() -> str:
    return "OK"
