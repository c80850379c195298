import json
from typing import Annotated

import openai
import pydantic
from fastapi import Depends, Request
from loguru import logger
from openai import AsyncOpenAI

from app.core.config import settings
from app.core.errors import ReasoningProviderError
from app.schemas.battle import BattleOutcome
from app.schemas.pokemon import PokemonDetail

SYSTEM_PROMPT = (
    "You are an expert Pokémon battle judge. Carefully analyse both Pokémon and decide the "
    "winner based on their types, stats and elemental advantages. "
    "ALWAYS answer with a valid JSON object."
)


class BattleJudgeService:
    """Asks an OpenAI chat model to decide a battle and narrate it."""

    def __init__(self, client: AsyncOpenAI | None = None) -> None:
        if client is None and settings.openai_api_key:
            client = AsyncOpenAI(
                api_key=settings.openai_api_key, timeout=settings.openai_timeout, max_retries=0
            )
        self.client = client

        if self.client is None:
            logger.warning("OpenAI API key not found. Battles will use fallback logic.")

    def _format_pokemon(self, label: str, pokemon: PokemonDetail) -> str:
        stats = pokemon.stats
        return f"""**{label}: {pokemon.name}**
- Types: {", ".join(pokemon.types)}
- HP: {stats.hp}
- Attack: {stats.attack}
- Defense: {stats.defense}
- Special Attack: {stats.special_attack}
- Special Defense: {stats.special_defense}
- Speed: {stats.speed}"""

    def _build_battle_prompt(self, pokemon1: PokemonDetail, pokemon2: PokemonDetail) -> str:
        return f"""Analyse the following Pokémon battle and decide the winner:

{self._format_pokemon("Pokémon 1", pokemon1)}

{self._format_pokemon("Pokémon 2", pokemon2)}

Consider:
1. Elemental type advantages and disadvantages
2. Base stats of each Pokémon
3. Speed (who attacks first)
4. Resistances and weaknesses

Answer with a JSON object of this exact shape:
{{
  "winner": "pokemon1" or "pokemon2",
  "reasoning": "2-3 sentence technical explanation of why this Pokémon won",
  "battleNarrative": "3-4 sentence epic narrative describing the key moments of the fight"
}}"""

    async def judge(
        self, pokemon1: PokemonDetail, pokemon2: PokemonDetail
    ) -> BattleOutcome | ReasoningProviderError:
        """Decide a battle with the AI judge.

        Never raises: any failure is returned as a ReasoningProviderError so the
        caller can resolve the battle another way.
        """
        if self.client is None:
            return ReasoningProviderError("OpenAI API key not configured")

        logger.info(f"Asking AI judge: {pokemon1.name} vs {pokemon2.name}")
        try:
            response = await self.client.chat.completions.create(
                model=settings.openai_model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": self._build_battle_prompt(pokemon1, pokemon2)},
                ],
                response_format={"type": "json_object"},
                temperature=0.7,
            )
        except openai.OpenAIError as e:
            return ReasoningProviderError(f"OpenAI request failed: {e}")

        content = response.choices[0].message.content if response.choices else None
        if not content:
            return ReasoningProviderError("Empty response from AI")

        try:
            outcome = BattleOutcome.model_validate(json.loads(content))
        except (json.JSONDecodeError, pydantic.ValidationError) as e:
            return ReasoningProviderError(f"Invalid response format from AI: {e}")

        logger.info(f"AI judge picked {outcome.winner}")
        return outcome


def get_battle_judge_service(request: Request) -> BattleJudgeService:
    return request.app.state.battle_judge_service


BattleJudgeServiceDep = Annotated[BattleJudgeService, Depends(get_battle_judge_service)]
