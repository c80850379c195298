import asyncio
from typing import Annotated

from fastapi import Depends
from loguru import logger
from sqlmodel import col, desc, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.db import get_db
from app.core.enums import BattleWinner
from app.core.errors import ReasoningProviderError, ValidationError
from app.models.battle import Battle
from app.schemas.battle import (
    BattleHistory,
    BattleHistoryItem,
    BattleOutcome,
    BattlePokemon,
    BattleResult,
)
from app.services.ai import BattleJudgeServiceDep
from app.services.pokemon import PokemonServiceDep
from app.utils.battle import simulate_battle


class BattleService:
    """Runs battles between Pokémon and keeps their history."""

    def __init__(
        self,
        db: Annotated[AsyncSession, Depends(get_db)],
        pokemon_service: PokemonServiceDep,
        judge_service: BattleJudgeServiceDep,
    ) -> None:
        self.db = db
        self.pokemon_service = pokemon_service
        self.judge_service = judge_service

    async def simulate_battle(self, pokemon1_id: str, pokemon2_id: str) -> BattleResult:
        """Simulate a battle between two Pokémon and save it.

        The AI judge is tried first; if it fails for any reason the battle is
        resolved from base stats and type matchups instead.

        Args:
            pokemon1_id: ID or name of the first Pokémon.
            pokemon2_id: ID or name of the second Pokémon.

        Raises:
            ValidationError: If both identifiers refer to the same Pokémon.
            NotFoundError: If either Pokémon does not exist.
            RetrievalError: If PokeAPI could not be reached.
        """
        if pokemon1_id.lower() == pokemon2_id.lower():
            msg = "Cannot simulate a battle between the same Pokémon"
            raise ValidationError(msg)

        logger.info(f"Starting battle: {pokemon1_id} vs {pokemon2_id}")

        pokemon1, pokemon2 = await asyncio.gather(
            self.pokemon_service.get_pokemon(pokemon1_id),
            self.pokemon_service.get_pokemon(pokemon2_id),
        )

        outcome: BattleOutcome
        match await self.judge_service.judge(pokemon1, pokemon2):
            case BattleOutcome() as judged:
                logger.info("Battle simulated using AI")
                outcome = judged
            case ReasoningProviderError() as error:
                logger.warning(f"AI simulation failed: {error.message}. Using fallback logic.")
                outcome = simulate_battle(pokemon1, pokemon2)

        winner = pokemon1 if outcome.winner is BattleWinner.POKEMON1 else pokemon2

        battle = Battle(
            pokemon1_id=str(pokemon1.id),
            pokemon1_name=pokemon1.name,
            pokemon2_id=str(pokemon2.id),
            pokemon2_name=pokemon2.name,
            winner_id=str(winner.id),
            winner_name=winner.name,
            battle_log={
                "reasoning": outcome.reasoning,
                "battleNarrative": outcome.battle_narrative,
                "pokemon1Stats": pokemon1.stats.model_dump(by_alias=True),
                "pokemon2Stats": pokemon2.stats.model_dump(by_alias=True),
            },
        )
        self.db.add(battle)
        await self.db.commit()
        await self.db.refresh(battle)
        logger.info(f"Battle saved with ID: {battle.id}")

        return BattleResult(
            battle_id=battle.id,
            pokemon1=BattlePokemon(id=battle.pokemon1_id, name=battle.pokemon1_name),
            pokemon2=BattlePokemon(id=battle.pokemon2_id, name=battle.pokemon2_name),
            winner=BattlePokemon(id=battle.winner_id, name=battle.winner_name),
            battle_narrative=outcome.battle_narrative,
            reasoning=outcome.reasoning,
            created_at=battle.created_at,
        )

    async def get_battle_history(self, limit: int = 10) -> BattleHistory:
        total_result = await self.db.exec(select(func.count()).select_from(Battle))
        total = total_result.one()

        result = await self.db.exec(
            select(Battle).order_by(desc(col(Battle.created_at))).limit(limit)
        )
        battles = [
            BattleHistoryItem.model_validate(battle, from_attributes=True)
            for battle in result.all()
        ]

        return BattleHistory(total=total, battles=battles)
