"""Deterministic battle resolution used when the AI judge is unavailable."""

from collections.abc import Sequence

from app.core.enums import BattleWinner
from app.schemas.battle import BattleOutcome
from app.schemas.pokemon import PokemonDetail

# Attacking type -> defending types it is strong against
TYPE_ADVANTAGES: dict[str, frozenset[str]] = {
    "normal": frozenset(),
    "fire": frozenset({"grass", "ice", "bug", "steel"}),
    "water": frozenset({"fire", "ground", "rock"}),
    "grass": frozenset({"water", "ground", "rock"}),
    "electric": frozenset({"water", "flying"}),
    "ice": frozenset({"grass", "ground", "flying", "dragon"}),
    "fighting": frozenset({"normal", "ice", "rock", "dark", "steel"}),
    "poison": frozenset({"grass", "fairy"}),
    "ground": frozenset({"fire", "electric", "poison", "rock", "steel"}),
    "flying": frozenset({"grass", "fighting", "bug"}),
    "psychic": frozenset({"fighting", "poison"}),
    "bug": frozenset({"grass", "psychic", "dark"}),
    "rock": frozenset({"fire", "ice", "flying", "bug"}),
    "ghost": frozenset({"psychic", "ghost"}),
    "dragon": frozenset({"dragon"}),
    "dark": frozenset({"psychic", "ghost"}),
    "steel": frozenset({"ice", "rock", "fairy"}),
    "fairy": frozenset({"fighting", "dragon", "dark"}),
}

ADVANTAGE_MULTIPLIER = 1.5
DISADVANTAGE_MULTIPLIER = 0.75

# Thresholds for the reasoning clauses
SIGNIFICANT_TYPE_MULTIPLIER = 1.2
ATTACK_MARGIN = 20
HP_MARGIN = 15


def calculate_base_score(pokemon: PokemonDetail) -> int:
    return pokemon.stats.total


def calculate_type_multiplier(
    attacker_types: Sequence[str], defender_types: Sequence[str]
) -> float:
    """Multiplier for an attacker over a defender across every pair of their types.

    Each pair can both boost (attacker type is strong against defender type) and
    weaken (defender type is strong against attacker type) the result.
    """
    multiplier = 1.0
    for attacker_type in attacker_types:
        for defender_type in defender_types:
            if defender_type in TYPE_ADVANTAGES.get(attacker_type, ()):
                multiplier *= ADVANTAGE_MULTIPLIER
            if attacker_type in TYPE_ADVANTAGES.get(defender_type, ()):
                multiplier *= DISADVANTAGE_MULTIPLIER
    return multiplier


def build_reasoning(
    winner: PokemonDetail, loser: PokemonDetail, winner_type_multiplier: float
) -> str:
    parts: list[str] = []

    if winner_type_multiplier > SIGNIFICANT_TYPE_MULTIPLIER:
        parts.append(f"{winner.name} has a significant type advantage over {loser.name}")
    if winner.stats.attack > loser.stats.defense + ATTACK_MARGIN:
        parts.append(f"with superior attack power ({winner.stats.attack})")
    if winner.stats.speed > loser.stats.speed:
        parts.append(f"and greater speed ({winner.stats.speed})")
    if winner.stats.hp > loser.stats.hp + HP_MARGIN:
        parts.append(f"combined with greater endurance ({winner.stats.hp} HP)")

    if not parts:
        return (
            f"{winner.name} won by having slightly better stats across every aspect of the battle."
        )
    return ", ".join(parts) + "."


def build_narrative(
    pokemon1: PokemonDetail, pokemon2: PokemonDetail, winner_tag: BattleWinner
) -> str:
    winner, loser = (
        (pokemon1, pokemon2) if winner_tag is BattleWinner.POKEMON1 else (pokemon2, pokemon1)
    )
    faster = pokemon1 if pokemon1.stats.speed > pokemon2.stats.speed else pokemon2

    return (
        f"The battle began with {faster.name} seizing the initiative thanks to its superior speed. "
        f"{loser.name} tried to hold on with its {' and '.join(loser.types)} type attacks, "
        f"but {winner.name} showed overwhelming dominance with devastating blows. "
        f"After an intense exchange of attacks, {winner.name} emerged victorious!"
    )


def simulate_battle(pokemon1: PokemonDetail, pokemon2: PokemonDetail) -> BattleOutcome:
    """Resolve a battle from summed base stats scaled by type matchups.

    Ties go to the second Pokémon.
    """
    pokemon1_multiplier = calculate_type_multiplier(pokemon1.types, pokemon2.types)
    pokemon2_multiplier = calculate_type_multiplier(pokemon2.types, pokemon1.types)

    pokemon1_score = calculate_base_score(pokemon1) * pokemon1_multiplier
    pokemon2_score = calculate_base_score(pokemon2) * pokemon2_multiplier

    if pokemon1_score > pokemon2_score:
        winner_tag, winner, loser, multiplier = (
            BattleWinner.POKEMON1,
            pokemon1,
            pokemon2,
            pokemon1_multiplier,
        )
    else:
        winner_tag, winner, loser, multiplier = (
            BattleWinner.POKEMON2,
            pokemon2,
            pokemon1,
            pokemon2_multiplier,
        )

    return BattleOutcome(
        winner=winner_tag,
        reasoning=build_reasoning(winner, loser, multiplier),
        battle_narrative=build_narrative(pokemon1, pokemon2, winner_tag),
    )
