from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.schemas.battle import BattleHistory, BattleResult, BattleSimulate
from app.schemas.common import APIResponse
from app.services.battle import BattleService

router = APIRouter(prefix="/battle", tags=["battle"])


@router.post("/simulate")
async def simulate_battle(
    payload: BattleSimulate, service: Annotated[BattleService, Depends()]
) -> APIResponse[BattleResult]:
    result = await service.simulate_battle(payload.pokemon1_id, payload.pokemon2_id)
    return APIResponse(data=result, message="Battle simulated successfully")


@router.get("/history")
async def get_battle_history(
    service: Annotated[BattleService, Depends()],
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
) -> APIResponse[BattleHistory]:
    history = await service.get_battle_history(limit=limit)
    return APIResponse(data=history)
