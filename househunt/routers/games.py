"""Game catalogue routes: which games a scenario+level offers."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from househunt.db.session import get_db
from househunt.models.game_deployment import GameDeployment
from househunt.schemas.progress import AvailableGamesOutSchema, GameSlotSchema
from househunt.services.progress import LEVELS, SCENARIOS, available_games, parse_games

router = APIRouter(prefix="/api/games", tags=["games"])


@router.get("/{scenario}/{level}", response_model=AvailableGamesOutSchema)
async def get_available_games(
    scenario: str,
    level: str,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Active games for the scenario and level; defaults if nothing is deployed."""
    if scenario not in SCENARIOS:
        raise HTTPException(status_code=400, detail="Invalid scenario")
    if level not in LEVELS:
        raise HTTPException(status_code=400, detail="Invalid level")

    result = await db.execute(
        select(GameDeployment).where(
            GameDeployment.scenario == scenario,
            GameDeployment.level == level,
            GameDeployment.is_active.is_(True),
        )
    )
    deployment = result.scalar_one_or_none()
    games = available_games(parse_games(deployment.games_json) if deployment else None)
    return AvailableGamesOutSchema(
        scenario=scenario,
        level=level,
        available_games=[GameSlotSchema.model_validate(game) for game in games],
    )
