"""Story-mode progress routes: level, completed games, scenario unlocks."""
import json
import logging
from datetime import datetime, timezone
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from househunt.core.config import get_settings
from househunt.db.session import get_db
from househunt.models.game_result import GameResult
from househunt.models.progress import Progress
from househunt.routers.deps import get_or_create_progress
from househunt.schemas.progress import (
    CompleteGameInSchema,
    CompleteGameOutSchema,
    GameResultSchema,
    LevelInSchema,
    ProgressOutSchema,
    UnlockInSchema,
)
from househunt.services.progress import (
    GAME_TYPES,
    LEVELS,
    SCENARIOS,
    add_unlocked,
    next_scenario,
    should_unlock_next,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/progress", tags=["progress"])
settings = get_settings()


def _check_choice(value: str, allowed: list[str], what: str) -> None:
    if value not in allowed:
        raise HTTPException(status_code=400, detail=f"Invalid {what}")


async def _results_for(db: AsyncSession, progress: Progress) -> list[GameResult]:
    result = await db.execute(
        select(GameResult).where(GameResult.progress_id == progress.id).order_by(GameResult.id.asc())
    )
    return list(result.scalars().all())


async def record_game_result(
    db: AsyncSession,
    progress: Progress,
    scenario: str,
    level: str,
    game_type: str,
    score: int,
) -> Optional[str]:
    """Store best score for the slot, add to total, unlock the next scenario if earned.

    Returns the newly unlocked scenario, if any.
    """
    result = await db.execute(
        select(GameResult).where(
            GameResult.progress_id == progress.id,
            GameResult.scenario == scenario,
            GameResult.level == level,
            GameResult.game_type == game_type,
        )
    )
    existing = result.scalar_one_or_none()
    now = datetime.now(timezone.utc)
    if existing is None:
        db.add(
            GameResult(
                progress_id=progress.id,
                scenario=scenario,
                level=level,
                game_type=game_type,
                score=score,
                completed_at=now,
            )
        )
    else:
        existing.score = max(existing.score, score)
        existing.completed_at = now

    progress.total_score += score
    await db.flush()

    scores = await db.execute(
        select(GameResult.score).where(
            GameResult.progress_id == progress.id,
            GameResult.scenario == scenario,
            GameResult.level == level,
        )
    )
    unlocked_scenario = None
    if should_unlock_next(scores.scalars().all(), settings.unlock_min_games, settings.unlock_min_score):
        candidate = next_scenario(scenario)
        unlocked = json.loads(progress.unlocked_scenarios_json)
        if candidate and add_unlocked(unlocked, candidate):
            progress.unlocked_scenarios_json = json.dumps(unlocked)
            unlocked_scenario = candidate
            logger.info("Player %s unlocked %s", progress.session_id, candidate)

    await db.commit()
    await db.refresh(progress)
    return unlocked_scenario


@router.get("", response_model=ProgressOutSchema)
async def get_progress(
    db: Annotated[AsyncSession, Depends(get_db)],
    progress: Annotated[Progress, Depends(get_or_create_progress)],
):
    """Current level, total score, best game results and unlocked scenarios."""
    results = await _results_for(db, progress)
    return ProgressOutSchema(
        current_level=progress.current_level,
        total_score=progress.total_score,
        unlocked_scenarios=json.loads(progress.unlocked_scenarios_json),
        completed_games=[GameResultSchema.model_validate(r) for r in results],
    )


@router.put("/level")
async def update_level(
    body: LevelInSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
    progress: Annotated[Progress, Depends(get_or_create_progress)],
):
    _check_choice(body.level, LEVELS, "level")
    progress.current_level = body.level
    await db.commit()
    return {"message": f"Level updated to {body.level}", "current_level": body.level}


@router.post("/complete", response_model=CompleteGameOutSchema)
async def complete_game(
    body: CompleteGameInSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
    progress: Annotated[Progress, Depends(get_or_create_progress)],
):
    """Record a finished game; may unlock the next scenario."""
    _check_choice(body.scenario, SCENARIOS, "scenario")
    _check_choice(body.level, LEVELS, "level")
    _check_choice(body.game_type, GAME_TYPES, "game type")

    unlocked_scenario = await record_game_result(
        db, progress, body.scenario, body.level, body.game_type, body.score
    )
    return CompleteGameOutSchema(
        scenario=body.scenario,
        level=body.level,
        game_type=body.game_type,
        score=body.score,
        total_score=progress.total_score,
        unlocked_scenario=unlocked_scenario,
    )


@router.post("/unlock")
async def unlock_scenario(
    body: UnlockInSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
    progress: Annotated[Progress, Depends(get_or_create_progress)],
):
    _check_choice(body.scenario, SCENARIOS, "scenario")
    unlocked = json.loads(progress.unlocked_scenarios_json)
    if add_unlocked(unlocked, body.scenario):
        progress.unlocked_scenarios_json = json.dumps(unlocked)
        await db.commit()
    return {"message": f"{body.scenario} scenario unlocked!", "unlocked_scenarios": unlocked}
