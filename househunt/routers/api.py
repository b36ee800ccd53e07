"""API routes: JSON for listings and swipe-game sessions."""
import json
import logging
import random
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from househunt.core.config import get_settings
from househunt.db.session import get_db
from househunt.models.listing import Listing
from househunt.models.progress import Progress
from househunt.routers.deps import get_or_create_progress, get_player_id, get_registry
from househunt.routers.progress import record_game_result
from househunt.schemas.game import (
    DecisionInSchema,
    DecisionOutSchema,
    DecisionResultSchema,
    ExplanationSchema,
    FinalScoreSchema,
    SessionStartSchema,
    SessionStateSchema,
    SwipeInSchema,
)
from househunt.schemas.listing import ListingOutSchema
from househunt.services.accommodation_game import (
    Accommodation,
    AccommodationGame,
    DecisionRecord,
    SessionCompleteError,
)
from househunt.services.progress import FIRST_SCENARIO, LEVELS
from househunt.services.sessions import GameSession, SessionRegistry
from househunt.services.swipe import SwipeOutcome, classify_swipe

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])
settings = get_settings()


# ---------- helpers ----------

def to_accommodation(row: Listing) -> Accommodation:
    return Accommodation(
        id=row.id,
        is_scam=row.is_scam,
        red_flags=tuple(json.loads(row.red_flags_json or "[]")),
        green_flags=tuple(json.loads(row.green_flags_json or "[]")),
        title=row.title,
        location=row.location,
        price=row.price,
        deposit=row.deposit,
        description=row.description,
        image=row.image,
    )


def _listing_out(listing: Accommodation) -> ListingOutSchema:
    return ListingOutSchema(
        id=listing.id,
        title=listing.title,
        location=listing.location,
        price=listing.price,
        deposit=listing.deposit,
        description=listing.description,
        image=listing.image,
    )


def _decision_out(record: DecisionRecord) -> DecisionOutSchema:
    explanation = record.explanation
    return DecisionOutSchema(
        listing_id=record.listing.id,
        user_choice=record.user_choice,
        is_correct=record.is_correct,
        actual_is_scam=record.listing.is_scam,
        explanation=ExplanationSchema(
            kind=explanation.kind,
            message=explanation.message,
            flags=list(explanation.flags),
            tips=list(explanation.tips),
        ),
        points_awarded=record.points_awarded,
    )


def _state_out(session: GameSession) -> SessionStateSchema:
    game = session.game
    current = game.get_current_accommodation()
    return SessionStateSchema(
        id=session.id,
        level=session.level,
        position=game.position,
        score=game.score,
        total=game.total,
        is_complete=game.is_complete(),
        current=_listing_out(current) if current is not None else None,
    )


def _decide(session: GameSession, accept: bool) -> DecisionOutSchema:
    try:
        record = session.game.submit_decision(accept)
    except SessionCompleteError:
        raise HTTPException(status_code=409, detail="Game already complete")
    return _decision_out(record)


def get_session(
    session_id: str,
    registry: Annotated[SessionRegistry, Depends(get_registry)],
    player_id: Annotated[str, Depends(get_player_id)],
) -> GameSession:
    session = registry.get(session_id, player_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Game session not found")
    return session


# ---------- listings ----------

@router.get("/accommodations", response_model=list[ListingOutSchema])
async def list_accommodations(db: Annotated[AsyncSession, Depends(get_db)]):
    """All listings, without the verdict or its flags."""
    result = await db.execute(select(Listing).order_by(Listing.id.asc()))
    return [ListingOutSchema.model_validate(row) for row in result.scalars().all()]


# ---------- swipe sessions ----------

@router.post("/swipe-sessions", response_model=SessionStateSchema, status_code=201)
async def start_session(
    db: Annotated[AsyncSession, Depends(get_db)],
    registry: Annotated[SessionRegistry, Depends(get_registry)],
    player_id: Annotated[str, Depends(get_player_id)],
    progress: Annotated[Progress, Depends(get_or_create_progress)],
    body: Optional[SessionStartSchema] = None,
):
    """Start a game over all listings in random order."""
    level = (body.level if body else None) or progress.current_level
    if level not in LEVELS:
        raise HTTPException(status_code=400, detail="Invalid level")

    result = await db.execute(select(Listing))
    listings = [to_accommodation(row) for row in result.scalars().all()]
    random.shuffle(listings)

    session = registry.create(player_id, AccommodationGame(listings, difficulty=level))
    return _state_out(session)


@router.get("/swipe-sessions/{session_id}", response_model=SessionStateSchema)
async def get_session_state(session: Annotated[GameSession, Depends(get_session)]):
    return _state_out(session)


@router.post("/swipe-sessions/{session_id}/decisions", response_model=DecisionResultSchema)
async def submit_decision(
    body: DecisionInSchema,
    session: Annotated[GameSession, Depends(get_session)],
):
    """Accept (legitimate) or reject (scam) the current listing."""
    decision = _decide(session, body.accept)
    return DecisionResultSchema(
        outcome=SwipeOutcome.ACCEPT.value if body.accept else SwipeOutcome.REJECT.value,
        decision=decision,
        session=_state_out(session),
    )


@router.post("/swipe-sessions/{session_id}/swipes", response_model=DecisionResultSchema)
async def submit_swipe(
    body: SwipeInSchema,
    session: Annotated[GameSession, Depends(get_session)],
):
    """Decide from a card release offset; short swipes snap back without a decision."""
    outcome = classify_swipe(body.dx, settings.swipe_threshold)
    decision = None
    if outcome is not SwipeOutcome.CANCEL:
        decision = _decide(session, outcome is SwipeOutcome.ACCEPT)
    return DecisionResultSchema(outcome=outcome.value, decision=decision, session=_state_out(session))


@router.get("/swipe-sessions/{session_id}/summary", response_model=FinalScoreSchema)
async def get_summary(session: Annotated[GameSession, Depends(get_session)]):
    final = session.game.get_final_score()
    return FinalScoreSchema(
        score=final.score,
        total=final.total,
        percentage=final.percentage,
        rating=final.rating,
        history=[_decision_out(r) for r in final.history],
    )


@router.post("/swipe-sessions/{session_id}/reset", response_model=SessionStateSchema)
async def reset_session(session: Annotated[GameSession, Depends(get_session)]):
    session.game.reset()
    return _state_out(session)


@router.post("/swipe-sessions/{session_id}/complete")
async def complete_session(
    db: Annotated[AsyncSession, Depends(get_db)],
    registry: Annotated[SessionRegistry, Depends(get_registry)],
    progress: Annotated[Progress, Depends(get_or_create_progress)],
    session: Annotated[GameSession, Depends(get_session)],
):
    """Save a finished game's percentage to progress and close the session."""
    if not session.game.is_complete():
        raise HTTPException(status_code=409, detail="Game not finished yet")

    final = session.game.get_final_score()
    logger.info("Session %s finished: %d/%d (%s)", session.id, final.score, final.total, final.rating)
    unlocked_scenario = await record_game_result(
        db, progress, FIRST_SCENARIO, session.level, "swipe", final.percentage
    )
    registry.discard(session.id)
    return {
        "score": final.score,
        "total": final.total,
        "percentage": final.percentage,
        "rating": final.rating,
        "total_score": progress.total_score,
        "unlocked_scenario": unlocked_scenario,
    }


@router.delete("/swipe-sessions/{session_id}", status_code=204)
async def delete_session(
    registry: Annotated[SessionRegistry, Depends(get_registry)],
    session: Annotated[GameSession, Depends(get_session)],
):
    registry.discard(session.id)
