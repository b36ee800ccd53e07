"""Shared request dependencies: guest identity, progress row, live-session registry."""
import json
import uuid
from typing import Annotated

from fastapi import Depends, Request, Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from househunt.core.config import get_settings
from househunt.db.session import get_db
from househunt.models.progress import Progress
from househunt.services.progress import FIRST_SCENARIO
from househunt.services.sessions import SessionRegistry

settings = get_settings()


def get_player_id(request: Request, response: Response) -> str:
    """Guest id from the session cookie; issue a new one on first contact."""
    sid = request.cookies.get(settings.session_cookie_name)
    if not sid:
        sid = str(uuid.uuid4())
        response.set_cookie(
            key=settings.session_cookie_name,
            value=sid,
            max_age=settings.session_cookie_max_age,
            httponly=True,
            samesite="lax",
        )
    return sid


async def get_or_create_progress(
    db: Annotated[AsyncSession, Depends(get_db)],
    player_id: Annotated[str, Depends(get_player_id)],
) -> Progress:
    result = await db.execute(select(Progress).where(Progress.session_id == player_id))
    progress = result.scalar_one_or_none()

    if progress is None:
        progress = Progress(
            session_id=player_id,
            current_level=settings.default_level,
            total_score=0,
            unlocked_scenarios_json=json.dumps([FIRST_SCENARIO]),
        )
        db.add(progress)
        await db.commit()
        await db.refresh(progress)

    return progress


def get_registry(request: Request) -> SessionRegistry:
    return request.app.state.sessions
