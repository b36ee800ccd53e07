"""House Hunt - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from househunt.core.config import get_settings
from househunt.db.base import Base
from househunt.db.session import engine, AsyncSessionLocal
from househunt.routers import api, games, progress
from househunt.services.seeding import seed_listings
from househunt.services.sessions import SessionRegistry

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as db:
        await seed_listings(db)

    app.state.sessions = SessionRegistry(max_sessions=settings.max_live_sessions)
    logger.info("%s ready", settings.app_name)

    yield

    await engine.dispose()


app = FastAPI(
    title="House Hunt",
    description="Language-learning story game: spot the accommodation scams",
    lifespan=lifespan,
)

app.include_router(api.router)
app.include_router(progress.router)
app.include_router(games.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
