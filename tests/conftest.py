"""
Pytest fixtures for House Hunt.

The app reads its settings at import time, so the database url is pointed at a
throwaway SQLite file before anything from househunt is imported.
"""
import os
import random
import sys
import tempfile
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

_db_dir = tempfile.mkdtemp(prefix="househunt-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{Path(_db_dir) / 'test.db'}"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from househunt.services.accommodation_game import Accommodation  # noqa: E402


# =============================================================================
# LISTINGS
# =============================================================================

def make_listing(listing_id, is_scam, **fields):
    """Listing with flags matching its verdict."""
    if is_scam:
        fields.setdefault("red_flags", (f"red flag {listing_id}",))
    else:
        fields.setdefault("green_flags", (f"green flag {listing_id}",))
    return Accommodation(id=listing_id, is_scam=is_scam, title=f"Listing {listing_id}", **fields)


@pytest.fixture
def scam_legit_scam():
    """Three listings: scam, legit, scam."""
    return [make_listing(1, True), make_listing(2, False), make_listing(3, True)]


@pytest.fixture
def ten_listings():
    """Alternating scam / legit listings, ids 0..9."""
    return [make_listing(i, i % 2 == 0) for i in range(10)]


@pytest.fixture
def listing_factory():
    return make_listing


@pytest.fixture
def rng():
    return random.Random(1234)


# =============================================================================
# HTTP
# =============================================================================

@pytest.fixture
def client():
    """TestClient with lifespan (tables, seed data, session registry). Fresh guest cookie each test."""
    from fastapi.testclient import TestClient

    from househunt.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def deploy(client):
    """Insert game deployments straight into the test database; removed afterwards."""
    import json

    from sqlalchemy import create_engine, delete
    from sqlalchemy.engine import make_url
    from sqlalchemy.orm import Session

    from househunt.models.game_deployment import GameDeployment

    url = make_url(os.environ["DATABASE_URL"]).set(drivername="sqlite")
    engine = create_engine(url)

    def _deploy(scenario, level, games, is_active=True):
        with Session(engine) as db:
            db.add(GameDeployment(scenario=scenario, level=level, is_active=is_active, games_json=json.dumps(games)))
            db.commit()

    yield _deploy

    with Session(engine) as db:
        db.execute(delete(GameDeployment))
        db.commit()
    engine.dispose()
