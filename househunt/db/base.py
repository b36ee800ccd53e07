"""SQLAlchemy declarative base and model imports for Alembic."""
from househunt.db.session import Base

# Import all models so Alembic can see them
from househunt.models.game_deployment import GameDeployment  # noqa: F401
from househunt.models.game_result import GameResult  # noqa: F401
from househunt.models.listing import Listing  # noqa: F401
from househunt.models.progress import Progress  # noqa: F401

__all__ = ["Base", "Listing", "Progress", "GameResult", "GameDeployment"]
