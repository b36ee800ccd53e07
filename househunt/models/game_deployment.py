"""GameDeployment model: which games a scenario+level offers."""
from sqlalchemy import Boolean, Column, Integer, String, Text, UniqueConstraint

from househunt.db.session import Base


class GameDeployment(Base):
    __tablename__ = "game_deployments"
    __table_args__ = (UniqueConstraint("scenario", "level", name="uq_game_deployments_scenario_level"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    scenario = Column(String(64), nullable=False)
    level = Column(String(8), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    # JSON array of {"game_type", "is_active", "max_score", "time_limit"}
    games_json = Column(Text, nullable=False, default="[]")
