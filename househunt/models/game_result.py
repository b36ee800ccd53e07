"""GameResult model: best score for one game type within a scenario and level."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from househunt.db.session import Base


class GameResult(Base):
    __tablename__ = "game_results"
    __table_args__ = (
        UniqueConstraint("progress_id", "scenario", "level", "game_type", name="uq_game_results_slot"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    progress_id = Column(Integer, ForeignKey("progress.id"), nullable=False, index=True)
    scenario = Column(String(64), nullable=False)
    level = Column(String(8), nullable=False)
    game_type = Column(String(64), nullable=False)
    score = Column(Integer, nullable=False, default=0)  # best score so far
    completed_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    progress = relationship("Progress", back_populates="results")
