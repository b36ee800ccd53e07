"""Progress model: one per guest session. Tracks level, total score and unlocked scenarios."""
from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from househunt.db.session import Base


class Progress(Base):
    __tablename__ = "progress"

    id = Column(Integer, primary_key=True, autoincrement=True)
    session_id = Column(String(64), unique=True, nullable=False, index=True)

    current_level = Column(String(8), nullable=False, default="A1")  # A1 | A2 | B1 | B2
    total_score = Column(Integer, nullable=False, default=0)
    # JSON array of scenario keys in unlock order
    unlocked_scenarios_json = Column(Text, nullable=False, default='["accommodation"]')

    results = relationship("GameResult", back_populates="progress", order_by="GameResult.id")
