"""Pydantic schemas for story-mode progress."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class GameResultSchema(BaseModel):
    scenario: str
    level: str
    game_type: str
    score: int
    completed_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProgressOutSchema(BaseModel):
    current_level: str
    total_score: int
    unlocked_scenarios: list[str]
    completed_games: list[GameResultSchema]


class LevelInSchema(BaseModel):
    level: str


class UnlockInSchema(BaseModel):
    scenario: str


class CompleteGameInSchema(BaseModel):
    scenario: str
    level: str
    game_type: str
    score: int = Field(ge=0)


class CompleteGameOutSchema(BaseModel):
    scenario: str
    level: str
    game_type: str
    score: int
    total_score: int
    unlocked_scenario: Optional[str] = None


class GameSlotSchema(BaseModel):
    game_type: str
    is_active: bool
    max_score: int
    time_limit: int

    class Config:
        from_attributes = True


class AvailableGamesOutSchema(BaseModel):
    scenario: str
    level: str
    available_games: list[GameSlotSchema]
