"""Pydantic schemas for swipe-game sessions, decisions and summaries."""
from typing import Literal, Optional

from pydantic import BaseModel

from househunt.schemas.listing import ListingOutSchema


class SessionStartSchema(BaseModel):
    level: Optional[str] = None  # defaults to the player's current level


class DecisionInSchema(BaseModel):
    accept: bool  # True = legitimate, False = scam


class SwipeInSchema(BaseModel):
    dx: float
    dy: float = 0.0


class ExplanationSchema(BaseModel):
    kind: Literal["scam", "legitimate"]
    message: str
    flags: list[str]
    tips: list[str]


class DecisionOutSchema(BaseModel):
    listing_id: int
    user_choice: bool
    is_correct: bool
    actual_is_scam: bool
    explanation: ExplanationSchema
    points_awarded: int


class SessionStateSchema(BaseModel):
    id: str
    level: str
    position: int
    score: int
    total: int
    is_complete: bool
    current: Optional[ListingOutSchema] = None


class DecisionResultSchema(BaseModel):
    outcome: Literal["accept", "reject", "cancel"]
    decision: Optional[DecisionOutSchema] = None
    session: SessionStateSchema


class FinalScoreSchema(BaseModel):
    score: int
    total: int
    percentage: int
    rating: str
    history: list[DecisionOutSchema]
