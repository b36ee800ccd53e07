from househunt.schemas.game import (
    DecisionInSchema,
    DecisionOutSchema,
    FinalScoreSchema,
    SessionStateSchema,
    SwipeInSchema,
)
from househunt.schemas.listing import ListingOutSchema
from househunt.schemas.progress import CompleteGameInSchema, ProgressOutSchema

__all__ = [
    "CompleteGameInSchema",
    "DecisionInSchema",
    "DecisionOutSchema",
    "FinalScoreSchema",
    "ListingOutSchema",
    "ProgressOutSchema",
    "SessionStateSchema",
    "SwipeInSchema",
]
