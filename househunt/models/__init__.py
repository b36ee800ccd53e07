from househunt.models.listing import Listing
from househunt.models.progress import Progress
from househunt.models.game_result import GameResult
from househunt.models.game_deployment import GameDeployment

__all__ = ["Listing", "Progress", "GameResult", "GameDeployment"]
