"""Live swipe-game sessions, keyed by id. One registry per app, held on app.state."""
import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional

from househunt.services.accommodation_game import AccommodationGame

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    id: str
    owner: str  # guest session cookie of the player
    level: str
    game: AccommodationGame


class SessionRegistry:
    """In-memory store of running games; the oldest session is evicted past max_sessions."""

    def __init__(self, max_sessions: int = 1000):
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, GameSession]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self, owner: str, game: AccommodationGame) -> GameSession:
        session = GameSession(id=uuid.uuid4().hex, owner=owner, level=game.difficulty, game=game)
        self._sessions[session.id] = session
        while len(self._sessions) > self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info("Evicted swipe session %s (registry full)", evicted_id)
        logger.info("Started swipe session %s at %s with %d listings", session.id, session.level, game.total)
        return session

    def get(self, session_id: str, owner: str) -> Optional[GameSession]:
        """Return the session if it exists and belongs to owner."""
        session = self._sessions.get(session_id)
        if session is None or session.owner != owner:
            return None
        return session

    def discard(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is not None:
            logger.info("Closed swipe session %s", session_id)
