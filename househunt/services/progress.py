"""Story-mode rules: fixed enumerations, scenario order and the unlock policy."""
import json
from dataclasses import dataclass
from typing import Iterable, Optional

# Story order; each scenario unlocks the next
SCENARIOS = ["accommodation", "city_registration", "university", "banking", "everyday_items"]
LEVELS = ["A1", "A2", "B1", "B2"]
GAME_TYPES = ["jumbled_letters", "taboo", "quiz", "memory_game", "memory", "scrabble", "anagrams", "swipe"]

FIRST_SCENARIO = SCENARIOS[0]

# Unlock: at least 2 games of the scenario+level scored 50 or more
UNLOCK_MIN_GAMES = 2
UNLOCK_MIN_SCORE = 50


@dataclass(frozen=True)
class GameSlot:
    """One game offered in a scenario+level."""

    game_type: str
    is_active: bool = True
    max_score: int = 100
    time_limit: int = 10  # minutes


# Offered when no deployment is configured for a scenario+level
DEFAULT_GAMES = (
    GameSlot("memory", time_limit=10),
    GameSlot("scrabble", time_limit=15),
    GameSlot("anagrams", time_limit=8),
)


def should_unlock_next(
    game_scores: Iterable[int],
    min_games: int = UNLOCK_MIN_GAMES,
    min_score: int = UNLOCK_MIN_SCORE,
) -> bool:
    """True when enough completed games of one scenario+level reached min_score."""
    return sum(1 for score in game_scores if score >= min_score) >= min_games


def next_scenario(scenario: str) -> Optional[str]:
    """Scenario that follows in story order; None for the last or an unknown one."""
    if scenario not in SCENARIOS:
        return None
    idx = SCENARIOS.index(scenario)
    if idx >= len(SCENARIOS) - 1:
        return None
    return SCENARIOS[idx + 1]


def add_unlocked(unlocked: list[str], scenario: str) -> bool:
    """Append scenario to the unlocked list unless already there. Returns True if added."""
    if scenario in unlocked:
        return False
    unlocked.append(scenario)
    return True


def parse_games(games_json: str) -> list[GameSlot]:
    """Game entries stored as JSON text; unknown game types are a ValueError."""
    games = [GameSlot(**item) for item in json.loads(games_json or "[]")]
    for game in games:
        if game.game_type not in GAME_TYPES:
            raise ValueError(f"Invalid game type: {game.game_type}")
    return games


def available_games(configured: Optional[Iterable[GameSlot]]) -> list[GameSlot]:
    """Active games of a deployment, or the defaults when there is none."""
    if configured is None:
        return list(DEFAULT_GAMES)
    return [game for game in configured if game.is_active]
