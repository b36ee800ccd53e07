"""Application configuration from environment."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "House Hunt"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./househunt.db"

    # Session cookie for guest players
    session_cookie_name: str = "hh_session_id"
    session_cookie_max_age: int = 60 * 60 * 24 * 30  # 30 days

    # Story mode
    default_level: str = "A1"
    unlock_min_games: int = 2
    unlock_min_score: int = 50

    # Swipe game
    swipe_threshold: float = 100.0
    max_live_sessions: int = 1000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
