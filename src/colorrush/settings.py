"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from colorrush.game.state import StreakBonusRule


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///./colorrush.db"

    # Leaderboard
    leaderboard_size: int = 5  # Entries kept per mistake tolerance

    # Streak bonuses (disabled while streak_bonus_points is 0)
    streak_interval: int = 10
    streak_bonus_points: int = 0

    # Development mode (enables level skipping)
    dev_mode: bool = False

    # Logging
    log_level: str = "INFO"

    @property
    def streaks_enabled(self) -> bool:
        """Check if streak bonuses are configured."""
        return self.streak_rule.enabled

    @property
    def streak_rule(self) -> StreakBonusRule:
        return StreakBonusRule(interval=self.streak_interval, points=self.streak_bonus_points)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
