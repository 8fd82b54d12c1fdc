"""Tests for application settings."""

import pytest

from colorrush.game.state import StreakBonusRule
from colorrush.settings import Settings, get_settings


class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("STREAK_BONUS_POINTS", raising=False)
        monkeypatch.delenv("DEV_MODE", raising=False)

        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite+aiosqlite:///./colorrush.db"
        assert settings.leaderboard_size == 5
        assert settings.streak_interval == 10
        assert settings.streak_bonus_points == 0
        assert settings.dev_mode is False
        assert settings.log_level == "INFO"
        assert settings.streaks_enabled is False

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STREAK_BONUS_POINTS", "5")
        monkeypatch.setenv("STREAK_INTERVAL", "8")
        monkeypatch.setenv("DEV_MODE", "true")

        settings = Settings(_env_file=None)

        assert settings.streaks_enabled is True
        assert settings.streak_rule == StreakBonusRule(interval=8, points=5)
        assert settings.dev_mode is True

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
