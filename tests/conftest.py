"""Pytest configuration and fixtures."""

import os
import random

import pytest

# Keep tests independent of any developer .env overrides - must happen before settings use
os.environ["STREAK_BONUS_POINTS"] = "0"
os.environ["DEV_MODE"] = "false"
os.environ["LEADERBOARD_SIZE"] = "5"

# Clear the settings cache to pick up the new environment variables
from colorrush.settings import get_settings  # noqa: E402

get_settings.cache_clear()

from colorrush.game.run import LevelRun  # noqa: E402
from colorrush.game.state import GameType, MistakeTolerance  # noqa: E402


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for deterministic boards."""
    return random.Random(1234)


@pytest.fixture
def run() -> LevelRun:
    """A run started in color-only mode with easy tolerance."""
    level_run = LevelRun()
    level_run.start_run(GameType.COLOR_ONLY, MistakeTolerance.EASY)
    return level_run
