"""Persistence-backed services used by the presentation layer."""

from colorrush.services.customization import CustomizationService, GameCustomization
from colorrush.services.leaderboard import LeaderboardService, ScoreEntry

__all__ = [
    "CustomizationService",
    "GameCustomization",
    "LeaderboardService",
    "ScoreEntry",
]
