"""Level definitions.

Levels 1-2: warm-up, no round timer and no perfect bonus
Levels 3-8: round timer tightens every two levels
Levels 9-10: round timeouts refresh the board instead of penalizing
"""

from .models import LevelConfig

LEVELS: list[LevelConfig] = [
    # ========== Warm-up ==========
    LevelConfig(
        level_id=1,
        duration_seconds=30,
        time_per_response=None,
        required_score=200,
        points_per_round=10,
    ),
    LevelConfig(
        level_id=2,
        duration_seconds=30,
        time_per_response=None,
        required_score=250,
        points_per_round=10,
    ),
    # ========== Timed rounds ==========
    LevelConfig(
        level_id=3,
        duration_seconds=30,
        time_per_response=1.8,
        required_score=300,
        points_per_round=15,
        perfect_bonus=30,
    ),
    LevelConfig(
        level_id=4,
        duration_seconds=30,
        time_per_response=1.8,
        required_score=375,
        points_per_round=15,
        perfect_bonus=30,
    ),
    LevelConfig(
        level_id=5,
        duration_seconds=30,
        time_per_response=1.5,
        required_score=400,
        points_per_round=20,
        perfect_bonus=40,
    ),
    LevelConfig(
        level_id=6,
        duration_seconds=30,
        time_per_response=1.5,
        required_score=500,
        points_per_round=20,
        perfect_bonus=40,
    ),
    LevelConfig(
        level_id=7,
        duration_seconds=30,
        time_per_response=1.2,
        required_score=600,
        points_per_round=25,
        perfect_bonus=50,
    ),
    LevelConfig(
        level_id=8,
        duration_seconds=30,
        time_per_response=1.2,
        required_score=650,
        points_per_round=25,
        perfect_bonus=50,
    ),
    # ========== Non-punitive refresh ==========
    LevelConfig(
        level_id=9,
        duration_seconds=30,
        time_per_response=1.0,
        required_score=700,
        points_per_round=30,
        perfect_bonus=60,
    ),
    LevelConfig(
        level_id=10,
        duration_seconds=15,
        time_per_response=1.0,
        required_score=750,
        points_per_round=30,
        perfect_bonus=60,
    ),
]


def get_level(level_id: int) -> LevelConfig | None:
    """Get a level by its 1-based number."""
    if 1 <= level_id <= len(LEVELS):
        return LEVELS[level_id - 1]
    return None


def get_total_levels() -> int:
    """Number of levels in a full run."""
    return len(LEVELS)
