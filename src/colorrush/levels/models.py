"""Level data models."""

from dataclasses import dataclass

# Levels from this id onward reshuffle the board on a round timeout
# instead of applying the timeout penalty.
NON_PUNITIVE_REFRESH_FROM_LEVEL = 9


@dataclass(frozen=True)
class LevelConfig:
    """Level definition.

    Attributes:
        level_id: Level number (1-based)
        duration_seconds: Length of the level timer
        time_per_response: Per-round deadline in seconds (None = no round timer)
        required_score: Minimum level score to pass when the level timer expires
        points_per_round: Points awarded per correct tap
        perfect_bonus: Bonus for a level finished without mistakes or timeouts
    """

    level_id: int
    duration_seconds: int
    time_per_response: float | None
    required_score: int
    points_per_round: int
    perfect_bonus: int | None = None

    @property
    def has_time_limit(self) -> bool:
        """Whether rounds on this level have their own deadline."""
        return self.time_per_response is not None

    @property
    def is_non_punitive_refresh(self) -> bool:
        """Round timeouts only reshuffle the board (levels 9-10)."""
        return self.level_id >= NON_PUNITIVE_REFRESH_FROM_LEVEL
