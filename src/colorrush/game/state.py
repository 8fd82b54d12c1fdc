"""Game modes, outcomes and run events."""

from dataclasses import dataclass, field
from enum import Enum


class GameType(Enum):
    """Which tile properties a tap is judged on."""

    COLOR_ONLY = "colorOnly"
    COLOR_AND_TEXT = "colorAndText"

    @property
    def description(self) -> str:
        if self == GameType.COLOR_ONLY:
            return "Match colors only"
        return "Match colors and text labels"


class MistakeTolerance(Enum):
    """Run-wide mistake budget."""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @property
    def max_mistakes(self) -> int:
        """Mistakes allowed before the next one ends the run."""
        return _MAX_MISTAKES[self]

    @property
    def description(self) -> str:
        if self == MistakeTolerance.HARD:
            return "No mistakes allowed"
        return f"{self.max_mistakes} mistakes allowed"


_MAX_MISTAKES = {
    MistakeTolerance.EASY: 5,
    MistakeTolerance.NORMAL: 3,
    MistakeTolerance.HARD: 0,
}


class LevelOutcome(Enum):
    """State of a single level attempt."""

    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"
    FAILED_INSUFFICIENT_SCORE = "failed_insufficient_score"  # Retry allowed
    FAILED_MAX_MISTAKES = "failed_max_mistakes"  # Ends the run
    FAILED_NEGATIVE_SCORE = "failed_negative_score"  # Ends the run

    @property
    def is_failure(self) -> bool:
        return self not in (LevelOutcome.IN_PROGRESS, LevelOutcome.COMPLETE)

    @property
    def ends_run(self) -> bool:
        return self in (LevelOutcome.FAILED_MAX_MISTAKES, LevelOutcome.FAILED_NEGATIVE_SCORE)


@dataclass(frozen=True)
class StreakBonusRule:
    """Bonus for consecutive correct taps within a level attempt.

    Attributes:
        interval: Consecutive correct taps needed per bonus
        points: Points added per bonus (0 disables streaks)
    """

    interval: int = 10
    points: int = 0

    @property
    def enabled(self) -> bool:
        return self.points > 0 and self.interval > 0

    def bonus_for(self, streak: int) -> int:
        """Bonus earned by the tap that brought the streak to ``streak``."""
        if self.enabled and streak > 0 and streak % self.interval == 0:
            return self.points
        return 0


class RunEventType(Enum):
    """Types of events emitted by a level run."""

    RUN_STARTED = "run_started"
    LEVEL_STARTED = "level_started"
    CORRECT_ANSWER = "correct_answer"
    WRONG_ANSWER = "wrong_answer"
    TIMEOUT = "timeout"
    STREAK_BONUS = "streak_bonus"
    LEVEL_COMPLETED = "level_completed"
    LEVEL_FAILED = "level_failed"
    RUN_COMPLETED = "run_completed"
    RUN_RESET = "run_reset"


@dataclass
class RunEvent:
    """A state change that occurred during a run.

    Attributes:
        type: Type of event
        level: Level number the event belongs to
        data: Event-specific data
    """

    type: RunEventType
    level: int
    data: dict = field(default_factory=dict)
