"""Derived score values shown on level result screens."""

from dataclasses import dataclass

from colorrush.game.run import TIMEOUT_PENALTY, WRONG_ANSWER_PENALTY, LevelRun

# Result screens show the timeout ("missed") block on these levels only
MISSED_STAT_LEVELS = range(3, 9)


def remaining_lives(run: LevelRun) -> int:
    """Mistakes left before the next one ends the run."""
    return max(0, run.mistake_tolerance.max_mistakes - run.mistakes)


def total_score(run: LevelRun) -> int:
    """Run score including the current attempt's uncommitted points.

    This is the value displayed as "Total Score" and submitted to the
    leaderboard when a run ends.
    """
    return run.global_score + run.level_positive_points


@dataclass(frozen=True)
class ScoreBreakdown:
    """Point breakdown of the current level attempt.

    Attributes:
        level: Level number
        level_score: Final level score (current_score)
        correct_answers_points: Points from correct taps, excluding streak bonuses
        streak_bonus_points: Streak bonuses earned this attempt
        mistakes_penalty: Points lost to wrong taps (negative or 0)
        timeouts_penalty: Points lost to round timeouts (negative or 0)
        perfect_bonus: Perfect bonus the attempt earns on completion
        total_score: Global score plus uncommitted level points
        remaining_lives: Mistakes left before game over
        show_missed: Whether the timeout block applies to this level
    """

    level: int
    level_score: int
    correct_answers_points: int
    streak_bonus_points: int
    mistakes_penalty: int
    timeouts_penalty: int
    perfect_bonus: int
    total_score: int
    remaining_lives: int
    show_missed: bool

    @classmethod
    def from_run(cls, run: LevelRun) -> "ScoreBreakdown":
        return cls(
            level=run.current_level,
            level_score=run.get_current_level_score(),
            correct_answers_points=run.level_base_points,
            streak_bonus_points=run.get_level_streak_bonuses(),
            mistakes_penalty=-WRONG_ANSWER_PENALTY * run.level_mistakes_from_wrong_taps,
            timeouts_penalty=-TIMEOUT_PENALTY * run.level_timeouts,
            perfect_bonus=run.get_perfect_bonus(),
            total_score=total_score(run),
            remaining_lives=remaining_lives(run),
            show_missed=run.current_level in MISSED_STAT_LEVELS,
        )
