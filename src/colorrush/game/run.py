"""Level run scoring and progression.

A run is one playthrough from level 1 toward level 10. Scores are kept on
two tracks:

- ``current_score``: the level score. Correct taps add to it, penalties
  subtract from it, and it may go negative. Reset at every level start/retry.
- ``global_score``: the run score submitted to the leaderboard. Penalties
  apply to it immediately, but positive points only arrive when a level is
  completed (``level_positive_points`` plus any perfect bonus). Points from
  a failed attempt are discarded on retry.

State is mutated in place. Timers are owned by the caller (see
``colorrush.game.session``), which reports taps, round timeouts and level
timer expiry through the methods below.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from colorrush.game.state import (
    GameType,
    LevelOutcome,
    MistakeTolerance,
    RunEvent,
    RunEventType,
    StreakBonusRule,
)
from colorrush.levels import LevelConfig, get_level, get_total_levels

if TYPE_CHECKING:
    from colorrush.settings import Settings

logger = logging.getLogger(__name__)

WRONG_ANSWER_PENALTY = 10
TIMEOUT_PENALTY = 5

RunListener = Callable[[RunEvent], None]


@dataclass
class LevelRun:
    """Mutable state of a single run.

    Attributes:
        current_level: Level being played (1-based)
        game_type: How taps are judged
        mistake_tolerance: Run-wide mistake budget
        is_active: Whether the run is being played
        is_completed: Whether all levels were completed
        current_score: Level score of the current attempt (may go negative)
        level_positive_points: Points earned this attempt, committed on completion
        global_score: Cumulative run score
        mistakes: Run-wide mistakes (wrong taps + insufficient-score failures)
        timeouts: Run-wide penalised round timeouts
        level_mistakes: Mistakes in the current attempt
        level_timeouts: Penalised round timeouts in the current attempt
        level_correct_answers: Correct taps in the current attempt
        level_score_shortfalls: Insufficient-score mistakes in the current attempt
        level_streak: Consecutive correct taps in the current attempt
        level_streak_bonuses: Streak bonus points earned in the current attempt
        last_bonus_earned: Last streak bonus, until cleared by the presentation layer
        completed_levels: Completed level numbers, in order
        failed_levels: Failed level numbers, in order
        perfect_levels: Perfect levels that earned a perfect bonus
        level_scores: Final level score per completed level
        streak_rule: Streak bonus configuration
        dev_tools_enabled: Allow skipping levels
    """

    current_level: int = 1
    game_type: GameType = GameType.COLOR_ONLY
    mistake_tolerance: MistakeTolerance = MistakeTolerance.EASY
    is_active: bool = False
    is_completed: bool = False

    current_score: int = 0
    level_positive_points: int = 0
    global_score: int = 0
    mistakes: int = 0
    timeouts: int = 0

    level_mistakes: int = 0
    level_timeouts: int = 0
    level_correct_answers: int = 0
    level_score_shortfalls: int = 0
    level_streak: int = 0
    level_streak_bonuses: int = 0
    last_bonus_earned: int = 0

    completed_levels: list[int] = field(default_factory=list)
    failed_levels: list[int] = field(default_factory=list)
    perfect_levels: list[int] = field(default_factory=list)
    level_scores: dict[int, int] = field(default_factory=dict)

    streak_rule: StreakBonusRule = field(default_factory=StreakBonusRule)
    dev_tools_enabled: bool = False
    _listeners: list[RunListener] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "LevelRun":
        """Create a run using streak and dev-tool options from Settings."""
        return cls(streak_rule=settings.streak_rule, dev_tools_enabled=settings.dev_mode)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, listener: RunListener) -> None:
        """Register a callback invoked after every state change event."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: RunListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event_type: RunEventType, **data) -> None:
        event = RunEvent(type=event_type, level=self.current_level, data=data)
        for listener in list(self._listeners):
            listener(event)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def current_level_config(self) -> LevelConfig | None:
        return get_level(self.current_level)

    @property
    def can_proceed_to_next_level(self) -> bool:
        level_config = self.current_level_config
        if level_config is None:
            return False
        return self.current_score >= level_config.required_score

    @property
    def is_perfect_level(self) -> bool:
        return self.level_mistakes == 0 and self.level_timeouts == 0

    @property
    def level_base_points(self) -> int:
        """Points from correct taps this attempt, excluding streak bonuses."""
        level_config = self.current_level_config
        if level_config is None:
            return 0
        return self.level_correct_answers * level_config.points_per_round

    @property
    def level_mistakes_from_wrong_taps(self) -> int:
        """Level mistakes that cost points (excludes the insufficient-score mistake)."""
        return self.level_mistakes - self.level_score_shortfalls

    def get_current_level_score(self) -> int:
        return self.current_score

    def get_perfect_bonus(self) -> int:
        """Perfect bonus the current attempt would earn on completion."""
        level_config = self.current_level_config
        if level_config is None or level_config.perfect_bonus is None or not self.is_perfect_level:
            return 0
        return level_config.perfect_bonus

    def get_level_streak_bonuses(self) -> int:
        return self.level_streak_bonuses

    def clear_last_bonus(self) -> None:
        self.last_bonus_earned = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start_run(self, game_type: GameType, mistake_tolerance: MistakeTolerance) -> None:
        """Begin a new run at level 1."""
        self.game_type = game_type
        self.mistake_tolerance = mistake_tolerance
        self.current_level = 1
        self.is_active = True
        self.is_completed = False
        self.reset_run_stats()

        logger.info(
            f"Run started: game_type={game_type.value}, tolerance={mistake_tolerance.value}"
        )
        self._emit(
            RunEventType.RUN_STARTED,
            game_type=game_type.value,
            mistake_tolerance=mistake_tolerance.value,
        )

    def start_level(self) -> None:
        """Begin an attempt at the current level.

        Resets the level score and per-attempt counters only. Run-wide
        mistakes, timeouts and the global score are left as they are.
        """
        self.reset_level_stats()
        logger.info(f"Level {self.current_level} started (global_score={self.global_score})")
        self._emit(RunEventType.LEVEL_STARTED, global_score=self.global_score)

    def reset_level_stats(self) -> None:
        """Reset the per-attempt state.

        Positive points of the previous attempt are discarded; penalties it
        applied to ``global_score`` and ``mistakes`` stay.
        """
        self.level_mistakes = 0
        self.level_timeouts = 0
        self.level_correct_answers = 0
        self.level_score_shortfalls = 0
        self.level_streak = 0
        self.level_streak_bonuses = 0
        self.last_bonus_earned = 0
        self.current_score = 0
        self.level_positive_points = 0

    def retry_level(self) -> None:
        """Retry the current level after an insufficient-score failure."""
        logger.info(
            f"Retrying level {self.current_level}, discarding {self.level_positive_points} points"
        )
        self.start_level()

    def reset_run_stats(self) -> None:
        """Clear every score, counter and history of the run."""
        self.reset_level_stats()
        self.global_score = 0
        self.mistakes = 0
        self.timeouts = 0
        self.perfect_levels = []
        self.completed_levels = []
        self.failed_levels = []
        self.level_scores = {}

    def end_run(self) -> None:
        """Reset the run after it has been left (results already submitted)."""
        self.reset_run_stats()
        self.current_level = 1
        self.is_active = False
        self.is_completed = False
        self._emit(RunEventType.RUN_RESET)

    # ------------------------------------------------------------------
    # Round results
    # ------------------------------------------------------------------

    def add_correct_answer(self) -> None:
        """Record a correct tap. The global score is not touched until completion."""
        level_config = self.current_level_config
        if level_config is None:
            return

        points = level_config.points_per_round
        self.current_score += points
        self.level_positive_points += points
        self.level_correct_answers += 1
        self.level_streak += 1

        bonus = self.streak_rule.bonus_for(self.level_streak)
        if bonus:
            self.current_score += bonus
            self.level_positive_points += bonus
            self.level_streak_bonuses += bonus
            self.last_bonus_earned = bonus

        logger.debug(f"Correct answer: current_score={self.current_score}")
        self._emit(RunEventType.CORRECT_ANSWER, points=points, current_score=self.current_score)
        if bonus:
            self._emit(RunEventType.STREAK_BONUS, points=bonus, streak=self.level_streak)

    def add_wrong_answer(self) -> None:
        """Record a wrong tap. The penalty applies to both scores immediately."""
        self.current_score -= WRONG_ANSWER_PENALTY
        self.global_score -= WRONG_ANSWER_PENALTY
        self.mistakes += 1
        self.level_mistakes += 1
        self.level_streak = 0

        logger.debug(
            f"Wrong answer: current_score={self.current_score}, mistakes={self.mistakes}"
        )
        self._emit(
            RunEventType.WRONG_ANSWER,
            penalty=WRONG_ANSWER_PENALTY,
            current_score=self.current_score,
            mistakes=self.mistakes,
        )

    def add_timeout(self) -> None:
        """Record a penalised round timeout. Does not count as a mistake."""
        self.current_score -= TIMEOUT_PENALTY
        self.global_score -= TIMEOUT_PENALTY
        self.timeouts += 1
        self.level_timeouts += 1
        self.level_streak = 0

        logger.debug(f"Timeout: current_score={self.current_score}, timeouts={self.timeouts}")
        self._emit(
            RunEventType.TIMEOUT,
            penalty=TIMEOUT_PENALTY,
            current_score=self.current_score,
        )

    # ------------------------------------------------------------------
    # Level decisions
    # ------------------------------------------------------------------

    def check_failure(self) -> LevelOutcome | None:
        """Run-ending failure check, applied after every tap or timeout.

        Level 1 fails on a negative level score, later levels on a negative
        global score. Otherwise the run ends once mistakes exceed the
        tolerance.
        """
        if self.current_level == 1:
            if self.current_score < 0:
                return LevelOutcome.FAILED_NEGATIVE_SCORE
        elif self.global_score < 0:
            return LevelOutcome.FAILED_NEGATIVE_SCORE

        if self.mistakes > self.mistake_tolerance.max_mistakes:
            return LevelOutcome.FAILED_MAX_MISTAKES
        return None

    def handle_time_up(self) -> LevelOutcome | None:
        """Decide the level outcome when the level timer expires.

        Missing the required score costs one mistake but no points.

        Returns:
            The outcome, or None when there is no active level
        """
        level_config = self.current_level_config
        if level_config is None:
            return None

        if self.current_score >= level_config.required_score:
            return LevelOutcome.COMPLETE

        self.mistakes += 1
        self.level_mistakes += 1
        self.level_score_shortfalls += 1

        if self.mistakes > self.mistake_tolerance.max_mistakes:
            return LevelOutcome.FAILED_MAX_MISTAKES
        return LevelOutcome.FAILED_INSUFFICIENT_SCORE

    def fail_level(self, outcome: LevelOutcome) -> None:
        """Record a failed attempt. Run-ending failures deactivate the run."""
        self.failed_levels.append(self.current_level)
        if outcome.ends_run:
            self.is_active = False
            self.is_completed = False

        logger.info(
            f"Level {self.current_level} failed ({outcome.value}): "
            f"mistakes={self.mistakes}, global_score={self.global_score}"
        )
        self._emit(RunEventType.LEVEL_FAILED, outcome=outcome.value, ends_run=outcome.ends_run)

    def complete_level(self) -> None:
        """Commit the attempt's points and advance to the next level."""
        self._complete_level(award_perfect_bonus=True)

    def skip_to_next_level(self) -> None:
        """Dev tool: complete the level with exactly the required score, no perfect bonus."""
        level_config = self.current_level_config
        if not self.dev_tools_enabled or level_config is None:
            return

        logger.info(f"dev_skip_level: Level {self.current_level}")
        self.current_score = level_config.required_score
        self.level_positive_points = level_config.required_score
        self._complete_level(award_perfect_bonus=False)

    def _complete_level(self, award_perfect_bonus: bool) -> None:
        level_config = self.current_level_config
        if level_config is None or self.is_completed:
            return

        completed = self.current_level
        self.global_score += self.level_positive_points
        # Committed points must not be counted again by total_score()
        self.level_positive_points = 0

        # Only levels that define a perfect bonus are recorded as perfect
        bonus = self.get_perfect_bonus() if award_perfect_bonus else 0
        perfect = bonus > 0
        self.global_score += bonus
        if perfect:
            self.perfect_levels.append(completed)

        self.level_scores[completed] = self.current_score
        self.completed_levels.append(completed)

        logger.info(
            f"Level {completed} completed: score={self.current_score}, "
            f"perfect_bonus={bonus}, global_score={self.global_score}"
        )
        self._emit(
            RunEventType.LEVEL_COMPLETED,
            score=self.current_score,
            perfect=perfect,
            perfect_bonus=bonus,
            global_score=self.global_score,
        )

        if completed >= get_total_levels():
            self.is_completed = True
            self.is_active = False
            logger.info(f"Run completed: global_score={self.global_score}")
            self._emit(RunEventType.RUN_COMPLETED, global_score=self.global_score)
        else:
            self.current_level += 1
            self.start_level()
