"""Externally clocked driver for playing levels of a run.

The session owns the round flow (announced color, board, level and round
timers) but never reads a clock itself: the host calls ``tick`` with the
elapsed time, and ``tap`` when the player touches a tile. Every call is
processed to completion before returning.
"""

import logging
import random

from colorrush.game.board import Board, ColorAnnouncer, build_board, is_correct_tap
from colorrush.game.colors import GameColor, color_name
from colorrush.game.ledger import total_score
from colorrush.game.run import LevelRun
from colorrush.game.state import LevelOutcome

logger = logging.getLogger(__name__)


class LevelSession:
    """Plays the levels of a LevelRun round by round.

    Attributes:
        run: The run being played
        phase: Outcome of the current attempt (None before the first level)
        time_remaining: Seconds left on the level timer
        round_time_remaining: Seconds left to answer the round (None = untimed)
        announced_color: Color announced for the current round
        board: Tiles of the current round
        previous_board: Tiles of the previous round
    """

    def __init__(self, run: LevelRun, rng: random.Random | None = None) -> None:
        self.run = run
        self._rng = rng or random.Random()
        self.announcer = ColorAnnouncer(self._rng)
        self.phase: LevelOutcome | None = None
        self.time_remaining: float = 0.0
        self.round_time_remaining: float | None = None
        self.announced_color: GameColor | None = None
        self.board: Board = ()
        self.previous_board: Board | None = None

    @property
    def is_playing(self) -> bool:
        return self.phase == LevelOutcome.IN_PROGRESS

    @property
    def is_run_over(self) -> bool:
        """True after a run-ending failure or once every level is completed."""
        if self.run.is_completed:
            return True
        return self.phase is not None and self.phase.ends_run

    @property
    def final_score(self) -> int:
        return total_score(self.run)

    @property
    def announced_color_name(self) -> str | None:
        if self.announced_color is None:
            return None
        return color_name(self.announced_color)

    # ------------------------------------------------------------------
    # Level flow
    # ------------------------------------------------------------------

    def begin_level(self) -> bool:
        """Start an attempt at the run's current level.

        Returns:
            False if the run is over or there is no level to play
        """
        if not self.run.is_active or self.run.current_level_config is None:
            return False
        self.run.start_level()
        return self._start_clock()

    def retry_level(self) -> bool:
        """Replay the level after an insufficient-score failure.

        Raises:
            ValueError: If the last attempt did not fail on score
        """
        if self.phase != LevelOutcome.FAILED_INSUFFICIENT_SCORE:
            raise ValueError(f"Cannot retry level from phase {self.phase}")
        self.run.retry_level()
        return self._start_clock()

    def advance(self) -> bool:
        """Commit a completed level and start the next one.

        Returns:
            True if a new level started, False if the run is now complete

        Raises:
            ValueError: If the current level has not been completed, or the run
                is already complete
        """
        if self.run.is_completed:
            raise ValueError("Cannot advance a completed run")
        if self.phase != LevelOutcome.COMPLETE:
            raise ValueError(f"Cannot advance from phase {self.phase}")
        self.run.complete_level()
        if self.run.is_completed:
            self.phase = None
            return False
        return self._start_clock()

    def _start_clock(self) -> bool:
        level_config = self.run.current_level_config
        if level_config is None:
            return False

        self.phase = LevelOutcome.IN_PROGRESS
        self.time_remaining = float(level_config.duration_seconds)
        self.announcer.reset()
        self.board = ()
        self._start_round()
        return True

    def _finish(self, outcome: LevelOutcome) -> None:
        self.phase = outcome
        self.round_time_remaining = None
        if outcome.is_failure:
            self.run.fail_level(outcome)

    # ------------------------------------------------------------------
    # Rounds
    # ------------------------------------------------------------------

    def _reset_round_timer(self) -> None:
        level_config = self.run.current_level_config
        if level_config is not None and level_config.has_time_limit:
            self.round_time_remaining = level_config.time_per_response
        else:
            self.round_time_remaining = None

    def _start_round(self) -> None:
        self.previous_board = self.board or None
        self.announced_color = self.announcer.next_color()
        self.board = build_board(
            self.run.game_type, self.announced_color, self.previous_board, self._rng
        )
        self._reset_round_timer()

    def refresh_board(self) -> None:
        """Reshuffle the board keeping the announced color. No score effect."""
        if not self.is_playing or self.announced_color is None:
            return
        self.previous_board = self.board
        self.board = build_board(
            self.run.game_type, self.announced_color, self.previous_board, self._rng
        )
        self._reset_round_timer()
        logger.debug(f"Board refreshed for level {self.run.current_level}")

    def tap(self, index: int) -> bool | None:
        """Handle a tap on a tile.

        Returns:
            Whether the tap was correct, or None if no round is in play
        """
        if not self.is_playing or self.announced_color is None:
            return None

        correct = is_correct_tap(self.run.game_type, self.board, index, self.announced_color)
        if correct:
            self.run.add_correct_answer()
        else:
            self.run.add_wrong_answer()

        if not self._check_failure():
            self._start_round()
        return correct

    def round_timeout(self) -> None:
        """Handle the round timer running out without a tap."""
        level_config = self.run.current_level_config
        if not self.is_playing or level_config is None:
            return

        if level_config.is_non_punitive_refresh:
            self.refresh_board()
            return

        self.run.add_timeout()
        if not self._check_failure():
            self._start_round()

    def expire(self) -> LevelOutcome | None:
        """Handle the level timer running out."""
        if not self.is_playing:
            return None
        outcome = self.run.handle_time_up()
        if outcome is not None:
            self._finish(outcome)
        return outcome

    def tick(self, delta_seconds: float) -> None:
        """Advance the level timer, then the round timer."""
        if not self.is_playing:
            return

        self.time_remaining -= delta_seconds
        if self.time_remaining <= 0:
            self.time_remaining = 0.0
            self.expire()
            return

        if self.round_time_remaining is not None:
            self.round_time_remaining -= delta_seconds

        # A long tick may span several round deadlines; time past each one
        # counts against the next round
        while self.is_playing and self.round_time_remaining is not None:
            if self.round_time_remaining > 0:
                break
            overshoot = -self.round_time_remaining
            self.round_timeout()
            if self.round_time_remaining is not None:
                self.round_time_remaining -= overshoot

    def _check_failure(self) -> bool:
        outcome = self.run.check_failure()
        if outcome is None:
            return False
        self._finish(outcome)
        return True
