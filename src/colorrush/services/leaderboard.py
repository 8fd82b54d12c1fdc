"""Leaderboard service with business logic.

Keeps the top scores per mistake tolerance. Each tier is stored as a JSON
list under its own key; unreadable data is treated as an empty leaderboard.
"""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from colorrush.db.repositories.key_value import KeyValueRepository
from colorrush.game.ledger import total_score
from colorrush.game.run import LevelRun
from colorrush.game.state import MistakeTolerance
from colorrush.settings import get_settings

logger = logging.getLogger(__name__)

LEADERBOARD_KEYS = {
    MistakeTolerance.EASY: "leaderboard.easy",
    MistakeTolerance.NORMAL: "leaderboard.normal",
    MistakeTolerance.HARD: "leaderboard.hard",
}


class ScoreEntry(BaseModel):
    """Single entry in the leaderboard."""

    id: UUID = Field(default_factory=uuid4)
    score: int
    date: datetime = Field(default_factory=lambda: datetime.now(UTC))
    duration_seconds: int | None = None
    max_mistakes: int | None = None
    round_timeout_seconds: float | None = None


_ENTRIES = TypeAdapter(list[ScoreEntry])


def _top(entries: list[ScoreEntry], limit: int) -> list[ScoreEntry]:
    return sorted(entries, key=lambda entry: entry.score, reverse=True)[:limit]


class LeaderboardService:
    """Bounded top-N leaderboards, one per mistake tolerance."""

    def __init__(self, repo: KeyValueRepository, max_entries: int | None = None) -> None:
        """Initialize the service.

        Args:
            repo: Key-value repository used for storage
            max_entries: Entries kept per tolerance (defaults to Settings.leaderboard_size)
        """
        self.repo = repo
        if max_entries is None:
            max_entries = get_settings().leaderboard_size
        self.max_entries = max_entries

    async def get_scores(self, tolerance: MistakeTolerance) -> list[ScoreEntry]:
        """Get the leaderboard for a tolerance, best score first."""
        key = LEADERBOARD_KEYS[tolerance]
        raw = await self.repo.get(key)
        if raw is None:
            return []
        try:
            entries = _ENTRIES.validate_json(raw)
        except ValidationError:
            logger.warning(f"Discarding unreadable leaderboard data under {key}")
            return []
        return _top(entries, self.max_entries)

    async def add_score(
        self,
        score: int,
        tolerance: MistakeTolerance,
        duration_seconds: int | None = None,
        max_mistakes: int | None = None,
        round_timeout_seconds: float | None = None,
    ) -> ScoreEntry:
        """Add a score and trim the leaderboard to max_entries.

        Returns:
            The new entry (which may already have been trimmed away)
        """
        entry = ScoreEntry(
            score=score,
            duration_seconds=duration_seconds,
            max_mistakes=max_mistakes,
            round_timeout_seconds=round_timeout_seconds,
        )
        entries = _top([*await self.get_scores(tolerance), entry], self.max_entries)
        await self.repo.set(
            LEADERBOARD_KEYS[tolerance], _ENTRIES.dump_json(entries).decode("utf-8")
        )

        logger.info(f"Added score {score} to {tolerance.value} leaderboard")
        return entry

    async def get_best_score(self, tolerance: MistakeTolerance) -> int:
        """Best score for a tolerance, or 0 if there are no entries."""
        scores = await self.get_scores(tolerance)
        return scores[0].score if scores else 0

    async def get_overall_best_score(self) -> int:
        """Best score across all tolerances, or 0 if there are no entries."""
        best = [await self.get_best_score(tolerance) for tolerance in MistakeTolerance]
        return max(best, default=0)

    async def reset(self) -> None:
        """Clear every leaderboard."""
        for key in LEADERBOARD_KEYS.values():
            await self.repo.delete(key)
        logger.info("Leaderboards reset")

    async def submit_run(self, run: LevelRun) -> ScoreEntry | None:
        """Submit the final score of a run that has ended.

        Completed runs are always recorded; runs that ended early are
        recorded only with a positive total score.

        Returns:
            The new entry, or None if nothing was submitted
        """
        score = total_score(run)
        if not run.is_completed and score <= 0:
            logger.debug(f"Not submitting non-positive score {score}")
            return None
        return await self.add_score(
            score,
            run.mistake_tolerance,
            max_mistakes=run.mistake_tolerance.max_mistakes,
        )
