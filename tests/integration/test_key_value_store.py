"""Integration tests for the key-value store and the services built on it.

These tests run against a real SQLite database file.

Run with: uv run pytest tests/integration/test_key_value_store.py -v
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from colorrush.db.repositories.key_value import KeyValueRepository
from colorrush.game.run import LevelRun
from colorrush.game.state import GameType, MistakeTolerance
from colorrush.services.customization import CustomizationService
from colorrush.services.leaderboard import LeaderboardService


class TestKeyValueRepository:
    """Tests for KeyValueRepository against the database."""

    @pytest.mark.asyncio
    async def test_get_missing_key(self, db_session: AsyncSession) -> None:
        repo = KeyValueRepository(db_session)
        assert await repo.get("missing") is None

    @pytest.mark.asyncio
    async def test_set_then_get(self, db_session: AsyncSession) -> None:
        repo = KeyValueRepository(db_session)
        await repo.set("greeting", "hello")
        assert await repo.get("greeting") == "hello"

    @pytest.mark.asyncio
    async def test_set_replaces_value(self, db_session: AsyncSession) -> None:
        repo = KeyValueRepository(db_session)
        await repo.set("greeting", "hello")
        await repo.set("greeting", "goodbye")
        assert await repo.get("greeting") == "goodbye"

    @pytest.mark.asyncio
    async def test_delete(self, db_session: AsyncSession) -> None:
        repo = KeyValueRepository(db_session)
        await repo.set("greeting", "hello")

        assert await repo.delete("greeting") is True
        assert await repo.get("greeting") is None
        assert await repo.delete("greeting") is False

    @pytest.mark.asyncio
    async def test_values_survive_new_session(self, db_engine: AsyncEngine) -> None:
        factory = async_sessionmaker(db_engine, expire_on_commit=False)
        async with factory() as session:
            await KeyValueRepository(session).set("persisted", "yes")
            await session.commit()

        async with factory() as session:
            assert await KeyValueRepository(session).get("persisted") == "yes"


class TestLeaderboardPersistence:
    """Tests for LeaderboardService with real storage."""

    @pytest.mark.asyncio
    async def test_top_five_kept_per_tolerance(self, db_session: AsyncSession) -> None:
        service = LeaderboardService(KeyValueRepository(db_session))
        for score in (100, 700, 300, 900, 200, 500, 50):
            await service.add_score(score, MistakeTolerance.NORMAL)
        await service.add_score(40, MistakeTolerance.HARD)

        normal = await service.get_scores(MistakeTolerance.NORMAL)
        assert [entry.score for entry in normal] == [900, 700, 500, 300, 200]
        assert await service.get_best_score(MistakeTolerance.HARD) == 40
        assert await service.get_best_score(MistakeTolerance.EASY) == 0
        assert await service.get_overall_best_score() == 900

    @pytest.mark.asyncio
    async def test_submit_played_run(self, db_session: AsyncSession) -> None:
        service = LeaderboardService(KeyValueRepository(db_session))
        run = LevelRun()
        run.start_run(GameType.COLOR_ONLY, MistakeTolerance.EASY)
        for _ in range(20):
            run.add_correct_answer()
        run.complete_level()
        for _ in range(4):
            run.add_correct_answer()

        entry = await service.submit_run(run)

        assert entry is not None
        assert entry.score == 240
        assert entry.max_mistakes == 5
        assert await service.get_best_score(MistakeTolerance.EASY) == 240

    @pytest.mark.asyncio
    async def test_reset(self, db_session: AsyncSession) -> None:
        service = LeaderboardService(KeyValueRepository(db_session))
        await service.add_score(100, MistakeTolerance.EASY)
        await service.reset()
        assert await service.get_overall_best_score() == 0


class TestCustomizationPersistence:
    """Tests for CustomizationService with real storage."""

    @pytest.mark.asyncio
    async def test_updates_are_kept_together(self, db_session: AsyncSession) -> None:
        service = CustomizationService(KeyValueRepository(db_session))
        await service.update_easy_settings(60, 1)
        await service.update_hard_settings(1.5, 0)

        loaded = await service.load()

        assert loaded.easy.duration_seconds == 60
        assert loaded.easy.max_mistakes == 1
        assert loaded.normal.round_timeout_seconds == 1.5
        assert loaded.hard.confusion_speed_seconds == 1.5
        assert loaded.hard.max_mistakes == 0
