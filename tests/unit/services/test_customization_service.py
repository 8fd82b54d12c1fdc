"""Tests for CustomizationService."""

from unittest.mock import AsyncMock

import pytest

from colorrush.services.customization import (
    CUSTOMIZATION_KEY,
    CustomizationService,
    GameCustomization,
)


class TestLoad:
    """Tests for loading customization."""

    @pytest.mark.asyncio
    async def test_defaults_when_missing(self) -> None:
        repo = AsyncMock()
        repo.get.return_value = None

        customization = await CustomizationService(repo).load()

        assert customization == GameCustomization()
        assert customization.easy.duration_seconds == 30
        assert customization.normal.round_timeout_seconds == 1.5
        assert customization.hard.confusion_speed_seconds == 1.8
        repo.get.assert_called_once_with(CUSTOMIZATION_KEY)

    @pytest.mark.asyncio
    async def test_defaults_when_unreadable(self) -> None:
        repo = AsyncMock()
        repo.get.return_value = "{broken"

        assert await CustomizationService(repo).load() == GameCustomization()

    @pytest.mark.asyncio
    async def test_saved_values(self) -> None:
        saved = GameCustomization()
        saved.normal.round_timeout_seconds = 1.2
        repo = AsyncMock()
        repo.get.return_value = saved.model_dump_json()

        loaded = await CustomizationService(repo).load()

        assert loaded.normal.round_timeout_seconds == 1.2


class TestUpdate:
    """Tests for updating customization sections."""

    @pytest.mark.asyncio
    async def test_update_easy_settings(self) -> None:
        repo = AsyncMock()
        repo.get.return_value = None

        result = await CustomizationService(repo).update_easy_settings(15, 0)

        assert result.easy.duration_seconds == 15
        assert result.easy.max_mistakes == 0
        repo.set.assert_called_once()
        key, value = repo.set.call_args.args
        assert key == CUSTOMIZATION_KEY
        assert GameCustomization.model_validate_json(value) == result

    @pytest.mark.asyncio
    async def test_update_keeps_other_sections(self) -> None:
        existing = GameCustomization()
        existing.hard.confusion_speed_seconds = 2.0
        repo = AsyncMock()
        repo.get.return_value = existing.model_dump_json()

        result = await CustomizationService(repo).update_normal_settings(1.8, 1)

        assert result.normal.round_timeout_seconds == 1.8
        assert result.hard.confusion_speed_seconds == 2.0

    @pytest.mark.asyncio
    async def test_update_hard_settings(self) -> None:
        repo = AsyncMock()
        repo.get.return_value = None

        result = await CustomizationService(repo).update_hard_settings(1.5, 2)

        assert result.hard.confusion_speed_seconds == 1.5
        assert result.hard.max_mistakes == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,args",
        [
            ("update_easy_settings", (45, 1)),
            ("update_easy_settings", (30, 3)),
            ("update_normal_settings", (1.0, 1)),
            ("update_hard_settings", (1.8, -1)),
        ],
    )
    async def test_rejects_values_outside_options(self, method: str, args: tuple) -> None:
        repo = AsyncMock()
        service = CustomizationService(repo)

        with pytest.raises(ValueError):
            await getattr(service, method)(*args)

        repo.set.assert_not_called()
