"""Player customization settings service."""

import logging

from pydantic import BaseModel, Field, ValidationError

from colorrush.db.repositories.key_value import KeyValueRepository

logger = logging.getLogger(__name__)

CUSTOMIZATION_KEY = "game.customization"

# Options offered by the customization sheet
EASY_DURATION_OPTIONS = (15, 30, 60)
NORMAL_ROUND_TIMEOUT_OPTIONS = (1.2, 1.5, 1.8)
HARD_CONFUSION_SPEED_OPTIONS = (2.0, 1.8, 1.5)
MAX_MISTAKES_OPTIONS = (0, 1, 2)


class EasyModeSettings(BaseModel):
    """Easy mode: fixed level duration."""

    duration_seconds: int = Field(default=30, gt=0)
    max_mistakes: int = Field(default=2, ge=0)


class NormalModeSettings(BaseModel):
    """Normal mode: per-round timeout."""

    round_timeout_seconds: float = Field(default=1.5, gt=0)
    max_mistakes: int = Field(default=2, ge=0)


class HardModeSettings(BaseModel):
    """Hard mode: board refresh ("confusion") speed."""

    confusion_speed_seconds: float = Field(default=1.8, gt=0)
    max_mistakes: int = Field(default=2, ge=0)


class GameCustomization(BaseModel):
    """All player-chosen settings, persisted as one JSON document."""

    easy: EasyModeSettings = Field(default_factory=EasyModeSettings)
    normal: NormalModeSettings = Field(default_factory=NormalModeSettings)
    hard: HardModeSettings = Field(default_factory=HardModeSettings)


def _check_option(name: str, value: float, options: tuple) -> None:
    if value not in options:
        raise ValueError(f"Invalid {name}: {value} (expected one of {options})")


class CustomizationService:
    """Loads and saves GameCustomization, falling back to defaults."""

    def __init__(self, repo: KeyValueRepository) -> None:
        """Initialize the service.

        Args:
            repo: Key-value repository used for storage
        """
        self.repo = repo

    async def load(self) -> GameCustomization:
        """Load the saved customization, or defaults if missing or unreadable."""
        raw = await self.repo.get(CUSTOMIZATION_KEY)
        if raw is None:
            return GameCustomization()
        try:
            return GameCustomization.model_validate_json(raw)
        except ValidationError:
            logger.warning("Discarding unreadable customization, using defaults")
            return GameCustomization()

    async def save(self, customization: GameCustomization) -> None:
        await self.repo.set(CUSTOMIZATION_KEY, customization.model_dump_json())

    async def update_easy_settings(
        self, duration_seconds: int, max_mistakes: int
    ) -> GameCustomization:
        """Update easy mode duration and mistake budget."""
        _check_option("duration_seconds", duration_seconds, EASY_DURATION_OPTIONS)
        _check_option("max_mistakes", max_mistakes, MAX_MISTAKES_OPTIONS)
        customization = await self.load()
        customization.easy = EasyModeSettings(
            duration_seconds=duration_seconds, max_mistakes=max_mistakes
        )
        await self.save(customization)
        return customization

    async def update_normal_settings(
        self, round_timeout_seconds: float, max_mistakes: int
    ) -> GameCustomization:
        """Update normal mode round timeout and mistake budget."""
        _check_option("round_timeout_seconds", round_timeout_seconds, NORMAL_ROUND_TIMEOUT_OPTIONS)
        _check_option("max_mistakes", max_mistakes, MAX_MISTAKES_OPTIONS)
        customization = await self.load()
        customization.normal = NormalModeSettings(
            round_timeout_seconds=round_timeout_seconds, max_mistakes=max_mistakes
        )
        await self.save(customization)
        return customization

    async def update_hard_settings(
        self, confusion_speed_seconds: float, max_mistakes: int
    ) -> GameCustomization:
        """Update hard mode refresh speed and mistake budget."""
        _check_option(
            "confusion_speed_seconds", confusion_speed_seconds, HARD_CONFUSION_SPEED_OPTIONS
        )
        _check_option("max_mistakes", max_mistakes, MAX_MISTAKES_OPTIONS)
        customization = await self.load()
        customization.hard = HardModeSettings(
            confusion_speed_seconds=confusion_speed_seconds, max_mistakes=max_mistakes
        )
        await self.save(customization)
        return customization
