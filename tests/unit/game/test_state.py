"""Tests for game modes and outcomes."""

import pytest

from colorrush.game.colors import COLOR_NAMES, PALETTE, GameColor, color_name, names_match
from colorrush.game.state import GameType, LevelOutcome, MistakeTolerance, StreakBonusRule


class TestMistakeTolerance:
    """Tests for MistakeTolerance budgets."""

    @pytest.mark.parametrize(
        "tolerance,expected",
        [
            (MistakeTolerance.EASY, 5),
            (MistakeTolerance.NORMAL, 3),
            (MistakeTolerance.HARD, 0),
        ],
    )
    def test_max_mistakes(self, tolerance: MistakeTolerance, expected: int) -> None:
        assert tolerance.max_mistakes == expected

    def test_descriptions(self) -> None:
        assert MistakeTolerance.HARD.description == "No mistakes allowed"
        assert MistakeTolerance.EASY.description == "5 mistakes allowed"

    def test_values(self) -> None:
        assert MistakeTolerance("normal") == MistakeTolerance.NORMAL


class TestGameType:
    """Tests for GameType."""

    def test_values(self) -> None:
        assert GameType("colorOnly") == GameType.COLOR_ONLY
        assert GameType("colorAndText") == GameType.COLOR_AND_TEXT

    def test_descriptions_differ(self) -> None:
        assert GameType.COLOR_ONLY.description != GameType.COLOR_AND_TEXT.description


class TestLevelOutcome:
    """Tests for outcome classification."""

    def test_failures(self) -> None:
        assert LevelOutcome.IN_PROGRESS.is_failure is False
        assert LevelOutcome.COMPLETE.is_failure is False
        assert LevelOutcome.FAILED_INSUFFICIENT_SCORE.is_failure is True
        assert LevelOutcome.FAILED_MAX_MISTAKES.is_failure is True
        assert LevelOutcome.FAILED_NEGATIVE_SCORE.is_failure is True

    def test_only_hard_failures_end_run(self) -> None:
        ending = {outcome for outcome in LevelOutcome if outcome.ends_run}
        assert ending == {LevelOutcome.FAILED_MAX_MISTAKES, LevelOutcome.FAILED_NEGATIVE_SCORE}


class TestStreakBonusRule:
    """Tests for StreakBonusRule."""

    def test_disabled_by_default(self) -> None:
        rule = StreakBonusRule()
        assert rule.enabled is False
        assert rule.bonus_for(10) == 0

    def test_bonus_on_interval_multiples(self) -> None:
        rule = StreakBonusRule(interval=4, points=2)
        assert [rule.bonus_for(streak) for streak in range(0, 9)] == [0, 0, 0, 0, 2, 0, 0, 0, 2]

    def test_zero_interval_disables(self) -> None:
        assert StreakBonusRule(interval=0, points=5).enabled is False


class TestColors:
    """Tests for the palette and color names."""

    def test_palette(self) -> None:
        assert PALETTE == (GameColor.RED, GameColor.BLUE, GameColor.GREEN, GameColor.YELLOW)
        assert COLOR_NAMES == ("red", "blue", "green", "yellow")

    def test_color_name(self) -> None:
        assert color_name(GameColor.YELLOW) == "yellow"
        assert GameColor.YELLOW.display_name == "yellow"

    def test_names_match(self) -> None:
        assert names_match("RED", GameColor.RED) is True
        assert names_match("Red", GameColor.BLUE) is False
        assert names_match(None, GameColor.RED) is False
