"""Game core for Color Rush."""

from colorrush.game.colors import COLOR_NAMES, PALETTE, GameColor, color_name
from colorrush.game.state import (
    GameType,
    LevelOutcome,
    MistakeTolerance,
    RunEvent,
    RunEventType,
    StreakBonusRule,
)
from colorrush.game.board import (
    BOARD_SIZE,
    MAX_BOARD_ATTEMPTS,
    Board,
    ColorAnnouncer,
    Tile,
    build_board,
    build_color_board,
    build_text_board,
    is_correct_tap,
)
from colorrush.game.run import TIMEOUT_PENALTY, WRONG_ANSWER_PENALTY, LevelRun
from colorrush.game.ledger import ScoreBreakdown, remaining_lives, total_score
from colorrush.game.session import LevelSession

__all__ = [
    # Colors
    "GameColor",
    "PALETTE",
    "COLOR_NAMES",
    "color_name",
    # State
    "GameType",
    "MistakeTolerance",
    "LevelOutcome",
    "StreakBonusRule",
    "RunEvent",
    "RunEventType",
    # Board
    "Tile",
    "Board",
    "BOARD_SIZE",
    "MAX_BOARD_ATTEMPTS",
    "ColorAnnouncer",
    "build_board",
    "build_color_board",
    "build_text_board",
    "is_correct_tap",
    # Run
    "LevelRun",
    "WRONG_ANSWER_PENALTY",
    "TIMEOUT_PENALTY",
    # Ledger
    "ScoreBreakdown",
    "remaining_lives",
    "total_score",
    # Session
    "LevelSession",
]
