"""Board generation and tap judgment.

Each round shows four tiles and announces one color. The player must tap a
tile that does NOT match the announced color:

- Color only: a tile is correct when its background differs from the
  announced color.
- Color + text: a tile is correct when its background differs from the
  announced color AND its label does not name it.

Boards are generated at random under per-mode placement constraints and are
never identical to the previous round's board unless generation runs out of
attempts, in which case a fallback board that still satisfies the placement
constraints is used.
"""

import logging
import random
from collections import deque
from dataclasses import dataclass

from colorrush.game.colors import COLOR_NAMES, PALETTE, GameColor, color_name, names_match
from colorrush.game.state import GameType

logger = logging.getLogger(__name__)

BOARD_SIZE = 4
MAX_BOARD_ATTEMPTS = 10

# Same color may be announced at most this many times in a row
MAX_ANNOUNCE_REPEATS = 2


@dataclass(frozen=True)
class Tile:
    """A single board cell.

    Attributes:
        background: Tile background color
        label: Text printed on the tile (None in color-only mode)
    """

    background: GameColor
    label: str | None = None

    def matches_background(self, announced: GameColor) -> bool:
        return self.background == announced

    def matches_text(self, announced: GameColor) -> bool:
        return names_match(self.label, announced)

    def is_correct(self, announced: GameColor, game_type: GameType) -> bool:
        """Whether tapping this tile is a correct answer."""
        if game_type == GameType.COLOR_ONLY:
            return not self.matches_background(announced)
        return not self.matches_background(announced) and not self.matches_text(announced)


Board = tuple[Tile, ...]


def _other_colors(announced: GameColor) -> list[GameColor]:
    return [color for color in PALETTE if color != announced]


def is_valid_color_board(board: Board, announced: GameColor) -> bool:
    """At least one tile shows the announced color and at least one does not."""
    has_match = any(tile.matches_background(announced) for tile in board)
    has_other = any(not tile.matches_background(announced) for tile in board)
    return len(board) == BOARD_SIZE and has_match and has_other


def is_valid_text_board(board: Board, announced: GameColor) -> bool:
    """All three tile kinds are present.

    - wrong by background: background is the announced color
    - wrong by text: other background, label names the announced color
    - correct: other background, label names some other color
    """
    wrong_by_background = any(tile.matches_background(announced) for tile in board)
    wrong_by_text = any(
        not tile.matches_background(announced) and tile.matches_text(announced) for tile in board
    )
    correct = any(tile.is_correct(announced, GameType.COLOR_AND_TEXT) for tile in board)
    return len(board) == BOARD_SIZE and wrong_by_background and wrong_by_text and correct


def build_color_board(
    announced: GameColor,
    previous: Board | None = None,
    rng: random.Random | None = None,
) -> Board:
    """Build a color-only board.

    Tiles are drawn uniformly from the palette and redrawn until the board is
    valid and differs from ``previous`` (up to MAX_BOARD_ATTEMPTS).
    """
    rng = rng or random.Random()

    for _ in range(MAX_BOARD_ATTEMPTS):
        board = tuple(Tile(rng.choice(PALETTE)) for _ in range(BOARD_SIZE))
        if is_valid_color_board(board, announced) and board != previous:
            return board

    logger.debug(f"Color board attempts exhausted for {color_name(announced)}, using fallback")
    tiles = [Tile(announced), Tile(rng.choice(_other_colors(announced)))]
    while len(tiles) < BOARD_SIZE:
        tiles.append(Tile(rng.choice(PALETTE)))
    rng.shuffle(tiles)
    return tuple(tiles)


def build_text_board(
    announced: GameColor,
    previous: Board | None = None,
    rng: random.Random | None = None,
) -> Board:
    """Build a color + text board containing all three tile kinds."""
    rng = rng or random.Random()
    announced_name = color_name(announced)
    others = _other_colors(announced)

    for _ in range(MAX_BOARD_ATTEMPTS):
        tiles = [
            # Wrong by background, any label
            Tile(announced, rng.choice(COLOR_NAMES)),
            # Wrong by text
            Tile(rng.choice(others), announced_name),
        ]

        correct_color = rng.choice(others)
        correct_labels = [
            name for name in COLOR_NAMES if name not in (announced_name, color_name(correct_color))
        ]
        tiles.append(Tile(correct_color, rng.choice(correct_labels)))

        while len(tiles) < BOARD_SIZE:
            tiles.append(Tile(rng.choice(PALETTE), rng.choice(COLOR_NAMES)))

        rng.shuffle(tiles)
        board = tuple(tiles)
        if is_valid_text_board(board, announced) and board != previous:
            return board

    logger.debug(f"Text board attempts exhausted for {announced_name}, using fallback")
    wrong_by_text_color = others[0]
    correct_color = others[1]
    tiles = [
        Tile(announced, color_name(wrong_by_text_color)),
        Tile(wrong_by_text_color, announced_name),
        Tile(correct_color, color_name(wrong_by_text_color)),
        Tile(rng.choice(PALETTE), rng.choice(COLOR_NAMES)),
    ]
    rng.shuffle(tiles)
    return tuple(tiles)


def build_board(
    game_type: GameType,
    announced: GameColor,
    previous: Board | None = None,
    rng: random.Random | None = None,
) -> Board:
    """Build the board for a round of the given game type."""
    if game_type == GameType.COLOR_ONLY:
        return build_color_board(announced, previous, rng)
    if game_type == GameType.COLOR_AND_TEXT:
        return build_text_board(announced, previous, rng)
    raise ValueError(f"Unknown game type: {game_type}")


def is_correct_tap(game_type: GameType, board: Board, index: int, announced: GameColor) -> bool:
    """Judge a tap on ``board[index]``.

    Raises:
        ValueError: If index is outside the board
    """
    if not 0 <= index < len(board):
        raise ValueError(f"Tile index {index} out of range for board of {len(board)}")
    return board[index].is_correct(announced, game_type)


class ColorAnnouncer:
    """Picks the announced color for each round.

    Colors are drawn uniformly, except that a color already announced
    MAX_ANNOUNCE_REPEATS times in a row is excluded from the next draw.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._recent: deque[GameColor] = deque(maxlen=MAX_ANNOUNCE_REPEATS)

    @property
    def recent(self) -> list[GameColor]:
        """Most recent announcements, oldest first."""
        return list(self._recent)

    def next_color(self) -> GameColor:
        """Draw and record the next announced color."""
        candidates = list(PALETTE)
        if len(self._recent) == MAX_ANNOUNCE_REPEATS and len(set(self._recent)) == 1:
            candidates.remove(self._recent[0])
        color = self._rng.choice(candidates)
        self._recent.append(color)
        return color

    def reset(self) -> None:
        """Forget announcement history (new level)."""
        self._recent.clear()
