"""Color palette shared by the announcer and the board."""

from enum import Enum


class GameColor(Enum):
    """The four playable colors. Values are the canonical spoken names."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"

    @property
    def display_name(self) -> str:
        return self.value


PALETTE: tuple[GameColor, ...] = tuple(GameColor)

COLOR_NAMES: tuple[str, ...] = tuple(color.value for color in PALETTE)


def color_name(color: GameColor) -> str:
    """Canonical lowercase name of a color, as announced to the player."""
    return color.value


def names_match(label: str | None, color: GameColor) -> bool:
    """Case-insensitive comparison of a tile label against a color name."""
    if label is None:
        return False
    return label.lower() == color.value
