"""Card, Color and Rank types."""

from dataclasses import dataclass
from enum import Enum


class Color(str, Enum):
    """Card colors. WILD marks the colorless wild cards and is never an active color."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    WILD = "wild"


# Fixed order, also used to break ties when a computer seat picks a color.
BASE_COLORS = (Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW)


class Rank(str, Enum):
    """Card ranks."""

    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    SKIP = "skip"
    REVERSE = "reverse"
    DRAW_TWO = "draw_two"
    WILD = "wild"
    WILD_DRAW_FOUR = "wild_draw_four"


NUMERAL_RANKS = tuple(r for r in Rank if r.value.isdigit())
ACTION_RANKS = (Rank.SKIP, Rank.REVERSE, Rank.DRAW_TWO)
WILD_RANKS = (Rank.WILD, Rank.WILD_DRAW_FOUR)


@dataclass(frozen=True)
class Card:
    """An Uno card.

    Numeral and action cards carry one of the four base colors.
    Wild and Wild Draw Four always carry Color.WILD.
    """

    color: Color
    rank: Rank

    def __post_init__(self) -> None:
        if self.rank in WILD_RANKS and self.color is not Color.WILD:
            raise ValueError(f"Wild cards must have color=wild, got {self.color}")
        if self.rank not in WILD_RANKS and self.color is Color.WILD:
            raise ValueError(f"Non-wild card {self.rank.value} must have a base color")

    @property
    def is_wild(self) -> bool:
        return self.rank in WILD_RANKS

    @property
    def is_numeral(self) -> bool:
        return self.rank in NUMERAL_RANKS

    @property
    def draw_count(self) -> int:
        """Cards the next seat is forced to draw when this card resolves."""
        if self.rank is Rank.DRAW_TWO:
            return 2
        if self.rank is Rank.WILD_DRAW_FOUR:
            return 4
        return 0

    def __str__(self) -> str:
        if self.is_wild:
            return self.rank.value
        return f"{self.color.value}_{self.rank.value}"
