"""
Piece, move and outcome types for ColorShapeLinks.

Every piece carries two independent attributes, a color and a shape. A run of
``win_sequence`` pieces sharing either attribute wins the game. Each color
"owns" one shape: a run of round pieces counts for white, a run of square
pieces counts for red.
"""

from enum import Enum, IntEnum
from typing import NamedTuple, Optional


class PShape(IntEnum):
    """Piece shape. Enumeration order is the move generation order."""
    ROUND = 0
    SQUARE = 1


class PColor(IntEnum):
    """Piece color, which doubles as the player identity."""
    WHITE = 0
    RED = 1

    def other(self) -> "PColor":
        return PColor.RED if self is PColor.WHITE else PColor.WHITE

    @property
    def shape(self) -> PShape:
        """Favored shape of this color."""
        return PShape.ROUND if self is PColor.WHITE else PShape.SQUARE

    def __str__(self):
        return self.name.capitalize()


class Winner(Enum):
    NONE = 0
    WHITE = 1
    RED = 2
    DRAW = 3

    @classmethod
    def from_color(cls, color: PColor) -> "Winner":
        return cls.WHITE if color is PColor.WHITE else cls.RED

    def to_color(self) -> Optional[PColor]:
        """Color of the winning player, or None for NONE and DRAW."""
        if self is Winner.WHITE:
            return PColor.WHITE
        if self is Winner.RED:
            return PColor.RED
        return None


class Piece(NamedTuple):
    color: PColor
    shape: PShape

    @property
    def glyph(self) -> str:
        """Single character used by console renderers: w, W, r or R."""
        letter = 'w' if self.color is PColor.WHITE else 'r'
        return letter.upper() if self.shape is PShape.SQUARE else letter


class FutureMove(NamedTuple):
    """A move a thinker intends to play: drop ``shape`` into ``column``."""
    column: int
    shape: PShape

    @property
    def is_no_move(self) -> bool:
        return self.column < 0

    def __str__(self):
        if self.is_no_move:
            return "NoMove"
        return f"{self.shape.name.capitalize()} at column {self.column}"


# Returned by thinkers that were cancelled or have nothing to play
NO_MOVE = FutureMove(-1, PShape.ROUND)
