"""
Game board for ColorShapeLinks.

The board is a ``rows x cols`` grid where row 0 is the BOTTOM row. Pieces are
dropped into columns and land in the lowest empty cell. A player wins by
lining up ``win_sequence`` pieces that share their color, or that share the
player's favored shape, horizontally, vertically or diagonally.

The search engine mutates a single board in place and backtracks with
``undo_move()``, so moves are kept on a strict LIFO stack:
``undo_move()`` is only valid right after the matching ``do_move()`` with no
other mutation in between.
"""

from typing import List, Optional, Tuple

import numpy as np

from color_shape_links.game.pieces import (
    FutureMove, PColor, PShape, Piece, Winner
)

# Cell codes stored in the grid: 0 is empty, otherwise 1 + 2 * color + shape
_PIECES: List[Optional[Piece]] = [None] + [
    Piece(color, shape) for color in PColor for shape in PShape
]

# Right, up, up-right and up-left
_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))

Pos = Tuple[int, int]


def _code(color: PColor, shape: PShape) -> int:
    return 1 + 2 * int(color) + int(shape)


class Board:
    """
    ColorShapeLinks board with gravity, piece supply and LIFO undo.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        win_sequence: Number of aligned pieces required to win
        round_pieces: Initial round pieces per player
        square_pieces: Initial square pieces per player
        grid: ``(rows, cols)`` int8 array of cell codes, row 0 at the bottom
    """

    def __init__(
        self,
        rows: int = 6,
        cols: int = 7,
        win_sequence: int = 4,
        round_pieces: int = 11,
        square_pieces: int = 10
    ):
        self.rows = rows
        self.cols = cols
        self.win_sequence = win_sequence
        self.round_pieces = round_pieces
        self.square_pieces = square_pieces

        self.grid = np.zeros((rows, cols), dtype=np.int8)
        self.heights = [0] * cols
        self.piece_counts = np.array(
            [[round_pieces, square_pieces]] * len(PColor), dtype=np.int32
        )
        self.turn = PColor.WHITE

        # One entry per applied move: (row, col) and the outcome it produced
        self.move_history: List[Pos] = []
        self._outcomes: List[Tuple[Winner, Optional[List[Pos]]]] = []

    def __repr__(self):
        return (f"Board({self.rows}x{self.cols}, win={self.win_sequence}, "
                f"moves={len(self.move_history)}, turn={self.turn})")

    def __getitem__(self, pos: Pos) -> Optional[Piece]:
        row, col = pos
        return _PIECES[self.grid[row, col]]

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.turn is other.turn
            and self.move_history == other.move_history
            and np.array_equal(self.grid, other.grid)
            and np.array_equal(self.piece_counts, other.piece_counts)
        )

    __hash__ = None

    @property
    def num_moves(self) -> int:
        return len(self.move_history)

    def piece_count(self, color: PColor, shape: PShape) -> int:
        """Remaining pieces of ``shape`` in the supply of ``color``."""
        return int(self.piece_counts[color, shape])

    def is_column_full(self, col: int) -> bool:
        return self.heights[col] >= self.rows

    def is_full(self) -> bool:
        return len(self.move_history) >= self.rows * self.cols

    def legal_moves(self) -> List[FutureMove]:
        """
        Moves available to the player in turn, ascending column then shape.
        """
        shapes = [s for s in PShape if self.piece_counts[self.turn, s] > 0]
        return [
            FutureMove(col, shape)
            for col in range(self.cols) if self.heights[col] < self.rows
            for shape in shapes
        ]

    def do_move(self, shape: PShape, col: int) -> int:
        """
        Drop a piece of ``shape`` for the player in turn into ``col``.

        Args:
            shape: Shape of the piece to drop
            col: Column index

        Returns:
            Row where the piece landed, or -1 if the move was rejected
            (column out of range or full, or shape exhausted)
        """
        if col < 0 or col >= self.cols or self.heights[col] >= self.rows:
            return -1
        if self.piece_counts[self.turn, shape] <= 0:
            return -1

        row = self.heights[col]
        self.grid[row, col] = _code(self.turn, shape)
        self.heights[col] += 1
        self.piece_counts[self.turn, shape] -= 1
        self.move_history.append((row, col))
        self.turn = self.turn.other()
        self._outcomes.append(self._outcome_after(row, col))
        return row

    def undo_move(self) -> None:
        """
        Revert the most recent move, restoring supply, turn and cell.

        Raises:
            IndexError: If there is no move to undo
        """
        if not self.move_history:
            raise IndexError("No moves to undo")

        row, col = self.move_history.pop()
        self._outcomes.pop()
        piece = _PIECES[self.grid[row, col]]
        self.grid[row, col] = 0
        self.heights[col] -= 1
        self.piece_counts[piece.color, piece.shape] += 1
        self.turn = piece.color

    def check_winner(self) -> Winner:
        """Outcome of the current position."""
        if not self._outcomes:
            return Winner.NONE
        return self._outcomes[-1][0]

    def winning_sequence(self) -> Optional[List[Pos]]:
        """Cells of a winning run in the current position, if any."""
        if not self._outcomes:
            return None
        return self._outcomes[-1][1]

    def copy(self) -> "Board":
        b = Board(self.rows, self.cols, self.win_sequence,
                  self.round_pieces, self.square_pieces)
        b.grid = self.grid.copy()
        b.heights = self.heights[:]
        b.piece_counts = self.piece_counts.copy()
        b.turn = self.turn
        b.move_history = self.move_history[:]
        b._outcomes = self._outcomes[:]
        return b

    def to_text(self) -> str:
        """Top row first, one glyph per cell (``.`` for empty)."""
        lines = []
        for row in range(self.rows - 1, -1, -1):
            lines.append("".join(
                _PIECES[code].glyph if code else "."
                for code in self.grid[row]
            ))
        return "\n".join(lines)

    def _run_through(self, row: int, col: int, dr: int, dc: int,
                     same) -> List[Pos]:
        """Cells of the maximal run through (row, col) along (dr, dc)."""
        cells = [(row, col)]
        for sign in (1, -1):
            r, c = row + sign * dr, col + sign * dc
            while 0 <= r < self.rows and 0 <= c < self.cols:
                piece = _PIECES[self.grid[r, c]]
                if piece is None or not same(piece):
                    break
                cells.append((r, c))
                r, c = r + sign * dr, c + sign * dc
        return cells

    def _outcome_after(
        self, row: int, col: int
    ) -> Tuple[Winner, Optional[List[Pos]]]:
        """
        Evaluate the position after a piece landed on (row, col).

        The previous position was not terminal, so only runs through the new
        piece can decide the game. If the move completes runs for both
        players at once, the game is a draw.
        """
        piece = _PIECES[self.grid[row, col]]
        shape_owner = PColor.WHITE if piece.shape is PShape.ROUND else PColor.RED

        winners = set()
        sequence = None
        for dr, dc in _DIRECTIONS:
            for owner, same in (
                (piece.color, lambda p: p.color is piece.color),
                (shape_owner, lambda p: p.shape is piece.shape),
            ):
                if owner in winners:
                    continue
                run = self._run_through(row, col, dr, dc, same)
                if len(run) >= self.win_sequence:
                    winners.add(owner)
                    if sequence is None:
                        sequence = sorted(run)

        if len(winners) == 2:
            return Winner.DRAW, None
        if winners:
            return Winner.from_color(winners.pop()), sequence

        # Board full, or the player to move has nothing left to drop
        if self.is_full() or not self.piece_counts[self.turn].any():
            return Winner.DRAW, None
        return Winner.NONE, None
