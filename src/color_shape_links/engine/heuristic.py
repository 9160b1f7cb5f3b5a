"""
Static evaluation of ColorShapeLinks positions.

Used by the minimax engine at the depth limit. The score is a sum over
occupied cells, from the point of view of one player ("perspective"):

- Axis terms: the row and column of a cell are mapped through a trapezoid
  that is flat at ``win_sequence + 1`` across a central zone of
  ``win_sequence`` cells and drops by one per cell towards the edges. Central
  pieces take part in more potential runs.
- Build from afar: looking forward along the row, each compatible piece
  (perspective color or favored shape) within ``win_sequence - 1`` cells adds
  its distance, until an incompatible piece blocks the scan.
- Dump from afar: a piece of the perspective color but of the other shape
  dilutes shape alignment and is penalized by a blend of its axis terms.

Color and shape are scored independently: a cell counts once for matching
(or not) the perspective color and once for matching (or not) its favored
shape. The dump penalty only applies to the perspective's own pieces, so the
evaluation is not antisymmetric in general.
"""

from functools import lru_cache
from typing import Tuple

import numpy as np

from color_shape_links.game.board import Board
from color_shape_links.game.pieces import PColor


def axis_weight(index: int, size: int, win_sequence: int) -> int:
    """
    Trapezoidal weight of a row or column index.

    Args:
        index: Row or column index
        size: Number of rows or columns on that axis
        win_sequence: Run length needed to win

    Returns:
        ``win_sequence + 1`` inside the central zone, one less per cell of
        distance outside it, never below 1
    """
    peak = win_sequence + 1
    zone_start = (size - win_sequence) // 2
    zone_end = zone_start + win_sequence - 1
    if index < zone_start:
        return max(1, peak - (zone_start - index))
    if index > zone_end:
        return max(1, peak - (index - zone_end))
    return peak


@lru_cache(maxsize=64)
def _axis_weights(size: int, win_sequence: int) -> Tuple[int, ...]:
    return tuple(axis_weight(i, size, win_sequence) for i in range(size))


def build_from_afar(board: Board, row: int, col: int, color: PColor) -> float:
    """Distance-weighted bonus for compatible pieces ahead on the row."""
    win_sequence = board.win_sequence
    if col + win_sequence > board.cols:
        return 0.0

    value = 0.0
    for j in range(col, col + win_sequence - 1):
        piece = board[row, j]
        if piece is None:
            continue
        if piece.color is not color and piece.shape is not color.shape:
            break
        value += j - col
    return value


def dump_from_afar(row_weight: float, col_weight: float) -> float:
    """Penalty for a perspective-colored piece of the unfavored shape."""
    return (row_weight + 2 * col_weight) / 3


def evaluate(board: Board, color: PColor) -> float:
    """
    Heuristic value of ``board`` for the player ``color``.

    Positive values favor ``color``. Pure function of the board contents:
    it knows nothing about search depth or alpha-beta bounds.
    """
    row_weights = _axis_weights(board.rows, board.win_sequence)
    col_weights = _axis_weights(board.cols, board.win_sequence)
    favored = color.shape

    h = 0.0
    for row, col in zip(*np.nonzero(board.grid)):
        row, col = int(row), int(col)
        piece = board[row, col]

        color_sign = 1 if piece.color is color else -1
        shape_sign = 1 if piece.shape is favored else -1

        term = row_weights[row] + col_weights[col]
        term += build_from_afar(board, row, col, color)
        h += (color_sign + shape_sign) * term

        if color_sign > 0 and shape_sign < 0:
            h -= dump_from_afar(row_weights[row], col_weights[col])
    return h
