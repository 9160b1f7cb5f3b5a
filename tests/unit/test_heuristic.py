"""
Unit tests for the static evaluation function.

On the default 6x7 board with win_sequence 4 the axis weights are:
    rows:    [4, 5, 5, 5, 5, 4]
    columns: [4, 5, 5, 5, 5, 4, 3]
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from color_shape_links.engine.heuristic import (
    axis_weight, build_from_afar, evaluate
)
from color_shape_links.game.board import Board
from color_shape_links.game.pieces import PColor, PShape

R, S = PShape.ROUND, PShape.SQUARE
WHITE, RED = PColor.WHITE, PColor.RED


def play(board, moves):
    for shape, col in moves:
        assert board.do_move(shape, col) >= 0
    return board


class TestAxisWeight:

    def test_default_columns(self):
        assert [axis_weight(i, 7, 4) for i in range(7)] == [4, 5, 5, 5, 5, 4, 3]

    def test_default_rows(self):
        assert [axis_weight(i, 6, 4) for i in range(6)] == [4, 5, 5, 5, 5, 4]

    def test_peak_is_win_sequence_plus_one(self):
        weights = [axis_weight(i, 11, 3) for i in range(11)]
        assert max(weights) == 4
        assert weights.count(4) == 3

    def test_never_below_one(self):
        assert min(axis_weight(i, 30, 4) for i in range(30)) == 1

    def test_short_axis_is_all_zone(self):
        assert [axis_weight(i, 3, 4) for i in range(3)] == [5, 5, 5]


class TestBuildFromAfar:

    def test_compatible_pieces_ahead(self):
        board = play(Board(), [(R, 0), (S, 0), (R, 1), (S, 1), (R, 2)])
        # Row 0: white rounds at columns 0, 1 and 2
        assert build_from_afar(board, 0, 0, WHITE) == 0 + 1 + 2
        # A white round is neither red nor square: blocks red immediately
        assert build_from_afar(board, 0, 0, RED) == 0

    def test_incompatible_piece_stops_scan(self):
        board = play(Board(), [(R, 0), (S, 1), (R, 2)])
        # Row 0: W round, R square, W round
        assert build_from_afar(board, 0, 0, WHITE) == 0

    def test_empty_cells_are_skipped(self):
        board = play(Board(), [(R, 0), (S, 6), (R, 2)])
        assert build_from_afar(board, 0, 0, WHITE) == 2

    def test_too_close_to_edge(self):
        board = play(Board(), [(R, 4), (S, 0), (R, 5)])
        assert build_from_afar(board, 0, 4, WHITE) == 0


class TestEvaluate:

    def test_empty_board(self):
        board = Board()
        assert evaluate(board, WHITE) == 0
        assert evaluate(board, RED) == 0

    def test_single_favored_piece(self):
        board = play(Board(), [(R, 3)])
        # Color and shape both match: 2 * (row 4 + col 5)
        assert evaluate(board, WHITE) == 18
        assert evaluate(board, RED) == -18

    def test_center_beats_edge(self):
        center = evaluate(play(Board(), [(R, 3)]), WHITE)
        edge = evaluate(play(Board(), [(R, 0)]), WHITE)
        corner = evaluate(play(Board(), [(R, 6)]), WHITE)
        assert center > edge > corner

    def test_antisymmetric_without_mismatches(self):
        # Only favored-shape pieces, all too close to the right edge for
        # the formation scan: the evaluation flips sign with perspective
        board = play(Board(), [(R, 5), (S, 5), (R, 6), (S, 6)])
        white = evaluate(board, WHITE)
        red = evaluate(board, RED)
        assert white == -4
        assert white == -red

    def test_mismatch_penalty_is_asymmetric(self):
        # Lone white square in the corner column: color and shape cancel out
        # for both players, but white also pays (4 + 2 * 3) / 3
        board = play(Board(), [(S, 6)])
        assert evaluate(board, WHITE) == pytest.approx(-10 / 3)
        assert evaluate(board, RED) == 0

    def test_pure_function(self):
        board = play(Board(), [(R, 3), (S, 3), (S, 2), (R, 4)])
        before = board.copy()
        assert evaluate(board, WHITE) == evaluate(board, WHITE)
        assert board == before


if __name__ == '__main__':
    sys.exit(pytest.main([__file__, '-v']))
