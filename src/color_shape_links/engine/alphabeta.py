"""
Depth-limited minimax search with alpha-beta pruning for ColorShapeLinks.

The search works on a single board mutated in place: every candidate move is
applied with ``do_move()``, searched recursively and reverted with
``undo_move()`` before the next one is tried. On return the board is exactly
as it was given.

Algorithm overview:

    def minimax(board, turn, depth, alpha, beta):
        if cancelled:
            return ABORTED
        if board is final:
            return +inf / -inf / 0
        if depth == max_depth:
            return heuristic(board, player)

        for col in columns:                 # ascending
            for shape in (ROUND, SQUARE):   # skip exhausted shapes
                do_move(shape, col)
                score = minimax(board, other(turn), depth + 1, alpha, beta)
                undo_move()

                if turn == player:          # maximizing
                    best = max(best, score)
                    if score >= beta:
                        break both loops    # beta cutoff
                    alpha = max(alpha, score)
                else:                       # minimizing
                    best = min(best, score)
                    if score <= alpha:
                        break both loops    # alpha cutoff
                    beta = min(beta, score)
        return best

Move generation order is fixed (column, then shape) so searches are
reproducible. Ties between exact scores are resolved in favor of the most
recently generated move; a score that is only a bound (a pruned child whose
value lies on or outside its alpha-beta window) never wins a tie, so the chosen
move always has the reported score.
"""

import math
import time
from dataclasses import dataclass
from typing import Callable, Optional, Union

from color_shape_links.cancellation import CancellationToken
from color_shape_links.engine.heuristic import evaluate
from color_shape_links.game.board import Board
from color_shape_links.game.pieces import (
    FutureMove, NO_MOVE, PColor, PShape, Winner
)

Evaluator = Callable[[Board, PColor], float]
RootCallback = Callable[[FutureMove, float, "Scored"], None]


@dataclass(frozen=True)
class Scored:
    """A completed search node: best move found there and its score."""
    move: FutureMove
    score: float


class Aborted:
    """A cancelled search node. Deliberately carries no score."""
    __slots__ = ()

    def __repr__(self):
        return "ABORTED"


ABORTED = Aborted()

SearchNode = Union[Scored, Aborted]


@dataclass
class SearchResult:
    """Result of a root search."""
    best_move: FutureMove
    score: Optional[float]
    aborted: bool
    max_depth: int
    nodes_searched: int
    time_ms: int


class AlphaBetaEngine:
    """
    Minimax search with alpha-beta pruning over a shared, mutable board.

    Args:
        max_depth: Search depth in plies; leaves at this depth are scored by
            the evaluator
        evaluator: Static evaluation ``(board, color) -> float``
        prune: Disable to run plain exhaustive minimax (same scores, more
            nodes)
    """

    def __init__(
        self,
        max_depth: int = 3,
        evaluator: Evaluator = evaluate,
        prune: bool = True
    ):
        self.max_depth = max_depth
        self.evaluator = evaluator
        self.prune = prune

        # Search statistics
        self.nodes_searched = 0

        # Called after each root candidate is searched
        self.on_root_move: Optional[RootCallback] = None

    def search(
        self,
        board: Board,
        token: CancellationToken,
        player: Optional[PColor] = None
    ) -> SearchResult:
        """
        Search the position for the best move of ``player``.

        Args:
            board: Position to search, restored before returning
            token: Cancellation token polled at every node
            player: Perspective player (defaults to the player in turn)

        Returns:
            SearchResult; ``best_move`` is ``NO_MOVE`` when the search was
            aborted or the position is already final
        """
        if player is None:
            player = board.turn
        self.nodes_searched = 0
        start = time.monotonic()

        node = self._minimax(board, token, player, board.turn, 0,
                             -math.inf, math.inf)

        elapsed_ms = int((time.monotonic() - start) * 1000)
        if node is ABORTED:
            return SearchResult(NO_MOVE, None, True, self.max_depth,
                                self.nodes_searched, elapsed_ms)
        return SearchResult(node.move, node.score, False, self.max_depth,
                            self.nodes_searched, elapsed_ms)

    def _minimax(
        self,
        board: Board,
        token: CancellationToken,
        player: PColor,
        turn: PColor,
        depth: int,
        alpha: float,
        beta: float
    ) -> SearchNode:
        """
        Recursive minimax with alpha-beta bounds.

        Args:
            board: Board, mutated and restored in place
            token: Cancellation token
            player: Perspective (maximizing) player
            turn: Player to move at this node
            depth: Current depth, 0 at the root
            alpha: Best score the maximizer is assured of
            beta: Best score the minimizer is assured of

        Returns:
            Scored node, or ABORTED if cancellation was requested
        """
        if token.is_cancellation_requested:
            return ABORTED

        self.nodes_searched += 1

        winner = board.check_winner()
        if winner is not Winner.NONE:
            if winner is Winner.DRAW:
                return Scored(NO_MOVE, 0.0)
            if winner.to_color() is player:
                return Scored(NO_MOVE, math.inf)
            return Scored(NO_MOVE, -math.inf)

        if depth == self.max_depth:
            return Scored(NO_MOVE, self.evaluator(board, player))

        maximizing = turn is player
        best = Scored(NO_MOVE, -math.inf if maximizing else math.inf)
        cutoff = False

        for col in range(board.cols):
            if board.is_column_full(col):
                continue

            for shape in PShape:
                if board.piece_count(turn, shape) == 0:
                    continue

                board.do_move(shape, col)
                child = self._minimax(board, token, player, turn.other(),
                                      depth + 1, alpha, beta)
                board.undo_move()

                if child is ABORTED:
                    return ABORTED

                move = FutureMove(col, shape)
                score = child.score

                # Ties go to the most recent move, but only when the child's
                # score is exact. On or outside the (alpha, beta) window a pruned
                # child only reports a bound. Leaves are always exact.
                exact = (not self.prune or child.move.is_no_move
                         or alpha < score < beta)
                if best.move.is_no_move:
                    improves = True
                elif score == best.score:
                    improves = exact
                elif maximizing:
                    improves = score > best.score
                else:
                    improves = score < best.score
                if improves:
                    best = Scored(move, score)

                if maximizing:
                    if self.prune and score >= beta:
                        cutoff = True
                    else:
                        alpha = max(alpha, score)
                else:
                    if self.prune and score <= alpha:
                        cutoff = True
                    else:
                        beta = min(beta, score)

                if depth == 0 and self.on_root_move is not None:
                    self.on_root_move(move, score, best)

                if cutoff:
                    break

            if cutoff:
                break

        return best
