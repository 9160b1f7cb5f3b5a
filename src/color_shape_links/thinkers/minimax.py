"""
Minimax AI thinker.
"""

import logging
from typing import Optional

from color_shape_links.cancellation import CancellationToken
from color_shape_links.engine.alphabeta import AlphaBetaEngine, SearchResult
from color_shape_links.game.board import Board
from color_shape_links.game.pieces import FutureMove
from color_shape_links.thinkers.base import AbstractThinker

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 3


class MinimaxThinker(AbstractThinker):
    """
    AI thinker backed by depth-limited alpha-beta minimax.

    Parameter string: the maximum search depth, a positive integer. Anything
    else selects ``DEFAULT_MAX_DEPTH``.
    """

    def __init__(self, config=None):
        super().__init__(config)
        self.engine = AlphaBetaEngine(max_depth=DEFAULT_MAX_DEPTH)
        self.engine.on_root_move = self._on_root_move
        self.last_result: Optional[SearchResult] = None

    @property
    def max_depth(self) -> int:
        return self.engine.max_depth

    @property
    def nodes_searched(self) -> int:
        return self.engine.nodes_searched

    def configure(self, params: str) -> None:
        try:
            depth = int(params)
        except (TypeError, ValueError):
            logger.debug("Invalid depth %r, using %d", params, DEFAULT_MAX_DEPTH)
            depth = DEFAULT_MAX_DEPTH
        if depth < 1:
            logger.debug("Non-positive depth %d, using %d", depth, DEFAULT_MAX_DEPTH)
            depth = DEFAULT_MAX_DEPTH
        self.engine.max_depth = depth

    def __str__(self):
        return f"{type(self).__name__}(D{self.max_depth})"

    def think(self, board: Board, token: CancellationToken) -> FutureMove:
        self.last_result = self.engine.search(board, token)
        result = self.last_result
        if result.aborted:
            logger.debug("%s cancelled after %d nodes", self, result.nodes_searched)
        else:
            logger.debug("%s chose %s (score %s, %d nodes, %d ms)",
                         self, result.best_move, result.score,
                         result.nodes_searched, result.time_ms)
        return result.best_move

    def _on_root_move(self, move, score, best) -> None:
        self.notify_thinking([
            f"Depth      : {self.max_depth}",
            f"Searched   : {move} -> {score:g}",
            f"Best so far: {best.move} -> {best.score:g}",
            f"Nodes      : {self.engine.nodes_searched}",
        ])
