"""
Turn orchestration for ColorShapeLinks.

A ``Match`` owns the board and alternates between two thinkers: white moves
first. Each turn the active thinker gets the board and a cancellation token
armed with the per-move time limit, and the returned move is validated and
applied. The match ends on a win, a draw, or a forfeit.

Policies:
- A thinker that returns ``NO_MOVE`` (it ran out of time) forfeits and the
  opponent wins.
- A thinker that returns an illegal move, or leaves the board modified, is
  defective: ``InvalidMoveError`` is raised and the match is abandoned.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from tqdm import tqdm

from color_shape_links.cancellation import CancellationToken
from color_shape_links.config import MatchConfig
from color_shape_links.exceptions import InvalidMoveError
from color_shape_links.game.board import Board
from color_shape_links.game.pieces import FutureMove, NO_MOVE, PColor, Winner
from color_shape_links.render import Renderer
from color_shape_links.thinkers.base import AbstractThinker

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    """Outcome of a finished match."""
    winner: Winner
    reason: str                                 # 'win', 'draw' or 'timeout'
    players: Dict[PColor, str]
    moves: List[FutureMove] = field(default_factory=list)
    winning_sequence: Optional[List[Tuple[int, int]]] = None
    final_board: Optional[Board] = None

    @property
    def is_draw(self) -> bool:
        return self.winner is Winner.DRAW

    @property
    def winner_name(self) -> Optional[str]:
        color = self.winner.to_color()
        return None if color is None else self.players[color]

    def describe(self) -> str:
        if self.is_draw:
            return "Game ended in a draw"
        color = self.winner.to_color()
        text = f"Winner is {self.players[color]} ({color})"
        if self.reason == 'timeout':
            text += f", {self.players[color.other()]} ran out of time"
        return text


class Match:
    """
    A single game between two thinkers.

    Args:
        white: Thinker playing white (moves first)
        red: Thinker playing red
        config: Board geometry, piece supply and time limit
        renderer: Observer for boards, thinking lines and results
    """

    def __init__(
        self,
        white: AbstractThinker,
        red: AbstractThinker,
        config: Optional[MatchConfig] = None,
        renderer: Optional[Renderer] = None
    ):
        self.config = config or MatchConfig()
        self.config.validate()
        self.thinkers = {PColor.WHITE: white, PColor.RED: red}
        self.renderer = renderer or Renderer()
        self.board = Board(
            rows=self.config.rows,
            cols=self.config.cols,
            win_sequence=self.config.win_sequence,
            round_pieces=self.config.round_pieces,
            square_pieces=self.config.square_pieces,
        )

    def run(self) -> MatchResult:
        """
        Play until the game is decided.

        Returns:
            MatchResult

        Raises:
            InvalidMoveError: If a thinker breaks the move protocol
        """
        players = {color: str(t) for color, t in self.thinkers.items()}
        moves: List[FutureMove] = []

        for thinker in self.thinkers.values():
            thinker.add_thinking_listener(self.renderer.thinking)
        try:
            while True:
                color = self.board.turn
                thinker = self.thinkers[color]
                move = self._play_turn(thinker, color)

                if move.is_no_move:
                    logger.info("%s (%s) returned no move and forfeits", thinker, color)
                    result = MatchResult(Winner.from_color(color.other()), 'timeout',
                                         players, moves, None, self.board.copy())
                    break

                moves.append(move)
                winner = self.board.check_winner()
                if winner is not Winner.NONE:
                    reason = 'draw' if winner is Winner.DRAW else 'win'
                    result = MatchResult(winner, reason, players, moves,
                                         self.board.winning_sequence(),
                                         self.board.copy())
                    break
        finally:
            for thinker in self.thinkers.values():
                thinker.remove_thinking_listener(self.renderer.thinking)

        logger.info("%s after %d moves", result.describe(), len(moves))
        self.renderer.show_result(result)
        return result

    def _play_turn(self, thinker: AbstractThinker, color: PColor) -> FutureMove:
        board = self.board
        self.renderer.render_board(board.copy())
        self.renderer.begin_turn(thinker, color)

        moves_before = board.num_moves
        token = CancellationToken(self.config.time_limit_ms)
        move = NO_MOVE
        try:
            move = thinker.think(board, token)
        finally:
            self.renderer.end_turn(thinker, color, move)

        if board.num_moves != moves_before or board.turn is not color:
            raise InvalidMoveError(thinker, move, "board was left modified")
        if move.is_no_move:
            return move

        self._validate(thinker, move)
        row = board.do_move(move.shape, move.column)
        if row < 0:
            raise InvalidMoveError(thinker, move, "board rejected the move")

        logger.info("%s (%s) placed a %s piece at column %d, row %d",
                    thinker, color, move.shape.name.lower(), move.column, row)
        return move

    def _validate(self, thinker: AbstractThinker, move: FutureMove) -> None:
        board = self.board
        if not 0 <= move.column < board.cols:
            raise InvalidMoveError(thinker, move, "column out of range")
        if board.is_column_full(move.column):
            raise InvalidMoveError(thinker, move, "column is full")
        if board.piece_count(board.turn, move.shape) == 0:
            raise InvalidMoveError(thinker, move, "no pieces of that shape left")


@dataclass
class SeriesResult:
    """Tally of several matches between the same two thinkers."""
    players: Dict[PColor, str]
    results: List[MatchResult]

    @property
    def tally(self) -> Counter:
        return Counter(r.winner for r in self.results)


def run_series(
    white: AbstractThinker,
    red: AbstractThinker,
    games: int,
    config: Optional[MatchConfig] = None,
    renderer: Optional[Renderer] = None,
    progress: bool = True
) -> SeriesResult:
    """
    Play ``games`` matches with the same thinkers and settings.

    Args:
        white: Thinker playing white in every game
        red: Thinker playing red in every game
        games: Number of games
        config: Match settings
        renderer: Observer passed to every match
        progress: Show a tqdm progress bar

    Returns:
        SeriesResult with every MatchResult in order
    """
    results = []
    with tqdm(total=games, desc="Games", ncols=80, disable=not progress) as pbar:
        for _ in range(games):
            result = Match(white, red, config, renderer).run()
            results.append(result)
            pbar.set_postfix(
                white=sum(r.winner is Winner.WHITE for r in results),
                red=sum(r.winner is Winner.RED for r in results),
                draw=sum(r.is_draw for r in results),
            )
            pbar.update(1)
    return SeriesResult({PColor.WHITE: str(white), PColor.RED: str(red)}, results)
