"""
ColorShapeLinks: a connect-style game where runs of a color or of a shape win.

Provides the board, the thinker contract with human and minimax thinkers, the
alpha-beta search engine and the match orchestrator.
"""

from color_shape_links.cancellation import CancellationToken
from color_shape_links.config import MatchConfig, load_config
from color_shape_links.exceptions import InvalidMoveError, UnknownThinkerError
from color_shape_links.game import (
    Board, FutureMove, NO_MOVE, PColor, PShape, Piece, Winner
)
from color_shape_links.match import Match, MatchResult, run_series
from color_shape_links.thinkers import (
    AbstractThinker, HumanThinker, MinimaxThinker, ThinkerRegistry, default_registry
)

__version__ = "0.1"

__all__ = [
    'CancellationToken',
    'MatchConfig',
    'load_config',
    'InvalidMoveError',
    'UnknownThinkerError',
    'Board',
    'FutureMove',
    'NO_MOVE',
    'PColor',
    'PShape',
    'Piece',
    'Winner',
    'Match',
    'MatchResult',
    'run_series',
    'AbstractThinker',
    'HumanThinker',
    'MinimaxThinker',
    'ThinkerRegistry',
    'default_registry',
]
