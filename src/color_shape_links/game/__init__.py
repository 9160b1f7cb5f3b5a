"""
Board and piece types for ColorShapeLinks.
"""

from color_shape_links.game.pieces import (
    PColor, PShape, Piece, Winner, FutureMove, NO_MOVE
)
from color_shape_links.game.board import Board

__all__ = [
    'PColor',
    'PShape',
    'Piece',
    'Winner',
    'FutureMove',
    'NO_MOVE',
    'Board',
]
