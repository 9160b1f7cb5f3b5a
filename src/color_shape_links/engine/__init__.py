"""
Search engine for ColorShapeLinks AI thinkers.

This module contains:
- Heuristic evaluation of non-final positions
- Depth-limited minimax search with alpha-beta pruning
"""

from color_shape_links.engine.heuristic import evaluate, axis_weight
from color_shape_links.engine.alphabeta import (
    AlphaBetaEngine, SearchResult, Scored, Aborted, ABORTED
)

__all__ = [
    'evaluate',
    'axis_weight',
    'AlphaBetaEngine',
    'SearchResult',
    'Scored',
    'Aborted',
    'ABORTED',
]
