"""
Thinkers: the players of a ColorShapeLinks match.
"""

from color_shape_links.thinkers.base import AbstractThinker
from color_shape_links.thinkers.human import (
    HumanThinker, InputSource, QueueInput, KeyboardInput
)
from color_shape_links.thinkers.minimax import MinimaxThinker, DEFAULT_MAX_DEPTH
from color_shape_links.thinkers.registry import ThinkerRegistry, default_registry

__all__ = [
    'AbstractThinker',
    'HumanThinker',
    'InputSource',
    'QueueInput',
    'KeyboardInput',
    'MinimaxThinker',
    'DEFAULT_MAX_DEPTH',
    'ThinkerRegistry',
    'default_registry',
]
