"""
Thinker contract shared by human and AI players.

A thinker is configured once with a parameter string, then asked to
``think()`` once per turn. ``think()`` receives the live board and a
cancellation token, must return a move before too long and must return
``NO_MOVE`` when cancelled before reaching a decision. While thinking, a
thinker may publish a few status lines to registered listeners.
"""

import time
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence

from color_shape_links.cancellation import CancellationToken
from color_shape_links.config import MatchConfig
from color_shape_links.game.board import Board
from color_shape_links.game.pieces import FutureMove

ThinkingListener = Callable[["AbstractThinker", Sequence[str]], None]


class AbstractThinker(ABC):
    """
    Base class for all thinkers.

    Subclasses implement ``think()`` and usually ``configure()``. The match
    settings are given at construction so thinkers can size their state to
    the board before play starts.

    Attributes:
        config: Settings of the match this thinker plays in
        notification_interval_ms: Minimum time between thinking notifications
    """

    notification_interval_ms = 20

    def __init__(self, config: Optional[MatchConfig] = None):
        self.config = config or MatchConfig()
        self._listeners: List[ThinkingListener] = []
        self._last_notification = float('-inf')

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def win_sequence(self) -> int:
        return self.config.win_sequence

    @property
    def time_limit_ms(self) -> int:
        return self.config.time_limit_ms

    def __str__(self):
        return type(self).__name__

    def configure(self, params: str) -> None:
        """
        Apply thinker specific parameters.

        Invalid parameters never raise; implementations fall back to their
        documented defaults instead.
        """

    @abstractmethod
    def think(self, board: Board, token: CancellationToken) -> FutureMove:
        """
        Choose a move for the player in turn.

        Args:
            board: Current board; it may be mutated while thinking but must
                be restored before returning
            token: Cooperative cancellation token

        Returns:
            The chosen move, or ``NO_MOVE`` if cancelled first
        """

    def add_thinking_listener(self, listener: ThinkingListener) -> None:
        self._listeners.append(listener)

    def remove_thinking_listener(self, listener: ThinkingListener) -> None:
        self._listeners.remove(listener)

    def notify_thinking(self, lines: Sequence[str], force: bool = False) -> bool:
        """
        Publish status lines, throttled to one call per notification interval.

        Returns:
            True if the lines were delivered to listeners
        """
        if not self._listeners:
            return False
        now = time.monotonic() * 1000
        if not force and now - self._last_notification < self.notification_interval_ms:
            return False
        self._last_notification = now
        for listener in self._listeners:
            listener(self, list(lines))
        return True
