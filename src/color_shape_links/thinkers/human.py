"""
Interactive thinker driven by keyboard input.

The human thinker runs a polling loop on the calling thread: each iteration
drains pending key presses from an input source, checks the cancellation
token and refreshes the thinking notification, then sleeps for a short poll
interval. Keys:

    a / 4 / left    select previous non-full column (wraps around)
    d / 6 / right   select next non-full column (wraps around)
    t               toggle shape, if the other shape is still available
    enter           drop the selected piece
"""

import queue
import sys
import threading
import time
from abc import ABC, abstractmethod
from typing import Iterable, Optional, TextIO

from color_shape_links.cancellation import CancellationToken
from color_shape_links.game.board import Board
from color_shape_links.game.pieces import FutureMove, NO_MOVE, PShape
from color_shape_links.thinkers.base import AbstractThinker

LEFT_KEYS = {'a', '4', 'left'}
RIGHT_KEYS = {'d', '6', 'right'}
TOGGLE_KEYS = {'t'}
DROP_KEYS = {'enter'}


class InputSource(ABC):
    """Non-blocking source of key names."""

    @abstractmethod
    def poll(self) -> Optional[str]:
        """Return the next pending key, or None if nothing was pressed."""

    def clear(self) -> None:
        """Discard every pending key."""
        while self.poll() is not None:
            pass


class QueueInput(InputSource):
    """Keys fed programmatically, e.g. by a GUI or a test."""

    def __init__(self, keys: Iterable[str] = ()):
        self.keys: "queue.Queue[str]" = queue.Queue()
        for key in keys:
            self.push(key)

    def push(self, key: str) -> None:
        self.keys.put(key)

    def poll(self) -> Optional[str]:
        try:
            return self.keys.get_nowait()
        except queue.Empty:
            return None


class KeyboardInput(QueueInput):
    """
    Keys typed on a line-buffered terminal.

    A daemon thread reads lines from ``stream``; every character of a line is
    a key press and the end of the line is ``enter``. So ``dd`` followed by
    Return moves two columns right and drops the piece.

    Only one reader may consume a stream: thinkers sharing a terminal must
    share one ``KeyboardInput``.
    """

    def __init__(self, stream: TextIO = None):
        super().__init__()
        self.stream = stream or sys.stdin
        self._reader = threading.Thread(target=self._read_lines, daemon=True)
        self._reader.start()

    def _read_lines(self) -> None:
        for line in self.stream:
            for char in line.rstrip('\r\n').lower():
                if not char.isspace():
                    self.push(char)
            self.push('enter')


class HumanThinker(AbstractThinker):
    """
    Thinker that lets a person pick column and shape.

    The selection persists between turns. Keys pending when a turn starts are
    discarded. If no input arrives before the token is cancelled, ``NO_MOVE``
    is returned.

    Args:
        config: Match settings
        input_source: Where key presses come from (defaults to the terminal)
        poll_interval_ms: Sleep between polling iterations
    """

    def __init__(self, config=None, input_source: InputSource = None,
                 poll_interval_ms: float = 10):
        super().__init__(config)
        self.input_source = input_source
        self.poll_interval_ms = poll_interval_ms
        self.selected_col = self.cols // 2
        self.selected_shape = PShape.ROUND

    def configure(self, params: str) -> None:
        # No parameters; reset the selection
        self.selected_col = self.cols // 2
        self.selected_shape = PShape.ROUND

    def think(self, board: Board, token: CancellationToken) -> FutureMove:
        if self.input_source is None:
            self.input_source = KeyboardInput()
        # Keys typed during the opponent's turn are not for this move
        self.input_source.clear()

        turn = board.turn
        move = NO_MOVE

        # Start on a shape that is still available
        if board.piece_count(turn, PShape.ROUND) == 0:
            self.selected_shape = PShape.SQUARE
        if board.piece_count(turn, PShape.SQUARE) == 0:
            self.selected_shape = PShape.ROUND

        # ...and on a column with room
        self.selected_col %= board.cols
        self._step_column(board, 0)

        while True:
            key = self.input_source.poll()
            while key is not None:
                key = key.lower()
                if key in RIGHT_KEYS:
                    self._step_column(board, 1)
                elif key in LEFT_KEYS:
                    self._step_column(board, -1)
                elif key in TOGGLE_KEYS:
                    other = PShape(1 - self.selected_shape)
                    if board.piece_count(turn, other) > 0:
                        self.selected_shape = other
                elif key in DROP_KEYS:
                    move = FutureMove(self.selected_col, self.selected_shape)
                    break
                key = self.input_source.poll()

            if not move.is_no_move:
                break

            if token.is_cancellation_requested:
                break

            remaining = token.remaining_ms
            self.notify_thinking([
                f"< > : Column [{self.selected_col:>8}] selected",
                f" T  : Piece  [{self.selected_shape.name.capitalize():>8}] selected",
                "    : Time to play: "
                + ("unlimited" if remaining is None else f"{remaining / 1000:.2f}s"),
            ])

            time.sleep(self.poll_interval_ms / 1000)

        return move

    def _step_column(self, board: Board, step: int) -> None:
        """
        Move the selection by ``step`` columns, skipping full columns.

        With ``step == 0`` the selection only moves if it sits on a full
        column.
        """
        if step:
            self.selected_col = (self.selected_col + step) % board.cols
        step = step or 1
        for _ in range(board.cols):
            if not board.is_column_full(self.selected_col):
                return
            self.selected_col = (self.selected_col + step) % board.cols
