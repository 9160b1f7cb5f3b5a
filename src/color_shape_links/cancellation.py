"""
Cooperative cancellation for thinkers.

A ``CancellationToken`` is shared by reference between whoever runs a match
and the thinker deciding the current move. Nothing interrupts a thinker: the
thinker polls ``is_cancellation_requested`` at bounded intervals and gives up
once it turns true. The token turns true either when ``cancel()`` is called
or when its deadline passes.
"""

import threading
import time
from typing import Optional


class CancellationToken:
    """
    Cancellation flag with an optional monotonic deadline.

    Args:
        time_limit_ms: If given, the token cancels itself this many
            milliseconds after construction
    """

    def __init__(self, time_limit_ms: Optional[float] = None):
        self._event = threading.Event()
        self._deadline: Optional[float] = None
        if time_limit_ms is not None:
            self.cancel_after(time_limit_ms)

    def cancel_after(self, time_limit_ms: float) -> None:
        """Arm (or re-arm) the deadline relative to now."""
        self._deadline = time.monotonic() + time_limit_ms / 1000.0

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancellation_requested(self) -> bool:
        if self._event.is_set():
            return True
        if self._deadline is not None and time.monotonic() >= self._deadline:
            self._event.set()
            return True
        return False

    @property
    def remaining_ms(self) -> Optional[float]:
        """Milliseconds left before the deadline, None if not armed."""
        if self._deadline is None:
            return None
        return max(0.0, (self._deadline - time.monotonic()) * 1000.0)
