"""Exceptions raised by the match orchestration layer."""


class InvalidMoveError(RuntimeError):
    """
    A thinker offered a move the board cannot accept.

    Conforming thinkers never play into a full column or with an exhausted
    shape, so this signals a defective thinker and ends the match.
    """

    def __init__(self, thinker, move, reason: str):
        super().__init__(f"{thinker} played an invalid move ({move}): {reason}")
        self.thinker = thinker
        self.move = move
        self.reason = reason


class UnknownThinkerError(KeyError):
    """No thinker is registered under the requested name."""

    def __init__(self, name: str, available):
        super().__init__(name)
        self.name = name
        self.available = list(available)

    def __str__(self):
        return (f"Unknown thinker '{self.name}' "
                f"(available: {', '.join(self.available)})")
