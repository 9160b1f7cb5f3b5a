"""
Configuration for ColorShapeLinks matches.
"""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union


# Match Configuration
DEFAULT_CONFIG = {
    'rows': 6,                  # Board height
    'cols': 7,                  # Board width
    'win_sequence': 4,          # Pieces in a row needed to win
    'round_pieces': 11,         # Round pieces per player
    'square_pieces': 10,        # Square pieces per player
    'time_limit_ms': 3600,      # Thinking time per move
}

# Players used when none are given on the command line
DEFAULT_PLAYERS = {
    'player1': 'minimax',
    'player2': 'minimax',
    'player1_params': '',
    'player2_params': '',
}


@dataclass
class MatchConfig:
    """Board geometry, piece supply and time budget of a match."""
    rows: int = DEFAULT_CONFIG['rows']
    cols: int = DEFAULT_CONFIG['cols']
    win_sequence: int = DEFAULT_CONFIG['win_sequence']
    round_pieces: int = DEFAULT_CONFIG['round_pieces']
    square_pieces: int = DEFAULT_CONFIG['square_pieces']
    time_limit_ms: int = DEFAULT_CONFIG['time_limit_ms']

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchConfig":
        """
        Build a config from a (possibly partial) dict of overrides.

        Raises:
            ValueError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        config = cls(**{k: int(v) for k, v in data.items()})
        config.validate()
        return config

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    def validate(self) -> None:
        """
        Check that a game can actually be played with these settings.

        Raises:
            ValueError: Describing the first problem found
        """
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Board must have at least one row and column, "
                             f"got {self.rows}x{self.cols}")
        if self.win_sequence < 2:
            raise ValueError(f"win_sequence must be at least 2, "
                             f"got {self.win_sequence}")
        if self.win_sequence > max(self.rows, self.cols):
            raise ValueError(f"win_sequence {self.win_sequence} does not fit "
                             f"on a {self.rows}x{self.cols} board")
        if self.round_pieces < 0 or self.square_pieces < 0:
            raise ValueError("Piece counts cannot be negative")
        if self.round_pieces + self.square_pieces == 0:
            raise ValueError("Players need at least one piece")
        if self.time_limit_ms <= 0:
            raise ValueError(f"time_limit_ms must be positive, "
                             f"got {self.time_limit_ms}")


def load_config(path: Union[str, Path]) -> MatchConfig:
    """Load match settings from a JSON file, defaults filling the gaps."""
    with open(path, 'r') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")
    return MatchConfig.from_dict(data)
