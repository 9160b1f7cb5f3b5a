"""
Unit tests for match configuration and cancellation tokens.
"""

import json
import sys
import time
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from color_shape_links.cancellation import CancellationToken
from color_shape_links.config import DEFAULT_CONFIG, MatchConfig, load_config


class TestMatchConfig:

    def test_defaults(self):
        config = MatchConfig()
        config.validate()
        assert config.to_dict() == DEFAULT_CONFIG

    def test_from_dict_partial(self):
        config = MatchConfig.from_dict({'rows': 5, 'cols': '8'})
        assert (config.rows, config.cols) == (5, 8)
        assert config.win_sequence == 4

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown config keys: depth"):
            MatchConfig.from_dict({'depth': 3})

    @pytest.mark.parametrize("overrides", [
        {'rows': 0},
        {'cols': -1},
        {'win_sequence': 1},
        {'win_sequence': 8},
        {'round_pieces': -1},
        {'round_pieces': 0, 'square_pieces': 0},
        {'time_limit_ms': 0},
    ])
    def test_invalid_values(self, overrides):
        with pytest.raises(ValueError):
            MatchConfig.from_dict(overrides)

    def test_win_sequence_fits_longest_axis(self):
        MatchConfig.from_dict({'rows': 3, 'cols': 8, 'win_sequence': 8})

    def test_non_numeric_value(self):
        with pytest.raises(ValueError):
            MatchConfig.from_dict({'rows': 'six'})


class TestLoadConfig:

    def test_load(self, tmp_path):
        path = tmp_path / "board.json"
        path.write_text(json.dumps({'rows': 5, 'cols': 5, 'win_sequence': 3}))

        config = load_config(path)

        assert (config.rows, config.cols, config.win_sequence) == (5, 5, 3)
        assert config.time_limit_ms == DEFAULT_CONFIG['time_limit_ms']

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "board.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(ValueError):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_config(tmp_path / "missing.json")


class TestCancellationToken:

    def test_not_cancelled_by_default(self):
        token = CancellationToken()
        assert not token.is_cancellation_requested
        assert token.remaining_ms is None

    def test_cancel(self):
        token = CancellationToken(10000)
        token.cancel()
        assert token.is_cancellation_requested

    def test_deadline(self):
        token = CancellationToken(10)
        assert 0 < token.remaining_ms <= 10
        time.sleep(0.03)
        assert token.is_cancellation_requested
        assert token.remaining_ms == 0.0

    def test_cancel_after(self):
        token = CancellationToken()
        token.cancel_after(10000)
        assert token.remaining_ms > 9000
        assert not token.is_cancellation_requested

    def test_cancelled_stays_cancelled(self):
        token = CancellationToken(1)
        time.sleep(0.01)
        assert token.is_cancellation_requested
        token.cancel_after(10000)
        assert token.is_cancellation_requested


if __name__ == '__main__':
    sys.exit(pytest.main([__file__, '-v']))
