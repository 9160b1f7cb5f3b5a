"""
Unit tests for the command line interface.
"""

import io
import json
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from color_shape_links.cli import build_parser, config_from_args, main

SMALL_BOARD = ['--rows', '4', '--cols', '4', '--win-sequence', '3',
               '--round-pieces', '8', '--square-pieces', '8',
               '--time-limit', '10000',
               '--player1-params', '1', '--player2-params', '1']


def run_cli(argv):
    output = io.StringIO()
    code = main(argv, console=Console(file=output, width=100))
    return code, output.getvalue()


class TestArguments:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.player1 == 'minimax' and args.player2 == 'minimax'
        assert args.games == 1
        config = config_from_args(args)
        assert (config.rows, config.cols, config.win_sequence) == (6, 7, 4)

    def test_overrides(self):
        args = build_parser().parse_args(['-r', '5', '-c', '9', '-w', '3', '-t', '200'])
        config = config_from_args(args)
        assert (config.rows, config.cols, config.win_sequence) == (5, 9, 3)
        assert config.time_limit_ms == 200

    def test_config_file_then_options(self, tmp_path):
        path = tmp_path / "board.json"
        path.write_text(json.dumps({'rows': 5, 'cols': 5, 'win_sequence': 3}))
        args = build_parser().parse_args(['--config', str(path), '--cols', '6'])

        config = config_from_args(args)

        assert (config.rows, config.cols, config.win_sequence) == (5, 6, 3)


class TestMain:

    def test_list_players(self):
        code, text = run_cli(['--list-players'])
        assert code == 0
        assert text.split() == ['human', 'minimax']

    def test_unknown_player(self):
        code, text = run_cli(['--player1', 'nobody'])
        assert code == 2
        assert "Unknown thinker 'nobody'" in text

    def test_invalid_board(self):
        code, text = run_cli(['--win-sequence', '12'])
        assert code == 2
        assert "Error:" in text

    def test_missing_config_file(self, tmp_path):
        code, _ = run_cli(['--config', str(tmp_path / 'missing.json')])
        assert code == 2

    def test_games_must_be_positive(self):
        code, _ = run_cli(SMALL_BOARD + ['--games', '0'])
        assert code == 2

    def test_quiet_single_game(self):
        code, text = run_cli(SMALL_BOARD + ['--quiet'])
        assert code == 0
        assert "Winner is" in text or "Game ended in a draw" in text

    def test_single_game_draws_boards(self):
        code, text = run_cli(SMALL_BOARD)
        assert code == 0
        assert "Move 1" in text
        assert "Final board" in text

    def test_series(self):
        code, text = run_cli(SMALL_BOARD + ['--games', '2'])
        assert code == 0
        assert "Results after 2 games" in text
        assert "Draws" in text


if __name__ == '__main__':
    sys.exit(pytest.main([__file__, '-v']))
