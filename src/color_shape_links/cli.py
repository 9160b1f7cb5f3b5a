#!/usr/bin/env python3
"""
Play ColorShapeLinks in the terminal.

Usage:
    color-shape-links --player1 human --player2 minimax --player2-params 4
    color-shape-links --games 20 --player1-params 2 --player2-params 3
    color-shape-links --list-players
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from color_shape_links.config import DEFAULT_CONFIG, DEFAULT_PLAYERS, MatchConfig, load_config
from color_shape_links.exceptions import UnknownThinkerError
from color_shape_links.game.pieces import PColor, Winner
from color_shape_links.match import Match, SeriesResult, run_series
from color_shape_links.render import Renderer, RichRenderer
from color_shape_links.thinkers.registry import ThinkerRegistry, default_registry

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='color-shape-links',
        description='ColorShapeLinks: drop pieces, link colors or shapes.'
    )
    board = parser.add_argument_group('board')
    board.add_argument('-r', '--rows', type=int, help=f"Board rows (default {DEFAULT_CONFIG['rows']})")
    board.add_argument('-c', '--cols', type=int, help=f"Board columns (default {DEFAULT_CONFIG['cols']})")
    board.add_argument('-w', '--win-sequence', type=int,
                       help=f"Pieces in a row to win (default {DEFAULT_CONFIG['win_sequence']})")
    board.add_argument('-o', '--round-pieces', type=int,
                       help=f"Round pieces per player (default {DEFAULT_CONFIG['round_pieces']})")
    board.add_argument('-s', '--square-pieces', type=int,
                       help=f"Square pieces per player (default {DEFAULT_CONFIG['square_pieces']})")
    board.add_argument('-t', '--time-limit', type=int, dest='time_limit_ms',
                       help=f"Time limit per move in ms (default {DEFAULT_CONFIG['time_limit_ms']})")
    board.add_argument('--config', help='JSON file with board settings')

    players = parser.add_argument_group('players')
    players.add_argument('--player1', default=DEFAULT_PLAYERS['player1'],
                         help='Thinker playing white, moves first')
    players.add_argument('--player2', default=DEFAULT_PLAYERS['player2'],
                         help='Thinker playing red')
    players.add_argument('--player1-params', default=DEFAULT_PLAYERS['player1_params'],
                         help='Parameter string for player 1')
    players.add_argument('--player2-params', default=DEFAULT_PLAYERS['player2_params'],
                         help='Parameter string for player 2')
    players.add_argument('-l', '--list-players', action='store_true',
                         help='List available thinkers and exit')

    parser.add_argument('-g', '--games', type=int, default=1,
                        help='Number of games to play (default 1)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Do not draw boards, only report results')
    return parser


def config_from_args(args: argparse.Namespace) -> MatchConfig:
    """Defaults, then the --config file, then explicit options."""
    config = load_config(args.config) if args.config else MatchConfig()
    overrides = {
        key: getattr(args, key)
        for key in ('rows', 'cols', 'win_sequence', 'round_pieces',
                    'square_pieces', 'time_limit_ms')
        if getattr(args, key) is not None
    }
    return MatchConfig.from_dict({**config.to_dict(), **overrides})


def setup_logging(verbose: bool, console: Console) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def print_series(console: Console, series: SeriesResult) -> None:
    tally = series.tally
    table = Table(title=f"Results after {len(series.results)} games")
    table.add_column("Player")
    table.add_column("Thinker")
    table.add_column("Wins", justify="right")
    for color in PColor:
        table.add_row(str(color), series.players[color],
                      str(tally[Winner.from_color(color)]))
    table.add_row("-", "Draws", str(tally[Winner.DRAW]))
    console.print(table)


def main(argv: Optional[List[str]] = None, registry: Optional[ThinkerRegistry] = None,
         console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    registry = registry or default_registry()
    setup_logging(args.verbose, console)

    if args.list_players:
        for name in registry.names():
            console.print(name)
        return 0

    try:
        config = config_from_args(args)
        white = registry.create(args.player1, config, args.player1_params)
        red = registry.create(args.player2, config, args.player2_params)
    except (ValueError, OSError, UnknownThinkerError) as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))}")
        return 2

    if args.games < 1:
        console.print("[bold red]Error:[/] --games must be at least 1")
        return 2

    renderer = Renderer() if args.quiet or args.games > 1 else RichRenderer(console)
    if args.games == 1:
        result = Match(white, red, config, renderer).run()
        if args.quiet:
            console.print(result.describe())
    else:
        series = run_series(white, red, args.games, config, renderer)
        print_series(console, series)
    return 0


if __name__ == '__main__':
    sys.exit(main())
