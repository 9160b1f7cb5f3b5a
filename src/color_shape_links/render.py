"""
Console rendering for ColorShapeLinks matches, using rich.

Renderers only observe: they receive board snapshots, thinking lines and
results, and never feed anything back into the match.
"""

from typing import Optional, Sequence

from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from color_shape_links.game.board import Board
from color_shape_links.game.pieces import PColor, PShape

PIECE_STYLES = {
    PColor.WHITE: "bold white",
    PColor.RED: "bold red",
}


class Renderer:
    """Match observer that ignores everything. Subclass to display."""

    def render_board(self, board: Board) -> None:
        pass

    def begin_turn(self, thinker, color: PColor) -> None:
        pass

    def thinking(self, thinker, lines: Sequence[str]) -> None:
        pass

    def end_turn(self, thinker, color: PColor, move) -> None:
        pass

    def show_result(self, result) -> None:
        pass


def board_text(board: Board) -> Text:
    """Board as styled text, top row first, winning cells highlighted."""
    winning = set(board.winning_sequence() or ())
    text = Text()
    text.append(" ".join(str(c % 10) for c in range(board.cols)) + "\n", style="dim")
    for row in range(board.rows - 1, -1, -1):
        for col in range(board.cols):
            piece = board[row, col]
            if piece is None:
                text.append(".", style="dim")
            else:
                style = PIECE_STYLES[piece.color]
                if (row, col) in winning:
                    style += " reverse"
                text.append(piece.glyph, style=style)
            if col < board.cols - 1:
                text.append(" ")
        text.append("\n")
    return text


def supply_table(board: Board) -> Table:
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Player")
    table.add_column("Round", justify="right")
    table.add_column("Square", justify="right")
    for color in PColor:
        table.add_row(
            Text(str(color), style=PIECE_STYLES[color]),
            str(board.piece_count(color, PShape.ROUND)),
            str(board.piece_count(color, PShape.SQUARE)),
        )
    return table


class RichRenderer(Renderer):
    """
    Renders boards and results to a rich console.

    While a thinker is deciding, its thinking lines are shown in a live panel
    that disappears once the move is made.
    """

    def __init__(self, console: Optional[Console] = None, show_thinking: bool = True):
        self.console = console or Console()
        self.show_thinking = show_thinking
        self._live: Optional[Live] = None

    def render_board(self, board: Board) -> None:
        self.console.print(Panel(
            Group(board_text(board), supply_table(board)),
            title=f"Move {board.num_moves + 1}",
            expand=False,
        ))

    def begin_turn(self, thinker, color: PColor) -> None:
        self.console.print(Text(f"{color} turn ({thinker})", style=PIECE_STYLES[color]))
        if self.show_thinking:
            self._live = Live(Text(""), console=self.console,
                              transient=True, refresh_per_second=10)
            self._live.start()

    def thinking(self, thinker, lines: Sequence[str]) -> None:
        if self._live is not None:
            self._live.update(Panel("\n".join(lines), title=str(thinker), expand=False))

    def end_turn(self, thinker, color: PColor, move) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None
        self.console.print(f"{color} ({thinker}) played: {move}")

    def show_result(self, result) -> None:
        if result.final_board is not None:
            self.console.print(Panel(board_text(result.final_board),
                                     title="Final board", expand=False))
        self.console.print(Text(result.describe(), style="bold green"))
