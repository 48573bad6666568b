"""
Blessed renderer for TTY Pong game
"""

from collections.abc import Iterator
from contextlib import contextmanager

from blessed import Terminal

from tty_pong.core.entities import DiscretePosition2D
from tty_pong.core.entities import GameSnapshot

BALL_GLYPH = "●"
PADDLE_GLYPH = "█"
BORDER_GLYPH = "█"
EMPTY_GLYPH = " "


def render_frame(snapshot: GameSnapshot) -> list[str]:
    """
    Turns a snapshot into the lines of text to print.

    The field is drawn top row first (y = height) with x running from 0 to
    width inclusive, framed by a border above and below. The ball is drawn
    over a paddle when both occupy the same cell.
    """
    paddle_cells = set(snapshot.paddle1_cells) | set(snapshot.paddle2_cells)
    border = BORDER_GLYPH * (snapshot.width + 1)

    lines = [
        "",
        f"Goals of player1: {snapshot.score[0]},  Goals of player2: {snapshot.score[1]}",
        "",
        border,
    ]
    for y in range(snapshot.height, -1, -1):
        row = []
        for x in range(snapshot.width + 1):
            cell = DiscretePosition2D(x, y)
            if cell == snapshot.ball_cell:
                row.append(BALL_GLYPH)
            elif cell in paddle_cells:
                row.append(PADDLE_GLYPH)
            else:
                row.append(EMPTY_GLYPH)
        lines.append("".join(row))
    lines.append(border)
    return lines


class TerminalRenderer:
    """Blessed-based renderer drawing the whole field every frame"""

    def __init__(self, term: Terminal | None = None):
        self.term = term if term is not None else Terminal()

    @contextmanager
    def session(self) -> Iterator[None]:
        """Full screen, unbuffered keys and hidden cursor, restored on exit"""
        with self.term.fullscreen(), self.term.cbreak(), self.term.hidden_cursor():
            yield

    def draw(self, snapshot: GameSnapshot) -> None:
        """Clears the screen and prints the frame, raising OSError on write failure"""
        frame = "\r\n".join(render_frame(snapshot))
        stream = self.term.stream
        stream.write(self.term.home + self.term.clear + frame + "\r\n")
        stream.flush()
