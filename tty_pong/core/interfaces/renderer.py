"""
Renderer protocol - defines interface for different rendering backends
"""

from contextlib import AbstractContextManager
from typing import Protocol

from tty_pong.core.entities import GameSnapshot


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    Renderers own the display: the game hands them a snapshot every tick
    and never touches the screen itself.
    """

    def session(self) -> AbstractContextManager[None]:
        """
        Prepare the display for drawing and restore it on exit.

        Used as ``with renderer.session(): ...`` around the whole game.
        """
        ...

    def draw(self, snapshot: GameSnapshot) -> None:
        """
        Render a single frame of the game.

        Args:
            snapshot: Game state to display

        Raises:
            OSError: When writing to the display fails. The game state is
                not affected and the next frame can be drawn normally.
        """
        ...
