"""
Keyboard input for TTY Pong game
"""

from blessed import Terminal
from blessed.keyboard import Keystroke

from tty_pong.utils.config import game_config


def key_identifier(keystroke: Keystroke) -> str:
    """Names special keys by their blessed name and others by their lowercase character"""
    if keystroke.is_sequence and keystroke.name:
        return str(keystroke.name)
    return str(keystroke).lower()


class KeyboardInput:
    """
    Collects the keys held on a terminal.

    Terminals report key presses and auto-repeats but no releases, so a key
    counts as held when it produced a keystroke during the poll window.
    """

    def __init__(self, term: Terminal | None = None, timeout: float | None = None):
        self.term = term if term is not None else Terminal()
        self.timeout = timeout if timeout is not None else game_config.INPUT_POLL_TIMEOUT

    def poll(self) -> frozenset[str]:
        """Drains pending keystrokes, waiting up to the poll window for each one"""
        pressed = set()
        while True:
            keystroke = self.term.inkey(timeout=self.timeout)
            if not keystroke:
                break
            pressed.add(key_identifier(keystroke))
        return frozenset(pressed)
