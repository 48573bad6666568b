"""
Terminal frontend of TTY Pong game
"""

from tty_pong.terminal.app import TerminalPong
from tty_pong.terminal.app import main
from tty_pong.terminal.keyboard import KeyboardInput
from tty_pong.terminal.renderer import TerminalRenderer
from tty_pong.terminal.renderer import render_frame

__all__ = ["TerminalPong", "TerminalRenderer", "KeyboardInput", "render_frame", "main"]
