"""
Utility module of TTY Pong game
"""

from tty_pong.utils.config import GameConfig
from tty_pong.utils.config import game_config
from tty_pong.utils.frame_clock import FrameClock

__all__ = ["game_config", "GameConfig", "FrameClock"]
