"""
Core module of TTY Pong game
"""

from tty_pong.core.entities import Ball
from tty_pong.core.entities import DiscretePosition2D
from tty_pong.core.entities import GameSnapshot
from tty_pong.core.entities import Paddle
from tty_pong.core.entities import Vector2D
from tty_pong.core.physics import PongSimulation
from tty_pong.core.physics import random_ball_velocity

__all__ = [
    "Ball",
    "Paddle",
    "GameSnapshot",
    "DiscretePosition2D",
    "Vector2D",
    "PongSimulation",
    "random_ball_velocity",
]
