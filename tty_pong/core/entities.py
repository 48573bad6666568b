"""
TTY Pong game entities: vectors, paddles, ball
"""

import math
import sys
from collections.abc import Collection
from dataclasses import dataclass

import numpy as np

from tty_pong.utils.config import game_config


def _to_cell(value: float) -> int:
    """Rounds a coordinate to the nearest cell index, half away from zero.

    Cells are unsigned: negative and NaN coordinates saturate to 0 and +inf
    to ``sys.maxsize``.
    """
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return sys.maxsize
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class DiscretePosition2D:
    """Grid cell used for collision tests and rendering"""

    x: int
    y: int

    def to_continuous(self) -> "Vector2D":
        return Vector2D(float(self.x), float(self.y))


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __isub__(self, other: "Vector2D") -> "Vector2D":
        self.x -= other.x
        self.y -= other.y
        return self

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def __imul__(self, scalar: float) -> "Vector2D":
        self.x *= scalar
        self.y *= scalar
        return self

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def to_discrete(self) -> DiscretePosition2D:
        """Rounds to the nearest grid cell (lossy)"""
        return DiscretePosition2D(_to_cell(self.x), _to_cell(self.y))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


class Paddle:
    """Player paddle: a single-column segment of cells around its center"""

    def __init__(
        self,
        extend_up: int,
        extend_down: int,
        key_up: str,
        key_down: str,
        position: Vector2D,
        speed: float | None = None,
    ):
        self.extend_up = extend_up
        self.extend_down = extend_down
        self.key_up = key_up
        self.key_down = key_down
        self.position = position
        speed = speed if speed is not None else game_config.PADDLE_SPEED
        self.velocity = Vector2D(0.0, speed)

    @property
    def height(self) -> int:
        """Number of cells covered by the paddle"""
        return self.extend_down + self.extend_up + 1

    def update_position(self, max_height: float, held_keys: Collection[str], dt: float) -> None:
        """Moves the paddle according to the held keys, then clamps it into the field.

        Both keys may be held at once, in which case the moves cancel out.
        """
        step = self.velocity * dt
        if self.key_up in held_keys:
            self.position += step
        if self.key_down in held_keys:
            self.position -= step

        self.position.y = max(
            min(self.position.y, max_height - self.extend_up), float(self.extend_down)
        )

    def collides_with(self, position: Vector2D) -> bool:
        """Checks whether the cell of ``position`` belongs to the paddle"""
        cell = position.to_discrete()
        own_cell = self.position.to_discrete()

        return (
            own_cell.y - self.extend_down <= cell.y <= own_cell.y + self.extend_up
            and own_cell.x == cell.x
        )

    def occupied_cells(self) -> list[DiscretePosition2D]:
        """Returns the cells for which ``collides_with`` holds, bottom to top"""
        own_cell = self.position.to_discrete()
        return [
            DiscretePosition2D(own_cell.x, y)
            for y in range(own_cell.y - self.extend_down, own_cell.y + self.extend_up + 1)
            if y >= 0
        ]


class Ball:
    """Game ball"""

    def __init__(self, position: Vector2D, velocity: Vector2D, speed_increase: float | None = None):
        self.position = position
        self.velocity = velocity
        self.speed_increase = (
            speed_increase if speed_increase is not None else game_config.BALL_SPEED_INCREASE
        )

    def next_position(self, dt: float) -> Vector2D:
        """Position after ``dt`` seconds at the current velocity, not committed"""
        return self.position + self.velocity * dt

    def update_position(
        self, max_height: float, paddle1: Paddle, paddle2: Paddle, dt: float
    ) -> list[str]:
        """
        Advances the ball by one tick.

        Walls are checked first, then the paddle the ball is travelling
        towards, then the position is integrated with the possibly flipped
        velocity and the velocity is escalated.

        Args:
            max_height: Height of the field (top wall)
            paddle1: Left paddle
            paddle2: Right paddle
            dt: Tick duration in seconds

        Returns:
            Names of the collisions that happened: "top", "bottom",
            "paddle1" and/or "paddle2"
        """
        collisions = []

        wall = self._check_wall_collision(max_height, dt)
        if wall is not None:
            self.bounce_vertical()
            collisions.append(wall)

        if self.velocity.x <= 0:
            if self._check_paddle_collision(paddle1, dt):
                self.bounce_horizontal()
                collisions.append("paddle1")
        elif self._check_paddle_collision(paddle2, dt):
            self.bounce_horizontal()
            collisions.append("paddle2")

        self.position = self.next_position(dt)
        self.velocity *= self.speed_increase

        return collisions

    def bounce_vertical(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.velocity.y = -self.velocity.y

    def bounce_horizontal(self) -> None:
        """Horizontal bounce (paddles)"""
        self.velocity.x = -self.velocity.x

    def collision_point_with(self, paddle: Paddle) -> Vector2D | None:
        """
        Point where the ball's straight path crosses the paddle's column.

        Returns None when the ball has no horizontal motion, since the path
        then never crosses any column.
        """
        if self.velocity.x == 0:
            return None
        collision_r = (paddle.position.x - self.position.x) / self.velocity.x
        return self.position + self.velocity * collision_r

    def _check_wall_collision(self, max_height: float, dt: float) -> str | None:
        next_position = self.next_position(dt)
        if next_position.y <= 0:
            return "bottom"
        if next_position.y >= max_height:
            return "top"
        return None

    def _check_paddle_collision(self, paddle: Paddle, dt: float) -> bool:
        collision_point = self.collision_point_with(paddle)
        if collision_point is None:
            return False

        next_position = self.next_position(dt)
        # The paddle must be reached within this tick (or already passed)
        if self.velocity.x <= 0:
            reached = collision_point.x >= next_position.x
        else:
            reached = collision_point.x <= next_position.x
        return reached and paddle.collides_with(collision_point)


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of the game for renderers"""

    width: int
    height: int
    score: tuple[int, int]
    ball_position: tuple[float, float]
    ball_cell: DiscretePosition2D
    paddle1_position: tuple[float, float]
    paddle2_position: tuple[float, float]
    paddle1_cells: tuple[DiscretePosition2D, ...]
    paddle2_cells: tuple[DiscretePosition2D, ...]
