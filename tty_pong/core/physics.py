"""
Game simulation for TTY Pong
"""

import logging
import random
from collections.abc import Collection
from typing import Any

from tty_pong.core.entities import Ball, GameSnapshot, Paddle, Vector2D
from tty_pong.utils.config import game_config

logger = logging.getLogger(__name__)


def random_ball_velocity(rng: random.Random | None = None) -> Vector2D:
    """
    Draws a serve velocity.

    The horizontal component is drawn from [min, max) or [-max, -min) with
    equal probability so the ball always travels towards a player, the
    vertical one from [-max_vy, max_vy).
    """
    draw = rng if rng is not None else random
    min_vx, max_vx = game_config.BALL_MIN_VX, game_config.BALL_MAX_VX
    if draw.random() < 0.5:
        vx = draw.uniform(min_vx, max_vx)
    else:
        vx = draw.uniform(-max_vx, -min_vx)
    vy = draw.uniform(-game_config.BALL_MAX_VY, game_config.BALL_MAX_VY)
    return Vector2D(vx, vy)


class PongSimulation:
    """Two-player Pong state: field, paddles, ball and scores"""

    def __init__(
        self,
        width: int,
        height: int,
        extend_up: int,
        extend_down: int,
        rng: random.Random | None = None,
    ):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.score: list[int] = [0, 0]

        layout = game_config.get_keyboard_layout()
        self.reset_key = game_config.RESET_KEY

        self.player1 = Paddle(
            extend_up,
            extend_down,
            layout.player1_keys["up"],
            layout.player1_keys["down"],
            self.initial_player1_position(),
        )
        self.player2 = Paddle(
            extend_up,
            extend_down,
            layout.player2_keys["up"],
            layout.player2_keys["down"],
            self.initial_player2_position(),
        )
        self.ball = Ball(self.initial_ball_position(), random_ball_velocity(self.rng))

    @property
    def player1_score(self) -> int:
        return self.score[0]

    @property
    def player2_score(self) -> int:
        return self.score[1]

    def initial_player1_position(self) -> Vector2D:
        return Vector2D(0.0, self.height / 2)

    def initial_player2_position(self) -> Vector2D:
        return Vector2D(float(self.width), self.height / 2)

    def initial_ball_position(self) -> Vector2D:
        return Vector2D(self.width / 2, self.height / 2)

    def update(self, held_keys: Collection[str], dt: float) -> dict[str, Any]:
        """
        Advances the game by one tick.

        Args:
            held_keys: Identifiers of the keys currently held down
            dt: Tick duration in seconds

        Returns:
            Dictionary with events that occurred:
            {
                "wall_bounces": ["top" | "bottom", ...],
                "paddle_hits": [{"player": 1 | 2}, ...],
                "goals": [{"player": 1 | 2, "score": [p1, p2]}, ...],
                "reset": True when the reset key interrupted the tick
            }
        """
        events: dict[str, Any] = {
            "wall_bounces": [],
            "paddle_hits": [],
            "goals": [],
            "reset": False,
        }

        if self.reset_key in held_keys:
            logger.info("Manual reset requested")
            self.reset_ball_and_players()
            events["reset"] = True
            return events

        self.player1.update_position(self.height, held_keys, dt)
        self.player2.update_position(self.height, held_keys, dt)

        for collision in self.ball.update_position(self.height, self.player1, self.player2, dt):
            if collision in ("top", "bottom"):
                events["wall_bounces"].append(collision)
            else:
                events["paddle_hits"].append({"player": 1 if collision == "paddle1" else 2})
            logger.debug("Ball collision: %s", collision)

        scorer = self._update_score()
        if scorer:
            events["goals"].append({"player": scorer, "score": self.score.copy()})

        return events

    def _update_score(self) -> int:
        """Awards a goal when the ball passed a paddle; returns the scorer or 0"""
        ball = self.ball
        if ball.velocity.x <= 0 and ball.position.x < self.player1.position.x:
            scorer = 2
        elif ball.velocity.x > 0 and ball.position.x > self.player2.position.x:
            scorer = 1
        else:
            return 0

        self.score[scorer - 1] += 1
        logger.info("Player %d scores, score is now %d-%d", scorer, *self.score)
        self.reset_ball_and_players()
        return scorer

    def reset_ball_and_players(self) -> None:
        """Puts paddles and ball back to the initial layout with a new serve"""
        self.player1.position = self.initial_player1_position()
        self.player2.position = self.initial_player2_position()
        self.ball.position = self.initial_ball_position()
        self.ball.velocity = random_ball_velocity(self.rng)

    def get_game_state(self) -> GameSnapshot:
        """Returns a read-only snapshot for rendering"""
        return GameSnapshot(
            width=self.width,
            height=self.height,
            score=(self.score[0], self.score[1]),
            ball_position=self.ball.position.to_tuple(),
            ball_cell=self.ball.position.to_discrete(),
            paddle1_position=self.player1.position.to_tuple(),
            paddle2_position=self.player2.position.to_tuple(),
            paddle1_cells=tuple(self.player1.occupied_cells()),
            paddle2_cells=tuple(self.player2.occupied_cells()),
        )
