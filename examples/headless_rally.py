"""
Runs a game without a terminal and prints what happened
"""

import random

from tty_pong.core.physics import PongSimulation
from tty_pong.terminal.renderer import render_frame


def main(ticks: int = 600, seed: int = 0) -> None:
    """Plays ``ticks`` ticks of 0.1 s with nobody at the controls"""
    simulation = PongSimulation(60, 18, 1, 1, rng=random.Random(seed))

    for tick in range(ticks):
        events = simulation.update(frozenset(), 0.1)
        for hit in events["paddle_hits"]:
            print(f"tick {tick:4d}: player {hit['player']} returns the ball")
        for goal in events["goals"]:
            print(f"tick {tick:4d}: player {goal['player']} scores, {goal['score']}")

    print("\n".join(render_frame(simulation.get_game_state())))


if __name__ == "__main__":
    main()
