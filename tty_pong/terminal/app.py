"""
TTY Pong terminal application: game loop and command line entry point
"""

import argparse
import logging
import random
import sys

from pydantic import ValidationError

from tty_pong.core.interfaces import FramePacer, InputSource, RendererProtocol
from tty_pong.core.physics import PongSimulation
from tty_pong.terminal.keyboard import KeyboardInput
from tty_pong.terminal.renderer import TerminalRenderer
from tty_pong.utils.config import KEYBOARD_LAYOUTS
from tty_pong.utils.config import game_config
from tty_pong.utils.config import load_config_from_file
from tty_pong.utils.frame_clock import FrameClock

logger = logging.getLogger(__name__)


class TerminalPong:
    """Drives the simulation: one input poll, update and draw per frame"""

    def __init__(
        self,
        simulation: PongSimulation,
        input_source: InputSource,
        renderer: RendererProtocol,
        pacer: FramePacer,
        quit_key: str | None = None,
    ):
        self.simulation = simulation
        self.input_source = input_source
        self.renderer = renderer
        self.pacer = pacer
        self.quit_key = quit_key if quit_key is not None else game_config.QUIT_KEY
        self.frames = 0
        self.failed_draws = 0

    def step(self, dt: float) -> bool:
        """
        Runs one frame.

        Returns:
            False when the quit key was pressed, True otherwise
        """
        held_keys = self.input_source.poll()
        if self.quit_key in held_keys:
            logger.info("Quit key pressed after %d frames", self.frames)
            return False

        self.simulation.update(held_keys, dt)
        self.frames += 1

        try:
            self.renderer.draw(self.simulation.get_game_state())
        except OSError as e:
            self.failed_draws += 1
            logger.warning("Failed to display! %s", e)
        return True

    def run(self, max_frames: int | None = None) -> None:
        """Plays until the quit key, Ctrl-C or ``max_frames`` frames"""
        logger.info(
            "Starting game on a %dx%d field", self.simulation.width, self.simulation.height
        )
        with self.renderer.session():
            try:
                for _, dt in self.pacer:
                    if max_frames is not None and self.frames >= max_frames:
                        break
                    if not self.step(dt):
                        break
            except KeyboardInterrupt:
                logger.info("Interrupted after %d frames", self.frames)

        logger.info("Final score %d-%d", *self.simulation.score)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tty-pong",
        description="Two-player Pong in the terminal",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--config", help="JSON configuration file to load first")
    parser.add_argument("-W", "--width", type=int, help="Width of the game field")
    parser.add_argument("-H", "--height", type=int, help="Height of the game field")
    parser.add_argument(
        "-u",
        "--up-extend",
        type=int,
        help="How many cells the paddles reach above their center",
    )
    parser.add_argument(
        "-d",
        "--down-extend",
        type=int,
        help="How many cells the paddles reach below their center",
    )
    parser.add_argument("--fps", type=int, help="Simulation ticks per second")
    parser.add_argument(
        "--layout", choices=sorted(KEYBOARD_LAYOUTS), help="Keyboard layout for player 1"
    )
    parser.add_argument("--seed", type=int, help="Seed for the ball serves")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--log-file", help="Write logs to this file (nothing is logged to the terminal)"
    )
    return parser


def configure_logging(level: str, log_file: str | None) -> None:
    """Logs go to a file only, the terminal belongs to the renderer"""
    if log_file is None:
        logging.getLogger().addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def apply_arguments(args: argparse.Namespace) -> None:
    """Copies command line overrides into the global configuration"""
    overrides = {
        "FIELD_WIDTH": args.width,
        "FIELD_HEIGHT": args.height,
        "PADDLE_EXTEND_UP": args.up_extend,
        "PADDLE_EXTEND_DOWN": args.down_extend,
        "FPS": args.fps,
        "KEYBOARD_LAYOUT": args.layout,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(game_config, name, value)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    if args.config is not None and not load_config_from_file(args.config):
        print(f"Could not load configuration from {args.config}", file=sys.stderr)
        return 2
    try:
        apply_arguments(args)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    simulation = PongSimulation(
        game_config.FIELD_WIDTH,
        game_config.FIELD_HEIGHT,
        game_config.PADDLE_EXTEND_UP,
        game_config.PADDLE_EXTEND_DOWN,
        rng=random.Random(args.seed),
    )
    renderer = TerminalRenderer()
    game = TerminalPong(
        simulation,
        KeyboardInput(renderer.term),
        renderer,
        FrameClock.from_fps(game_config.FPS),
    )
    game.run()
    print(f"Final score: {simulation.player1_score} - {simulation.player2_score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
