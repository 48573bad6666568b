"""
Tests for the terminal application loop and command line
"""

import itertools
import random
from contextlib import contextmanager

import pytest

from tty_pong.core.physics import PongSimulation
from tty_pong.terminal.app import TerminalPong, build_parser, main
from tty_pong.utils.config import game_config


class ScriptedInput:
    """Returns scripted key sets, then nothing"""

    def __init__(self, frames=()):
        self.frames = list(frames)

    def poll(self):
        if self.frames:
            keys = self.frames.pop(0)
            if isinstance(keys, BaseException):
                raise keys
            return frozenset(keys)
        return frozenset()


class RecordingRenderer:
    """Keeps drawn snapshots, optionally failing on some frames"""

    def __init__(self, fail_on=()):
        self.fail_on = set(fail_on)
        self.snapshots = []
        self.attempts = 0
        self.in_session = False
        self.sessions = 0

    @contextmanager
    def session(self):
        self.in_session = True
        self.sessions += 1
        try:
            yield
        finally:
            self.in_session = False

    def draw(self, snapshot):
        assert self.in_session
        self.attempts += 1
        if self.attempts in self.fail_on:
            raise OSError("write failed")
        self.snapshots.append(snapshot)


def ticks(count, dt=0.1):
    return [(frame, dt) for frame in range(count)]


@pytest.fixture
def simulation():
    return PongSimulation(60, 18, 1, 1, rng=random.Random(11))


class TestTerminalPong:
    """Test the game loop"""

    def test_one_draw_per_tick(self, simulation):
        """Test that every tick updates and draws once"""
        renderer = RecordingRenderer()
        game = TerminalPong(simulation, ScriptedInput(), renderer, ticks(5))

        game.run()

        assert game.frames == 5
        assert len(renderer.snapshots) == 5
        assert renderer.sessions == 1
        assert not renderer.in_session

    def test_held_keys_reach_simulation(self, simulation):
        """Test that polled keys move the paddles"""
        renderer = RecordingRenderer()
        game = TerminalPong(simulation, ScriptedInput([{"w"}, {"w"}]), renderer, ticks(3))

        game.run()

        assert simulation.player1.position.y == pytest.approx(11.4)
        assert renderer.snapshots[0].paddle1_position[1] == pytest.approx(10.2)

    def test_quit_key_stops(self, simulation):
        """Test that the quit key ends the game before updating"""
        renderer = RecordingRenderer()
        game = TerminalPong(simulation, ScriptedInput([set(), {"q", "w"}]), renderer, ticks(10))

        game.run()

        assert game.frames == 1
        assert simulation.player1.position.y == 9.0
        assert not renderer.in_session

    def test_failed_draw_is_not_fatal(self, simulation):
        """Test that the game goes on after a display failure"""
        renderer = RecordingRenderer(fail_on={2})
        game = TerminalPong(simulation, ScriptedInput(), renderer, ticks(4))

        game.run()

        assert game.frames == 4
        assert game.failed_draws == 1
        assert len(renderer.snapshots) == 3

    def test_interrupt_restores_display(self, simulation):
        """Test that Ctrl-C leaves the loop and closes the display session"""
        renderer = RecordingRenderer()
        game = TerminalPong(
            simulation, ScriptedInput([set(), KeyboardInterrupt()]), renderer, ticks(10)
        )

        game.run()

        assert game.frames == 1
        assert not renderer.in_session

    def test_max_frames(self, simulation):
        """Test stopping an endless pacer after a number of frames"""
        pacer = ((frame, 0.1) for frame in itertools.count())
        game = TerminalPong(simulation, ScriptedInput(), RecordingRenderer(), pacer)

        game.run(max_frames=7)

        assert game.frames == 7


class TestCommandLine:
    """Test argument parsing and configuration overrides"""

    @pytest.fixture(autouse=True)
    def restore_config(self):
        yield
        game_config.reset_to_defaults()

    def test_parse_arguments(self):
        """Test the short and long options"""
        args = build_parser().parse_args(["-W", "40", "-H", "12", "-u", "2", "--down-extend", "0"])
        assert (args.width, args.height, args.up_extend, args.down_extend) == (40, 12, 2, 0)
        assert args.fps is None
        assert args.log_level == "INFO"

    def test_invalid_value(self, capsys):
        """Test that an invalid override exits with status 2"""
        assert main(["--width", "-5"]) == 2
        assert "Invalid configuration" in capsys.readouterr().err
        assert game_config.FIELD_WIDTH == 60

    def test_missing_config_file(self, tmp_path, capsys):
        """Test that an unreadable configuration file exits with status 2"""
        assert main(["--config", str(tmp_path / "missing.json")]) == 2
        assert "Could not load configuration" in capsys.readouterr().err

    def test_unknown_layout(self):
        """Test that argparse rejects unknown layouts"""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--layout", "dvorak"])
