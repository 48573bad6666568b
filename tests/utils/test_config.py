"""
Unit tests for configuration validation

Tests the configuration system including:
- Game configuration validation
- Saving and loading configuration files
- Context manager for temporary config changes
"""

import json

import pytest
from pydantic import ValidationError

from tty_pong.utils.config import (
    GameConfig,
    game_config,
    game_config_tmp,
    load_config_from_file,
)


@pytest.fixture
def restore_global_config():
    """Puts the global configuration back to its defaults after the test"""
    yield game_config
    game_config.reset_to_defaults()


class TestGameConfigValidation:
    """Test game configuration validation"""

    def test_default_config(self):
        """Test the default values"""
        config = GameConfig()

        assert config.FIELD_WIDTH == 60
        assert config.FIELD_HEIGHT == 18
        assert config.PADDLE_EXTEND_UP == 1
        assert config.PADDLE_EXTEND_DOWN == 1
        assert config.PADDLE_SPEED == 12.0
        assert config.BALL_SPEED_INCREASE == 1.003
        assert config.FPS == 10

    @pytest.mark.parametrize(
        "field,value",
        [
            ("FIELD_WIDTH", -1),
            ("PADDLE_EXTEND_DOWN", -2),
            ("BALL_SPEED_INCREASE", 0.9),
            ("FPS", 0),
            ("INPUT_POLL_TIMEOUT", -0.1),
            ("KEYBOARD_LAYOUT", "dvorak"),
            ("RESET_KEY", ""),
        ],
    )
    def test_invalid_values_rejected(self, field, value):
        """Test that invalid values are rejected at construction"""
        with pytest.raises(ValidationError):
            GameConfig(**{field: value})

    def test_empty_serve_range_rejected(self):
        """Test that the maximum serve speed must exceed the minimum"""
        with pytest.raises(ValidationError, match="BALL_MAX_VX"):
            GameConfig(BALL_MIN_VX=10.0, BALL_MAX_VX=5.0)

    def test_assignment_is_validated(self):
        """Test that invalid assignments are rejected and leave the value unchanged"""
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.FIELD_HEIGHT = -18
        assert config.FIELD_HEIGHT == 18

    def test_keyboard_layout(self):
        """Test the keys of each layout"""
        assert GameConfig().get_keyboard_layout().player1_keys == {"up": "w", "down": "s"}

        azerty = GameConfig(KEYBOARD_LAYOUT="azerty").get_keyboard_layout()
        assert azerty.player1_keys == {"up": "z", "down": "s"}
        assert azerty.player2_keys == {"up": "KEY_UP", "down": "KEY_DOWN"}

    def test_reset_to_defaults(self):
        """Test that reset_to_defaults undoes every change"""
        config = GameConfig(FIELD_WIDTH=80, FPS=30, KEYBOARD_LAYOUT="qwertz")
        config.reset_to_defaults()
        assert config == GameConfig()


class TestConfigFiles:
    """Test saving and loading configuration files"""

    def test_save_and_load(self, tmp_path):
        """Test that a saved configuration loads back identically"""
        path = tmp_path / "config.json"
        config = GameConfig(FIELD_WIDTH=80, FIELD_HEIGHT=24, PADDLE_EXTEND_UP=2)
        config.save_to_file(str(path))

        assert json.loads(path.read_text())["FIELD_WIDTH"] == 80
        assert GameConfig.load_from_file(str(path)) == config

    def test_load_missing_file(self, tmp_path):
        """Test that loading a missing file raises FileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            GameConfig.load_from_file(str(tmp_path / "missing.json"))

    def test_load_into_global_config(self, tmp_path, restore_global_config):
        """Test loading a file into the global configuration"""
        path = tmp_path / "config.json"
        GameConfig(FIELD_WIDTH=42).save_to_file(str(path))

        assert load_config_from_file(str(path)) is True
        assert game_config.FIELD_WIDTH == 42

    def test_load_into_global_config_failures(self, tmp_path, restore_global_config):
        """Test that unreadable files leave the global configuration untouched"""
        broken = tmp_path / "broken.json"
        broken.write_text("{not json")
        invalid = tmp_path / "invalid.json"
        invalid.write_text(json.dumps({"FIELD_WIDTH": -3}))

        assert load_config_from_file(str(tmp_path / "missing.json")) is False
        assert load_config_from_file(str(broken)) is False
        assert load_config_from_file(str(invalid)) is False
        assert game_config == GameConfig()


class TestConfigContextManager:
    """Test the temporary configuration context manager"""

    def test_values_restored(self):
        """Test that values are restored after the block"""
        with game_config_tmp(FIELD_WIDTH=100, PADDLE_SPEED=20.0):
            assert game_config.FIELD_WIDTH == 100
            assert game_config.PADDLE_SPEED == 20.0
        assert game_config.FIELD_WIDTH == 60
        assert game_config.PADDLE_SPEED == 12.0

    def test_values_restored_on_error(self):
        """Test that values are restored when the block raises"""
        with pytest.raises(RuntimeError):
            with game_config_tmp(FPS=30):
                raise RuntimeError("boom")
        assert game_config.FPS == 10

    def test_invalid_value_rejected(self):
        """Test that temporary values are validated too"""
        with pytest.raises(ValidationError):
            with game_config_tmp(FIELD_WIDTH=-10):
                pass
        assert game_config.FIELD_WIDTH == 60
