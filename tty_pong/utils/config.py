"""
TTY Pong game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import ValidationInfo
from pydantic import field_validator

logger = logging.getLogger(__name__)


@dataclass
class KeyboardLayout:
    """Configuration for keyboard layouts"""

    name: str
    player1_keys: dict[str, str]
    player2_keys: dict[str, str]
    display_names: dict[str, str]


# Keyboard layouts definition, key identifiers as reported by the input layer
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        player1_keys={"up": "w", "down": "s"},
        player2_keys={"up": "KEY_UP", "down": "KEY_DOWN"},
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        player1_keys={"up": "z", "down": "s"},  # Z instead of W
        player2_keys={"up": "KEY_UP", "down": "KEY_DOWN"},
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        player1_keys={"up": "w", "down": "s"},
        player2_keys={"up": "KEY_UP", "down": "KEY_DOWN"},
        display_names={"up": "W", "down": "S"},
    ),
}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation for compatibility with existing code
    model_config = {"validate_assignment": True}

    # Field dimensions, in grid cells
    FIELD_WIDTH: int = Field(default=60, ge=0, description="Field width in cells")
    FIELD_HEIGHT: int = Field(default=18, ge=0, description="Field height in cells")

    # Player paddles
    PADDLE_EXTEND_UP: int = Field(default=1, ge=0, description="Paddle reach above its center")
    PADDLE_EXTEND_DOWN: int = Field(default=1, ge=0, description="Paddle reach below its center")
    PADDLE_SPEED: float = Field(default=12.0, ge=0, description="Paddle speed in cells/second")

    # Ball physics
    BALL_SPEED_INCREASE: float = Field(
        default=1.003, ge=1.0, description="Ball velocity factor applied every tick"
    )
    BALL_MIN_VX: float = Field(default=10.0, gt=0, description="Minimum horizontal serve speed")
    BALL_MAX_VX: float = Field(default=20.0, gt=0, description="Maximum horizontal serve speed")
    BALL_MAX_VY: float = Field(default=6.0, ge=0, description="Maximum vertical serve speed")

    # Timing
    FPS: int = Field(default=10, gt=0, description="Simulation ticks per second")
    INPUT_POLL_TIMEOUT: float = Field(
        default=0.02, ge=0, description="Keyboard poll window in seconds"
    )

    # Controls
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")
    RESET_KEY: str = Field(default="r", min_length=1, description="Key resetting ball and paddles")
    QUIT_KEY: str = Field(default="q", min_length=1, description="Key leaving the game")

    @field_validator("BALL_MAX_VX")
    @classmethod
    def validate_serve_speed(cls, v: float, info: ValidationInfo) -> float:
        """Validate that the serve speed range is not empty"""
        # info.data contains already validated fields
        min_vx = info.data.get("BALL_MIN_VX", 10.0) if info.data else 10.0
        if v <= min_vx:
            raise ValueError(f"BALL_MAX_VX ({v}) must be greater than BALL_MIN_VX ({min_vx})")
        return v

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS[self.KEYBOARD_LAYOUT]

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "tty_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        config_path = Path(filepath)

        with open(config_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "tty_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        defaults = GameConfig()
        for field_name in type(self).model_fields.keys():
            setattr(self, field_name, getattr(defaults, field_name))


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "tty_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        logger.info("No configuration file at %s, keeping defaults", filepath)
        return False
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error("Error loading config from %s: %s", filepath, e)
        return False

    # Update global config
    for field_name in GameConfig.model_fields.keys():
        setattr(game_config, field_name, getattr(loaded_config, field_name))
    logger.info("Loaded configuration from %s", filepath)
    return True


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values: dict[str, Any] = {}
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        old_values = _change_values(game_config, **kwargs)
        yield
    finally:
        _change_values(game_config, **old_values)
