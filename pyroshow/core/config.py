"""
Pyroshow Configuration
Contains simulation constants and display settings.
"""
import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional, Union

# Display
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
FPS = 60
TITLE = "Pyroshow"

# Trail overlay (alpha out of 255)
TRAIL_ALPHA = 100

# Rockets
ROCKET_SPEED = 3  # units per tick
ROCKET_RADIUS = 2
PARTICLES_PER_EXPLOSION = 60

# Particles
PARTICLE_RADIUS = 2
PARTICLE_GRAVITY = 0.05  # units per tick^2
PARTICLE_DRAG = 0.98
PARTICLE_MIN_SPEED = 1.0
PARTICLE_MAX_SPEED = 5.0
PARTICLE_MIN_DECAY = 0.003
PARTICLE_MAX_DECAY = 0.018


class ConfigError(ValueError):
    """Raised when a settings file holds unknown or invalid values."""


@dataclass
class Settings:
    """Display settings that may be overridden from a JSON file."""
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    fps: int = FPS
    title: str = TITLE

    def validate(self) -> "Settings":
        for key in ("width", "height", "fps"):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigError(f"'{key}' must be a positive integer, got {value!r}")
        if not isinstance(self.title, str):
            raise ConfigError(f"'title' must be a string, got {self.title!r}")
        return self

    def to_dict(self) -> dict:
        return asdict(self)


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """Load display settings, falling back to defaults when no path is given."""
    if path is None:
        return Settings()

    try:
        with open(path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path}: invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a JSON object")

    known = set(Settings().to_dict())
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"{path}: unknown setting(s): {', '.join(unknown)}")

    return Settings(**data).validate()
