"""Run configuration.

Defaults can be overridden through TERMLIFE_* environment variables (see
.env.example) and then by command-line flags.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .core.boundary import BoundaryPolicy
from .driver.clock import DEFAULT_FRAME_RATE

ENV_PREFIX = 'TERMLIFE_'


def _env_int(environ: Mapping[str, str], name: str) -> Optional[int]:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == '':
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


def _env_float(environ: Mapping[str, str], name: str) -> Optional[float]:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == '':
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from None


@dataclass
class LifeConfig:
    """Settings for one simulation run."""
    width: int = 40
    height: int = 20
    boundary: BoundaryPolicy = BoundaryPolicy.WRAP
    frame_rate: float = DEFAULT_FRAME_RATE
    seed: Optional[int] = None
    max_generations: Optional[int] = None
    debug_neighbors: bool = False
    clear_screen: bool = True
    log_level: str = 'WARNING'

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'LifeConfig':
        """Build a config from TERMLIFE_* variables, falling back to defaults.

        Raises:
            ValueError: If a variable holds a malformed value
        """
        if environ is None:
            environ = os.environ

        config = cls()
        width = _env_int(environ, 'WIDTH')
        if width is not None:
            config.width = width
        height = _env_int(environ, 'HEIGHT')
        if height is not None:
            config.height = height
        boundary = environ.get(ENV_PREFIX + 'BOUNDARY')
        if boundary:
            config.boundary = BoundaryPolicy.parse(boundary)
        frame_rate = _env_float(environ, 'FPS')
        if frame_rate is not None:
            config.frame_rate = frame_rate
        config.seed = _env_int(environ, 'SEED')
        log_level = environ.get(ENV_PREFIX + 'LOG_LEVEL')
        if log_level:
            config.log_level = log_level.upper()
        return config

    def validate(self) -> None:
        """Check the settings are usable.

        Raises:
            ValueError: On the first invalid setting found
        """
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {self.width}x{self.height}")
        if self.frame_rate <= 0:
            raise ValueError(f"Frame rate must be positive, got {self.frame_rate}")
        if self.max_generations is not None and self.max_generations < 0:
            raise ValueError(f"max_generations cannot be negative, got {self.max_generations}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level {self.log_level!r}")
