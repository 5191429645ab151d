"""
Tunables for Nibbles, read from NIBBLES_* environment variables.

A .env file in the working directory is honoured through python-dotenv.
"""

import os
from dataclasses import dataclass
from typing import Callable, Optional

from dotenv import load_dotenv

from nibbles import constants

ENV_PREFIX = "NIBBLES_"


def _read(name: str, cast: Callable, default):
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} has an invalid value: {raw!r}")


@dataclass
class Config:
    width: float = constants.BOARD_WIDTH
    height: float = constants.BOARD_HEIGHT
    cell_size: float = constants.CELL_SIZE
    base_interval: float = constants.BASE_INTERVAL
    speedup_factor: float = constants.SPEEDUP_FACTOR
    min_interval: Optional[float] = None
    start_length: int = constants.START_LENGTH
    seed: Optional[int] = None
    fps: int = constants.FPS
    log_level: str = "INFO"
    worm_name: str = constants.WORM_NAME

    @classmethod
    def from_env(cls) -> "Config":
        """Build a validated config from the environment (and .env)"""
        load_dotenv()
        config = cls(
            width=_read("WIDTH", float, constants.BOARD_WIDTH),
            height=_read("HEIGHT", float, constants.BOARD_HEIGHT),
            cell_size=_read("CELL_SIZE", float, constants.CELL_SIZE),
            base_interval=_read("BASE_INTERVAL", float, constants.BASE_INTERVAL),
            speedup_factor=_read("SPEEDUP_FACTOR", float, constants.SPEEDUP_FACTOR),
            min_interval=_read("MIN_INTERVAL", float, None),
            start_length=_read("START_LENGTH", int, constants.START_LENGTH),
            seed=_read("SEED", int, None),
            fps=_read("FPS", int, constants.FPS),
            log_level=_read("LOG_LEVEL", str.upper, "INFO"),
            worm_name=_read("WORM_NAME", str, constants.WORM_NAME),
        )
        config.validate()
        return config

    def validate(self):
        """Raise ValueError on settings the simulation cannot run with"""
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.width < self.cell_size or self.height < self.cell_size:
            raise ValueError(
                f"Board {self.width}x{self.height} must fit at least one cell of {self.cell_size}"
            )
        if self.base_interval <= 0:
            raise ValueError(f"base_interval must be positive, got {self.base_interval}")
        if not 0 < self.speedup_factor < 1:
            raise ValueError(f"speedup_factor must be between 0 and 1, got {self.speedup_factor}")
        if self.min_interval is not None and self.min_interval < 0:
            raise ValueError(f"min_interval cannot be negative, got {self.min_interval}")
        if self.start_length < 1:
            raise ValueError(f"start_length must be at least 1, got {self.start_length}")
        if self.fps < 1:
            raise ValueError(f"fps must be at least 1, got {self.fps}")
