"""
Simulation root holding exactly one worm and one fruit.

The host calls steer() with the player's request and update() with the
frame time, once per frame. Renderers read snapshot() or the worm and
fruit attributes directly and must not mutate them.
"""

import logging
import random
from typing import Any, Dict, Optional

from nibbles.board import Board
from nibbles.config import Config
from nibbles.fruit import Fruit
from nibbles.scheduler import TickScheduler
from nibbles.worm import StepOutcome, Worm

logger = logging.getLogger(__name__)


class Simulation:
    """Owns the board, worm, fruit, scheduler and random source"""

    def __init__(self, config: Optional[Config] = None, rng: Optional[random.Random] = None):
        self.config = config or Config()
        self.config.validate()
        self.rng = rng or random.Random(self.config.seed)

        self.board = Board(self.config.width, self.config.height, self.config.cell_size)
        self.worm = Worm(
            self.board,
            base_interval=self.config.base_interval,
            speedup_factor=self.config.speedup_factor,
            start_length=self.config.start_length,
            min_interval=self.config.min_interval,
            name=self.config.worm_name,
        )
        self.fruit = Fruit.spawn(self.board, self.rng)
        self.scheduler = TickScheduler(self.worm, self.step)

        self.ticks = 0
        self.last_outcome: Optional[StepOutcome] = None
        logger.info(
            f"Simulation started: board {self.board.width}x{self.board.height}, "
            f"cell {self.board.cell_size}, fruit at {self.fruit.position}"
        )

    def steer(self, requested: Optional[str]) -> bool:
        """Forward a direction request to the worm, None means no input"""
        if requested is None:
            return False
        return self.worm.set_direction(requested)

    def update(self, dt: float) -> bool:
        """Advance the clock by one frame, return True if the worm moved"""
        return self.scheduler.update(dt)

    def step(self) -> StepOutcome:
        """Run the movement & growth engine once"""
        self.last_outcome = self.worm.step(self.fruit, self.rng)
        self.ticks += 1
        return self.last_outcome

    def snapshot(self) -> Dict[str, Any]:
        """Read-only view of everything a renderer needs"""
        return {
            "tick": self.ticks,
            "name": self.worm.name,
            "direction": self.worm.direction,
            "head": self.worm.head_position,
            "segments": self.worm.positions,
            "fruit": self.fruit.position,
            "fruit_color": self.fruit.color,
            "level": self.worm.level,
            "max_level": self.worm.max_level_reached,
            "tick_interval": self.worm.tick_interval,
        }

    def __repr__(self):
        return (
            f"<Simulation tick={self.ticks}, level={self.worm.level}, "
            f"segments={len(self.worm.segments)}, fruit={self.fruit.position}>"
        )
