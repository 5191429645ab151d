"""
Worm state, direction control and the per-tick movement & growth engine.

Segments are ordered head first: segments[0] is the head, the last entry
is the tail. Positions are world coordinates produced by whole cell steps,
so exact equality is used for collision and fruit checks.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from nibbles.board import Board
from nibbles.constants import (
    BASE_INTERVAL, DIRECTION_DELTA, OPPOSITE, RIGHT, SPEEDUP_FACTOR,
    START_LENGTH, VALID_DIRECTIONS, WORM_COLOR, WORM_NAME,
)
from nibbles.fruit import Fruit

logger = logging.getLogger(__name__)

Position = Tuple[float, float]


@dataclass
class Segment:
    """One body cell of the worm"""
    position: Position


@dataclass
class StepOutcome:
    """What happened during one fired tick"""
    head: Position
    collided: bool = False
    grew: bool = False
    ate: bool = False


class Worm:
    """
    The mutable simulation state of the worm.

    Attributes:
        direction: direction of the last movement step
        next_direction: guarded request applied at the start of the next step
        tick_interval: seconds between movement steps
        elapsed: time accumulated since the last step
        head_position: where the head is, authoritative for the next step
        segments: owned body segments, head first
        level: 1 + fruit eaten since the last reset
        max_level_reached: best level so far, never decreases
    """

    def __init__(
        self,
        board: Board,
        base_interval: float = BASE_INTERVAL,
        speedup_factor: float = SPEEDUP_FACTOR,
        start_length: int = START_LENGTH,
        min_interval: Optional[float] = None,
        name: str = WORM_NAME,
        color: Tuple[int, int, int] = WORM_COLOR,
    ):
        self.board = board
        self.base_interval = base_interval
        self.speedup_factor = speedup_factor
        self.start_length = start_length
        self.min_interval = min_interval
        self.name = name
        self.color = color

        self.direction = RIGHT
        self.next_direction = RIGHT
        self.tick_interval = base_interval
        self.elapsed = 0.0
        self.head_position: Position = (0.0, 0.0)
        self.segments: List[Segment] = []
        self.level = 1
        self.max_level_reached = 1

    @property
    def positions(self) -> List[Position]:
        """Segment positions, head first"""
        return [segment.position for segment in self.segments]

    def set_direction(self, requested: str) -> bool:
        """Request a turn, ignoring direct reversals. Return True if accepted"""
        if requested not in VALID_DIRECTIONS:
            raise ValueError(f"Unknown direction: {requested!r}")
        if requested == OPPOSITE[self.direction]:
            return False
        self.next_direction = requested
        return True

    def next_head(self) -> Position:
        """Head position one cell ahead in the current direction, wrapped"""
        dx, dy = DIRECTION_DELTA[self.direction]
        x, y = self.head_position
        size = self.board.cell_size
        return self.board.wrap((x + dx * size, y + dy * size))

    def step(self, fruit: Fruit, rng: random.Random) -> StepOutcome:
        """Advance one cell, shift the body, then collide, grow or eat"""
        self.direction = self.next_direction
        self.head_position = self.next_head()
        outcome = StepOutcome(head=self.head_position)

        vacated, collided = self._shift_body(self.head_position)
        if collided:
            self._reset()
            outcome.collided = True
            return outcome

        # Ramp-up: first segment lands on the head, later ones on the old tail
        if len(self.segments) < self.start_length:
            self.segments.append(Segment(vacated))
            outcome.grew = True

        if self.head_position == fruit.position:
            self._eat(fruit, rng)
            self.segments.append(Segment(vacated))
            outcome.ate = True

        logger.debug(
            f"{self.name} stepped {self.direction} to {self.head_position} "
            f"({len(self.segments)} segments)"
        )
        return outcome

    def _shift_body(self, new_head: Position) -> Tuple[Position, bool]:
        """
        Follow-the-leader shift.

        Each segment takes the position its predecessor held before this
        step. Returns the position vacated by the tail (the new head when
        the worm has no segments) and whether a body segment was about to
        land on the new head.
        """
        carry = new_head
        for index, segment in enumerate(self.segments):
            if index > 0 and carry == new_head:
                return carry, True
            previous = segment.position
            segment.position = carry
            carry = previous
        return carry, False

    def _eat(self, fruit: Fruit, rng: random.Random):
        fruit.respawn(self.board, rng)

        interval = self.tick_interval * self.speedup_factor
        if self.min_interval is not None:
            interval = max(self.min_interval, interval)
        self.tick_interval = interval

        self.level += 1
        self.max_level_reached = max(self.max_level_reached, self.level)
        logger.info(
            f"{self.name} ate fruit at {self.head_position}: level {self.level}, "
            f"interval {self.tick_interval:.4f}s, next fruit at {fruit.position}"
        )

    def _reset(self):
        """Self-collision: back to level 1 and regrow from nothing"""
        logger.info(
            f"{self.name} ran into itself at {self.head_position} on level {self.level} "
            f"(best {self.max_level_reached})"
        )
        self.level = 1
        self.tick_interval = self.base_interval
        self.segments.clear()
