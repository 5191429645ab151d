"""
Random fruit placement.

Fruit lands on the cell grid that starts at the board's minimum bound.
Occupied worm cells are not excluded, so fruit may spawn under the worm.
"""

import logging
import random
from dataclasses import dataclass
from typing import Tuple

from nibbles.board import Board

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


def random_color(rng: random.Random) -> Color:
    """Uniformly random RGB color"""
    return (rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))


def place_fruit(board: Board, rng: random.Random) -> Tuple[Color, float, float]:
    """Pick a color and a grid-aligned position anywhere on the board"""
    color = random_color(rng)
    x = board.min_x + board.cell_size * rng.randrange(board.columns)
    y = board.min_y + board.cell_size * rng.randrange(board.rows)
    return color, x, y


@dataclass
class Fruit:
    """The single fruit on the board"""
    position: Tuple[float, float] = (0.0, 0.0)
    color: Color = (255, 255, 255)

    @classmethod
    def spawn(cls, board: Board, rng: random.Random) -> "Fruit":
        """Create a fruit at a random position"""
        fruit = cls()
        fruit.respawn(board, rng)
        return fruit

    def respawn(self, board: Board, rng: random.Random):
        """Replace position and color with fresh random ones"""
        color, x, y = place_fruit(board, rng)
        self.color = color
        self.position = (x, y)
        logger.debug(f"Fruit placed at {self.position} with color {self.color}")
