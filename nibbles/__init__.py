"""
nibbles - a grid worm simulation on a wrap-around board.

  board       - Board bounds and clamp_wrap().
  fruit       - Fruit and random placement.
  worm        - Worm state, direction guard, movement & growth engine.
  scheduler   - TickScheduler turning frame time into steps.
  simulation  - Simulation root owning one worm and one fruit.
  controls    - Key state to direction request.
  game        - pygame host and entry point.
"""

from nibbles.board import Board, clamp_wrap
from nibbles.config import Config
from nibbles.constants import DOWN, LEFT, RIGHT, UP
from nibbles.fruit import Fruit, place_fruit
from nibbles.scheduler import TickScheduler
from nibbles.simulation import Simulation
from nibbles.worm import Segment, StepOutcome, Worm

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT',
    'Board', 'clamp_wrap',
    'Config',
    'Fruit', 'place_fruit',
    'Segment', 'StepOutcome', 'Worm',
    'TickScheduler',
    'Simulation',
]
