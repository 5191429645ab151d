import os
import random

# Must be set before pygame creates a display
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from nibbles.board import Board
from nibbles.fruit import Fruit
from nibbles.worm import Worm

# A fruit cell the worm cannot reach from the origin within a few ticks
OUT_OF_REACH = (-437.5, -287.5)


@pytest.fixture
def board():
    return Board(900, 600, 25)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def worm(board):
    return Worm(board)


@pytest.fixture
def fruit():
    return Fruit(position=OUT_OF_REACH, color=(200, 40, 40))
