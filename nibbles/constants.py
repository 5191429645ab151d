"""
Shared constants for Nibbles.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_DIRECTIONS = {UP, DOWN, LEFT, RIGHT}

# World-space unit vectors, y grows upwards
DIRECTION_DELTA = {
    UP:    (0, 1),
    DOWN:  (0, -1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Simulation defaults
BOARD_WIDTH = 900
BOARD_HEIGHT = 600
CELL_SIZE = 25
BASE_INTERVAL = 0.5    # Seconds per step at level 1
SPEEDUP_FACTOR = 0.9   # Interval multiplier per fruit eaten
START_LENGTH = 5       # Segments grown one per tick after a (re)start
FPS = 60

WORM_NAME = "Wormy"
WORM_COLOR = (64, 64, 191)
WORM_HEAD_COLOR = (110, 110, 235)
