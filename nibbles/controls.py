"""
Keyboard mapping for the direction controller.
"""

from typing import Optional

import pygame

from nibbles.constants import DOWN, LEFT, RIGHT, UP

# Checked in this order, the last pressed match wins
KEY_BINDINGS = (
    (RIGHT, (pygame.K_d, pygame.K_RIGHT)),
    (LEFT,  (pygame.K_a, pygame.K_LEFT)),
    (DOWN,  (pygame.K_s, pygame.K_DOWN)),
    (UP,    (pygame.K_w, pygame.K_UP)),
)


def requested_direction(pressed) -> Optional[str]:
    """
    Map the pressed-key state to a direction request.

    pressed is anything indexable by key code, such as the result of
    pygame.key.get_pressed(). Returns None when no direction key is down.
    """
    requested = None
    for direction, keys in KEY_BINDINGS:
        if any(pressed[key] for key in keys):
            requested = direction
    return requested
