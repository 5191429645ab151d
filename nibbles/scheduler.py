"""
Tick scheduler: turns per-frame elapsed time into movement steps.
"""

from typing import Any, Callable

from nibbles.worm import Worm


def tick_due(elapsed: float, interval: float) -> bool:
    """True once enough time has accumulated for a step"""
    return elapsed >= interval


class TickScheduler:
    """
    Accumulates frame time on the worm and fires at most one step per frame.

    The worm's tick_interval is read on every check because eating fruit
    or colliding changes it. When a step fires the accumulator is reset to
    zero and any remainder is dropped.
    """

    def __init__(self, worm: Worm, on_tick: Callable[[], Any]):
        self.worm = worm
        self.on_tick = on_tick

    def update(self, dt: float) -> bool:
        """Add dt to the accumulator, return True if a step fired"""
        self.worm.elapsed += dt
        if not tick_due(self.worm.elapsed, self.worm.tick_interval):
            return False

        self.on_tick()
        self.worm.elapsed = 0.0
        return True
