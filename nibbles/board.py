"""
Board geometry: playable bounds and wrap-around arithmetic.

The board is centered on the origin. A segment is one cell wide, so its
center may travel from -extent/2 + cell/2 to extent/2 - cell/2 on each axis.
"""

from dataclasses import dataclass, field
from typing import Tuple


def clamp_wrap(coordinate: float, minimum: float, maximum: float) -> float:
    """Wrap a coordinate that left [minimum, maximum] to the opposite edge"""
    if coordinate > maximum:
        return minimum
    if coordinate < minimum:
        return maximum
    return coordinate


@dataclass(frozen=True)
class Board:
    """Immutable board dimensions and derived bounds"""
    width: float
    height: float
    cell_size: float
    min_x: float = field(init=False)
    max_x: float = field(init=False)
    min_y: float = field(init=False)
    max_y: float = field(init=False)

    def __post_init__(self):
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.width < self.cell_size or self.height < self.cell_size:
            raise ValueError(
                f"Board {self.width}x{self.height} is smaller than one cell ({self.cell_size})."
            )

        half_cell = self.cell_size / 2
        # frozen dataclass: derived fields go through object.__setattr__
        object.__setattr__(self, 'min_x', -self.width / 2 + half_cell)
        object.__setattr__(self, 'max_x', self.width / 2 - half_cell)
        object.__setattr__(self, 'min_y', -self.height / 2 + half_cell)
        object.__setattr__(self, 'max_y', self.height / 2 - half_cell)

    @property
    def columns(self) -> int:
        """Number of whole cells across the board"""
        return int(self.width // self.cell_size)

    @property
    def rows(self) -> int:
        """Number of whole cells down the board"""
        return int(self.height // self.cell_size)

    def wrap(self, position: Tuple[float, float]) -> Tuple[float, float]:
        """Wrap both axes of a position independently"""
        x, y = position
        return (
            clamp_wrap(x, self.min_x, self.max_x),
            clamp_wrap(y, self.min_y, self.max_y),
        )

    def contains(self, position: Tuple[float, float]) -> bool:
        x, y = position
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y
