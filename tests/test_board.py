"""
Tests for board geometry and wrap-around.
"""

import pytest

from nibbles.board import Board, clamp_wrap
from nibbles.constants import VALID_DIRECTIONS
from nibbles.worm import Worm


class TestClampWrap:
    """Tests for clamp_wrap()."""

    def test_inside_is_unchanged(self):
        """Coordinates inside the bounds pass through."""
        assert clamp_wrap(10.0, -437.5, 437.5) == 10.0

    def test_bounds_are_inclusive(self):
        """Exactly min and max are legal positions."""
        assert clamp_wrap(437.5, -437.5, 437.5) == 437.5
        assert clamp_wrap(-437.5, -437.5, 437.5) == -437.5

    def test_above_max_wraps_to_min(self):
        """Leaving past max re-enters at min."""
        assert clamp_wrap(450.0, -437.5, 437.5) == -437.5

    def test_below_min_wraps_to_max(self):
        """Leaving past min re-enters at max."""
        assert clamp_wrap(-462.5, -437.5, 437.5) == 437.5


class TestBoard:
    """Tests for the Board dataclass."""

    def test_derived_bounds(self):
        """Bounds keep a whole cell inside the board edge."""
        board = Board(900, 600, 25)
        assert board.min_x == -437.5
        assert board.max_x == 437.5
        assert board.min_y == -287.5
        assert board.max_y == 287.5

    def test_cell_counts(self):
        """Columns and rows count whole cells."""
        board = Board(900, 600, 25)
        assert board.columns == 36
        assert board.rows == 24

    def test_board_is_immutable(self):
        """Board fields cannot be reassigned."""
        board = Board(900, 600, 25)
        with pytest.raises(AttributeError):
            board.width = 100

    def test_non_positive_cell_size_raises(self):
        """A cell must have a size."""
        with pytest.raises(ValueError):
            Board(900, 600, 0)

    def test_board_smaller_than_cell_raises(self):
        """The board must fit at least one cell."""
        with pytest.raises(ValueError):
            Board(20, 600, 25)

    def test_wrap_axes_independently(self):
        """Each axis wraps on its own."""
        board = Board(900, 600, 25)
        assert board.wrap((450.0, 0.0)) == (-437.5, 0.0)
        assert board.wrap((0.0, -312.5)) == (0.0, 287.5)
        assert board.wrap((450.0, 312.5)) == (-437.5, -287.5)


class TestWrapInvariant:
    """One step plus wrap always lands within bounds."""

    @pytest.mark.parametrize("direction", sorted(VALID_DIRECTIONS))
    def test_every_cell_every_direction(self, board, direction):
        worm = Worm(board)
        worm.direction = direction

        # Both the lattice through the origin and the lattice through the minimum bound
        xs = [board.min_x + i * board.cell_size for i in range(board.columns)]
        xs += [i * board.cell_size for i in range(-17, 18)]
        ys = [board.min_y + i * board.cell_size for i in range(board.rows)]
        ys += [i * board.cell_size for i in range(-11, 12)]

        for x in xs:
            for y in ys:
                worm.head_position = (x, y)
                assert board.contains(worm.next_head()), (x, y, direction)
