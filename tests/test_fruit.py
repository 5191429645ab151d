"""
Tests for random fruit placement.
"""

import random
from unittest.mock import patch

from nibbles.board import Board
from nibbles.fruit import Fruit, place_fruit, random_color


class TestPlaceFruit:
    """Tests for place_fruit()."""

    def test_positions_are_grid_aligned_and_inside(self, board):
        """Every placement lies on a cell center within the bounds."""
        rng = random.Random(7)
        for _ in range(500):
            _, x, y = place_fruit(board, rng)
            assert board.contains((x, y))
            assert ((x - board.min_x) / board.cell_size).is_integer()
            assert ((y - board.min_y) / board.cell_size).is_integer()

    def test_every_column_and_row_is_reachable(self, board):
        """Placement spans the whole board, edges included."""
        rng = random.Random(11)
        xs, ys = set(), set()
        for _ in range(5000):
            _, x, y = place_fruit(board, rng)
            xs.add(x)
            ys.add(y)
        assert len(xs) == board.columns
        assert len(ys) == board.rows
        assert min(xs) == board.min_x and max(xs) == board.max_x
        assert min(ys) == board.min_y and max(ys) == board.max_y

    def test_color_channels_in_range(self):
        """Colors are RGB byte triples."""
        rng = random.Random(3)
        for _ in range(100):
            color = random_color(rng)
            assert len(color) == 3
            assert all(0 <= channel <= 255 for channel in color)

    def test_same_seed_same_fruit(self, board):
        """Placement is reproducible from a seed."""
        assert place_fruit(board, random.Random(99)) == place_fruit(board, random.Random(99))

    def test_single_cell_board(self):
        """A one-cell board always places fruit at its center."""
        board = Board(25, 25, 25)
        _, x, y = place_fruit(board, random.Random(0))
        assert (x, y) == (0.0, 0.0)


class TestFruit:
    """Tests for the Fruit entity."""

    def test_respawn_replaces_position_and_color(self, board, rng):
        """Respawn takes both values from place_fruit."""
        fruit = Fruit()
        with patch('nibbles.fruit.place_fruit', return_value=((1, 2, 3), 112.5, -12.5)):
            fruit.respawn(board, rng)
        assert fruit.position == (112.5, -12.5)
        assert fruit.color == (1, 2, 3)

    def test_spawn_places_on_board(self, board, rng):
        """Spawned fruit starts somewhere on the board."""
        fruit = Fruit.spawn(board, rng)
        assert board.contains(fruit.position)
