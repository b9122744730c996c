"""Tests for the FoodPlacer module."""

import numpy as np

from block_snake.food import FoodPlacer
from block_snake.grid import Grid


class TestFoodPlacer:
    def test_place_inside_grid(self):
        grid = Grid(rows=3, cols=7)
        placer = FoodPlacer(np.random.default_rng(0))
        for _ in range(200):
            assert grid.is_inside(placer.place(grid))

    def test_deterministic_with_seed(self):
        positions_a = self._place_with_seed(42)
        positions_b = self._place_with_seed(42)
        assert positions_a == positions_b

    def test_different_seeds_differ(self):
        assert self._place_with_seed(1) != self._place_with_seed(2)

    def test_covers_whole_grid(self):
        """Placement is over the full grid, not only free cells."""
        grid = Grid(rows=2, cols=2)
        placer = FoodPlacer(np.random.default_rng(3))
        seen = {placer.place(grid) for _ in range(200)}
        assert seen == {(0, 0), (0, 1), (1, 0), (1, 1)}

    def test_returns_plain_ints(self):
        placer = FoodPlacer(np.random.default_rng(0))
        row, col = placer.place(Grid(rows=4, cols=4))
        assert type(row) is int
        assert type(col) is int

    @staticmethod
    def _place_with_seed(seed: int) -> list[tuple[int, int]]:
        grid = Grid(rows=10, cols=10)
        placer = FoodPlacer(np.random.default_rng(seed))
        return [placer.place(grid) for _ in range(5)]
