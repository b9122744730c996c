"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from block_snake.grid import Coordinate

if TYPE_CHECKING:
    from block_snake.grid import Grid

logger = logging.getLogger(__name__)


class FoodPlacer:
    """Draws food cells uniformly over the whole grid.

    Occupied cells are not excluded; food can land under the snake. Pass a
    seeded NumPy generator for reproducible placement.
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()

    def place(self, grid: Grid) -> Coordinate:
        """Return a new food coordinate inside *grid*."""
        row = int(self.rng.integers(0, grid.rows))
        col = int(self.rng.integers(0, grid.cols))
        logger.debug("Food placed at (%d, %d).", row, col)
        return Coordinate(row, col)
