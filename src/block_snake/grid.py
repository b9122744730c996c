"""Grid geometry and render-time occupancy boards."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import NamedTuple

import numpy as np

from block_snake.errors import ConstructionError


class Coordinate(NamedTuple):
    """A grid cell in (row, col) order, consistent with NumPy indexing."""

    row: int
    col: int


class CellType(enum.IntEnum):
    """Integer codes stored in a rendered board."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Grid:
    """Fixed-size playing field.

    The engine only needs :meth:`is_inside`; the remaining helpers exist for
    the display side, which addresses cells by a packed ``row * cols + col``
    index.
    """

    def __init__(self, rows: int = 20, cols: int = 20) -> None:
        if rows < 1 or cols < 1:
            raise ConstructionError("Grid dimensions must be positive.")
        self.rows = rows
        self.cols = cols

    def is_inside(self, coord: tuple[int, int]) -> bool:
        """Check whether a coordinate lies within the grid."""
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.cols

    def render(
        self,
        snake: Iterable[tuple[int, int]],
        food: tuple[int, int] | None,
    ) -> np.ndarray:
        """Build a ``(rows, cols)`` board of :class:`CellType` codes.

        Snake segments are painted after food, so a snake cell sitting on top
        of the food renders as ``SNAKE``.
        """
        board = np.zeros((self.rows, self.cols), dtype=np.int8)
        if food is not None and self.is_inside(food):
            board[food[0], food[1]] = CellType.FOOD
        for row, col in snake:
            if self.is_inside((row, col)):
                board[row, col] = CellType.SNAKE
        return board

    @staticmethod
    def changed_cells(before: np.ndarray, after: np.ndarray) -> list[int]:
        """Packed indices of cells whose type differs between two boards."""
        return np.flatnonzero(before != after).tolist()

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"rows": self.rows, "cols": self.cols}
