"""Snake body and movement directions."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator

from block_snake.grid import Coordinate


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Parse ``"up"``, ``"Down"`` etc. Raises ``ValueError`` otherwise."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}") from None

    @classmethod
    def from_key(cls, key: str) -> Direction | None:
        """Map a keyboard arrow key name to a direction, if it is one."""
        return _ARROW_KEYS.get(key)


_ARROW_KEYS: dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
}


def move(coord: tuple[int, int], direction: Direction) -> Coordinate:
    """Offset a coordinate by one cell in *direction*."""
    dr, dc = direction.value
    return Coordinate(coord[0] + dr, coord[1] + dc)


class Snake:
    """Immutable snake body, head first.

    Segments may repeat: nothing prevents the head from passing over the
    body, and the engine never checks for it.
    """

    __slots__ = ("_body",)

    def __init__(self, body: Iterable[tuple[int, int]]) -> None:
        segments = tuple(Coordinate(r, c) for r, c in body)
        if not segments:
            raise ValueError("Snake must have at least one segment.")
        self._body = segments

    @property
    def body(self) -> tuple[Coordinate, ...]:
        return self._body

    @property
    def head(self) -> Coordinate:
        """Return the head coordinate."""
        return self._body[0]

    def advance(self, new_head: tuple[int, int], grow: bool = False) -> Snake:
        """Return the snake moved onto *new_head*.

        The tail is kept when *grow* is set, so the body gains one segment.
        """
        head = (Coordinate(*new_head),)
        if grow:
            return Snake(head + self._body)
        return Snake(head + self._body[:-1])

    def __len__(self) -> int:
        return len(self._body)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._body)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snake):
            return NotImplemented
        return self._body == other._body

    def __hash__(self) -> int:
        return hash(self._body)

    def __repr__(self) -> str:
        return f"Snake({list(self._body)!r})"
