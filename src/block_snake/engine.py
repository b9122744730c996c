"""Tick-driven game engine composing grid, snake, food, and score logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace

import numpy as np

from block_snake.config import GameConfig
from block_snake.errors import ConstructionError, PreconditionError
from block_snake.food import FoodPlacer
from block_snake.grid import Coordinate, Grid
from block_snake.score import ScoreTracker
from block_snake.snake import Direction, Snake, move

logger = logging.getLogger(__name__)


class GameStatus(str, enum.Enum):
    """Lifecycle states for a game."""

    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


@dataclass(frozen=True)
class GameState:
    """A snapshot of one game.

    ``direction`` is the heading used by the last tick; ``next_direction``
    is the buffered heading the next tick will use.
    """

    snake: Snake
    direction: Direction
    next_direction: Direction
    food: Coordinate | None
    score: int = 0
    status: GameStatus = GameStatus.IDLE
    tick: int = 0

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "tick": self.tick,
            "score": self.score,
            "direction": self.next_direction.name.lower(),
            "snake": [list(seg) for seg in self.snake],
            "food": list(self.food) if self.food is not None else None,
            "game_over": self.status is GameStatus.ENDED,
        }


@dataclass(frozen=True)
class Advanced:
    """The snake moved; ``ate`` is set when it reached the food."""

    state: GameState
    ate: bool = False


@dataclass(frozen=True)
class Collided:
    """The head would have left the grid. The game is over."""

    state: GameState


TickResult = Advanced | Collided


def advance(state: GameState, grid: Grid, placer: FoodPlacer) -> TickResult:
    """Compute the state one tick after *state*.

    Only the grid boundary ends a game; the head may cross the body freely.
    A new food cell is drawn from *placer* when the head lands on the food.
    """
    if state.status is not GameStatus.RUNNING:
        raise PreconditionError(
            f"Cannot tick a game that is {state.status.value}.",
        )

    direction = state.next_direction
    head = move(state.snake.head, direction)

    if not grid.is_inside(head):
        return Collided(
            replace(state, direction=direction, status=GameStatus.ENDED),
        )

    # Food under the body does nothing; only the head eats.
    ate = head == state.food
    snake = state.snake.advance(head, grow=ate)
    food = placer.place(grid) if ate else state.food
    return Advanced(
        replace(
            state,
            snake=snake,
            direction=direction,
            food=food,
            score=state.score + 1 if ate else state.score,
            tick=state.tick + 1,
        ),
        ate=ate,
    )


class GameEngine:
    """Single-snake, tick-based game controller.

    The engine owns the grid, the food placer, the score tracker, and the
    current :class:`GameState`. Nothing else replaces the state: callers go
    through :meth:`start`, :meth:`restart`, :meth:`set_direction`, and
    :meth:`tick`.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        scores: ScoreTracker | None = None,
        placer: FoodPlacer | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(rows=self.config.rows, cols=self.config.cols)

        self.spawn = self.config.spawn_cell
        if not self.grid.is_inside(self.spawn):
            raise ConstructionError(
                f"Spawn cell {tuple(self.spawn)} lies outside the "
                f"{self.grid.rows}x{self.grid.cols} grid.",
            )

        self.placer = (
            placer if placer is not None
            else FoodPlacer(np.random.default_rng(self.config.seed))
        )
        self.scores = scores if scores is not None else ScoreTracker()

        heading = self.config.direction
        self.state = GameState(
            snake=Snake([self.spawn]),
            direction=heading,
            next_direction=heading,
            food=None,
        )

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def high_score(self) -> int:
        return self.scores.high_score

    def start(self) -> GameState:
        """Begin the first game. Only valid while idle."""
        if self.state.status is not GameStatus.IDLE:
            raise PreconditionError("Game has already been started.")
        self._reset()
        logger.info("Game started on a %dx%d grid.", self.grid.rows, self.grid.cols)
        return self.state

    def restart(self) -> GameState:
        """Reset to a fresh running game. Same effect as :meth:`start`."""
        if self.state.status is GameStatus.IDLE:
            raise PreconditionError("Cannot restart a game that never started.")
        self._reset()
        logger.info("Game restarted.")
        return self.state

    def set_direction(self, direction: Direction) -> None:
        """Buffer *direction* for the next tick.

        Any direction is accepted, including a 180° reversal.
        """
        if self.state.status is not GameStatus.RUNNING:
            raise PreconditionError("Direction changes need a running game.")
        self.state = replace(self.state, next_direction=direction)

    def tick(self) -> TickResult:
        """Advance the game by one tick."""
        result = advance(self.state, self.grid, self.placer)
        self.state = result.state

        if isinstance(result, Collided):
            logger.info(
                "Snake left the grid at tick %d with score %d.",
                self.state.tick, self.state.score,
            )
        elif result.ate:
            self.scores.record(self.state.score)
        return result

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        data = self.state.to_dict()
        data["high_score"] = self.scores.high_score
        data["grid"] = self.grid.to_dict()
        return data

    def _reset(self) -> None:
        heading = self.config.direction
        self.state = GameState(
            snake=Snake([self.spawn]),
            direction=heading,
            next_direction=heading,
            food=self.placer.place(self.grid),
            score=0,
            status=GameStatus.RUNNING,
            tick=0,
        )
        self.scores.reset()
