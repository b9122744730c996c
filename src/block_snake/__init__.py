"""Block Snake — core game engine."""

from block_snake.clock import TimeTracker
from block_snake.config import GameConfig
from block_snake.engine import (
    Advanced,
    Collided,
    GameEngine,
    GameState,
    GameStatus,
    TickResult,
    advance,
)
from block_snake.errors import ConstructionError, GameError, PreconditionError
from block_snake.food import FoodPlacer
from block_snake.grid import CellType, Coordinate, Grid
from block_snake.score import (
    HighScoreStore,
    InMemoryHighScoreStore,
    JsonHighScoreStore,
    ScoreTracker,
)
from block_snake.session import GameSession
from block_snake.snake import Direction, Snake, move

__all__ = [
    "Advanced",
    "CellType",
    "Collided",
    "ConstructionError",
    "Coordinate",
    "Direction",
    "FoodPlacer",
    "GameConfig",
    "GameEngine",
    "GameError",
    "GameSession",
    "GameState",
    "GameStatus",
    "Grid",
    "HighScoreStore",
    "InMemoryHighScoreStore",
    "JsonHighScoreStore",
    "PreconditionError",
    "ScoreTracker",
    "Snake",
    "TickResult",
    "TimeTracker",
    "advance",
    "move",
]
