"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from block_snake.errors import ConstructionError
from block_snake.grid import Coordinate
from block_snake.score import DEFAULT_KEY
from block_snake.snake import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board size, spawn point, timer periods, and persistence settings.

    Supports JSON serialization so a setup can be saved and replayed.
    """

    # Board
    rows: int = 20
    cols: int = 20
    spawn: tuple[int, int] = (1, 3)
    initial_direction: str = "down"

    # Timers
    move_interval_ms: int = 300
    clock_interval_ms: int = 1000

    # Food placement
    seed: int | None = None

    # Persistence
    high_score_path: str | None = None
    high_score_key: str = DEFAULT_KEY

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ConstructionError("rows and cols must be positive.")
        if self.move_interval_ms <= 0 or self.clock_interval_ms <= 0:
            raise ConstructionError("Timer intervals must be positive.")
        try:
            Direction.from_name(self.initial_direction)
        except ValueError as exc:
            raise ConstructionError(str(exc)) from exc
        if len(self.spawn) != 2:
            raise ConstructionError("spawn must be a (row, col) pair.")
        # JSON has no tuples; normalize whatever sequence was loaded.
        object.__setattr__(self, "spawn", tuple(self.spawn))

    @property
    def direction(self) -> Direction:
        return Direction.from_name(self.initial_direction)

    @property
    def spawn_cell(self) -> Coordinate:
        return Coordinate(*self.spawn)

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
