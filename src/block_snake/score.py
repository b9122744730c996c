"""Current and best-ever score tracking with pluggable persistence."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_KEY = "highScore"


class HighScoreStore(Protocol):
    """A single named slot holding the best-ever score."""

    def load(self) -> int | None: ...

    def save(self, value: int) -> None: ...


class InMemoryHighScoreStore:
    """Process-local store, mainly for tests and throwaway sessions."""

    def __init__(self, value: int | None = None) -> None:
        self.value = value
        self.saves = 0

    def load(self) -> int | None:
        return self.value

    def save(self, value: int) -> None:
        self.value = value
        self.saves += 1


class JsonHighScoreStore:
    """Keeps the high score under *key* in a small JSON document.

    Other keys in the file are preserved on save, so several games can share
    one file.
    """

    def __init__(self, path: str | Path, key: str = DEFAULT_KEY) -> None:
        self.path = Path(path)
        self.key = key

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text())
        except json.JSONDecodeError:
            logger.warning(
                "High score file %s is not valid JSON; treating it as empty.",
                self.path,
            )
            return {}
        return raw if isinstance(raw, dict) else {}

    def load(self) -> int | None:
        value = self._read().get(self.key)
        if value is None:
            return None
        logger.debug("Loaded high score %s from %s.", value, self.path)
        return int(value)

    def save(self, value: int) -> None:
        data = self._read()
        data[self.key] = int(value)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2))
        logger.debug("High score %d written to %s.", value, self.path)


class ScoreTracker:
    """Holds the score of the running game and the best score ever seen."""

    def __init__(self, store: HighScoreStore | None = None) -> None:
        self.store = store if store is not None else InMemoryHighScoreStore()
        loaded = self.store.load()
        self.high_score = loaded if loaded is not None else 0
        self.score = 0

    def reset(self) -> None:
        """Zero the current score for a new game.

        The high score is refreshed from the store, which other trackers may
        have raised since this one last looked.
        """
        self.score = 0
        self.refresh()

    def refresh(self) -> int:
        """Adopt the stored high score if it is better than ours."""
        stored = self.store.load()
        if stored is not None and stored > self.high_score:
            self.high_score = stored
        return self.high_score

    def record(self, score: int) -> bool:
        """Adopt *score* as the current score.

        Returns True when it beat the high score, in which case the new high
        score has been saved. The store is consulted first, since other
        trackers may share it.
        """
        if score < 0:
            raise ValueError("Score cannot be negative.")
        self.score = score
        if score <= self.high_score:
            return False
        stored = self.store.load()
        if stored is not None and stored >= score:
            self.high_score = stored
            return False
        self.high_score = score
        self.store.save(score)
        logger.info("New high score: %d.", score)
        return True
