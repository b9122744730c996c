"""Registry of live play sessions sharing one high-score store."""

from __future__ import annotations

import asyncio
import logging
import uuid

from block_snake.config import GameConfig
from block_snake.engine import GameEngine
from block_snake.score import (
    HighScoreStore,
    InMemoryHighScoreStore,
    JsonHighScoreStore,
    ScoreTracker,
)
from block_snake.session import FrameListener, GameSession

logger = logging.getLogger(__name__)


class SessionManager:
    """Creates one :class:`GameSession` per connected player."""

    def __init__(
        self,
        config: GameConfig | None = None,
        store: HighScoreStore | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        if store is None:
            store = (
                JsonHighScoreStore(
                    self.config.high_score_path, self.config.high_score_key,
                )
                if self.config.high_score_path
                else InMemoryHighScoreStore()
            )
        self.store = store
        self._sessions: dict[str, GameSession] = {}

    @property
    def high_score(self) -> int:
        value = self.store.load()
        return value if value is not None else 0

    def create_session(
        self, on_frame: FrameListener | None = None,
    ) -> tuple[str, GameSession]:
        """Build a fresh idle session and register it."""
        engine = GameEngine(self.config, scores=ScoreTracker(self.store))
        session = GameSession(engine, on_frame=on_frame)
        session_id = uuid.uuid4().hex[:12]
        self._sessions[session_id] = session
        logger.info("Session %s created.", session_id)
        return session_id, session

    def get_session(self, session_id: str) -> GameSession | None:
        return self._sessions.get(session_id)

    async def close_session(self, session_id: str) -> None:
        """Stop a session's timers and forget it."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return
        await session.stop()
        logger.info("Session %s closed.", session_id)

    def __len__(self) -> int:
        return len(self._sessions)

    async def cleanup(self) -> None:
        """Stop every live session."""
        sessions = list(self._sessions.values())
        self._sessions.clear()
        if sessions:
            await asyncio.gather(
                *(s.stop() for s in sessions), return_exceptions=True,
            )
        logger.info("SessionManager cleanup complete.")
