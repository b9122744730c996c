"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from block_snake.config import GameConfig
from block_snake.score import HighScoreStore
from block_snake.server.manager import SessionManager
from block_snake.server.routes import router
from block_snake.server.websocket import ws_router


def create_app(
    config: GameConfig | None = None,
    store: HighScoreStore | None = None,
) -> FastAPI:
    """Build and return the FastAPI application."""

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        yield
        await app.state.session_manager.cleanup()

    app = FastAPI(
        title="Block Snake", version="0.1.0", lifespan=_lifespan,
    )
    app.state.session_manager = SessionManager(config=config, store=store)
    app.include_router(router)
    app.include_router(ws_router)
    return app
