"""REST API route handlers."""

from __future__ import annotations

from fastapi import APIRouter, Request

from block_snake.server.models import ConfigResponse, HighScoreResponse

router = APIRouter(tags=["game"])


def _get_manager(request: Request):
    return request.app.state.session_manager


@router.get("/config")
async def get_config(request: Request) -> ConfigResponse:
    """Board size and timer periods used by new sessions."""
    config = _get_manager(request).config
    return ConfigResponse(
        rows=config.rows,
        cols=config.cols,
        spawn=config.spawn,
        initial_direction=config.initial_direction,
        move_interval_ms=config.move_interval_ms,
        clock_interval_ms=config.clock_interval_ms,
    )


@router.get("/high-score")
async def get_high_score(request: Request) -> HighScoreResponse:
    """Best score ever recorded."""
    return HighScoreResponse(high_score=_get_manager(request).high_score)
