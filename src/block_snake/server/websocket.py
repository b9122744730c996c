"""WebSocket handler for real-time play."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from block_snake.errors import PreconditionError
from block_snake.server.manager import SessionManager
from block_snake.session import GameSession
from block_snake.snake import Direction

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> SessionManager:
    return ws.app.state.session_manager


def _parse_direction(msg: dict) -> Direction | None:
    key = msg.get("key")
    if isinstance(key, str):
        return Direction.from_key(key)
    name = msg.get("direction")
    if isinstance(name, str):
        try:
            return Direction.from_name(name)
        except ValueError:
            return None
    return None


async def _dispatch(session: GameSession, msg: dict) -> None:
    """Apply one client message to the session."""
    command = msg.get("command")
    if command == "start":
        await session.start()
    elif command == "restart":
        await session.restart()
    else:
        direction = _parse_direction(msg)
        if direction is not None:
            await session.set_direction(direction)


@ws_router.websocket("/play")
async def play(websocket: WebSocket) -> None:
    """Player WebSocket: send keys and commands, receive a frame per timer event."""
    manager = _get_manager(websocket)
    await websocket.accept()

    async def send_frame(frame: dict) -> None:
        if websocket.client_state != WebSocketState.CONNECTED:
            return
        try:
            await websocket.send_text(json.dumps(frame, separators=(",", ":")))
        except Exception:
            logger.warning("Failed sending frame to a closed socket.")

    session_id, session = manager.create_session(on_frame=send_frame)
    logger.info("Player connected to session %s.", session_id)

    # Send the idle frame so the client can draw the board immediately.
    await send_frame(session.frame())

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue
            try:
                await _dispatch(session, msg)
            except PreconditionError as exc:
                logger.debug("Ignored message %r: %s", msg, exc)
    except WebSocketDisconnect:
        logger.info("Player disconnected from session %s.", session_id)
    finally:
        await manager.close_session(session_id)
