"""WebSocket integration tests for real-time play."""

from __future__ import annotations

import json

import pytest
from starlette.testclient import TestClient

from block_snake.config import GameConfig
from block_snake.score import InMemoryHighScoreStore
from block_snake.server.app import create_app


def _client(**overrides) -> TestClient:
    params = {"rows": 5, "cols": 5, "move_interval_ms": 20}
    params.update(overrides)
    application = create_app(
        GameConfig(**params), store=InMemoryHighScoreStore(),
    )
    return TestClient(application)


@pytest.fixture()
def tc():
    return _client()


def _receive_until(ws, predicate, limit: int = 60) -> dict:
    for _ in range(limit):
        frame = json.loads(ws.receive_text())
        if predicate(frame):
            return frame
    raise AssertionError("Expected frame never arrived.")


class TestPlayWebSocket:
    def test_connect_receives_idle_frame(self, tc):
        with tc.websocket_connect("/play") as ws:
            frame = json.loads(ws.receive_text())
            assert frame["status"] == "idle"
            assert frame["food"] is None
            assert frame["snake"] == [[1, 3]]
            assert frame["time"] == "00:00"
            assert len(frame["cells"]) == 5

    def test_start_runs_until_game_over(self, tc):
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"command": "start"}))
            running = json.loads(ws.receive_text())
            assert running["status"] == "running"

            final = _receive_until(ws, lambda f: f["game_over"])
            assert final["status"] == "ended"
            assert final["snake"][0] == [4, 3]

    def test_arrow_key_changes_direction(self):
        client = _client(rows=20, cols=20)
        with client.websocket_connect("/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"command": "start"}))
            ws.receive_text()
            ws.send_text(json.dumps({"key": "ArrowRight"}))
            frame = _receive_until(ws, lambda f: f["direction"] == "right")
            assert frame["status"] == "running"

    def test_direction_name_accepted(self):
        client = _client(rows=20, cols=20)
        with client.websocket_connect("/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"command": "start"}))
            ws.receive_text()
            ws.send_text(json.dumps({"direction": "LEFT"}))
            _receive_until(ws, lambda f: f["direction"] == "left")

    def test_restart_after_game_over(self, tc):
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"command": "start"}))
            _receive_until(ws, lambda f: f["game_over"])

            ws.send_text(json.dumps({"command": "restart"}))
            frame = json.loads(ws.receive_text())
            assert frame["status"] == "running"
            assert frame["tick"] == 0
            assert frame["snake"] == [[1, 3]]


class TestInvalidMessages:
    def test_garbage_ignored(self, tc):
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            ws.send_text("not-json")
            ws.send_text("[]")
            ws.send_text("123")
            ws.send_text(json.dumps({"direction": "invalid_dir"}))
            ws.send_text(json.dumps({"key": "Space"}))
            ws.send_text(json.dumps({"command": "jump"}))
            # Illegal in the idle status.
            ws.send_text(json.dumps({"direction": "up"}))
            ws.send_text(json.dumps({"command": "restart"}))

            ws.send_text(json.dumps({"command": "start"}))
            frame = json.loads(ws.receive_text())
            assert frame["status"] == "running"

    def test_second_start_ignored(self):
        client = _client(rows=20, cols=20, move_interval_ms=1000)
        with client.websocket_connect("/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"command": "start"}))
            ws.receive_text()
            ws.send_text(json.dumps({"command": "start"}))
            ws.send_text(json.dumps({"command": "restart"}))
            frame = json.loads(ws.receive_text())
            assert frame["status"] == "running"
            assert frame["tick"] == 0


class TestDisconnect:
    def test_disconnect_closes_session(self, tc):
        manager = tc.app.state.session_manager
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"command": "start"}))
            ws.receive_text()
            assert len(manager) == 1
        assert len(manager) == 0
