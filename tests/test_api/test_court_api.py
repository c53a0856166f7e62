"""
Tests for the court REST and WebSocket API.

These tests drive the same sequence a drag handler and renderer would:
move, release, advance frames, redraw.
"""

import pytest
from fastapi.testclient import TestClient

from shuttle.api.main import app


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def session_id(client) -> str:
    response = client.post("/api/v1/court/sessions", json={"auto_rotation": True, "rotation_ms": 300})
    assert response.status_code == 201
    return response.json()["session_id"]


def _player(payload: dict, player_id: str) -> dict:
    return next(p for p in payload["players"] if p["id"] == player_id)


class TestAppInfo:
    """Root and health endpoints."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["name"] == "Shuttle API"

    def test_health(self, client, session_id):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["active_sessions"] >= 1


class TestSessions:
    """Session lifecycle endpoints."""

    def test_create_without_body(self, client):
        response = client.post("/api/v1/court/sessions")
        assert response.status_code == 201
        data = response.json()
        assert [p["id"] for p in data["players"]] == ["A1", "A2", "B1", "B2"]
        assert data["is_animating"] is False

    def test_get_and_list(self, client, session_id):
        assert client.get(f"/api/v1/court/sessions/{session_id}").status_code == 200
        assert session_id in client.get("/api/v1/court/sessions").json()

    def test_invalid_id(self, client):
        response = client.get("/api/v1/court/sessions/not-a-uuid")
        assert response.status_code == 400

    def test_missing_session(self, client):
        response = client.get("/api/v1/court/sessions/00000000-0000-0000-0000-000000000000")
        assert response.status_code == 404

    def test_delete(self, client, session_id):
        assert client.delete(f"/api/v1/court/sessions/{session_id}").status_code == 204
        assert client.get(f"/api/v1/court/sessions/{session_id}").status_code == 404

    def test_rejects_bad_settings(self, client):
        response = client.post("/api/v1/court/sessions", json={"rotation_ms": -5})
        assert response.status_code == 422


class TestPlayerEndpoints:
    """Move, release and advance."""

    def test_move_is_clamped(self, client, session_id):
        response = client.put(
            f"/api/v1/court/sessions/{session_id}/players/A1/position",
            json={"x": 300.0, "y": 0.0},
        )
        assert response.status_code == 200
        assert _player(response.json(), "A1")["y"] == 690.0

    def test_unknown_player(self, client, session_id):
        response = client.put(
            f"/api/v1/court/sessions/{session_id}/players/C3/position",
            json={"x": 0.0, "y": 0.0},
        )
        assert response.status_code == 404

    def test_drag_end_and_advance(self, client, session_id):
        base = f"/api/v1/court/sessions/{session_id}"
        client.put(f"{base}/players/A1/position", json={"x": 150.0, "y": 1250.0})

        response = client.post(f"{base}/players/A1/drag-end")
        assert response.status_code == 200
        data = response.json()
        assert data["rotation"]["state"] == "attack"
        assert data["rotation"]["target"]["y"] == 920.0
        assert data["session"]["is_animating"] is True

        for _ in range(3):
            state = client.post(f"{base}/advance", json={"elapsed_ms": 100}).json()

        assert state["is_animating"] is False
        assert _player(state, "A2")["y"] == 920.0

    def test_drag_end_reports_raw_and_clamped_target(self, client, session_id):
        """A centered defender splits 260 left; the clamp then pulls x in to 90."""
        base = f"/api/v1/court/sessions/{session_id}"
        client.put(f"{base}/players/A1/position", json={"x": 305.0, "y": 1005.0})

        rotation = client.post(f"{base}/players/A1/drag-end").json()["rotation"]

        assert rotation["state"] == "defense"
        assert rotation["raw_target"] == {"x": 45.0, "y": 1005.0}
        assert rotation["target"] == {"x": 90.0, "y": 1005.0}

    def test_drag_end_team_b(self, client, session_id):
        response = client.post(f"/api/v1/court/sessions/{session_id}/players/B1/drag-end")
        assert response.status_code == 200
        assert response.json()["rotation"] is None

    def test_auto_rotation_toggle(self, client, session_id):
        base = f"/api/v1/court/sessions/{session_id}"
        response = client.put(f"{base}/auto-rotation", json={"enabled": False})
        assert response.json()["auto_rotation"] is False

        response = client.post(f"{base}/players/A1/drag-end")
        assert response.json()["rotation"] is None

    def test_reset(self, client, session_id):
        base = f"/api/v1/court/sessions/{session_id}"
        client.put(f"{base}/players/A1/position", json={"x": 150.0, "y": 1250.0})
        data = client.post(f"{base}/reset").json()
        assert _player(data, "A1")["x"] == 205.0


class TestFieldEndpoint:
    """Heatmap endpoint."""

    def test_field(self, client, session_id):
        response = client.get(f"/api/v1/court/sessions/{session_id}/field")
        assert response.status_code == 200
        data = response.json()
        assert data["team"] == "A"
        assert data["furthest_point"] == {"x": 30.0, "y": 700.0}
        assert all(cell["alpha"] > 0.05 for cell in data["cells"])

    def test_field_idempotent(self, client, session_id):
        url = f"/api/v1/court/sessions/{session_id}/field"
        assert client.get(url).json() == client.get(url).json()


class TestWebSocket:
    """Live court updates."""

    def test_invalid_session(self, client):
        with client.websocket_connect("/ws/court/not-a-uuid") as ws:
            message = ws.receive_json()
        assert message["type"] == "error"
        assert message["code"] == "INVALID_SESSION_ID"

    def test_sync_and_move(self, client, session_id):
        with client.websocket_connect(f"/ws/court/{session_id}") as ws:
            initial = ws.receive_json()
            assert initial["type"] == "state_sync"
            assert initial["payload"]["field"]["furthest_point"] is not None

            ws.send_json({"type": "move_player", "player_id": "B1", "x": 300.0, "y": 2000.0})
            moved = ws.receive_json()
            assert _player(moved["payload"], "B1")["y"] == 650.0

            ws.send_json({"type": "move_player", "player_id": "Q1", "x": 0.0, "y": 0.0})
            assert ws.receive_json()["code"] == "PLAYER_NOT_FOUND"

            ws.send_json({"type": "move_player", "player_id": "A1"})
            assert ws.receive_json()["code"] == "INVALID_MESSAGE"

            ws.send_text("{not json")
            assert ws.receive_json()["code"] == "INVALID_JSON"

    def test_non_object_messages_rejected(self, client, session_id):
        """Valid JSON that is not an object gets an error and the socket stays open."""
        with client.websocket_connect(f"/ws/court/{session_id}") as ws:
            ws.receive_json()

            for text in ("[1, 2]", "5", '"x"', "null"):
                ws.send_text(text)
                reply = ws.receive_json()
                assert reply["type"] == "error"
                assert reply["code"] == "INVALID_MESSAGE"

            ws.send_json({"type": "drag_end", "player_id": "Z9"})
            assert ws.receive_json()["code"] == "PLAYER_NOT_FOUND"

            ws.send_json({"type": "request_sync"})
            assert ws.receive_json()["type"] == "state_sync"

    def test_unknown_message_type(self, client, session_id):
        with client.websocket_connect(f"/ws/court/{session_id}") as ws:
            ws.receive_json()
            ws.send_json({"type": "teleport"})
            assert ws.receive_json()["code"] == "UNKNOWN_MESSAGE"

    def test_drag_end_streams_frames(self, client):
        session_id = client.post(
            "/api/v1/court/sessions",
            json={"auto_rotation": True, "rotation_ms": 40, "frame_ms": 10},
        ).json()["session_id"]

        with client.websocket_connect(f"/ws/court/{session_id}") as ws:
            ws.receive_json()
            ws.send_json({"type": "move_player", "player_id": "A1", "x": 150.0, "y": 1250.0})
            ws.receive_json()
            ws.send_json({"type": "drag_end", "player_id": "A1"})

            types = []
            for _ in range(20):
                message = ws.receive_json()
                types.append(message["type"])
                if message["type"] == "animation_complete":
                    break

        assert types[0] == "state_sync"
        assert "frame_update" in types
        assert types[-1] == "animation_complete"
        assert _player(message["payload"], "A2")["y"] == 920.0
