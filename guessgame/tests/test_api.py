"""
Tests for API layer.

Tests:
- API service methods
- Session lifecycle via API
- HTTP endpoints
- Error handling
"""

import pytest
from fastapi.testclient import TestClient

from ..api.schemas import (
    IntroduceRequest,
    GuessRequest,
    SessionStatus,
    ErrorCode,
    ErrorResponse,
)
from ..api.service import APIService
from ..api.app import create_app
from ..engine_core.messages import Introduce
from ..engine_core.state import GamePhase
from .conftest import SECRET


class TestAPIService:
    """Tests for APIService."""

    @pytest.fixture
    def service(self, manager):
        """Create a fresh API service with secret 5."""
        return APIService(session_manager=manager)

    def test_create_session(self, service):
        response = service.create_session()

        assert response.session_id == 101
        assert response.status == SessionStatus.NEW_GAME
        assert response.players_missing == 2
        assert "secret_number" not in response.model_dump()

    def test_get_nonexistent_session(self, service):
        response = service.get_session(12345)

        assert isinstance(response, ErrorResponse)
        assert response.error_code == ErrorCode.SESSION_NOT_FOUND

    def test_introduce_and_turn(self, service):
        sid = service.create_session().session_id

        first = service.introduce(sid, IntroduceRequest(player_name="P1"))
        second = service.introduce(sid, IntroduceRequest(player_name="P2"))

        assert [m.type for m in first.messages] == ["not_ready"]
        assert [m.type for m in second.messages] == ["ready", "your_turn"]
        assert second.status == SessionStatus.PLAYING

        status = service.get_session(sid)
        assert status.current_turn_player == "P2"
        assert status.players == ["P1", "P2"]

    def test_win_then_game_over(self, service):
        sid = service.create_session().session_id
        service.introduce(sid, IntroduceRequest(player_name="P1"))
        service.introduce(sid, IntroduceRequest(player_name="P2"))

        won = service.guess(sid, GuessRequest(player_name="P2", value=SECRET))
        over = service.guess(sid, GuessRequest(player_name="P1", value=1))

        assert won.messages[0].type == "won"
        assert won.status == SessionStatus.OVER
        assert over.messages[0].type == "game_over"
        assert over.messages[0].winning_player_name == "P2"

        status = service.get_session(sid)
        assert status.winning_player_name == "P2"
        assert status.current_turn_player is None

    def test_guess_unknown_session(self, service):
        response = service.guess(5, GuessRequest(player_name="P1", value=1))
        assert response.error_code == ErrorCode.SESSION_NOT_FOUND

    def test_status_matches_own_transition(self, service, manager):
        """Status reflects this request's transition, not a later one."""
        sid = service.create_session().session_id
        session = manager.get_session(sid)
        original_exchange = session.exchange

        def exchange_then_interleave(request):
            result = original_exchange(request)
            original_exchange(Introduce("P2"))
            return result

        session.exchange = exchange_then_interleave
        response = service.introduce(sid, IntroduceRequest(player_name="P1"))

        assert session.phase == GamePhase.PLAYING
        assert [m.type for m in response.messages] == ["not_ready"]
        assert response.status == SessionStatus.WAITING_FOR_SECOND_PLAYER

    def test_closed_session_not_found(self, service, manager):
        sid = service.create_session().session_id
        manager.get_session(sid).close()

        response = service.guess(sid, GuessRequest(player_name="P1", value=1))

        assert response.error_code == ErrorCode.SESSION_NOT_FOUND

    def test_end_and_list_sessions(self, service):
        ids = [service.create_session().session_id for _ in range(3)]

        assert service.list_sessions().count == 3
        assert service.end_session(ids[0]).success
        assert not service.end_session(ids[0]).success
        assert service.list_sessions().sessions == ids[1:]


class TestHTTPApp:
    """Tests for the FastAPI endpoints."""

    @pytest.fixture
    def client(self, manager):
        app = create_app(APIService(session_manager=manager))
        return TestClient(app)

    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_create_and_get_session(self, client):
        created = client.post("/api/v1/sessions")
        assert created.status_code == 201
        sid = created.json()["session_id"]

        response = client.get(f"/api/v1/sessions/{sid}")
        assert response.status_code == 200
        assert response.json()["status"] == "new_game"

    def test_get_missing_session(self, client):
        response = client.get("/api/v1/sessions/999")

        assert response.status_code == 404
        assert response.json()["error_code"] == "SESSION_NOT_FOUND"

    def test_scenario_over_http(self, client):
        sid = client.post("/api/v1/sessions").json()["session_id"]

        def post(path, body):
            response = client.post(f"/api/v1/sessions/{sid}/{path}", json=body)
            assert response.status_code == 200
            return response.json()["messages"]

        assert post("introduce", {"player_name": "P1"}) == [
            {"type": "not_ready", "game_id": sid, "still_waiting_for_players": 1},
        ]
        assert [m["type"] for m in post("introduce", {"player_name": "P2"})] == [
            "ready", "your_turn",
        ]
        assert post("guess", {"player_name": "P2", "value": 9})[0]["hint"] == "lower"
        assert post("guess", {"player_name": "P1", "value": 1})[0]["hint"] == "higher"
        assert post("guess", {"player_name": "P2", "value": 5}) == [
            {
                "type": "won",
                "game_id": sid,
                "winning_player_name": "P2",
                "winning_guess": 5,
                "guess_count": 3,
            },
        ]
        assert post("introduce", {"player_name": "P3"})[0]["type"] == "game_over"

    def test_invalid_guess_body(self, client):
        sid = client.post("/api/v1/sessions").json()["session_id"]

        response = client.post(
            f"/api/v1/sessions/{sid}/guess",
            json={"player_name": "P1", "value": "five"},
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_end_session(self, client):
        sid = client.post("/api/v1/sessions").json()["session_id"]

        response = client.delete(f"/api/v1/sessions/{sid}")
        assert response.json() == {"success": True, "session_id": sid}

        listed = client.get("/api/v1/sessions").json()
        assert listed == {"sessions": [], "count": 0}
