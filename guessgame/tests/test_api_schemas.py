"""
Tests for API Pydantic schemas.

Validates that:
- Engine messages convert to tagged wire models
- Wire messages parse back through the discriminated union
- Request models build engine requests
"""

import pytest
from pydantic import TypeAdapter, ValidationError


class TestMessageConversion:
    """Tests for message_to_schema."""

    def test_nope_try_again_wire_format(self):
        from guessgame.api.schemas import message_to_schema
        from guessgame.engine_core.messages import NopeTryAgain, Hint

        data = message_to_schema(NopeTryAgain(3, "Bo", 9, Hint.LOWER)).model_dump(mode="json")

        assert data == {
            "type": "nope_try_again",
            "game_id": 3,
            "next_player_name": "Bo",
            "incorrect_value": 9,
            "hint": "lower",
        }

    def test_not_ready_wire_format(self):
        from guessgame.api.schemas import message_to_schema
        from guessgame.engine_core.messages import NotReady

        data = message_to_schema(NotReady(1, still_waiting_for_players=2)).model_dump()

        assert data["type"] == "not_ready"
        assert data["still_waiting_for_players"] == 2

    def test_every_message_type_converts(self):
        from guessgame.api.schemas import message_to_schema
        from guessgame.engine_core import messages

        samples = [
            messages.NotReady(1, 1),
            messages.Ready(1),
            messages.YourTurn(1, "Bo"),
            messages.NotYourTurn(1, "Fee"),
            messages.GameInProgress(1),
            messages.Won(1, "Bo", 4, 2),
            messages.Lose(1, "Bo", 4, 2),
            messages.NopeTryAgain(1, "Fee", 2, messages.Hint.HIGHER),
            messages.GameOver(1, "Bo", 4, 2),
        ]
        types = [message_to_schema(m).type for m in samples]

        assert types == [
            "not_ready", "ready", "your_turn", "not_your_turn", "game_in_progress",
            "won", "lose", "nope_try_again", "game_over",
        ]

    def test_unknown_message_rejected(self):
        from guessgame.api.schemas import message_to_schema
        from guessgame.engine_core.messages import GameMessage

        with pytest.raises(TypeError):
            message_to_schema(GameMessage(1))

    def test_discriminated_union_parses(self):
        from guessgame.api.schemas import GameMessageModel, GameOverMessage

        adapter = TypeAdapter(GameMessageModel)
        parsed = adapter.validate_python({
            "type": "game_over",
            "game_id": 7,
            "winning_player_name": "Bo",
            "winning_guess": 5,
            "guess_count": 3,
        })

        assert isinstance(parsed, GameOverMessage)
        assert parsed.guess_count == 3


class TestRequestSchemas:
    """Tests for request models."""

    def test_guess_request_to_engine(self):
        from guessgame.api.schemas import GuessRequest
        from guessgame.engine_core.messages import Guess

        request = GuessRequest(player_name="Bo", value=12)
        assert request.to_request() == Guess("Bo", 12)

    def test_introduce_request_to_engine(self):
        from guessgame.api.schemas import IntroduceRequest
        from guessgame.engine_core.messages import Introduce

        assert IntroduceRequest(player_name="").to_request() == Introduce("")

    def test_guess_requires_integer(self):
        from guessgame.api.schemas import GuessRequest

        with pytest.raises(ValidationError):
            GuessRequest(player_name="Bo", value="five")

    def test_error_response_schema(self):
        from guessgame.api.schemas import ErrorResponse, ErrorCode

        data = ErrorResponse(
            error="Session 4 not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
        ).model_dump(mode="json")

        assert data["error_code"] == "SESSION_NOT_FOUND"
        assert data["api_version"] == "v1"
