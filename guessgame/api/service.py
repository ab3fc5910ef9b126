"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine requests
2. Manages sessions
3. Formats engine messages for the wire

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .schemas import (
    # Requests
    IntroduceRequest,
    GuessRequest,
    # Responses
    SessionResponse,
    MessagesResponse,
    SessionListResponse,
    EndSessionResponse,
    ErrorResponse,
    # Enums
    SessionStatus,
    ErrorCode,
    message_to_schema,
)
from ..engine_core.messages import GameRequest
from ..engine_core.state import GamePhase
from ..session import SessionManager, Session, SessionNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        session = service.create_session()
        service.introduce(session.session_id, IntroduceRequest(player_name="Bo"))
        service.guess(session.session_id, GuessRequest(player_name="Bo", value=4))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_session(self) -> SessionResponse:
        """
        Create a new game session.
        """
        session = self.session_manager.create_session()
        return self._session_to_response(session)

    def get_session(self, session_id: int) -> SessionResponse | ErrorResponse:
        """
        Get session status.
        """
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return self._session_to_response(session)

    def introduce(
        self, session_id: int, request: IntroduceRequest
    ) -> MessagesResponse | ErrorResponse:
        """Introduce a player to a session."""
        return self._send(session_id, request.to_request())

    def guess(self, session_id: int, request: GuessRequest) -> MessagesResponse | ErrorResponse:
        """Submit a guess to a session."""
        return self._send(session_id, request.to_request())

    def end_session(self, session_id: int, reason: str = "user_ended") -> EndSessionResponse:
        """End a session."""
        success = self.session_manager.end_session(session_id, reason)
        return EndSessionResponse(success=success, session_id=session_id)

    def list_sessions(self) -> SessionListResponse:
        """List active session IDs."""
        sessions = self.session_manager.list_active_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    # =========================================================================
    # Helpers
    # =========================================================================

    def _send(self, session_id: int, request: GameRequest) -> MessagesResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        try:
            result = session.exchange(request)
        except SessionNotFoundError:
            return self._not_found(session_id)

        return MessagesResponse(
            session_id=session_id,
            status=SessionStatus.from_phase(result.new_state.phase),
            messages=[message_to_schema(m) for m in result.responses],
        )

    def _not_found(self, session_id: int) -> ErrorResponse:
        logger.debug("Session %s not found", session_id)
        return ErrorResponse(
            error=f"Session {session_id} not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
        )

    def _session_to_response(self, session: Session) -> SessionResponse:
        """Convert a session to its API response."""
        state = session.game_state
        data = state.data
        return SessionResponse(
            session_id=session.session_id,
            status=SessionStatus.from_phase(state.phase),
            players=list(data.player_names),
            players_missing=data.players_missing,
            current_turn_player=(
                data.current_player_name if state.phase == GamePhase.PLAYING else None
            ),
            guess_count=data.guess_count,
            winning_player_name=data.winning_player_name,
            created_at=session.created_at,
        )
