"""
API Module - HTTP interface.

Exposes game sessions via REST API. A client:
1. Creates a game session
2. Introduces both players
3. Sends guesses in turn
4. Polls the session to see whose turn it is

All state is session-scoped. No user accounts.
"""

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
    HealthResponse,
    # Enums
    SessionStatus,
    ErrorCode,
    message_to_schema,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "IntroduceRequest",
    "GuessRequest",
    # Responses
    "SessionResponse",
    "MessagesResponse",
    "SessionListResponse",
    "EndSessionResponse",
    "ErrorResponse",
    "HealthResponse",
    # Enums
    "SessionStatus",
    "ErrorCode",
    "message_to_schema",
    # Service
    "APIService",
    "create_app",
]
