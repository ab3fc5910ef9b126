"""
FastAPI Application - REST API for guessing game sessions.

Endpoints:
    GET    /api/v1/health                       Health check
    POST   /api/v1/sessions                     Create game session
    GET    /api/v1/sessions                     List active sessions
    GET    /api/v1/sessions/{id}                Get session status
    DELETE /api/v1/sessions/{id}                End session
    POST   /api/v1/sessions/{id}/introduce      Join a game
    POST   /api/v1/sessions/{id}/guess          Guess the secret number

Responses to introduce/guess go only to the caller. A player waiting for
their turn polls GET /sessions/{id} to see whose turn it is.

All bodies are JSON with explicit Pydantic schemas.
"""

from typing import Annotated, Optional, Union
import logging
import os

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from .. import __version__
from .service import APIService
from .schemas import (
    # Request models
    IntroduceRequest,
    GuessRequest,
    # Response models
    SessionResponse,
    MessagesResponse,
    SessionListResponse,
    EndSessionResponse,
    ErrorResponse,
    HealthResponse,
    # Enums
    ErrorCode,
)
from ..engine_core.secret import SecretNumberGenerator, MAX_SECRET_NUMBER
from ..session import SessionManager

# Environment configuration
GUESSGAME_ENV = os.getenv("GUESSGAME_ENV", "development")
GUESSGAME_LOG_LEVEL = os.getenv("GUESSGAME_LOG_LEVEL", "INFO")
GUESSGAME_MAX_SECRET = int(os.getenv("GUESSGAME_MAX_SECRET", str(MAX_SECRET_NUMBER)))
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")

logger = logging.getLogger(__name__)


def create_app(service: Optional[APIService] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Guessing Game API",
        description="""
Two-player number guessing game.

## Flow

1. `POST /sessions` creates a game
2. Both players `POST /introduce`; the second one to join goes first
3. Players take turns `POST /guess` until one finds the secret number

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Session does not exist |
| `VALIDATION_ERROR` | Request body is invalid |
| `INTERNAL_ERROR` | Session could not be created |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService(
        session_manager=SessionManager(
            secret_generator=SecretNumberGenerator(max_secret_number=GUESSGAME_MAX_SECRET),
        )
    )
    app.state.api_service = api_service

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Invalid request",
            status_code=422,
            details={"errors": jsonable_encoder(exc.errors())},
        )

    def error_or(response):
        if isinstance(response, ErrorResponse):
            return make_error_response(response.error_code, response.error, status_code=404)
        return response

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        status_code=201,
        responses={500: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Create a new game session",
    )
    async def create_session() -> Union[SessionResponse, JSONResponse]:
        """Create a new game waiting for two players."""
        try:
            return api_service.create_session()
        except Exception as e:
            return make_error_response(
                ErrorCode.INTERNAL_ERROR,
                f"Could not create session: {e}",
                status_code=500,
            )

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List active sessions",
    )
    async def list_sessions() -> SessionListResponse:
        """List all active session IDs."""
        return api_service.list_sessions()

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session status",
    )
    async def get_session(session_id: int) -> Union[SessionResponse, JSONResponse]:
        """Get the current status of a game session."""
        return error_or(api_service.get_session(session_id))

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(
        session_id: int,
        reason: Annotated[str, Query(description="Reason for ending")] = "user_ended",
    ) -> EndSessionResponse:
        """End a game session and release resources."""
        return api_service.end_session(session_id, reason)

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions/{session_id}/introduce",
        response_model=MessagesResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Join a game",
    )
    async def introduce(
        session_id: int,
        body: IntroduceRequest,
    ) -> Union[MessagesResponse, JSONResponse]:
        """
        Introduce a player.

        The first player gets `not_ready`; the second gets `ready`
        followed by `your_turn`.
        """
        return error_or(api_service.introduce(session_id, body))

    @app.post(
        "/api/v1/sessions/{session_id}/guess",
        response_model=MessagesResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Guess the secret number",
    )
    async def guess(
        session_id: int,
        body: GuessRequest,
    ) -> Union[MessagesResponse, JSONResponse]:
        """
        Guess the secret number.

        **Response Body:**
        ```json
        {"session_id": 1, "status": "playing", "messages": [
            {"type": "nope_try_again", "game_id": 1, "next_player_name": "Bo",
             "incorrect_value": 9, "hint": "lower"}
        ]}
        ```
        """
        return error_or(api_service.guess(session_id, body))

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="guessgame",
            version=__version__,
        )

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Guessing Game API",
            "version": __version__,
            "environment": GUESSGAME_ENV,
            "docs": "/api/docs",
            "health": "/api/v1/health",
        }

    logger.info("Guessing game API created (env=%s)", GUESSGAME_ENV)
    return app
