"""
Pydantic Schemas for API - JSON encoding of the game vocabulary.

These models define the exact contract between HTTP clients and the engine.
Every game message is a JSON object with a `type` discriminator:

    {"type": "nope_try_again", "game_id": 3, "next_player_name": "Bo",
     "incorrect_value": 9, "hint": "lower"}

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has been ended
- VALIDATION_ERROR: Request body could not be parsed
- INTERNAL_ERROR: Session could not be created
"""

from dataclasses import asdict
from enum import Enum
from typing import Annotated, Literal, Optional, Union, Any
from pydantic import BaseModel, Field

from ..engine_core import messages
from ..engine_core.state import GamePhase


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values (one per game phase)."""
    NEW_GAME = "new_game"
    WAITING_FOR_SECOND_PLAYER = "waiting_for_second_player"
    PLAYING = "playing"
    OVER = "over"

    @classmethod
    def from_phase(cls, phase: GamePhase) -> "SessionStatus":
        return cls(phase.value)


class HintValue(str, Enum):
    HIGHER = "higher"
    LOWER = "lower"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Request Models
# =============================================================================

class IntroduceRequest(BaseModel):
    """Request to join a game."""
    player_name: str = Field(..., description="Name of the joining player")

    def to_request(self) -> messages.Introduce:
        return messages.Introduce(player_name=self.player_name)


class GuessRequest(BaseModel):
    """Request to guess the secret number. Any integer is accepted."""
    player_name: str = Field(..., description="Name of the guessing player")
    value: int = Field(..., description="The guessed number")

    def to_request(self) -> messages.Guess:
        return messages.Guess(player_name=self.player_name, value=self.value)


# =============================================================================
# Game Messages
# =============================================================================

class NotReadyMessage(BaseModel):
    type: Literal["not_ready"] = "not_ready"
    game_id: int
    still_waiting_for_players: int


class ReadyMessage(BaseModel):
    type: Literal["ready"] = "ready"
    game_id: int


class YourTurnMessage(BaseModel):
    type: Literal["your_turn"] = "your_turn"
    game_id: int
    player_name: str


class NotYourTurnMessage(BaseModel):
    type: Literal["not_your_turn"] = "not_your_turn"
    game_id: int
    other_player_name: str


class GameInProgressMessage(BaseModel):
    type: Literal["game_in_progress"] = "game_in_progress"
    game_id: int


class WonMessage(BaseModel):
    type: Literal["won"] = "won"
    game_id: int
    winning_player_name: str
    winning_guess: int
    guess_count: int


class LoseMessage(BaseModel):
    """Reserved; the engine never sends it."""
    type: Literal["lose"] = "lose"
    game_id: int
    winning_player_name: str
    winning_guess: int
    guess_count: int


class NopeTryAgainMessage(BaseModel):
    type: Literal["nope_try_again"] = "nope_try_again"
    game_id: int
    next_player_name: str
    incorrect_value: int
    hint: HintValue


class GameOverMessage(BaseModel):
    type: Literal["game_over"] = "game_over"
    game_id: int
    winning_player_name: str
    winning_guess: int
    guess_count: int


GameMessageModel = Annotated[
    Union[
        NotReadyMessage,
        ReadyMessage,
        YourTurnMessage,
        NotYourTurnMessage,
        GameInProgressMessage,
        WonMessage,
        LoseMessage,
        NopeTryAgainMessage,
        GameOverMessage,
    ],
    Field(discriminator="type"),
]

_MESSAGE_MODELS: dict[type, type[BaseModel]] = {
    messages.NotReady: NotReadyMessage,
    messages.Ready: ReadyMessage,
    messages.YourTurn: YourTurnMessage,
    messages.NotYourTurn: NotYourTurnMessage,
    messages.GameInProgress: GameInProgressMessage,
    messages.Won: WonMessage,
    messages.Lose: LoseMessage,
    messages.NopeTryAgain: NopeTryAgainMessage,
    messages.GameOver: GameOverMessage,
}


def message_to_schema(message: messages.GameMessage) -> BaseModel:
    """Convert an engine message to its wire model."""
    model = _MESSAGE_MODELS.get(type(message))
    if model is None:
        raise TypeError(f"No wire model for message type: {type(message).__name__}")

    fields: dict[str, Any] = asdict(message)
    if "hint" in fields:
        fields["hint"] = HintValue(message.hint.value)
    return model(**fields)


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class SessionResponse(BaseModel):
    """
    Response containing session information.

    The secret number is never included.
    """
    session_id: int
    status: SessionStatus
    players: list[str] = Field(default_factory=list)
    players_missing: int = 2
    current_turn_player: Optional[str] = None
    guess_count: int = 0
    winning_player_name: Optional[str] = None
    created_at: float = 0.0
    api_version: str = "v1"


class MessagesResponse(BaseModel):
    """Responses to one request, in the order the game produced them."""
    session_id: int
    status: SessionStatus
    messages: list[GameMessageModel] = Field(default_factory=list)
    api_version: str = "v1"


class SessionListResponse(BaseModel):
    """Response listing active sessions."""
    sessions: list[int]
    count: int


class EndSessionResponse(BaseModel):
    """Response after ending a session."""
    success: bool
    session_id: int


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
