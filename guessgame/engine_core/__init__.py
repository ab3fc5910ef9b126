"""
Engine Core - Guessing game state machine.

The engine is the runtime that:
1. Allocates game IDs
2. Picks the secret number
3. Holds GameState
4. Applies requests via the reducer
"""

from .ids import IdAllocator
from .secret import SecretNumberGenerator, MAX_SECRET_NUMBER
from .state import GameState, GameData, GamePhase
from .messages import (
    Hint,
    GameRequest,
    Introduce,
    Guess,
    GameMessage,
    NotReady,
    Ready,
    YourTurn,
    NotYourTurn,
    GameInProgress,
    Won,
    Lose,
    NopeTryAgain,
    GameOver,
)
from .reducer import Reducer, TransitionResult, apply_request, compute_hint

__all__ = [
    "IdAllocator",
    "SecretNumberGenerator",
    "MAX_SECRET_NUMBER",
    "GameState",
    "GameData",
    "GamePhase",
    "Hint",
    "GameRequest",
    "Introduce",
    "Guess",
    "GameMessage",
    "NotReady",
    "Ready",
    "YourTurn",
    "NotYourTurn",
    "GameInProgress",
    "Won",
    "Lose",
    "NopeTryAgain",
    "GameOver",
    "Reducer",
    "TransitionResult",
    "apply_request",
    "compute_hint",
]
