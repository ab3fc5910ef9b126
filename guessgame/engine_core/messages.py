"""
Message Protocol - Requests to a game and responses from it.

Requests:
1. Introduce - a player joins the game
2. Guess - a player tries to find the secret number

Responses all carry the game ID, so a caller can multiplex
several games over one channel.

All messages are immutable values compared by their fields.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union


class Hint(Enum):
    """Direction in which the next guess should move."""
    HIGHER = "higher"
    LOWER = "lower"


# =============================================================================
# Requests
# =============================================================================

@dataclass(frozen=True)
class GameRequest:
    """Base class for requests to a game."""
    player_name: str


@dataclass(frozen=True)
class Introduce(GameRequest):
    """Introduce a player to the game."""


@dataclass(frozen=True)
class Guess(GameRequest):
    """Attempt to guess the secret number."""
    value: int


Request = Union[Introduce, Guess]


# =============================================================================
# Responses
# =============================================================================

@dataclass(frozen=True)
class GameMessage:
    """Base class for responses from a game."""
    game_id: int


@dataclass(frozen=True)
class NotReady(GameMessage):
    """The game is still waiting for players to join."""
    still_waiting_for_players: int


@dataclass(frozen=True)
class Ready(GameMessage):
    """Both players have joined."""


@dataclass(frozen=True)
class YourTurn(GameMessage):
    """It is the named player's turn to guess."""
    player_name: str


@dataclass(frozen=True)
class NotYourTurn(GameMessage):
    """The guess was out of turn; the named (other) player is up."""
    other_player_name: str


@dataclass(frozen=True)
class GameInProgress(GameMessage):
    """Players cannot join once the game has started."""


@dataclass(frozen=True)
class Won(GameMessage):
    """The sender found the secret number."""
    winning_player_name: str
    winning_guess: int
    guess_count: int


@dataclass(frozen=True)
class Lose(GameMessage):
    """
    The sender lost the game.

    Part of the vocabulary but never produced by the game.
    """
    winning_player_name: str
    winning_guess: int
    guess_count: int


@dataclass(frozen=True)
class NopeTryAgain(GameMessage):
    """
    The guess was wrong.

    `next_player_name` is whose turn it is now; that player is not
    notified and has to ask (or be told by the host).
    """
    next_player_name: str
    incorrect_value: int
    hint: Hint


@dataclass(frozen=True)
class GameOver(GameMessage):
    """The game has been won; nothing more can happen."""
    winning_player_name: str
    winning_guess: int
    guess_count: int
