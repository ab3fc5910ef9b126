"""
Game State - Phase plus immutable game data.

Design principles:
- Immutable: every change returns a new state
- The phase is the tag; the data record holds everything else
- Only the reducer builds new states from requests
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum

PLAYERS_PER_GAME = 2


class GamePhase(Enum):
    """Phases of a guessing game."""
    NEW_GAME = "new_game"
    WAITING_FOR_SECOND_PLAYER = "waiting_for_second_player"
    PLAYING = "playing"
    OVER = "over"


@dataclass(frozen=True)
class GameData:
    """
    Everything a game knows besides its phase.

    `current_player_idx` indexes `player_names` and only means something
    once both players have joined.
    """
    game_id: int
    secret_number: int
    player_names: tuple[str, ...] = field(default_factory=tuple)
    current_player_idx: int = 0
    guess_count: int = 0
    winning_player_name: str | None = None

    @property
    def players_missing(self) -> int:
        return PLAYERS_PER_GAME - len(self.player_names)

    @property
    def current_player_name(self) -> str | None:
        """Name of the player whose turn is next, if the game has started."""
        if len(self.player_names) < PLAYERS_PER_GAME:
            return None
        return self.player_names[self.current_player_idx]

    @property
    def next_player_idx(self) -> int:
        return (self.current_player_idx + 1) % len(self.player_names)

    def with_player(self, player_name: str) -> GameData:
        """Return new data with a player appended."""
        return replace(self, player_names=self.player_names + (player_name,))

    def _copy_with(self, **kwargs) -> GameData:
        return replace(self, **kwargs)


@dataclass(frozen=True)
class GameState:
    """Complete state of one game at a point in time."""
    phase: GamePhase
    data: GameData

    @classmethod
    def new(cls, game_id: int, secret_number: int) -> GameState:
        """Initial state of a freshly created game."""
        return cls(
            phase=GamePhase.NEW_GAME,
            data=GameData(game_id=game_id, secret_number=secret_number),
        )

    @property
    def game_id(self) -> int:
        return self.data.game_id

    @property
    def is_over(self) -> bool:
        return self.phase == GamePhase.OVER

    def goto(self, phase: GamePhase, data: GameData | None = None) -> GameState:
        """Return a state in `phase`, optionally with new data."""
        return GameState(phase=phase, data=data if data is not None else self.data)

    def using(self, data: GameData) -> GameState:
        """Return a state in the same phase with new data."""
        return GameState(phase=self.phase, data=data)
