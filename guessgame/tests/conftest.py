"""
Pytest fixtures for Guessgame tests.
"""

import pytest

from ..engine_core.ids import IdAllocator
from ..engine_core.secret import SecretNumberGenerator
from ..engine_core.state import GameState, GamePhase
from ..engine_core.messages import Introduce
from ..engine_core.reducer import apply_request
from ..session import SessionManager

SECRET = 5
PLAYER_1 = "Bo Diddly"
PLAYER_2 = "Fee Fifofum"


class FixedRandom:
    """Random source that always picks the same number."""

    def __init__(self, value: int):
        self.value = value

    def randint(self, a: int, b: int) -> int:
        return self.value


@pytest.fixture
def new_game_state() -> GameState:
    """A freshly created game with secret 5."""
    return GameState.new(game_id=1, secret_number=SECRET)


@pytest.fixture
def one_player_state(new_game_state: GameState) -> GameState:
    """Game after the first player joined."""
    return apply_request(new_game_state, Introduce(PLAYER_1)).new_state


@pytest.fixture
def playing_state(one_player_state: GameState) -> GameState:
    """Game with both players; PLAYER_2 is up."""
    state = apply_request(one_player_state, Introduce(PLAYER_2)).new_state
    assert state.phase == GamePhase.PLAYING
    return state


@pytest.fixture
def manager() -> SessionManager:
    """Session manager with deterministic IDs and secret 5."""
    return SessionManager(
        id_allocator=IdAllocator(start=100),
        secret_generator=SecretNumberGenerator(rng=FixedRandom(SECRET)),
    )
