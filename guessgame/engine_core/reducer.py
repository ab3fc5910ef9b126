"""
Reducer - Applies requests to game state.

The reducer is the single point of state change.
All transitions go through apply_request().

Design principles:
- Pure function: (state, request) -> (new_state, responses)
- One handler per phase
- Game conditions (not ready, not your turn, game over) are responses, not errors
- Responses are meant for the sender of the request only
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .state import GameState, GamePhase
from .messages import (
    GameRequest, GameMessage, Introduce, Guess, Hint,
    NotReady, Ready, YourTurn, NotYourTurn, GameInProgress,
    Won, NopeTryAgain, GameOver,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransitionResult:
    """
    Result of applying a request.

    Contains the new state and the responses for the sender, in order.
    """
    new_state: GameState
    responses: list[GameMessage] = field(default_factory=list)


class Reducer:
    """
    Reducer applies requests to game state.

    Stateless - all state is in GameState.
    """

    def apply(self, state: GameState, request: GameRequest) -> TransitionResult:
        """
        Apply a request to the game state.

        Raises TypeError for anything that is not an Introduce or a Guess.
        """
        if not isinstance(request, (Introduce, Guess)):
            raise TypeError(f"Unsupported request type: {type(request).__name__}")

        handler = self._get_handler(state.phase)
        result = handler(state, request)

        if result.new_state.phase != state.phase:
            logger.info(
                "Game %d: %s -> %s",
                state.game_id, state.phase.value, result.new_state.phase.value,
            )
        return result

    def _get_handler(self, phase: GamePhase):
        """Get the handler function for a phase."""
        handlers = {
            GamePhase.NEW_GAME: self._handle_new_game,
            GamePhase.WAITING_FOR_SECOND_PLAYER: self._handle_waiting_for_second_player,
            GamePhase.PLAYING: self._handle_playing,
            GamePhase.OVER: self._handle_over,
        }
        return handlers[phase]

    def _handle_new_game(self, state: GameState, request: GameRequest) -> TransitionResult:
        data = state.data
        if isinstance(request, Introduce):
            return TransitionResult(
                new_state=state.goto(
                    GamePhase.WAITING_FOR_SECOND_PLAYER,
                    data.with_player(request.player_name),
                ),
                responses=[NotReady(data.game_id, still_waiting_for_players=1)],
            )

        return TransitionResult(
            new_state=state,
            responses=[NotReady(data.game_id, still_waiting_for_players=2)],
        )

    def _handle_waiting_for_second_player(
        self, state: GameState, request: GameRequest
    ) -> TransitionResult:
        data = state.data
        if isinstance(request, Introduce):
            new_data = data.with_player(request.player_name)
            # The player who joined last goes first
            new_data = new_data._copy_with(current_player_idx=len(new_data.player_names) - 1)
            return TransitionResult(
                new_state=state.goto(GamePhase.PLAYING, new_data),
                responses=[
                    Ready(data.game_id),
                    YourTurn(data.game_id, new_data.current_player_name),
                ],
            )

        return TransitionResult(
            new_state=state,
            responses=[NotReady(data.game_id, still_waiting_for_players=1)],
        )

    def _handle_playing(self, state: GameState, request: GameRequest) -> TransitionResult:
        data = state.data
        if isinstance(request, Introduce):
            return TransitionResult(new_state=state, responses=[GameInProgress(data.game_id)])

        current_player = data.current_player_name
        if request.player_name != current_player:
            logger.debug(
                "Game %d: %r guessed out of turn (current: %r)",
                data.game_id, request.player_name, current_player,
            )
            return TransitionResult(
                new_state=state,
                responses=[NotYourTurn(data.game_id, current_player)],
            )

        guess_count = data.guess_count + 1
        if request.value == data.secret_number:
            logger.info(
                "Game %d: won by %r after %d guesses",
                data.game_id, current_player, guess_count,
            )
            return TransitionResult(
                new_state=state.goto(
                    GamePhase.OVER,
                    data._copy_with(
                        guess_count=guess_count,
                        winning_player_name=current_player,
                    ),
                ),
                responses=[Won(data.game_id, request.player_name, request.value, guess_count)],
            )

        hint = compute_hint(request.value, data.secret_number)
        new_data = data._copy_with(
            current_player_idx=data.next_player_idx,
            guess_count=guess_count,
        )
        return TransitionResult(
            new_state=state.using(new_data),
            responses=[
                NopeTryAgain(
                    data.game_id,
                    next_player_name=new_data.current_player_name,
                    incorrect_value=request.value,
                    hint=hint,
                )
            ],
        )

    def _handle_over(self, state: GameState, request: GameRequest) -> TransitionResult:
        data = state.data
        return TransitionResult(
            new_state=state,
            responses=[
                GameOver(
                    data.game_id,
                    winning_player_name=data.winning_player_name,
                    winning_guess=data.secret_number,
                    guess_count=data.guess_count,
                )
            ],
        )


def compute_hint(value: int, secret_number: int) -> Hint:
    """Hint for an incorrect guess: which way the secret lies."""
    return Hint.LOWER if value > secret_number else Hint.HIGHER


def apply_request(state: GameState, request: GameRequest) -> TransitionResult:
    """Convenience function to apply a request."""
    return Reducer().apply(state, request)
