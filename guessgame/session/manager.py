"""
Session Manager - Creates and manages game sessions.

LIFECYCLE:
1. Host creates a session -> game ID allocated, secret number picked
2. Players' requests are sent to the session one at a time
3. Each request returns its responses to the caller only
4. Host ends the session -> removed from memory

RULES:
- In-memory only, nothing is persisted
- A session never ends itself; reaching Over just parks it
- Requests for one session are serialized by the session's own lock
- Sessions share nothing but the ID allocator
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import threading
import time

from ..engine_core.ids import IdAllocator
from ..engine_core.secret import SecretNumberGenerator
from ..engine_core.state import GameState, GamePhase
from ..engine_core.messages import GameRequest, GameMessage
from ..engine_core.reducer import Reducer, TransitionResult

logger = logging.getLogger(__name__)


class SessionNotFoundError(KeyError):
    """No session with the given ID is registered."""

    def __init__(self, session_id: int):
        super().__init__(session_id)
        self.session_id = session_id

    def __str__(self) -> str:
        return f"Session {self.session_id} not found"


@dataclass
class Session:
    """
    One guessing game.

    Contains:
    - The current game state
    - The lock that makes it a single-request-at-a-time mailbox
    - Session metadata

    The game ID doubles as the session ID.
    """
    session_id: int
    game_state: GameState
    created_at: float
    last_activity: float = 0.0
    active: bool = True

    reducer: Reducer = field(default_factory=Reducer, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def phase(self) -> GamePhase:
        return self.game_state.phase

    def is_active(self) -> bool:
        """Check if the session has not been ended."""
        return self.active

    def close(self) -> None:
        """Stop accepting requests. Waits for a request in flight to finish."""
        with self._lock:
            self.active = False

    def exchange(self, request: GameRequest) -> TransitionResult:
        """
        Apply one request and return the whole transition.

        Concurrent callers are served one at a time; each sees the
        state left by the previous request. Raises SessionNotFoundError
        once the session has been closed.
        """
        with self._lock:
            if not self.active:
                raise SessionNotFoundError(self.session_id)
            result = self.reducer.apply(self.game_state, request)
            self.game_state = result.new_state
            self.last_activity = time.time()

        logger.debug("Session %d: %r -> %r", self.session_id, request, result.responses)
        return result

    def send(self, request: GameRequest) -> list[GameMessage]:
        """Apply one request and return the responses for its sender."""
        return list(self.exchange(request).responses)


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions (ID + secret number)
    - Route requests to sessions
    - Release sessions when the host asks

    No persistence - sessions are in-memory only.
    """

    def __init__(
        self,
        id_allocator: IdAllocator | None = None,
        secret_generator: SecretNumberGenerator | None = None,
    ):
        self.id_allocator = id_allocator or IdAllocator()
        self.secret_generator = secret_generator or SecretNumberGenerator()
        self._sessions: dict[int, Session] = {}
        self._lock = threading.Lock()

    def create_session(self) -> Session:
        """
        Create a new game session in the NEW_GAME phase.

        If the secret number cannot be generated, the error propagates
        and nothing is registered.
        """
        try:
            secret_number = self.secret_generator.generate()
        except Exception:
            logger.exception("Could not generate a secret number; no session created")
            raise

        session_id = self.id_allocator.next_id()
        now = time.time()
        session = Session(
            session_id=session_id,
            game_state=GameState.new(session_id, secret_number),
            created_at=now,
            last_activity=now,
        )

        with self._lock:
            self._sessions[session_id] = session

        logger.info("Session %d created", session_id)
        logger.debug("Session %d secret number: %d", session_id, secret_number)
        return session

    def get_session(self, session_id: int) -> Session | None:
        """Get a session by ID."""
        with self._lock:
            return self._sessions.get(session_id)

    def send(self, session_id: int, request: GameRequest) -> list[GameMessage]:
        """
        Send a request to a session.

        Raises SessionNotFoundError if the session does not exist.
        """
        session = self.get_session(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session.send(request)

    def end_session(self, session_id: int, reason: str = "completed") -> bool:
        """
        End a session and release it.

        Returns False if there was no such session.
        """
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            return False

        session.close()
        logger.info(
            "Session %d ended (%s) in phase %s",
            session_id, reason, session.phase.value,
        )
        return True

    def list_active_sessions(self) -> list[int]:
        """List IDs of registered sessions; ended sessions are unregistered."""
        with self._lock:
            return list(self._sessions)

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> list[int]:
        """
        End sessions that have seen no requests for max_age_seconds.

        Never called by the engine itself; the host decides when.
        """
        current_time = time.time()
        with self._lock:
            to_remove = [
                sid for sid, session in self._sessions.items()
                if current_time - session.last_activity > max_age_seconds
            ]

        for session_id in to_remove:
            self.end_session(session_id, reason="stale")
        return to_remove
