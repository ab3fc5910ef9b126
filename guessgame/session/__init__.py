"""
Session Module - Manages ephemeral game sessions.

A session represents one guessing game:
- Created when the host asks for a new game
- Holds the current game state
- Processes requests one at a time
- Released when the host ends it

Sessions are EPHEMERAL:
- No persistence to database
- Gone on restart
"""

from .manager import SessionManager, Session, SessionNotFoundError

__all__ = [
    "SessionManager",
    "Session",
    "SessionNotFoundError",
]
