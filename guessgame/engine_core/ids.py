"""
Identity Allocator - Issues unique game IDs.

The allocator is the only resource shared across sessions.
It is injected into the session manager rather than living as a module global,
so tests can start it at a known value.
"""

from __future__ import annotations
import threading


class IdAllocator:
    """
    Monotonic, thread-safe counter for game IDs.

    IDs start at `start + 1` and never repeat for the lifetime of the allocator.
    """

    def __init__(self, start: int = 0):
        self._value = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Allocate and return the next game ID."""
        with self._lock:
            self._value += 1
            return self._value

    def peek_next_id(self) -> int:
        """
        Get the next game ID without allocating it.

        Informational only: another thread may allocate it first.
        """
        return self._value + 1

    def last_allocated_id(self) -> int:
        """Get the most recently allocated game ID (the start value if none)."""
        return self._value
