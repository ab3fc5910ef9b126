"""
Guessgame - Two-player Number Guessing Engine

A turn-based session engine for a two-player guessing game.
One player pair shares a hidden secret number and takes turns guessing it.
The engine provides:
- Session identity allocation
- Secret number generation
- A pure state machine for registration, turns and hints
- An in-memory session manager and an HTTP host
"""

__version__ = "0.1.0"
