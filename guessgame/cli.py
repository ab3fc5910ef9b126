"""
Guessgame CLI - Command-line interface for the engine.

Usage:
    guessgame play [--player1 NAME] [--player2 NAME] [--seed N]
        Play a hot-seat game on one terminal
    guessgame serve [--host HOST] [--port PORT]
        Run the HTTP API
"""

import argparse
import random
import sys

from .engine_core.messages import GameMessage, Guess, Introduce, Won, GameOver
from .engine_core.secret import SecretNumberGenerator, MAX_SECRET_NUMBER
from .logging_config import setup_logging
from .session import SessionManager


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Guessgame - Two-player number guessing game",
        prog="guessgame",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: WARNING for play)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a hot-seat game")
    play_parser.add_argument("--player1", default="Player 1", help="Name of the first player")
    play_parser.add_argument("--player2", default="Player 2", help="Name of the second player (goes first)")
    play_parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible secret")
    play_parser.add_argument("--max-secret", type=int, default=MAX_SECRET_NUMBER, help="Largest possible secret")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")

    args = parser.parse_args(argv)

    if args.command == "play":
        setup_logging(args.log_level or "WARNING")
        cmd_play(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args):
    """Play a hot-seat game."""
    rng = random.Random(args.seed) if args.seed is not None else None
    manager = SessionManager(
        secret_generator=SecretNumberGenerator(max_secret_number=args.max_secret, rng=rng),
    )
    print(f"Guess the number between 1 and {args.max_secret}.")
    run_game(manager, args.player1, args.player2)


def run_game(manager, player1, player2, read=None, write=None):
    """
    Drive one game between two players sharing a terminal.

    Returns the final messages of the game (the Won message), or None
    if input ran out first.
    """
    read = read or input
    write = write or print
    session = manager.create_session()
    write(f"Game {session.session_id} created")

    for name in (player1, player2):
        for message in session.send(Introduce(name)):
            write(format_message(message))

    try:
        while not session.game_state.is_over:
            player = session.game_state.data.current_player_name
            try:
                raw = read(f"{player}, your guess: ")
            except EOFError:
                write("")
                return None

            try:
                value = int(raw.strip())
            except ValueError:
                write(f"Not a number: {raw!r}")
                continue

            responses = session.send(Guess(player, value))
            for message in responses:
                write(format_message(message))
    finally:
        manager.end_session(session.session_id)

    return responses


def format_message(message: GameMessage) -> str:
    """Human-readable line for a game message."""
    name = type(message).__name__
    if isinstance(message, (Won, GameOver)):
        return (
            f"[{name}] {message.winning_player_name} found {message.winning_guess} "
            f"in {message.guess_count} guesses"
        )

    details = ", ".join(
        f"{key}={getattr(value, 'value', value)}"
        for key, value in vars(message).items()
        if key != "game_id"
    )
    return f"[{name}] {details}" if details else f"[{name}]"


def cmd_serve(args):
    """Run the HTTP API with uvicorn."""
    import uvicorn
    from .api.app import create_app, GUESSGAME_LOG_LEVEL
    from .logging_config import uvicorn_log_config

    level = args.log_level or GUESSGAME_LOG_LEVEL
    setup_logging(level)
    uvicorn.run(
        create_app(),
        host=args.host,
        port=args.port,
        log_config=uvicorn_log_config(level),
    )


if __name__ == "__main__":
    main()
