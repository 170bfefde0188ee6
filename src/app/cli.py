from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Callable

from commit_reveal import Commitment, EntropySourceFailure, FairnessEngine, verification_url
from menu import MenuState, render_menu, transition
from protocol import MoveCycleResolver, RoundOutcome, UsageError, parse_moves
from rules_table import format_rules_table

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fair-rps",
        description="Provably fair rock-paper-scissors with any odd number of moves.",
    )
    parser.add_argument("moves", nargs="*", help="Odd number (>= 3) of distinct move names, in cycle order")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("RPS_LOG_LEVEL", "WARNING"),
        help="Logging level for diagnostics on stderr (env: RPS_LOG_LEVEL)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        moves = parse_moves(args.moves)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 2

    resolver = MoveCycleResolver(moves)
    engine = FairnessEngine()
    try:
        play_round(resolver, engine)
    except EntropySourceFailure as exc:
        print(f"Fatal: {exc}", file=sys.stderr)
        return 1
    return 0


def play_round(
    resolver: MoveCycleResolver,
    engine: FairnessEngine,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> RoundOutcome | None:
    """Play one committed round; returns ``None`` if the user exits first."""
    moves = resolver.moves
    commitment = engine.commit(moves)
    write(f"HMAC: {commitment.tag}")

    while True:
        write("\n" + render_menu(moves))
        try:
            choice = read("Enter your move: ")
        except (EOFError, KeyboardInterrupt):
            # Closed input counts as leaving the game.
            choice = "0"

        state, index = transition(choice, len(moves))
        if state is MenuState.EXITED:
            logger.info("round abandoned before reveal")
            return None
        if state is MenuState.SHOWING_HELP:
            write(format_rules_table(moves, resolver.generate_outcome_matrix()))
            continue
        if state is MenuState.RESOLVED and index is not None:
            return _finish_round(resolver, engine, commitment, moves[index], write)
        write("Invalid choice, please try again.")


def _finish_round(
    resolver: MoveCycleResolver,
    engine: FairnessEngine,
    commitment: Commitment,
    user_move: str,
    write: Callable[[str], None],
) -> RoundOutcome:
    result = resolver.resolve_round(user_move, commitment.move)
    reveal = engine.reveal(commitment)
    write(f"Your move: {result.user_move}")
    write(f"Computer move: {reveal.move}")
    write(f"Key: {reveal.key}")
    write(f"Result: {result.outcome}")
    write("Check here:\n" + verification_url(key=reveal.key, move=reveal.move))
    return result


def _configure_logging(level: str) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise SystemExit(f"--log-level must be a logging level name, got {level!r}")
    logging.basicConfig(level=numeric, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


if __name__ == "__main__":
    raise SystemExit(main())
