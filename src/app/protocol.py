from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Literal, Sequence

Outcome = Literal["Win", "Lose", "Draw"]
OutcomeMatrix = list[list[Outcome]]

MIN_MOVES = 3

logger = logging.getLogger(__name__)


class UsageError(ValueError):
    """Raised when the move arguments cannot form a valid move set."""

    EXAMPLE = "Example: fair-rps Rock Paper Scissors"

    def __str__(self) -> str:
        return f"Error: {self.args[0]}\n{self.EXAMPLE}"


def parse_moves(args: Sequence[str]) -> tuple[str, ...]:
    moves = tuple(args)
    if len(moves) < MIN_MOVES:
        raise UsageError(f"at least {MIN_MOVES} moves are required, got {len(moves)}.")
    if len(moves) % 2 == 0:
        raise UsageError(f"the number of moves must be odd, got {len(moves)}.")

    repeated = [move for move, count in Counter(moves).items() if count > 1]
    if repeated:
        raise UsageError("moves must not repeat: " + ", ".join(repeated) + ".")
    return moves


@dataclass(frozen=True)
class RoundOutcome:
    user_move: str
    pc_move: str
    outcome: Outcome


class MoveCycleResolver:
    """Win relation over an odd-length cycle of moves.

    Each move beats the ``n // 2`` moves that follow it on the cycle and
    loses to the ``n // 2`` moves that precede it. With an odd count every
    pair of distinct moves has exactly one winner.
    """

    def __init__(self, moves: Sequence[str]) -> None:
        self.moves: tuple[str, ...] = tuple(moves)

    def index(self, move: str) -> int:
        try:
            return self.moves.index(move)
        except ValueError:
            raise ValueError(f"Unknown move: {move!r}") from None

    def resolve(self, move_a: str, move_b: str) -> Outcome:
        i = self.index(move_a)
        j = self.index(move_b)
        if i == j:
            return "Draw"

        n = len(self.moves)
        d = (j - i) % n
        return "Win" if 1 <= d <= n // 2 else "Lose"

    def resolve_round(self, user_move: str, pc_move: str) -> RoundOutcome:
        outcome = self.resolve(user_move, pc_move)
        logger.debug("resolved %r vs %r: %s", user_move, pc_move, outcome)
        return RoundOutcome(user_move=user_move, pc_move=pc_move, outcome=outcome)

    def generate_outcome_matrix(self) -> OutcomeMatrix:
        return [[self.resolve(a, b) for b in self.moves] for a in self.moves]
