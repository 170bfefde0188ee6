from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

from protocol import MoveCycleResolver, UsageError, parse_moves  # type: ignore[import-not-found]  # noqa: E402

RPS = ["Rock", "Paper", "Scissors"]
RPSLS = ["Rock", "Paper", "Scissors", "Lizard", "Spock"]


def test_three_moves_each_beats_the_next() -> None:
    r = MoveCycleResolver(RPS)
    assert r.resolve("Rock", "Paper") == "Win"
    assert r.resolve("Paper", "Scissors") == "Win"
    assert r.resolve("Scissors", "Rock") == "Win"

    assert r.resolve("Rock", "Scissors") == "Lose"
    assert r.resolve("Scissors", "Paper") == "Lose"
    assert r.resolve("Paper", "Rock") == "Lose"

    assert r.resolve("Paper", "Paper") == "Draw"


def test_five_moves_beat_the_following_half() -> None:
    r = MoveCycleResolver(RPSLS)
    assert r.resolve("Scissors", "Lizard") == "Win"
    assert r.resolve("Scissors", "Spock") == "Win"
    assert r.resolve("Scissors", "Rock") == "Lose"
    assert r.resolve("Scissors", "Paper") == "Lose"
    assert r.resolve("Spock", "Rock") == "Win"
    assert r.resolve("Rock", "Spock") == "Lose"
    assert r.resolve("Spock", "Spock") == "Draw"


def test_win_wraps_around_the_end_of_the_cycle() -> None:
    moves = [f"m{i}" for i in range(7)]
    r = MoveCycleResolver(moves)
    assert [r.resolve("m5", b) for b in moves] == ["Win", "Win", "Lose", "Lose", "Lose", "Draw", "Win"]


@pytest.mark.parametrize("n", [3, 5, 7, 9, 11, 21])
def test_cycle_is_a_balanced_tournament(n: int) -> None:
    moves = [f"m{i}" for i in range(n)]
    r = MoveCycleResolver(moves)
    for a in moves:
        results = [r.resolve(a, b) for b in moves]
        assert results.count("Draw") == 1
        assert results.count("Win") == (n - 1) // 2
        assert results.count("Lose") == (n - 1) // 2
        for b in moves:
            if a == b:
                assert r.resolve(a, b) == "Draw"
            else:
                assert (r.resolve(a, b) == "Win") == (r.resolve(b, a) == "Lose")


@pytest.mark.parametrize("moves", [RPS, RPSLS, [str(i) for i in range(9)]])
def test_outcome_matrix_matches_resolve(moves: list[str]) -> None:
    r = MoveCycleResolver(moves)
    matrix = r.generate_outcome_matrix()
    assert len(matrix) == len(moves)
    for i, row in enumerate(matrix):
        assert len(row) == len(moves)
        assert row[i] == "Draw"
        for j, cell in enumerate(row):
            assert cell == r.resolve(moves[i], moves[j])


def test_resolve_round_is_from_the_user_side() -> None:
    r = MoveCycleResolver(RPS)
    result = r.resolve_round("Rock", "Paper")
    assert result.user_move == "Rock"
    assert result.pc_move == "Paper"
    assert result.outcome == "Win"


def test_unknown_move_is_rejected() -> None:
    with pytest.raises(ValueError):
        MoveCycleResolver(RPS).resolve("Rock", "rock")


def test_parse_moves_accepts_odd_distinct() -> None:
    assert parse_moves(RPSLS) == tuple(RPSLS)
    assert parse_moves(["a", "A", "b"]) == ("a", "A", "b")


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["Rock"],
        ["Rock", "Paper"],
        ["Rock", "Paper", "Scissors", "Lizard"],
        ["Rock", "Rock", "Scissors"],
        ["a", "b", "c", "d", "a"],
    ],
)
def test_parse_moves_rejects_bad_input(args: list[str]) -> None:
    with pytest.raises(UsageError) as info:
        parse_moves(args)
    assert "Example:" in str(info.value)


def test_usage_error_names_repeated_moves() -> None:
    with pytest.raises(UsageError, match="must not repeat: Rock"):
        parse_moves(["Rock", "Rock", "Scissors"])
