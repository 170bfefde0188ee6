from __future__ import annotations

from typing import Sequence

from tabulate import tabulate

from protocol import OutcomeMatrix

CORNER = "v PC \\ User >"


def format_rules_table(moves: Sequence[str], matrix: OutcomeMatrix) -> str:
    """Render the outcome matrix with PC moves as rows and User moves as columns.

    Each cell is the result for the PC (row) move against the User (column) move.
    """
    if len(matrix) != len(moves):
        raise ValueError("matrix size does not match the move set")

    rows = [[move, *cells] for move, cells in zip(moves, matrix)]
    intro = "Results are from the PC's point of view: find the PC move on the left and your move on top."
    return intro + "\n" + tabulate(rows, headers=[CORNER, *moves], tablefmt="grid", disable_numparse=True)
