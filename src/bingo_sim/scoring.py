from __future__ import annotations

from typing import Sequence

from .board import Board


def score(board: Board) -> int:
    """Sum of unmarked cell values; an all-marked board scores 0."""
    return sum(cell.value for cell in board.cells() if not cell.marked)


def best_scoring(boards: Sequence[Board]) -> int:
    """Index of the highest scoring board; ties resolve to the earliest one."""
    if not boards:
        raise ValueError("best_scoring requires at least one board")
    best_idx = 0
    best_score = score(boards[0])
    for idx in range(1, len(boards)):
        current = score(boards[idx])
        if current > best_score:
            best_idx, best_score = idx, current
    return best_idx
