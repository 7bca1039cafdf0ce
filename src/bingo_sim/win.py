from __future__ import annotations

from typing import List, Sequence, Tuple

from .board import Board, Cell


def _complete(line: Sequence[Cell]) -> bool:
    return all(cell.marked for cell in line)


def is_winning(board: Board) -> bool:
    """True when any row or any column is fully marked.

    Rows are checked before columns and the scan stops at the first complete
    line. Diagonals never count.
    """
    for row in board.rows():
        if _complete(row):
            return True
    for col in board.columns():
        if _complete(col):
            return True
    return False


def partition_boards(boards: Sequence[Board]) -> Tuple[List[Board], List[Board]]:
    """Split boards into (winning, non_winning), both keeping input order."""
    winning: List[Board] = []
    non_winning: List[Board] = []
    for board in boards:
        (winning if is_winning(board) else non_winning).append(board)
    return winning, non_winning


def filter_winning(boards: Sequence[Board]) -> List[Board]:
    return [board for board in boards if is_winning(board)]


def filter_non_winning(boards: Sequence[Board]) -> List[Board]:
    return [board for board in boards if not is_winning(board)]
