from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

from .board import BOARD_SIZE, Board
from .errors import InputFormatError


def _to_int(token: str, line_no: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise InputFormatError(f"not a number: {token!r}", line=line_no) from None


def parse_draws(line: str, line_no: int = 1) -> List[int]:
    tokens = [tok.strip() for tok in line.split(",")]
    if not any(tokens):
        raise InputFormatError("empty draw sequence", line=line_no)
    return [_to_int(tok, line_no) for tok in tokens]


def parse_board(text: str, size: int = BOARD_SIZE) -> Board:
    rows = [
        [_to_int(tok, line_no) for tok in line.split()]
        for line_no, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]
    return Board.from_rows(rows, size=size)


def parse_input(text: str, size: int = BOARD_SIZE) -> Tuple[List[int], List[Board]]:
    """Parse the draws line followed by blocks of ``size`` board rows.

    Blank lines only separate; every ``size`` consecutive rows form a board.
    """
    draws: List[int] | None = None
    boards: List[Board] = []
    pending: List[List[int]] = []
    first_row_line = 0
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        if draws is None:
            draws = parse_draws(line, line_no)
            continue
        if not pending:
            first_row_line = line_no
        pending.append([_to_int(tok, line_no) for tok in line.split()])
        if len(pending) == size:
            try:
                boards.append(Board.from_rows(pending, size=size))
            except InputFormatError as exc:
                raise InputFormatError(str(exc), line=first_row_line) from None
            pending = []

    if draws is None:
        raise InputFormatError("input has no draw sequence")
    if pending:
        raise InputFormatError(
            f"incomplete board: {len(pending)} of {size} rows", line=first_row_line
        )
    if not boards:
        raise InputFormatError("input has no boards")
    return draws, boards


def read_input(path: Path, size: int = BOARD_SIZE) -> Tuple[List[int], List[Board]]:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InputFormatError(f"not UTF-8 text: {exc.reason} at byte {exc.start}") from None
    return parse_input(text, size=size)


def format_draws(draws: Sequence[int]) -> str:
    return ",".join(str(number) for number in draws)


def format_board(board: Board) -> str:
    """Row-text form of the board's original values, one row per line."""
    width = max(len(str(v)) for row in board.values() for v in row)
    return "\n".join(
        " ".join(f"{v:>{width}}" for v in row) for row in board.values()
    )


def format_input(draws: Sequence[int], boards: Sequence[Board]) -> str:
    blocks = [format_draws(draws)] + [format_board(board) for board in boards]
    return "\n\n".join(blocks) + "\n"
