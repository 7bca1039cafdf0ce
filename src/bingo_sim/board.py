from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence

from .errors import InputFormatError

BOARD_SIZE = 5


@dataclass
class Cell:
    value: int
    marked: bool = False


class Board:
    """Square grid of numbered cells; marks only ever accumulate."""

    def __init__(self, cells: List[List[Cell]]):
        self._cells = cells

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], size: int = BOARD_SIZE) -> "Board":
        """Build a board from raw rows, enforcing an exact ``size x size`` grid.

        Values must be distinct within a board.
        """
        if len(rows) != size:
            raise InputFormatError(f"board must have {size} rows, got {len(rows)}")
        seen = set()
        cells: List[List[Cell]] = []
        for r_idx, row in enumerate(rows):
            if len(row) != size:
                raise InputFormatError(
                    f"board row {r_idx + 1} must have {size} values, got {len(row)}"
                )
            for value in row:
                if value in seen:
                    raise InputFormatError(f"duplicate value {value} within board")
                seen.add(value)
            cells.append([Cell(int(value)) for value in row])
        return cls(cells)

    @property
    def size(self) -> int:
        return len(self._cells)

    def rows(self) -> List[List[Cell]]:
        return [list(row) for row in self._cells]

    def columns(self) -> List[List[Cell]]:
        n = self.size
        return [[self._cells[i][j] for i in range(n)] for j in range(n)]

    def cells(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    def values(self) -> List[List[int]]:
        return [[cell.value for cell in row] for row in self._cells]

    def marked_mask(self) -> List[List[bool]]:
        return [[cell.marked for cell in row] for row in self._cells]

    def mark(self, number: int) -> bool:
        hit = False
        for cell in self.cells():
            if cell.value == number:
                cell.marked = True
                hit = True
        return hit

    def copy(self) -> "Board":
        return Board([[Cell(c.value, c.marked) for c in row] for row in self._cells])

    def render(self, style: Optional[Callable[[str], str]] = None) -> str:
        lines: List[str] = []
        for row in self._cells:
            parts: List[str] = []
            for cell in row:
                if cell.marked:
                    text = f"{'*':>3}"
                    parts.append(style(text) if style else text)
                else:
                    parts.append(f"{cell.value:3d}")
            lines.append(",".join(parts))
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board(size={self.size}, values={self.values()!r})"


def mark(boards: Sequence[Board], number: int) -> Sequence[Board]:
    """Mark ``number`` on every board in place and return the same collection."""
    for board in boards:
        board.mark(number)
    return boards


def copy_boards(boards: Sequence[Board]) -> List[Board]:
    return [board.copy() for board in boards]
