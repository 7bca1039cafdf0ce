"""Bingo game simulation: first and last winning board selection."""

from .board import BOARD_SIZE, Board, Cell, mark
from .core import GameEngine, GameResult, first_winner, last_winner
from .errors import BingoError, InputFormatError, NoWinnerError
from .scoring import score
from .version import __version__
from .win import filter_non_winning, filter_winning, is_winning

__all__ = [
    "BOARD_SIZE",
    "Board",
    "Cell",
    "mark",
    "GameEngine",
    "GameResult",
    "first_winner",
    "last_winner",
    "BingoError",
    "InputFormatError",
    "NoWinnerError",
    "score",
    "filter_winning",
    "filter_non_winning",
    "is_winning",
    "__version__",
]
