from __future__ import annotations


class BingoError(Exception):
    """Base class for simulation failures."""


class InputFormatError(BingoError, ValueError):
    def __init__(self, message: str, *, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class NoWinnerError(BingoError):
    """Raised when the draw sequence ends before a decisive board is found."""

    def __init__(self, strategy: str, draws_played: int):
        self.strategy = strategy
        self.draws_played = draws_played
        super().__init__(
            f"No {strategy} winner after {draws_played} draw(s)"
        )
