"""Game engine running draws against boards under a selection strategy."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Sequence

from ..board import Board, copy_boards, mark
from ..errors import NoWinnerError
from ..scoring import best_scoring, score
from ..win import filter_winning, partition_boards

logger = logging.getLogger(__name__)


@dataclass
class GameMetrics:
    """Metrics for one strategy run."""

    draws_played: int
    total_time: float = 0.0


@dataclass
class GameResult:
    """Outcome of one strategy run."""

    strategy: str
    result: int
    board_score: int
    number: int
    draw_index: int
    board_index: int
    winners: int
    board: Board
    metrics: GameMetrics = field(default_factory=lambda: GameMetrics(draws_played=0))


def _index_of(boards: Sequence[Board], board: Board) -> int:
    for idx, candidate in enumerate(boards):
        if candidate is board:
            return idx
    raise ValueError("board is not part of this game")


def _finish(
    strategy: str,
    boards: Sequence[Board],
    board: Board,
    *,
    number: int,
    draw_index: int,
    winners: int,
) -> GameResult:
    board_score = score(board)
    return GameResult(
        strategy=strategy,
        result=board_score * number,
        board_score=board_score,
        number=number,
        draw_index=draw_index,
        board_index=_index_of(boards, board),
        winners=winners,
        board=board,
        metrics=GameMetrics(draws_played=draw_index),
    )


def first_winner(boards: Sequence[Board], draws: Sequence[int]) -> GameResult:
    """Select the board completing a line on the earliest draw.

    Among simultaneous winners the highest score wins; equal scores resolve to
    the board appearing first in ``boards``. The input boards are not mutated.
    """
    working = copy_boards(boards)
    for draw_index, number in enumerate(draws, start=1):
        mark(working, number)
        winners = filter_winning(working)
        if winners:
            logger.info(
                "draw #%02d, number: %d - found %d winning board(s)",
                draw_index,
                number,
                len(winners),
            )
            chosen = winners[best_scoring(winners)]
            return _finish(
                "first", working, chosen,
                number=number, draw_index=draw_index, winners=len(winners),
            )
    raise NoWinnerError("first", len(draws))


def last_winner(boards: Sequence[Board], draws: Sequence[int]) -> GameResult:
    """Select the board completing a line after every other board has.

    Winners are eliminated each draw as long as at least one candidate would
    remain. Once the remaining candidates all win on the same draw, the first
    of them in input order is selected. The input boards are not mutated.
    """
    working = copy_boards(boards)
    candidates: List[Board] = list(working)
    for draw_index, number in enumerate(draws, start=1):
        mark(candidates, number)
        winners, others = partition_boards(candidates)
        if winners and not others:
            logger.info(
                "draw #%02d, number: %2d - found %d last winning board(s)",
                draw_index,
                number,
                len(winners),
            )
            return _finish(
                "last", working, winners[0],
                number=number, draw_index=draw_index, winners=len(winners),
            )
        if winners:
            logger.debug(
                "draw #%02d: eliminated %d board(s), %d remaining",
                draw_index,
                len(winners),
                len(others),
            )
        candidates = others
    raise NoWinnerError("last", len(draws))


STRATEGIES: Dict[str, Callable[[Sequence[Board], Sequence[int]], GameResult]] = {
    "first": first_winner,
    "last": last_winner,
}


class GameEngine:
    """Runs a single selection strategy over independent copies of the boards."""

    def __init__(self, strategy: str = "first"):
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy: {strategy}")
        self.strategy = strategy

    def play(self, boards: Sequence[Board], draws: Sequence[int]) -> GameResult:
        start_time = time.perf_counter()
        try:
            result = STRATEGIES[self.strategy](boards, draws)
        finally:
            elapsed = time.perf_counter() - start_time
            logger.debug("%s winner duration: %.6fs", self.strategy, elapsed)
        result.metrics.total_time = elapsed
        return result
