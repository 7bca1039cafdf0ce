"""Core module for bingo game simulation."""

from .engine import STRATEGIES, GameEngine, GameMetrics, GameResult, first_winner, last_winner

__all__ = [
    "STRATEGIES",
    "GameEngine",
    "GameMetrics",
    "GameResult",
    "first_winner",
    "last_winner",
]
