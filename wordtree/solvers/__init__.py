from .bounds import optimal_score
from .game import (
    DONE_MESSAGE, DoubleGame, Game, GuessCandidate, LargeGame, OptimizationNotDone,
    SingleGame, Status, new_game,
)

__all__ = [
    "optimal_score", "new_game", "Game", "SingleGame", "DoubleGame", "LargeGame",
    "GuessCandidate", "Status", "OptimizationNotDone", "DONE_MESSAGE",
]
