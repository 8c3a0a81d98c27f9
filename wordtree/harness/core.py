"""
Optimizer driver and strategy replay.

- optimize:          call refine() on a root game until the strategy is
                     provably optimal (or a step budget runs out).
- play_case:         follow a finished strategy against one hidden answer.
- evaluate_strategy: replay every candidate; the mean guess count must equal
                     the root's exact average score.

These functions are UI-agnostic so they can be reused by the CLI, a notebook
or tests without changes; progress display is left to the `on_step` callback.
"""

from __future__ import annotations

import time
from collections import Counter
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from wordtree.engine.codes import WIN_CODE
from wordtree.engine.table import FeedbackTable
from wordtree.solvers.game import Game

StepCallback = Callable[[int, Game], None]


def optimize(
        game: Game,
        words: Sequence[str],
        *,
        max_steps: Optional[int] = None,
        on_step: Optional[StepCallback] = None,
        top: int = 3,
) -> Dict:
    """
    Refine `game` until done, or until `max_steps` refine() calls were made.

    Stopping early is a normal outcome: the game stays consistent and can be
    passed to optimize() again to resume.

    Returns:
        dict with keys:
            done (bool), steps (int), score (float), best (str),
            tree (str | None, only when done), time_ms (float)
    """
    if max_steps is not None and max_steps < 0:
        raise ValueError(f"max_steps must be non-negative; got {max_steps}")

    steps = 0
    t0 = time.perf_counter()
    while not game.is_optimization_done():
        if max_steps is not None and steps >= max_steps:
            break
        game.refine()
        steps += 1
        if on_step is not None:
            on_step(steps, game)
    dt = (time.perf_counter() - t0) * 1000.0

    done = game.is_optimization_done()
    return {
        "done": done,
        "steps": steps,
        "score": game.get_average_score(),
        "best": game.describe_best(words, top=top),
        "tree": game.render_tree(words) if done else None,
        "time_ms": dt,
    }


def play_case(game: Game, table: FeedbackTable, answer: int) -> Dict:
    """
    Play the finished strategy `game` against the hidden word `answer`.

    Returns:
        dict with keys: answer (int), guesses (int), history (list[(guess, code)])

    Raises OptimizationNotDone if some visited node is still being searched.
    """
    history: List[Tuple[int, int]] = []
    node = game
    while True:
        guess = node.first_guess()
        code = table.lookup(answer, guess)
        history.append((guess, code))
        if code == WIN_CODE:
            return {"answer": answer, "guesses": len(history), "history": history}
        node = node.after(code)


def evaluate_strategy(game: Game, table: FeedbackTable, answers: Sequence[int]) -> Dict:
    """
    Replay the strategy for every index in `answers` (normally the root's candidates).

    Returns:
        dict with keys: cases, mean_guesses, max_guesses, histogram ({guesses: count})
    """
    counts = [play_case(game, table, a)["guesses"] for a in answers]
    if not counts:
        raise ValueError("no answers to evaluate")
    return {
        "cases": len(counts),
        "mean_guesses": sum(counts) / len(counts),
        "max_guesses": max(counts),
        "histogram": dict(sorted(Counter(counts).items())),
    }
