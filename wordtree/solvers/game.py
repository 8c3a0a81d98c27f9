"""
Anytime branch-and-bound search for the strategy minimizing the expected
number of guesses.

A game is the search state for one set of remaining candidates (word indices
into the shared FeedbackTable). Three kinds:

  - SingleGame : one candidate, guess it; score exactly 1.
  - DoubleGame : two candidates, guess either; score exactly 1.5.
  - LargeGame  : three or more; UNSTARTED -> IN_PROGRESS -> DONE.

A LargeGame keeps a min-heap of GuessCandidates ("what if we guess g"),
ordered by their current average-score bound, ties broken by guess index.
Each call to refine() advances the game by one step:

  UNSTARTED    : split the candidates by feedback code for every possible
                 guess, build one subgame per non-empty bucket and score the
                 guess with the subgames' provisional bounds.
  IN_PROGRESS  : pop the most promising guess, refine each of its subgames
                 once, rescore it and push it back. If the new front of the
                 heap is exact (all subgames done) it is optimal: nothing
                 left in the heap can score lower, since every bound is
                 optimistic. The game becomes DONE.
  DONE         : nothing to do.

Scores reported by get_average_score() never decrease across refine() calls
and never exceed the true optimum.
"""

from __future__ import annotations

import heapq
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from wordtree.engine.codes import render
from wordtree.engine.table import FeedbackTable
from .bounds import optimal_score

DONE_MESSAGE = "optimization is over"


class OptimizationNotDone(RuntimeError):
    """Raised when a finished strategy is required but the search is still running."""


class Status(Enum):
    UNSTARTED = "unstarted"
    IN_PROGRESS = "in_progress"
    DONE = "done"


@dataclass
class SingleGame:
    word: int

    def word_count(self) -> int:
        return 1

    def get_average_score(self) -> float:
        return 1.0

    def is_optimization_done(self) -> bool:
        return True

    def refine(self) -> None:
        pass

    def describe_best(self, words: Sequence[str], top: int = 3) -> str:
        return DONE_MESSAGE

    def render_tree(self, words: Sequence[str]) -> str:
        return f"{words[self.word]} !"

    def first_guess(self) -> int:
        return self.word

    def after(self, code: int) -> "Game":
        # The only candidate is always guessed right
        raise KeyError(code)


@dataclass
class DoubleGame:
    first: int
    second: int
    # feedback code of guessing `first` when `second` is the answer
    miss_code: int

    def word_count(self) -> int:
        return 2

    def get_average_score(self) -> float:
        return 1.5

    def is_optimization_done(self) -> bool:
        return True

    def refine(self) -> None:
        pass

    def describe_best(self, words: Sequence[str], top: int = 3) -> str:
        return DONE_MESSAGE

    def render_tree(self, words: Sequence[str]) -> str:
        return f"{words[self.first]} or {words[self.second]} !"

    def first_guess(self) -> int:
        return self.first

    def after(self, code: int) -> "Game":
        if code != self.miss_code:
            raise KeyError(code)
        return SingleGame(self.second)


@dataclass
class GuessCandidate:
    """One hypothesis of a LargeGame: guess `guess`, then play `subgames[code]`."""
    guess: int
    subgames: Dict[int, "Game"]
    avg_score: float
    optimization_done: bool


# Heap entries: (avg_score, guess index, candidate). Guess indices are unique
# within a game, so the candidate itself is never compared.
_Entry = Tuple[float, int, GuessCandidate]


class LargeGame:
    """Search state for three or more candidates."""

    def __init__(self, table: FeedbackTable, words: Sequence[int]):
        self.table = table
        self.words: List[int] = list(words)
        self.status = Status.UNSTARTED
        self.best: Optional[GuessCandidate] = None
        self._heap: List[_Entry] = []

    def __repr__(self) -> str:
        return f"LargeGame(words={len(self.words)}, status={self.status.value})"

    def word_count(self) -> int:
        return len(self.words)

    def get_average_score(self) -> float:
        if self.status is Status.DONE:
            return self.best.avg_score
        if self.status is Status.IN_PROGRESS:
            return self._heap[0][0]
        return optimal_score(len(self.words))

    def is_optimization_done(self) -> bool:
        return self.status is Status.DONE

    # ---- search ----

    def refine(self) -> None:
        """Advance the search by one step (no-op once DONE)."""
        if self.status is Status.UNSTARTED:
            self._expand()
        elif self.status is Status.IN_PROGRESS:
            self._tighten()

    def _partition(self, guess: int) -> Dict[int, List[int]]:
        """Bucket the other candidates by the feedback they give to `guess`."""
        buckets: Dict[int, List[int]] = defaultdict(list)
        for solution, code in zip(self.words, self.table.column(guess, self.words)):
            # guessing the solution itself is the win case, no subgame
            if solution == guess:
                continue
            buckets[code].append(solution)
        return buckets

    def _score(self, guess: int, subgames: Dict[int, "Game"]) -> _Entry:
        weighted = 0.0
        done = True
        for sub in subgames.values():
            weighted += sub.word_count() * sub.get_average_score()
            if not sub.is_optimization_done():
                done = False
        cand = GuessCandidate(
            guess=guess,
            subgames=subgames,
            avg_score=1.0 + weighted / len(self.words),
            optimization_done=done,
        )
        return cand.avg_score, cand.guess, cand

    def _expand(self) -> None:
        heap: List[_Entry] = []
        for guess in self.words:
            subgames = {code: new_game(self.table, members)
                        for code, members in self._partition(guess).items()}
            heap.append(self._score(guess, subgames))
        heapq.heapify(heap)
        self._heap = heap
        self.status = Status.IN_PROGRESS

    def _tighten(self) -> None:
        _, _, cand = heapq.heappop(self._heap)
        for sub in cand.subgames.values():
            sub.refine()
        heapq.heappush(self._heap, self._score(cand.guess, cand.subgames))

        front = self._heap[0][2]
        if front.optimization_done:
            self.best = front
            self._heap = []
            self.status = Status.DONE

    # ---- reporting ----

    def candidates(self, top: int = 3) -> List[GuessCandidate]:
        """The `top` most promising live guesses, best first."""
        return [c for _, _, c in heapq.nsmallest(top, self._heap)]

    def describe_best(self, words: Sequence[str], top: int = 3) -> str:
        if self.status is not Status.IN_PROGRESS:
            return DONE_MESSAGE
        return " ".join(f"{words[c.guess]}-{c.avg_score:.6f}" for c in self.candidates(top))

    def _require_done(self) -> GuessCandidate:
        if self.status is not Status.DONE:
            raise OptimizationNotDone(f"optimization not done ({self.status.value})")
        return self.best

    def render_tree(self, words: Sequence[str]) -> str:
        """
        One line per leaf path: 'guess <pattern> <rest of the path>'.
        Buckets are listed in ascending feedback-code order.
        """
        best = self._require_done()
        word = words[best.guess]
        lines: List[str] = []
        for code in sorted(best.subgames):
            pattern = render(code)
            for line in best.subgames[code].render_tree(words).splitlines():
                lines.append(f"{word} {pattern} {line}")
        return "\n".join(lines)

    def first_guess(self) -> int:
        return self._require_done().guess

    def after(self, code: int) -> "Game":
        return self._require_done().subgames[code]


Game = Union[SingleGame, DoubleGame, LargeGame]


def new_game(table: FeedbackTable, words: Iterable[int]) -> Game:
    """
    Build the game for a set of candidate indices.

    Raises ValueError for an empty set.
    """
    words = list(words)
    if not words:
        raise ValueError("a game needs at least one candidate")
    if len(words) == 1:
        return SingleGame(words[0])
    if len(words) == 2:
        return DoubleGame(words[0], words[1], table.lookup(words[1], words[0]))
    return LargeGame(table, words)
