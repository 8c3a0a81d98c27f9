"""
Feedback for a single (solution, guess) pair.

Conventions (see codes.py):
  - GREEN  : correct letter in the correct position
  - YELLOW : correct letter in the wrong position
  - BLACK  : letter not present (or present fewer times than guessed)

Algorithm (two-pass, single-use matching):
  1) First pass marks all greens; those solution positions are used up.
  2) Second pass walks the guess left to right. A non-green guess letter
     becomes yellow if some other, still unused solution position holds the
     same letter; that solution position is then consumed so a later guess
     position cannot reuse it.
"""

from __future__ import annotations

from typing import List

from .codes import BLACK, GREEN, LETTERS, WORD_LENGTH, YELLOW, Pattern


def feedback(solution: str, guess: str) -> Pattern:
    """
    Compute the color pattern of `guess` against the hidden `solution`.

    Examples:
      feedback("abadc", "azcaa") -> (GREEN, BLACK, YELLOW, YELLOW, BLACK)
    """
    if not len(solution) == len(guess) == WORD_LENGTH:
        raise ValueError(f"solution {solution!r} and guess {guess!r} must both have 5 letters")

    colors: List[int] = [BLACK] * WORD_LENGTH
    used = [False] * WORD_LENGTH

    # Pass 1: greens
    for i in range(WORD_LENGTH):
        if guess[i] == solution[i]:
            colors[i] = GREEN
            used[i] = True

    # Pass 2: yellows, each solution letter consumed at most once
    for i in range(WORD_LENGTH):
        if colors[i] == GREEN:
            continue
        for j in range(WORD_LENGTH):
            if not used[j] and guess[i] == solution[j]:
                used[j] = True
                colors[i] = YELLOW
                break

    return tuple(colors)


def score(guess: str, answer: str) -> str:
    """
    Text form of the feedback, one letter per position ('G', 'Y' or 'B').

    Examples:
      score("azcaa", "abadc") -> "GBYYB"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    return "".join(LETTERS[c] for c in feedback(answer, guess))
