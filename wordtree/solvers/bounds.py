"""
Best-possible expected score for a candidate set of a given size.

Idea:
  An ideal guess taken from the set wins immediately for one candidate and
  splits the other (count - 1) candidates as evenly as possible across the
  242 non-winning feedback codes. Recursing on the bucket sizes gives a
  closed form that no real guess can beat:

      optimal_score(n) = (1/n) * (1 + small_count * small_size * (1 + optimal_score(small_size))
                                    + big_count * big_size * (1 + optimal_score(big_size)))

  Every candidate in a bucket of size k pays 1 + optimal_score(k); an empty
  bucket costs nothing.

The search uses it as the provisional (optimistic) score of subgames that
have not been explored yet.
"""

from __future__ import annotations

import math
from functools import lru_cache

from wordtree.engine.codes import NON_WINNING_CODES


def _bucket_cost(size: int) -> float:
    """Total guesses spent on one bucket: each member pays 1 + optimal_score(size)."""
    return 0.0 if size == 0 else size * (1.0 + optimal_score(size))


@lru_cache(maxsize=None)
def optimal_score(count: int) -> float:
    """
    Lower bound on the expected number of guesses for `count` candidates.

    optimal_score(0) == 0 is only meaningful for bucket accounting.
    Raises ValueError for negative counts.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count == 0:
        return 0.0
    if count == 1:
        return 1.0
    if count == 2:
        return 1.5

    others = count - 1
    small_size = others // NON_WINNING_CODES
    big_size = small_size + 1
    big_count = others % NON_WINNING_CODES
    small_count = NON_WINNING_CODES - big_count

    result = (1.0 + small_count * _bucket_cost(small_size)
              + big_count * _bucket_cost(big_size)) / count
    assert not math.isnan(result), f"NaN lower bound for count={count}"
    return result
