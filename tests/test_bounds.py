import pytest
from wordtree.solvers import optimal_score


@pytest.mark.parametrize("count,expected", [
    (0, 0.0),
    (1, 1.0),
    (2, 1.5),
    (3, 5 / 3),
    (4, 7 / 4),
    (10, 19 / 10),
    # 243 candidates: a guess plus 242 singleton buckets
    (243, 485 / 243),
    # 244: one bucket has to hold two words
    (244, 2.0),
])
def test_optimal_score_values(count, expected):
    assert optimal_score(count) == pytest.approx(expected)


def test_optimal_score_monotone():
    prev = optimal_score(0)
    for n in range(1, 5000):
        cur = optimal_score(n)
        assert cur >= prev
        prev = cur


def test_optimal_score_rejects_negative():
    with pytest.raises(ValueError):
        optimal_score(-1)
