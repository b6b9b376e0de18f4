import math

import pytest

from combinatorics import (
    InvalidArgument,
    combination_count,
    new_combination_enumerator,
    new_sublist_enumerator,
    permutation_count,
    sublist_count,
)


@pytest.mark.parametrize("n,r", [(0, 0), (4, 2), (7, 3), (10, 10), (20, 5)])
def test_closed_forms(n: int, r: int) -> None:
    assert combination_count(n, r) == math.comb(n, r)
    assert sublist_count(n, r) == math.perm(n, r)
    assert permutation_count(r) == math.factorial(r)


@pytest.mark.parametrize("n,r", [(5, 2), (6, 3)])
def test_counts_match_enumerators(n: int, r: int) -> None:
    assert combination_count(n, r) == sum(1 for _ in new_combination_enumerator(n, r))
    assert sublist_count(n, r) == sum(1 for _ in new_sublist_enumerator(n, r))


def test_count_validation() -> None:
    with pytest.raises(InvalidArgument):
        combination_count(3, 5)
    with pytest.raises(InvalidArgument):
        sublist_count(-1, 0)
    with pytest.raises(InvalidArgument):
        permutation_count(-3)
