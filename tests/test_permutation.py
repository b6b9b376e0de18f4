import itertools
import math

import pytest

from combinatorics import Exhausted, InvalidArgument, new_permutation_enumerator


@pytest.mark.parametrize("r", range(0, 7))
def test_count_order_and_bijection(r: int) -> None:
    tuples = list(new_permutation_enumerator(r))
    assert len(tuples) == math.factorial(r)
    assert len(set(tuples)) == len(tuples)
    assert tuples == sorted(tuples)
    for t in tuples:
        assert sorted(t) == list(range(r))
    assert tuples == list(itertools.permutations(range(r)))


def test_three_items_order() -> None:
    assert list(new_permutation_enumerator(3)) == [
        (0, 1, 2),
        (0, 2, 1),
        (1, 0, 2),
        (1, 2, 0),
        (2, 0, 1),
        (2, 1, 0),
    ]


@pytest.mark.parametrize("r,first", [(0, ()), (1, (0,))])
def test_trivial_sizes_yield_one_tuple(r: int, first: tuple) -> None:
    e = new_permutation_enumerator(r)
    assert e.current() == first
    with pytest.raises(Exhausted):
        e.advance()
    with pytest.raises(Exhausted):
        e.advance()
    assert e.current() == first


def test_current_is_a_snapshot() -> None:
    e = new_permutation_enumerator(3)
    before = e.current()
    e.advance()
    assert before == (0, 1, 2)
    assert e.current() == (0, 2, 1)


def test_negative_r_rejected() -> None:
    with pytest.raises(InvalidArgument):
        new_permutation_enumerator(-1)


def test_iterating_after_exhaustion_yields_nothing() -> None:
    e = new_permutation_enumerator(1)
    with pytest.raises(Exhausted):
        e.advance()
    assert list(e) == []
    assert list(e) == []
