"""Closed-form sizes of the enumerations."""

from __future__ import annotations

from math import comb, factorial, perm

from combinatorics.enumerators.base import check_size
from combinatorics.exceptions import InvalidArgument


def _check_pair(n: int, r: int) -> None:
    check_size("n", n)
    check_size("r", r)
    if r > n:
        raise InvalidArgument(f"r must be <= n, got r={r} n={n}")


def combination_count(n: int, r: int) -> int:
    """Return ``C(n, r)``, the number of tuples a combination enumerator yields."""
    _check_pair(n, r)
    return comb(n, r)


def permutation_count(r: int) -> int:
    """Return ``r!``."""
    check_size("r", r)
    return factorial(r)


def sublist_count(n: int, r: int) -> int:
    """Return ``n! / (n-r)!``, the number of ordered ``r``-selections."""
    _check_pair(n, r)
    return perm(n, r)
