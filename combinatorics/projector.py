"""Lift index enumerators to tuples of values.

Each helper snapshots its input once (``list``) and then lazily maps every
index tuple of the chosen enumerator through that snapshot. Elements are
treated as unique by position, not by value.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Sequence, Tuple, TypeVar

from combinatorics.enumerators import (
    DigitState,
    new_combination_enumerator,
    new_permutation_enumerator,
    new_sublist_enumerator,
)
from combinatorics.exceptions import InvalidArgument

T = TypeVar("T")

logger = logging.getLogger("combinatorics.projector")


def project(source: Iterable[T], enumerator: DigitState) -> Iterator[Tuple[T, ...]]:
    """Map each index tuple of ``enumerator`` to the matching source values.

    Args:
        source: Ordered collection; copied once before enumeration starts so
            later mutation of the original does not affect the output.
        enumerator: Any enumerator over indices ``< len(source)``. It is
            advanced on every pull and must not be shared with another
            consumer.

    Returns:
        Lazy, finite iterator of tuples ``(source[i0], ..., source[i_{r-1}])``.
        It simply ends when the enumerator is exhausted.

    Raises:
        InvalidArgument: If the enumerator can address indices beyond the
            snapshot.
    """
    values: Sequence[T] = list(source)
    bound = getattr(enumerator, "n", enumerator.size)
    if bound > len(values):
        raise InvalidArgument(
            f"enumerator addresses {bound} items but source has {len(values)}"
        )
    return map(lambda indices: tuple(values[i] for i in indices), enumerator)


def combinations(iterable: Iterable[T], r: int) -> Iterator[Tuple[T, ...]]:
    """Return ``r``-length subsequences of ``iterable`` in combination order.

    If the input is sorted the tuples come out sorted.
    """
    values = list(iterable)
    return project(values, new_combination_enumerator(len(values), r))


def permutations(iterable: Iterable[T], r: Optional[int] = None) -> Iterator[Tuple[T, ...]]:
    """Return full permutations, or ``r``-length partial ones when ``r`` is given.

    Full permutations follow lexicographic order of positions. Partial ones
    group the orderings of each combination together and are not globally
    sorted.
    """
    values = list(iterable)
    if r is None:
        return project(values, new_permutation_enumerator(len(values)))
    return project(values, new_sublist_enumerator(len(values), r))


def sublists(iterable: Iterable[T], r: int) -> Iterator[Tuple[T, ...]]:
    """Return every ordered ``r``-selection of ``iterable`` without repetition."""
    values = list(iterable)
    logger.debug("sublists over %d items r=%d", len(values), r)
    return project(values, new_sublist_enumerator(len(values), r))
