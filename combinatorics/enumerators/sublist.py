"""Ordered ``r``-selections without repetition (partial permutations).

Composition of the two other enumerators: every permutation of the current
combination is emitted before moving to the next combination. The emitted
tuples are lexicographic over the re-indexed positions only; across
combinations they are not globally sorted by value.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from combinatorics.enumerators.base import DigitState, check_size
from combinatorics.enumerators.combination import CombinationEnumerator
from combinatorics.enumerators.permutation import PermutationEnumerator
from combinatorics.exceptions import Exhausted, InvalidArgument

logger = logging.getLogger("combinatorics.enumerators.sublist")


class SublistEnumerator(DigitState):
    """All ``n! / (n-r)!`` ordered ``r``-subsets of ``{0, ..., n-1}``.

    Attributes:
        n: Population size.
    """

    def __init__(self, n: int, r: int):
        check_size("n", n)
        check_size("r", r)
        if r > n:
            raise InvalidArgument(f"r must be <= n, got r={r} n={n}")
        self.n = n
        self._combinations = CombinationEnumerator(n, r)
        self._combination = self._combinations.current()
        self._permutations = PermutationEnumerator(r)
        super().__init__(self._reindex(self._permutations.current()))
        logger.debug("sublist enumerator n=%d r=%d", n, r)

    def _reindex(self, permutation: Tuple[int, ...]) -> List[int]:
        return [self._combination[k] for k in permutation]

    def _step(self) -> bool:
        try:
            self._permutations.advance()
        except Exhausted:
            try:
                self._combinations.advance()
            except Exhausted:
                return False
            self._combination = self._combinations.current()
            # fresh permutation state for the new combination
            self._permutations = PermutationEnumerator(self.size)
        self._digits[:] = self._reindex(self._permutations.current())
        return True


def new_sublist_enumerator(n: int, r: int) -> SublistEnumerator:
    """Create a partial-permutation enumerator over ``(n, r)``.

    Raises:
        InvalidArgument: If ``n`` or ``r`` is negative or ``r > n``.
    """
    return SublistEnumerator(n, r)
